"""Django settings for the watchlist project.

Values come from environment variables; the defaults suit local development.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.environ.get("WATCHLIST_SECRET_KEY", "django-insecure-watchlist-dev-key")
DEBUG = env_bool("WATCHLIST_DEBUG", False)
ALLOWED_HOSTS = os.environ.get("WATCHLIST_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "movies.apps.MoviesConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "watchlist.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "watchlist.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("WATCHLIST_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

# Every worker process must share this backend: the invalidation signals only
# reach the cache they run against. Create the table with
# `python manage.py createcachetable`.
CACHES = {
    "default": {
        "BACKEND": os.environ.get(
            "WATCHLIST_CACHE_BACKEND", "django.core.cache.backends.db.DatabaseCache"
        ),
        "LOCATION": os.environ.get("WATCHLIST_CACHE_LOCATION", "watchlist_cache"),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "UTC"
STATIC_URL = "static/"

# The API reads the session token itself and hands it to the movie service,
# so DRF performs no authentication of its own.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "movies.handlers.exceptions.api_exception_handler",
}

# Shared watch-list credential and session lifetime.
WATCHLIST_PASSWORD = os.environ.get("WATCHLIST_PASSWORD", "movienight")
WATCHLIST_SESSION_MAX_AGE = int(os.environ.get("WATCHLIST_SESSION_MAX_AGE", 30 * 24 * 60 * 60))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "movies": {
            "handlers": ["console"],
            "level": os.environ.get("WATCHLIST_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
