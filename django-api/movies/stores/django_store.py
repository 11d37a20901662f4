"""Django ORM implementation of the MovieStore."""

import functools
import logging

from django.core.cache import cache
from django.db import DatabaseError, transaction

from movies import models
from movies.domain import Movie, MovieId, MoviePatch
from movies.domain.errors import StoreFailureError
from movies.stores.interfaces import MovieStore

logger = logging.getLogger(__name__)

LIST_CACHE_KEY = "movies:list"


def detail_cache_key(movie_id: MovieId | str) -> str:
    return f"movies:{movie_id}"


def _to_domain(row: models.Movie) -> Movie:
    return Movie(
        id=MovieId(value=row.id),
        name=row.name,
        genre=row.genre,
        seen=row.seen,
        is_deleted=row.is_deleted,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _translate_db_errors(method):
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as exc:
            logger.exception("Movie store operation %s failed", method.__name__)
            raise StoreFailureError() from exc

    return wrapper


class DjangoMovieStore(MovieStore):
    """Database-backed movie store using Django ORM.

    Reads go through the Django cache; signals in movies/signals.py drop the
    cached entries whenever a row is saved or deleted.
    """

    def __init__(self, cache_timeout: int = 300) -> None:
        self._cache_timeout = cache_timeout

    @_translate_db_errors
    def list_movies(self) -> list[Movie]:
        movies = cache.get(LIST_CACHE_KEY)
        if movies is None:
            rows = models.Movie.objects.order_by("name", "created_at", "id")
            movies = [_to_domain(row) for row in rows]
            cache.set(LIST_CACHE_KEY, movies, self._cache_timeout)
        return list(movies)

    @_translate_db_errors
    def get_movie(self, movie_id: MovieId) -> Movie | None:
        key = detail_cache_key(movie_id)
        movie = cache.get(key)
        if movie is not None:
            return movie
        row = models.Movie.objects.filter(id=movie_id.value).first()
        if row is None:
            return None
        movie = _to_domain(row)
        cache.set(key, movie, self._cache_timeout)
        return movie

    @_translate_db_errors
    def insert_movie(self, name: str, genre: str) -> Movie:
        row = models.Movie.objects.create(name=name, genre=genre)
        return _to_domain(row)

    @_translate_db_errors
    def update_movie(self, movie_id: MovieId, patch: MoviePatch) -> Movie | None:
        with transaction.atomic():
            row = models.Movie.objects.select_for_update().filter(id=movie_id.value).first()
            if row is None:
                return None
            changed = [
                field
                for field in patch.changed_fields()
                if getattr(row, field) != getattr(patch, field)
            ]
            if not changed:
                return _to_domain(row)
            for field in changed:
                setattr(row, field, getattr(patch, field))
            row.save(update_fields=[*changed, "updated_at"])
        return _to_domain(row)

    @_translate_db_errors
    def delete_movie(self, movie_id: MovieId) -> bool:
        row = models.Movie.objects.filter(id=movie_id.value).first()
        if row is None:
            return False
        row.delete()
        return True
