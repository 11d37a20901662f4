from django.urls import path

from movies.handlers import MovieDetailView, MovieListView, SessionView

urlpatterns = [
    path("auth/session", SessionView.as_view(), name="auth-session"),
    path("movies", MovieListView.as_view(), name="movie-list"),
    path("movies/<str:movie_id>", MovieDetailView.as_view(), name="movie-detail"),
]
