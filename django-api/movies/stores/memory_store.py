"""In-memory implementation of the MovieStore.

Used by unit tests and local tooling. A single lock serialises every
operation, so merge patches never interleave.
"""

import threading
import uuid
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from movies.domain import Movie, MovieId, MoviePatch
from movies.stores.interfaces import MovieStore


class InMemoryMovieStore(MovieStore):
    """Dict-backed movie store."""

    def __init__(self, clock: Callable[[], datetime] = timezone.now) -> None:
        self._clock = clock
        self._movies: dict[MovieId, Movie] = {}
        self._lock = threading.Lock()

    def list_movies(self) -> list[Movie]:
        with self._lock:
            movies = list(self._movies.values())
        return sorted(movies, key=lambda m: (m.name, m.created_at, str(m.id)))

    def get_movie(self, movie_id: MovieId) -> Movie | None:
        with self._lock:
            return self._movies.get(movie_id)

    def insert_movie(self, name: str, genre: str) -> Movie:
        now = self._clock()
        with self._lock:
            movie_id = MovieId(value=uuid.uuid4())
            while movie_id in self._movies:
                movie_id = MovieId(value=uuid.uuid4())
            movie = Movie(
                id=movie_id,
                name=name,
                genre=genre,
                seen=False,
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )
            self._movies[movie_id] = movie
        return movie

    def update_movie(self, movie_id: MovieId, patch: MoviePatch) -> Movie | None:
        with self._lock:
            current = self._movies.get(movie_id)
            if current is None:
                return None
            updated = current.apply(patch, self._clock())
            self._movies[movie_id] = updated
        return updated

    def delete_movie(self, movie_id: MovieId) -> bool:
        with self._lock:
            return self._movies.pop(movie_id, None) is not None
