"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from movies.domain import Movie, MovieId, MoviePatch


class MovieStore(ABC):
    """Interface for movie persistence operations.

    Mutating methods return only after the write is committed. Implementations
    raise StoreFailureError when the backing storage is unavailable.
    """

    @abstractmethod
    def list_movies(self) -> list[Movie]:
        """Return every movie, soft-deleted ones included, in a stable order."""
        ...

    @abstractmethod
    def get_movie(self, movie_id: MovieId) -> Movie | None:
        """Return a movie by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_movie(self, name: str, genre: str) -> Movie:
        """Persist a new unseen, non-deleted movie with a fresh ID."""
        ...

    @abstractmethod
    def update_movie(self, movie_id: MovieId, patch: MoviePatch) -> Movie | None:
        """Apply a merge patch atomically against the latest stored value.

        Returns the updated movie, or None if not found.
        """
        ...

    @abstractmethod
    def delete_movie(self, movie_id: MovieId) -> bool:
        """Permanently remove a movie. Returns False if it did not exist."""
        ...
