"""Movie service - all collection business logic lives here.

Services:
- Depend only on interfaces (stores, auth gate)
- Check the caller's session token before touching the store
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from movies.auth.gate import AuthGate
from movies.domain import Movie, MovieDetails, MovieId, MoviePatch
from movies.domain.errors import MovieNotFoundError, MovieValidationError
from movies.stores.interfaces import MovieStore

logger = logging.getLogger(__name__)


class MovieService:
    """Service for watch-list collection operations.

    Every operation takes the caller's session token as its first argument.
    """

    def __init__(self, store: MovieStore, gate: AuthGate) -> None:
        self._store = store
        self._gate = gate

    def authorize(self, token: str | None) -> None:
        """Check a session token without touching the store.

        Raises:
            UnauthorizedError: If the token is not valid.
        """
        self._gate.verify(token)

    def list_active(self, token: str | None) -> list[Movie]:
        """Return all movies that have not been soft-deleted.

        Raises:
            UnauthorizedError: If the token is not valid.
        """
        self.authorize(token)
        return [movie for movie in self._store.list_movies() if not movie.is_deleted]

    def get_movie(self, token: str | None, movie_id: str) -> Movie:
        """Return a movie by ID, soft-deleted or not.

        Raises:
            UnauthorizedError: If the token is not valid.
            MovieNotFoundError: If the movie does not exist.
        """
        self.authorize(token)
        parsed_id = self._parse_id(movie_id)
        movie = self._store.get_movie(parsed_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def create_movie(self, token: str | None, name: str | None, genre: str | None) -> Movie:
        """Create an unseen movie.

        Raises:
            UnauthorizedError: If the token is not valid.
            MovieValidationError: If name or genre is empty or missing.
        """
        self.authorize(token)
        try:
            details = MovieDetails(name=name or "", genre=genre or "")
        except ValueError as exc:
            raise MovieValidationError(str(exc)) from None
        movie = self._store.insert_movie(details.name, details.genre)
        logger.info("Created movie %s", movie.id)
        return movie

    def update_movie(
        self,
        token: str | None,
        movie_id: str,
        *,
        seen: bool | None = None,
        is_deleted: bool | None = None,
    ) -> Movie:
        """Merge-patch a movie: only the fields given are changed.

        Raises:
            UnauthorizedError: If the token is not valid.
            MovieValidationError: If a field has the wrong type, or the patch
                would restore a soft-deleted movie.
            MovieNotFoundError: If the movie does not exist.
        """
        self.authorize(token)
        try:
            patch = MoviePatch(seen=seen, is_deleted=is_deleted)
        except ValueError as exc:
            raise MovieValidationError(str(exc)) from None
        parsed_id = self._parse_id(movie_id)
        movie = self._store.update_movie(parsed_id, patch)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        if not patch.is_empty:
            logger.info("Updated movie %s (%s)", movie.id, ", ".join(patch.changed_fields()))
        return movie

    def hard_delete(self, token: str | None, movie_id: str) -> None:
        """Permanently remove a movie. Administrative use only.

        Raises:
            UnauthorizedError: If the token is not valid.
            MovieNotFoundError: If the movie does not exist.
        """
        self.authorize(token)
        parsed_id = self._parse_id(movie_id)
        if not self._store.delete_movie(parsed_id):
            raise MovieNotFoundError(movie_id)
        logger.info("Hard-deleted movie %s", parsed_id)

    @staticmethod
    def _parse_id(movie_id: str) -> MovieId:
        # No record can carry a malformed ID, so it is reported as not found.
        try:
            return MovieId.from_string(movie_id)
        except (TypeError, ValueError, AttributeError):
            raise MovieNotFoundError(movie_id) from None
