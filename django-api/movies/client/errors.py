"""Errors raised by the watch-list client."""

from dataclasses import dataclass


@dataclass(eq=False)
class ApiError(Exception):
    """A failed round trip. ``status`` is None when no response arrived."""

    status: int | None
    message: str

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"HTTP {self.status}: {self.message}"


class UnauthorizedApiError(ApiError):
    """The session token was missing, invalid or expired."""


class NotFoundApiError(ApiError):
    """The movie does not exist on the server."""


class ValidationApiError(ApiError):
    """The server rejected the request body."""


class MutationInFlightError(Exception):
    """A mutation was requested while an earlier one on the same target is unresolved."""

    def __init__(self, target: str) -> None:
        super().__init__(f"A request for {target} is already in flight")
        self.target = target


class UnknownMovieError(LookupError):
    """A mutation named a movie that is not in the client's collection."""

    def __init__(self, movie_id: str) -> None:
        super().__init__(f"Movie {movie_id} is not in the collection")
        self.movie_id = movie_id
