"""Domain error codes for the movies module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MOVIE_NOT_FOUND = "MOVIE_NOT_FOUND"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnauthorizedError(DomainError):
    """Raised when a caller has no valid session token."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Unauthorized")


class MovieValidationError(DomainError):
    """Raised when a create or update request carries invalid fields."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class MovieNotFoundError(DomainError):
    """Raised when a movie is not found."""

    def __init__(self, movie_id: str) -> None:
        super().__init__(code=ErrorCode.MOVIE_NOT_FOUND, message="Movie not found")
        self.movie_id = movie_id


class StoreFailureError(DomainError):
    """Raised when the underlying persistence is unavailable."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Internal server error",
        )
