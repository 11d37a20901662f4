"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from rest_framework.test import APIClient

from movies.auth import SignedTokenGate
from movies.client.errors import (
    ApiError,
    NotFoundApiError,
    UnauthorizedApiError,
    ValidationApiError,
)
from movies.client.records import MovieRecord
from movies.domain.errors import DomainError, ErrorCode
from movies.services import MovieService
from movies.stores import InMemoryMovieStore

PASSWORD = "movienight"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def token(settings) -> str:
    settings.WATCHLIST_PASSWORD = PASSWORD
    return SignedTokenGate.from_settings().authenticate(PASSWORD).token


@pytest.fixture
def auth_client(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture(autouse=True)
def clear_cache(request):
    """The cache lives in the database, so only database tests can touch it."""
    if request.node.get_closest_marker("django_db") is None:
        yield
        return
    from django.core.cache import cache
    request.getfixturevalue("db")
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def gate() -> SignedTokenGate:
    return SignedTokenGate(password=PASSWORD, max_age=timedelta(days=30))


@pytest.fixture
def store() -> InMemoryMovieStore:
    return InMemoryMovieStore()


@pytest.fixture
def service(store: InMemoryMovieStore, gate: SignedTokenGate) -> MovieService:
    return MovieService(store=store, gate=gate)


@pytest.fixture
def service_token(gate: SignedTokenGate) -> str:
    return gate.authenticate(PASSWORD).token


_API_ERRORS = {
    ErrorCode.UNAUTHORIZED: (UnauthorizedApiError, 401),
    ErrorCode.VALIDATION_ERROR: (ValidationApiError, 400),
    ErrorCode.MOVIE_NOT_FOUND: (NotFoundApiError, 404),
    ErrorCode.STORE_FAILURE: (ApiError, 500),
}


class ServiceBackedApi:
    """MovieApi implementation calling a MovieService in-process.

    ``fail_next`` makes the next call raise a server error without reaching
    the service.
    """

    def __init__(self, service: MovieService, token: str) -> None:
        self.service = service
        self.token = token
        self.fail_next = False
        self.calls: list[tuple] = []

    async def list_movies(self) -> list[MovieRecord]:
        self.calls.append(("list",))
        return [self._record(m) for m in self._call(self.service.list_active, self.token)]

    async def create_movie(self, name: str, genre: str) -> MovieRecord:
        self.calls.append(("create", name, genre))
        return self._record(self._call(self.service.create_movie, self.token, name, genre))

    async def update_movie(self, movie_id, *, seen=None, is_deleted=None) -> MovieRecord:
        self.calls.append(("update", movie_id, seen, is_deleted))
        movie = self._call(
            self.service.update_movie, self.token, movie_id, seen=seen, is_deleted=is_deleted
        )
        return self._record(movie)

    def _call(self, method, *args, **kwargs):
        if self.fail_next:
            self.fail_next = False
            raise ApiError(status=500, message="Internal server error")
        try:
            return method(*args, **kwargs)
        except DomainError as err:
            error_cls, status = _API_ERRORS[err.code]
            raise error_cls(status=status, message=err.message) from err

    @staticmethod
    def _record(movie) -> MovieRecord:
        return MovieRecord(
            id=str(movie.id),
            name=movie.name,
            genre=movie.genre,
            seen=movie.seen,
            is_deleted=movie.is_deleted,
        )


@pytest.fixture
def backend(service: MovieService, service_token: str) -> ServiceBackedApi:
    return ServiceBackedApi(service, service_token)
