"""Async HTTP client for the watch-list API."""

import logging
from typing import Any

import httpx

from movies.client.errors import (
    ApiError,
    NotFoundApiError,
    UnauthorizedApiError,
    ValidationApiError,
)
from movies.client.records import MovieRecord

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: ValidationApiError,
    401: UnauthorizedApiError,
    404: NotFoundApiError,
}


def _record(payload: Any) -> MovieRecord:
    try:
        return MovieRecord.from_json(payload)
    except (KeyError, TypeError) as exc:
        raise ApiError(status=None, message="Malformed response") from exc


class MovieApiClient:
    """Talks to ``/movies`` and ``/auth/session`` under ``base_url``.

    Requests are never retried; a failure is raised to the caller as ApiError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "MovieApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def login(self, password: str) -> str:
        """Exchange the shared password for a session token and keep it."""
        payload = await self._request("POST", "auth/session", json={"password": password})
        try:
            self.token = payload["token"]
        except (KeyError, TypeError) as exc:
            raise ApiError(status=None, message="Malformed response") from exc
        return self.token

    async def list_movies(self) -> list[MovieRecord]:
        payload = await self._request("GET", "movies")
        if not isinstance(payload, list):
            raise ApiError(status=None, message="Malformed response")
        return [_record(item) for item in payload]

    async def get_movie(self, movie_id: str) -> MovieRecord:
        return _record(await self._request("GET", f"movies/{movie_id}"))

    async def create_movie(self, name: str, genre: str) -> MovieRecord:
        payload = await self._request("POST", "movies", json={"name": name, "genre": genre})
        return _record(payload)

    async def update_movie(
        self,
        movie_id: str,
        *,
        seen: bool | None = None,
        is_deleted: bool | None = None,
    ) -> MovieRecord:
        body: dict[str, bool] = {}
        if seen is not None:
            body["seen"] = seen
        if is_deleted is not None:
            body["isDeleted"] = is_deleted
        payload = await self._request("PATCH", f"movies/{movie_id}", json=body)
        return _record(payload)

    async def delete_movie(self, movie_id: str) -> None:
        await self._request("DELETE", f"movies/{movie_id}")

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(status=None, message="Network error") from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.warning("%s %s returned a non-JSON body", method, path)
                raise ApiError(status=response.status_code, message="Malformed response") from exc

        try:
            message = response.json().get("error") or response.reason_phrase
        except (ValueError, AttributeError):
            message = response.reason_phrase
        error_cls = _STATUS_ERRORS.get(response.status_code, ApiError)
        raise error_cls(status=response.status_code, message=message)
