"""Sync controller: mediates user mutations between the cache and the server.

Nothing is applied locally before the server confirms it, so a failed round
trip needs no rollback: the cache is simply left alone and an error message
is recorded. While a request for a movie is unresolved, further mutations of
that movie are refused with MutationInFlightError (the UI disables the
control); the same goes for a second add while one is in flight.
Any other exception, cancellation included, still resolves the pending request
before it propagates.
"""

import logging
import random
from collections.abc import Callable
from typing import Protocol

from movies.client.errors import ApiError, MutationInFlightError, UnknownMovieError
from movies.client.records import MovieRecord
from movies.client.state import (
    AddFailed,
    AddStarted,
    ErrorReported,
    Event,
    GroupToggled,
    LoadFailed,
    LoadStarted,
    MessagesCleared,
    MovieAdded,
    MovieRemoved,
    MovieReplaced,
    MoviesLoaded,
    MutationFailed,
    MutationStarted,
    Shuffled,
    SortToggled,
    WatchlistState,
    reduce,
)
from movies.client.view_state import Rendered, shuffle_order

logger = logging.getLogger(__name__)

Listener = Callable[[WatchlistState], None]


class MovieApi(Protocol):
    """The subset of the HTTP client the controller needs."""

    async def list_movies(self) -> list[MovieRecord]: ...

    async def create_movie(self, name: str, genre: str) -> MovieRecord: ...

    async def update_movie(
        self,
        movie_id: str,
        *,
        seen: bool | None = None,
        is_deleted: bool | None = None,
    ) -> MovieRecord: ...


class SyncController:
    """Owns the client state and drives it through the reducer."""

    def __init__(
        self,
        api: MovieApi,
        *,
        rng: random.Random | None = None,
        state: WatchlistState | None = None,
    ) -> None:
        self._api = api
        self._rng = rng or random.Random()
        self._state = state or WatchlistState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> WatchlistState:
        return self._state

    def rendered(self) -> Rendered:
        return self._state.rendered()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, event: Event) -> WatchlistState:
        self._state = reduce(self._state, event)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def is_pending(self, movie_id: str) -> bool:
        return movie_id in self._state.pending

    async def refresh(self) -> None:
        """Replace the cache with the server's active collection."""
        self.dispatch(LoadStarted())
        try:
            movies = await self._api.list_movies()
        except ApiError as exc:
            logger.warning("Loading movies failed: %s", exc)
            self.dispatch(LoadFailed("Failed to load movies. Please try again."))
            return
        except BaseException:
            self.dispatch(LoadFailed("Failed to load movies. Please try again."))
            raise
        self.dispatch(MoviesLoaded(tuple(movies)))

    async def add_movie(self, name: str, genre: str) -> MovieRecord | None:
        """Create a movie and append the server's record to the cache."""
        if self._state.adding:
            raise MutationInFlightError("add")
        if not name.strip() or not genre.strip():
            self.dispatch(ErrorReported("Movie title and genre are required"))
            return None
        self.dispatch(AddStarted())
        try:
            movie = await self._api.create_movie(name, genre)
        except ApiError as exc:
            logger.warning("Adding movie failed: %s", exc)
            self.dispatch(AddFailed("Failed to add movie. Please try again."))
            return None
        except BaseException:
            self.dispatch(AddFailed("Failed to add movie. Please try again."))
            raise
        self.dispatch(MovieAdded(movie))
        return movie

    async def toggle_seen(self, movie_id: str) -> MovieRecord | None:
        """Flip ``seen``; the server's returned record replaces the cached one."""
        current = self._require(movie_id)
        self.dispatch(MutationStarted(movie_id))
        try:
            movie = await self._api.update_movie(movie_id, seen=not current.seen)
        except ApiError as exc:
            logger.warning("Updating movie %s failed: %s", movie_id, exc)
            self.dispatch(MutationFailed(movie_id, "Failed to update movie. Please try again."))
            return None
        except BaseException:
            self.dispatch(MutationFailed(movie_id, "Failed to update movie. Please try again."))
            raise
        self.dispatch(MovieReplaced(movie))
        return movie

    async def soft_delete(self, movie_id: str) -> bool:
        """Mark a movie deleted on the server, then drop it from the cache."""
        self._require(movie_id)
        self.dispatch(MutationStarted(movie_id))
        try:
            await self._api.update_movie(movie_id, is_deleted=True)
        except ApiError as exc:
            logger.warning("Deleting movie %s failed: %s", movie_id, exc)
            self.dispatch(MutationFailed(movie_id, "Failed to delete movie. Please try again."))
            return False
        except BaseException:
            self.dispatch(MutationFailed(movie_id, "Failed to delete movie. Please try again."))
            raise
        self.dispatch(MovieRemoved(movie_id))
        return True

    def toggle_sort(self) -> WatchlistState:
        return self.dispatch(SortToggled())

    def toggle_group(self) -> WatchlistState:
        return self.dispatch(GroupToggled())

    def shuffle(self) -> WatchlistState:
        """Freeze a fresh random permutation of the current collection."""
        return self.dispatch(Shuffled(shuffle_order(self._state.movies, self._rng)))

    def clear_messages(self) -> WatchlistState:
        return self.dispatch(MessagesCleared())

    def _require(self, movie_id: str) -> MovieRecord:
        if self.is_pending(movie_id):
            raise MutationInFlightError(movie_id)
        movie = self._state.find(movie_id)
        if movie is None:
            raise UnknownMovieError(movie_id)
        return movie
