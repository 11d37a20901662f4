"""Watch-list client state and its reducer.

Pure function: (state, event) -> state
No IO, no randomness. The returned state is a new object; the input is never
modified. Failure events leave ``movies`` exactly as it was.
"""

from dataclasses import dataclass, field, replace

from movies.client.records import MovieRecord
from movies.client.view_state import (
    Rendered,
    ViewOptions,
    apply_shuffle,
    render_view,
    toggle_group,
    toggle_sort,
)


@dataclass(frozen=True)
class WatchlistState:
    """Cached active collection plus presentation and request status."""

    movies: tuple[MovieRecord, ...] = ()
    view: ViewOptions = field(default_factory=ViewOptions)
    loading: bool = False
    adding: bool = False
    pending: frozenset[str] = frozenset()
    error: str | None = None
    notice: str | None = None

    def rendered(self) -> Rendered:
        return render_view(self.movies, self.view)

    def find(self, movie_id: str) -> MovieRecord | None:
        return next((movie for movie in self.movies if movie.id == movie_id), None)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class MoviesLoaded:
    movies: tuple[MovieRecord, ...]


@dataclass(frozen=True)
class LoadFailed:
    message: str


@dataclass(frozen=True)
class AddStarted:
    pass


@dataclass(frozen=True)
class MovieAdded:
    movie: MovieRecord


@dataclass(frozen=True)
class AddFailed:
    message: str


@dataclass(frozen=True)
class MutationStarted:
    movie_id: str


@dataclass(frozen=True)
class MovieReplaced:
    movie: MovieRecord


@dataclass(frozen=True)
class MovieRemoved:
    movie_id: str


@dataclass(frozen=True)
class MutationFailed:
    movie_id: str
    message: str


@dataclass(frozen=True)
class SortToggled:
    pass


@dataclass(frozen=True)
class GroupToggled:
    pass


@dataclass(frozen=True)
class Shuffled:
    """Carries the permutation; drawing it is the dispatcher's job."""

    order: tuple[str, ...]


@dataclass(frozen=True)
class ErrorReported:
    message: str


@dataclass(frozen=True)
class MessagesCleared:
    pass


Event = (
    LoadStarted
    | MoviesLoaded
    | LoadFailed
    | AddStarted
    | MovieAdded
    | AddFailed
    | MutationStarted
    | MovieReplaced
    | MovieRemoved
    | MutationFailed
    | SortToggled
    | GroupToggled
    | Shuffled
    | ErrorReported
    | MessagesCleared
)


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def reduce(state: WatchlistState, event: Event) -> WatchlistState:
    """Apply one event to the current state."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown event: {type(event).__name__}")
    return handler(state, event)


def _load_started(state: WatchlistState, event: LoadStarted) -> WatchlistState:
    return replace(state, loading=True)


def _movies_loaded(state: WatchlistState, event: MoviesLoaded) -> WatchlistState:
    active = tuple(movie for movie in event.movies if not movie.is_deleted)
    return replace(state, movies=active, loading=False, error=None)


def _load_failed(state: WatchlistState, event: LoadFailed) -> WatchlistState:
    return replace(state, loading=False, error=event.message)


def _add_started(state: WatchlistState, event: AddStarted) -> WatchlistState:
    return replace(state, adding=True)


def _movie_added(state: WatchlistState, event: MovieAdded) -> WatchlistState:
    return replace(
        state,
        movies=(*state.movies, event.movie),
        adding=False,
        error=None,
        notice="Movie added successfully!",
    )


def _add_failed(state: WatchlistState, event: AddFailed) -> WatchlistState:
    return replace(state, adding=False, error=event.message)


def _mutation_started(state: WatchlistState, event: MutationStarted) -> WatchlistState:
    return replace(state, pending=state.pending | {event.movie_id})


def _movie_replaced(state: WatchlistState, event: MovieReplaced) -> WatchlistState:
    movie = event.movie
    if movie.is_deleted:
        movies = tuple(m for m in state.movies if m.id != movie.id)
    else:
        movies = tuple(movie if m.id == movie.id else m for m in state.movies)
    return replace(state, movies=movies, pending=state.pending - {movie.id}, error=None)


def _movie_removed(state: WatchlistState, event: MovieRemoved) -> WatchlistState:
    return replace(
        state,
        movies=tuple(m for m in state.movies if m.id != event.movie_id),
        pending=state.pending - {event.movie_id},
        error=None,
    )


def _mutation_failed(state: WatchlistState, event: MutationFailed) -> WatchlistState:
    return replace(state, pending=state.pending - {event.movie_id}, error=event.message)


def _sort_toggled(state: WatchlistState, event: SortToggled) -> WatchlistState:
    return replace(state, view=toggle_sort(state.view))


def _group_toggled(state: WatchlistState, event: GroupToggled) -> WatchlistState:
    return replace(state, view=toggle_group(state.view))


def _shuffled(state: WatchlistState, event: Shuffled) -> WatchlistState:
    return replace(state, view=apply_shuffle(state.view, event.order))


def _error_reported(state: WatchlistState, event: ErrorReported) -> WatchlistState:
    return replace(state, error=event.message)


def _messages_cleared(state: WatchlistState, event: MessagesCleared) -> WatchlistState:
    return replace(state, error=None, notice=None)


_HANDLERS = {
    LoadStarted: _load_started,
    MoviesLoaded: _movies_loaded,
    LoadFailed: _load_failed,
    AddStarted: _add_started,
    MovieAdded: _movie_added,
    AddFailed: _add_failed,
    MutationStarted: _mutation_started,
    MovieReplaced: _movie_replaced,
    MovieRemoved: _movie_removed,
    MutationFailed: _mutation_failed,
    SortToggled: _sort_toggled,
    GroupToggled: _group_toggled,
    Shuffled: _shuffled,
    ErrorReported: _error_reported,
    MessagesCleared: _messages_cleared,
}
