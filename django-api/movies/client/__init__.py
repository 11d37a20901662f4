"""Watch-list client: HTTP access, derived view state and mutation sync."""

from movies.client.api import MovieApiClient
from movies.client.errors import (
    ApiError,
    MutationInFlightError,
    NotFoundApiError,
    UnauthorizedApiError,
    UnknownMovieError,
    ValidationApiError,
)
from movies.client.records import MovieRecord
from movies.client.state import WatchlistState, reduce
from movies.client.sync import MovieApi, SyncController
from movies.client.view_state import SortDirection, ViewOptions, render, shuffle_order

__all__ = [
    "ApiError",
    "MovieApi",
    "MovieApiClient",
    "MovieRecord",
    "MutationInFlightError",
    "NotFoundApiError",
    "SortDirection",
    "SyncController",
    "UnauthorizedApiError",
    "UnknownMovieError",
    "ValidationApiError",
    "ViewOptions",
    "WatchlistState",
    "reduce",
    "render",
    "shuffle_order",
]
