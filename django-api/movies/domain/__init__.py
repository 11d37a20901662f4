from movies.domain.models import Movie
from movies.domain.value_objects import MovieDetails, MovieId, MoviePatch

__all__ = [
    "Movie",
    "MovieId",
    "MovieDetails",
    "MoviePatch",
]
