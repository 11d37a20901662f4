from movies.auth import SignedTokenGate
from movies.services.movie_service import MovieService
from movies.stores import DjangoMovieStore


def get_movie_service() -> MovieService:
    """Build the service wired to the database store and the configured gate."""
    return MovieService(store=DjangoMovieStore(), gate=SignedTokenGate.from_settings())


__all__ = ["MovieService", "get_movie_service"]
