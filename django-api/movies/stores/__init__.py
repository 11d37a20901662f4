from movies.stores.django_store import DjangoMovieStore
from movies.stores.interfaces import MovieStore
from movies.stores.memory_store import InMemoryMovieStore

__all__ = ["MovieStore", "DjangoMovieStore", "InMemoryMovieStore"]
