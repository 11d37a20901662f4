from movies.handlers.views import MovieDetailView, MovieListView, SessionView

__all__ = ["MovieListView", "MovieDetailView", "SessionView"]
