"""Tiered movie repository: cache, local store and remote source."""

from .exceptions import MovieRepositoryError, RemoteFetchError, UnsupportedOperationError
from .models import Movie, QueryKind
from .repository import MoviesRepository

__all__ = [
    "Movie",
    "MovieRepositoryError",
    "MoviesRepository",
    "QueryKind",
    "RemoteFetchError",
    "UnsupportedOperationError",
]
