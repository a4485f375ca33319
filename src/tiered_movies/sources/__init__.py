"""Movie data sources: the contract and its local and remote implementations."""

from .base import MoviesDataSource
from .local import SQLiteMoviesDataSource
from .remote import TMDbMoviesDataSource

__all__ = ["MoviesDataSource", "SQLiteMoviesDataSource", "TMDbMoviesDataSource"]
