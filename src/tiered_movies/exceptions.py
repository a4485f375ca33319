"""Error types raised by the movie repository and its data sources."""


class MovieRepositoryError(Exception):
    """Base class for repository errors."""


class RemoteFetchError(MovieRepositoryError):
    """The remote source could not be reached or returned unusable data."""


class UnsupportedOperationError(MovieRepositoryError, NotImplementedError):
    """The operation is not available on this data source."""
