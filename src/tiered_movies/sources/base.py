"""The contract shared by every movie data source."""

from abc import ABC, abstractmethod

from ..models.movie import Movie


class MoviesDataSource(ABC):
    """A source of movie collections and single movies.

    ``force_remote`` and ``online_required`` are hints passed through to the
    implementation; each source decides what they mean for it.
    """

    @abstractmethod
    async def load_popular_movies(self, force_remote: bool, page: int) -> list[Movie]:
        pass

    @abstractmethod
    async def load_top_rated_movies(self, force_remote: bool) -> list[Movie]:
        pass

    @abstractmethod
    async def search_movie(self, force_remote: bool, query: str) -> list[Movie]:
        pass

    @abstractmethod
    async def get_movie(self, online_required: bool, movie_id: int) -> Movie | None:
        """Return the movie, or None when this source does not have it."""

    @abstractmethod
    def add_movie(self, movie: Movie) -> None:
        pass

    @abstractmethod
    def clear_data(self) -> None:
        pass
