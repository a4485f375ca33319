"""TMDb API data source, the remote tier."""

import logging

import httpx
from attrs import define

from ..config import TMDB_API_BASE_URL
from ..exceptions import RemoteFetchError
from ..models.movie import Movie
from .base import MoviesDataSource

logger = logging.getLogger(__name__)


@define
class TMDbMoviesDataSource(MoviesDataSource):
    """Client for the TMDb movie lists, search and details endpoints."""

    read_access_token: str
    base_url: str = TMDB_API_BASE_URL
    timeout: float = 30.0
    _client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.read_access_token}",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, path: str, params: dict | None = None) -> dict:
        client = await self._get_client()
        try:
            resp = await client.get(path, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"TMDb request {path} failed: {e}") from e
        except ValueError as e:
            raise RemoteFetchError(f"TMDb returned invalid JSON for {path}") from e

    async def _get_results(self, path: str, params: dict | None = None) -> list[Movie]:
        data = await self._get_json(path, params)
        try:
            return [Movie.from_tmdb(item) for item in data.get("results", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteFetchError(f"Unexpected TMDb payload for {path}") from e

    async def load_popular_movies(self, force_remote: bool, page: int) -> list[Movie]:
        """Fetch one page of popular movies."""
        return await self._get_results("/movie/popular", {"page": page})

    async def load_top_rated_movies(self, force_remote: bool) -> list[Movie]:
        """Fetch the first page of top-rated movies."""
        return await self._get_results("/movie/top_rated")

    async def search_movie(self, force_remote: bool, query: str) -> list[Movie]:
        """Search movies by title."""
        return await self._get_results("/search/movie", {"query": query})

    async def get_movie(self, online_required: bool, movie_id: int) -> Movie | None:
        """Fetch movie details, or None if TMDb does not know the id."""
        client = await self._get_client()
        try:
            resp = await client.get(f"/movie/{movie_id}")
            if resp.status_code == httpx.codes.NOT_FOUND:
                return None
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"TMDb request for movie {movie_id} failed: {e}") from e
        except ValueError as e:
            raise RemoteFetchError(f"TMDb returned invalid JSON for movie {movie_id}") from e

        try:
            return Movie.from_tmdb(data)
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteFetchError(f"Unexpected TMDb payload for movie {movie_id}") from e

    def add_movie(self, movie: Movie) -> None:
        # TMDb is read-only from here
        logger.debug("Ignoring add_movie(%s) on remote source", movie.id)

    def clear_data(self) -> None:
        logger.debug("Ignoring clear_data() on remote source")
