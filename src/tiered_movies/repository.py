"""Tiered movie repository: cache, then local store, then remote source."""

import logging
from collections.abc import Awaitable, Callable, Hashable

from .cache import MovieCache
from .exceptions import UnsupportedOperationError
from .models.movie import Movie, QueryKind
from .sources.base import MoviesDataSource

logger = logging.getLogger(__name__)

# (source, force_remote) -> awaitable collection, with the query parameter bound
Fetch = Callable[[MoviesDataSource, bool], Awaitable[list[Movie]]]


class MoviesRepository(MoviesDataSource):
    """Serves movies from the in-process cache, the local tier and the remote tier.

    Collection loads read the first tier that has data and backfill the tiers
    above it. A refresh fetches from the remote tier, then replaces the cache
    and the local store with the result. A failed remote fetch leaves both
    untouched. Errors from the local tier are not caught and never trigger a
    remote fallback.
    """

    def __init__(
        self,
        local_data_source: MoviesDataSource,
        remote_data_source: MoviesDataSource,
        cache: MovieCache | None = None,
    ):
        self.local_data_source = local_data_source
        self.remote_data_source = remote_data_source
        self.cache = cache if cache is not None else MovieCache()
        # Query key whose refresh last wrote the local store
        self._local_owner: tuple[QueryKind, Hashable] | None = None

    async def load_popular_movies(self, force_remote: bool, page: int) -> list[Movie]:
        return await self._load_collection(
            QueryKind.POPULAR,
            page,
            force_remote,
            lambda source, force: source.load_popular_movies(force, page),
        )

    async def load_top_rated_movies(self, force_remote: bool) -> list[Movie]:
        return await self._load_collection(
            QueryKind.TOP_RATED,
            None,
            force_remote,
            lambda source, force: source.load_top_rated_movies(force),
        )

    async def search_movie(self, force_remote: bool, query: str) -> list[Movie]:
        return await self._load_collection(
            QueryKind.SEARCH,
            query,
            force_remote,
            lambda source, force: source.search_movie(force, query),
        )

    async def _load_collection(
        self, kind: QueryKind, param: Hashable, force_remote: bool, fetch: Fetch
    ) -> list[Movie]:
        key = (kind, param)
        if force_remote:
            return await self._refresh(key, fetch)

        cached = self.cache.get(key)
        if cached:
            logger.debug("Serving %s (%r) from cache: %d movies", kind.value, param, len(cached))
            return cached

        if not self._local_answers(key):
            logger.debug(
                "Local store holds %r, refreshing %s (%r)", self._local_owner, kind.value, param
            )
            return await self._refresh(key, fetch)

        local_movies = await fetch(self.local_data_source, False) or []
        for movie in local_movies:
            self.cache.append(movie, key)
        if local_movies:
            logger.debug(
                "Serving %s (%r) from local store: %d movies", kind.value, param, len(local_movies)
            )
            return list(local_movies)

        # Nothing stored locally counts as a miss, not as "no movies"
        return await self._refresh(key, fetch)

    def _local_answers(self, key: tuple[QueryKind, Hashable]) -> bool:
        """In partitioned mode the local store only answers the key that filled it."""
        return not self.cache.partitioned or self._local_owner == key

    async def _refresh(self, key: tuple[QueryKind, Hashable], fetch: Fetch) -> list[Movie]:
        """Fetch from the remote tier, then rewrite the cache and the local store."""
        kind, param = key
        try:
            movies = await fetch(self.remote_data_source, True)
        except Exception:
            logger.warning("Remote refresh of %s (%r) failed", kind.value, param)
            raise

        self.cache.reset(key)
        self.local_data_source.clear_data()
        self._local_owner = key
        for movie in movies:
            self.cache.append(movie, key)
            self.local_data_source.add_movie(movie)

        logger.info("Refreshed %s (%r) from remote: %d movies", kind.value, param, len(movies))
        return list(movies)

    async def get_movie(self, online_required: bool, movie_id: int) -> Movie | None:
        """Load one movie, from the local store unless ``online_required``.

        Returns None when neither tier has the movie. The cache is not used.
        """
        if online_required:
            return await self._fetch_remote_movie(movie_id)

        movie = await self.local_data_source.get_movie(online_required, movie_id)
        if movie is not None:
            return movie
        return await self._fetch_remote_movie(movie_id)

    async def _fetch_remote_movie(self, movie_id: int) -> Movie | None:
        try:
            movie = await self.remote_data_source.get_movie(True, movie_id)
        except Exception:
            logger.warning("Remote lookup of movie %s failed", movie_id)
            raise

        if movie is not None:
            self.local_data_source.add_movie(movie)
        return movie

    def add_movie(self, movie: Movie) -> None:
        raise UnsupportedOperationError("Movies are only written by refreshes and lookups")

    def clear_data(self) -> None:
        self.cache.clear()
        self._local_owner = None
        self.local_data_source.clear_data()

    def cache_snapshot(self) -> list[Movie]:
        return self.cache.snapshot()
