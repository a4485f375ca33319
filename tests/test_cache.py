"""Tests for the in-process movie cache."""

from tiered_movies.cache import MovieCache
from tiered_movies.models.movie import Movie, QueryKind

A = Movie(id=1, title="Alien")
B = Movie(id=2, title="Blade Runner")

POPULAR_1 = (QueryKind.POPULAR, 1)
TOP_RATED = (QueryKind.TOP_RATED, None)


class TestSharedCache:
    """Tests for the default shared cache."""

    def test_starts_empty(self):
        """Test a new cache holds nothing."""
        cache = MovieCache()
        assert cache.get() == []
        assert len(cache) == 0

    def test_keys_share_one_bucket(self):
        """Test that every key reads and writes the same list."""
        cache = MovieCache()
        cache.append(A, POPULAR_1)
        cache.append(B, TOP_RATED)
        assert cache.get(POPULAR_1) == [A, B]
        assert cache.get((QueryKind.SEARCH, "x")) == [A, B]

    def test_reset_empties_everything(self):
        """Test that resetting any key clears the shared bucket."""
        cache = MovieCache()
        cache.append(A, POPULAR_1)
        cache.reset(TOP_RATED)
        assert cache.snapshot() == []

    def test_get_returns_copy(self):
        """Test that callers cannot mutate the cache through a read."""
        cache = MovieCache()
        cache.append(A)
        cache.get().append(B)
        assert cache.snapshot() == [A]


class TestPartitionedCache:
    """Tests for the partitioned cache."""

    def test_keys_are_independent(self):
        """Test that each key has its own bucket."""
        cache = MovieCache(partitioned=True)
        cache.append(A, POPULAR_1)
        cache.append(B, TOP_RATED)
        assert cache.get(POPULAR_1) == [A]
        assert cache.get(TOP_RATED) == [B]
        assert cache.get((QueryKind.POPULAR, 2)) == []

    def test_reset_only_clears_its_key(self):
        """Test that resetting one key leaves the others alone."""
        cache = MovieCache(partitioned=True)
        cache.append(A, POPULAR_1)
        cache.append(B, TOP_RATED)
        cache.reset(POPULAR_1)
        assert cache.snapshot() == [B]

    def test_clear_empties_all_keys(self):
        """Test that clear drops every bucket."""
        cache = MovieCache(partitioned=True)
        cache.append(A, POPULAR_1)
        cache.append(B, TOP_RATED)
        cache.clear()
        assert len(cache) == 0
