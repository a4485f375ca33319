"""In-process movie cache, the first tier."""

from __future__ import annotations

import threading
from collections.abc import Hashable

from .models.movie import Movie, QueryKind

CacheKey = tuple[QueryKind, Hashable]


class MovieCache:
    """
    Ordered movie cache guarded by a single lock.

    In the default shared mode every query kind reads and writes one bucket,
    so a cached popular page also answers top-rated and search calls. With
    ``partitioned=True`` each ``(kind, parameter)`` key has its own bucket.
    Reads always return a fresh list.
    """

    def __init__(self, partitioned: bool = False):
        self.partitioned = partitioned
        self._lock = threading.Lock()
        self._buckets: dict[CacheKey | None, list[Movie]] = {}

    def _bucket_key(self, key: CacheKey | None) -> CacheKey | None:
        return key if self.partitioned else None

    def get(self, key: CacheKey | None = None) -> list[Movie]:
        with self._lock:
            return list(self._buckets.get(self._bucket_key(key), ()))

    def append(self, movie: Movie, key: CacheKey | None = None) -> None:
        with self._lock:
            self._buckets.setdefault(self._bucket_key(key), []).append(movie)

    def reset(self, key: CacheKey | None = None) -> None:
        """Empty the bucket for ``key``; in shared mode that is the whole cache."""
        with self._lock:
            self._buckets.pop(self._bucket_key(key), None)

    def clear(self) -> None:
        with self._lock:
            self._buckets.clear()

    def snapshot(self) -> list[Movie]:
        """All cached movies, bucket by bucket in insertion order."""
        with self._lock:
            return [movie for bucket in self._buckets.values() for movie in bucket]

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())
