"""Data models for the tiered movie repository."""

from .movie import Movie, QueryKind

__all__ = ["Movie", "QueryKind"]
