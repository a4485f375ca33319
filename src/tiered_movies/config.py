"""Configuration management using environment variables."""

import os
from functools import lru_cache

from attrs import define

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"

_TRUTHY = {"1", "true", "yes", "on"}


@define
class Settings:
    """Application settings."""

    tmdb_read_access_token: str
    tmdb_base_url: str = TMDB_API_BASE_URL
    database_path: str = "movies.db"
    partitioned_cache: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings(
        tmdb_read_access_token=os.environ["TMDB_READ_ACCESS_TOKEN"],
        tmdb_base_url=os.environ.get("TMDB_API_BASE_URL", TMDB_API_BASE_URL),
        database_path=os.environ.get("MOVIE_DB_PATH", "movies.db"),
        partitioned_cache=os.environ.get("MOVIE_CACHE_PARTITIONED", "").lower()
        in _TRUTHY,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
