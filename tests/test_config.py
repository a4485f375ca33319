"""Tests for settings loading."""

import pytest

from tiered_movies.config import TMDB_API_BASE_URL, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestGetSettings:
    """Tests for get_settings."""

    def test_defaults(self, monkeypatch):
        """Test that only the token is required."""
        monkeypatch.setenv("TMDB_READ_ACCESS_TOKEN", "token")
        for name in ("TMDB_API_BASE_URL", "MOVIE_DB_PATH", "MOVIE_CACHE_PARTITIONED", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.tmdb_read_access_token == "token"
        assert settings.tmdb_base_url == TMDB_API_BASE_URL
        assert settings.database_path == "movies.db"
        assert settings.partitioned_cache is False
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("TMDB_READ_ACCESS_TOKEN", "token")
        monkeypatch.setenv("MOVIE_DB_PATH", "/tmp/m.db")
        monkeypatch.setenv("MOVIE_CACHE_PARTITIONED", "Yes")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.database_path == "/tmp/m.db"
        assert settings.partitioned_cache is True
        assert settings.log_level == "DEBUG"

    def test_missing_token(self, monkeypatch):
        """Test that a missing token is an error."""
        monkeypatch.delenv("TMDB_READ_ACCESS_TOKEN", raising=False)
        with pytest.raises(KeyError):
            get_settings()
