"""Tests for logging setup."""

import logging

import pytest

from tiered_movies.config import Settings
from tiered_movies.logging_config import configure_logging


def stderr_handlers(root):
    return [h for h in root.handlers if type(h) is logging.StreamHandler]


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_level = root.level
    existing = stderr_handlers(root)
    for handler in existing:
        root.removeHandler(handler)
    yield root
    for handler in stderr_handlers(root):
        root.removeHandler(handler)
    for handler in existing:
        root.addHandler(handler)
    root.setLevel(saved_level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_from_settings(self, root_logger):
        """Test that the root level follows the settings."""
        configure_logging(Settings(tmdb_read_access_token="t", log_level="debug"))
        assert root_logger.level == logging.DEBUG
        assert len(stderr_handlers(root_logger)) == 1

    def test_unknown_level_means_info(self, root_logger):
        """Test the fallback level."""
        configure_logging(Settings(tmdb_read_access_token="t", log_level="chatty"))
        assert root_logger.level == logging.INFO

    def test_quiets_http_request_logs(self, root_logger):
        """Test that httpx request lines are hidden at INFO."""
        configure_logging(Settings(tmdb_read_access_token="t"))
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_second_call_adds_no_handler(self, root_logger):
        """Test that configuring twice keeps one stderr handler."""
        settings = Settings(tmdb_read_access_token="t")
        configure_logging(settings)
        configure_logging(settings)
        assert len(stderr_handlers(root_logger)) == 1
