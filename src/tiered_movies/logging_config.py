"""Logging setup for the MCP server process.

stdout carries the MCP stdio transport, so every record goes to stderr.
"""

import logging
import sys

from .config import Settings

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# httpx logs one INFO line per request
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(settings: Settings) -> None:
    """Install a stderr handler at ``settings.log_level``; unknown levels mean INFO."""
    level = _LEVELS.get(settings.log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if any(
        isinstance(h, logging.StreamHandler) and h.stream is sys.stderr for h in root.handlers
    ):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    )
    root.addHandler(handler)
