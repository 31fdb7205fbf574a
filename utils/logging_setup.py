"""
Logging configuration for processes that host title evaluation.

Library modules only create named loggers under "lobby_titles" and never
configure handlers. This package ships no entry point of its own:
configure_logging() is the hook the hosting process (such as a bot) calls
once at startup, before using the services.
"""

from __future__ import annotations

import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Configure root logging and return the "lobby_titles" logger.

    Args:
        level: Level name or number; defaults to LOG_LEVEL. Unknown names fall back to INFO.
    """
    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,  # Override handlers a host framework may have installed
    )
    logger = logging.getLogger("lobby_titles")
    logger.setLevel(resolved)
    return logger
