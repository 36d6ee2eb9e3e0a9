"""
Logging setup for Paddle Arena

Modules log through ``logging.getLogger(__name__)``; this module only
configures the root handler once at startup.

Environment variables:
    PADDLE_ARENA_LOG_LEVEL=DEBUG   # Global level (default INFO)
"""

import logging
import os

LOG_LEVEL_ENV = "PADDLE_ARENA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_level(level: str | int | None = None) -> int:
    """Resolve a level name or number, falling back to the environment then INFO"""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger for the application"""
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, force=True)
