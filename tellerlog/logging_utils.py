"""Mini README: Application-wide logging helpers for Tellerlog.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and sets the level.

Usage:
    Modules call ``get_logger(__name__)`` once at import time. The root logger
    is configured a single time per process so recorded transactions and export
    failures appear with the same timestamped format regardless of which
    driver (console, HTTP, tests) is active. Later calls may still adjust the
    level, which the CLI uses to honour ``TELLERLOG_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once and apply ``level`` on every call."""

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
