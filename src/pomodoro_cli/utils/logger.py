"""Session log for the timer, kept under platformdirs user_log_dir.

Set ``POMODORO_LOG_LEVEL`` (e.g. ``INFO``) to quieten the file; unknown
values fall back to DEBUG.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_cli"
_LOG_FILE = "pomodoro.log"
_LEVEL_ENV = "POMODORO_LOG_LEVEL"
_MAX_BYTES = 1024 * 1024  # one line per phase, 1 MB is months of sessions
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get(_LEVEL_ENV, "DEBUG").upper())
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the shared timer logger, opening the log file on first use."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    # Records come from models and commands alike, so tag the call site
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-7s %(module)s.%(funcName)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
