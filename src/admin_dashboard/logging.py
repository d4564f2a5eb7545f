"""Logging setup shared by admin_dashboard entry points."""

from __future__ import annotations

import logging
import logging.config
import os

from admin_dashboard.paths import repo_file

NOISY_LIBRARY_LOGGERS = ("urllib3", "requests")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
QUIET_LEVEL = logging.INFO


def resolve_level() -> int:
    """Level named by LOG_LEVEL, DEBUG when unset or unknown."""
    level_name = os.getenv("LOG_LEVEL", "DEBUG").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.DEBUG


def configure_logging(*, quiet: bool = False) -> logging.Logger:
    """Configure the root logger from logging.ini, or a plain stream handler without it.

    quiet caps verbosity at INFO regardless of LOG_LEVEL.
    """
    root = logging.getLogger()
    config_path = repo_file("logging.ini")
    if config_path.is_file():
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    elif not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    level = resolve_level()
    root.setLevel(max(level, QUIET_LEVEL) if quiet else level)
    for logger_name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.INFO)
    return root
