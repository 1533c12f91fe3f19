# utils/logging_utils.py

"""
Lightweight logging utilities for the prng-core project.

The generator core reports failures to its callers through return values
(None / False), never by raising. The log is the second channel: every
failure path also leaves a WARNING here, and construction / reseeding
leave DEBUG records.

This helper gives you:

    - a single place to configure log format / level,
    - automatic creation of a log directory,
    - a simple `get_logger(__name__)` function.

Usage:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("Generator constructed")
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOG_FILENAME, LOG_LEVEL, LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# We keep a simple cache so multiple calls with the same name
# return the same logger instance.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    """
    Make sure the directory for log files exists.
    """
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = LOG_LEVEL,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = LOG_FILENAME,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger for the entire project.

    Call this once near the start of your driver script *if* you want
    centralized logging. If you never call it, `get_logger` will still work
    but with Python's default basicConfig.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to log_dir / filename.
        log_to_stdout:
            If True, also log to stdout.
        filename:
            Name of the log file inside the log directory.
        log_dir:
            Directory for the log file; defaults to config.LOGS_DIR.
    """
    handlers: list[logging.Handler] = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_to_file:
        target_dir = log_dir or LOGS_DIR
        _ensure_log_dir(target_dir)
        fh = logging.FileHandler(target_dir / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    # If root already has handlers, avoid duplicating them
    root = logging.getLogger()
    if root.handlers:
        # Just adjust level if already configured
        root.setLevel(level)
        return

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(
    name: Optional[str] = None,
    level: int = LOG_LEVEL,
) -> Logger:
    """
    Get a logger with a given name, configured at a given level.

    If no name is provided, we use the module-level name "__main__".
    The first time this is called, if no handlers exist on the root
    logger, we set up a minimal stdout-only configuration so logs are
    visible.

    Args:
        name:
            Logger name (usually __name__ in the caller).
        level:
            Logging level for this logger.

    Returns:
        logging.Logger instance.
    """
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # If root logger has no handlers, configure a minimal default
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    _LOGGER_CACHE[name] = logger
    return logger
