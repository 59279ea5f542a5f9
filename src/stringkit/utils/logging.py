"""Structured logging helpers for the stringkit library."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["setup_logging", "get_logger", "get_log_path"]

_PACKAGE_LOGGER = "stringkit"
_LOG_DIR_ENV = "STRINGKIT_LOG_DIR"
_CONFIGURED = False
_LOG_PATH: Path | None = None

logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> Path | None:
    """Attach rotating file + optional console handlers to the ``stringkit`` logger.

    A file handler is only installed when ``log_dir`` (or ``STRINGKIT_LOG_DIR``)
    is provided. Returns the log file path, if any.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force:
        return _LOG_PATH

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    log_path: Path | None = None
    target_dir = _resolve_log_dir(log_dir)
    if target_dir is not None:
        target_dir.mkdir(parents=True, exist_ok=True)
        log_path = target_dir / "stringkit.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.setLevel(level)
    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)


def get_log_path() -> Path | None:
    """Return the currently configured log file if available."""

    return _LOG_PATH


def _resolve_log_dir(log_dir: Path | str | None) -> Path | None:
    env_override = os.environ.get(_LOG_DIR_ENV)
    target = log_dir or env_override
    if not target:
        return None
    return Path(target).expanduser()
