"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest

from stringkit.services.settings import reset_settings

_ENV_NAMES = (
    "STRINGKIT_GRANULARITY",
    "STRINGKIT_DEBUG_LOGGING",
    "STRINGKIT_LOG_LEVEL",
    "STRINGKIT_LOG_DIR",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    package_logger = logging.getLogger("stringkit")
    level = package_logger.level
    yield
    reset_settings()
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def playground() -> str:
    return "Hello, playground, playground, playground"


@pytest.fixture
def mixed_text() -> str:
    """Five grapheme units: a+acute, b, c, CRLF, d."""

    return "a\u0301bc\r\nd"
