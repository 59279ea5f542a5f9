"""Comparison options shared by searching and three-way comparison."""

from __future__ import annotations

import logging
import unicodedata
from enum import Flag, auto
from functools import lru_cache

import regex

from ..errors import PatternInvalidError

__all__ = ["CompareOptions", "fold", "compile_pattern"]

LOGGER = logging.getLogger(__name__)


class CompareOptions(Flag):
    """How two pieces of text are matched or compared.

    ``LITERAL`` is exact code-point matching, which is also what you get with
    no options at all. ``NUMERIC`` only affects three-way comparison, and
    ``BACKWARDS``/``ANCHORED`` only affect :func:`stringkit.text.search.find`.
    Folding options (case, diacritics, width) apply to literal search and
    comparison; in ``REGULAR_EXPRESSION`` mode only ``CASE_INSENSITIVE`` is honored.
    """

    NONE = 0
    CASE_INSENSITIVE = auto()
    LITERAL = auto()
    BACKWARDS = auto()
    ANCHORED = auto()
    NUMERIC = auto()
    DIACRITIC_INSENSITIVE = auto()
    WIDTH_INSENSITIVE = auto()
    REGULAR_EXPRESSION = auto()


def fold(text: str, options: CompareOptions) -> str:
    """Return ``text`` reduced to the key used for matching under ``options``."""

    if options & CompareOptions.WIDTH_INSENSITIVE:
        text = unicodedata.normalize("NFKC", text)
    if options & CompareOptions.DIACRITIC_INSENSITIVE:
        decomposed = unicodedata.normalize("NFD", text)
        text = "".join(char for char in decomposed if not unicodedata.combining(char))
    if options & CompareOptions.CASE_INSENSITIVE:
        text = text.casefold()
    return text


def compile_pattern(pattern: str, options: CompareOptions = CompareOptions.NONE) -> regex.Pattern[str]:
    """Compile ``pattern`` for ``options``, raising :class:`PatternInvalidError` on bad syntax.

    ``BACKWARDS`` compiles a reverse pattern: ``search`` then finds the last
    match before ``endpos`` and ``match`` anchors at ``endpos``.
    """

    flags = regex.IGNORECASE if options & CompareOptions.CASE_INSENSITIVE else 0
    if options & CompareOptions.BACKWARDS:
        flags |= regex.REVERSE
    return _compile(pattern, flags)


@lru_cache(maxsize=128)
def _compile(pattern: str, flags: int) -> regex.Pattern[str]:
    try:
        return regex.compile(pattern, flags)
    except regex.error as exc:
        LOGGER.debug("Rejected pattern %r: %s", pattern, exc)
        raise PatternInvalidError(
            message=f"Invalid regex pattern: {exc}",
            pattern=pattern,
            reason=str(exc),
        ) from exc
