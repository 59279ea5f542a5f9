"""Size queries for strings in the encodings callers usually care about."""

from __future__ import annotations

from ..core.units import Granularity, unit_count

__all__ = ["byte_size", "utf16_length", "is_ascii", "grapheme_count", "unit_count"]


def byte_size(text: str, encoding: str = "utf-8") -> int:
    """Return the number of bytes ``text`` occupies in ``encoding``.

    ``"\\r\\n"`` is two bytes but a single grapheme unit.
    """

    return len(text.encode(encoding))


def utf16_length(text: str) -> int:
    """Return the number of UTF-16 code units, as JavaScript or Cocoa would count them."""

    return len(text.encode("utf-16-le")) // 2


def is_ascii(text: str) -> bool:
    return text.isascii()


def grapheme_count(text: str) -> int:
    """Return the number of user-perceived characters regardless of the configured granularity."""

    return unit_count(text, Granularity.GRAPHEME)
