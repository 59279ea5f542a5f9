"""Whitespace trimming and condensing."""

from __future__ import annotations

import regex

__all__ = ["trimmed", "trimmed_leading", "trimmed_trailing", "condensed_whitespace"]

_HORIZONTAL_SPACE_RE = regex.compile(r"[\t\p{Zs}]+")


def trimmed(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace and newlines."""

    return text.strip()


def trimmed_leading(text: str) -> str:
    return text.lstrip()


def trimmed_trailing(text: str) -> str:
    return text.rstrip()


def condensed_whitespace(text: str) -> str:
    """Collapse runs of spaces and tabs into one space and drop them at both ends.

    Line breaks are not horizontal space and are kept as they are.
    """

    return " ".join(part for part in _HORIZONTAL_SPACE_RE.split(text) if part)
