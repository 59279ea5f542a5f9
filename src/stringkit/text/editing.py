"""Splicing helpers that return edited copies of a string."""

from __future__ import annotations

from ..core.options import CompareOptions, compile_pattern
from ..core.units import Granularity
from .addressing import clamped_range_at

__all__ = ["replace", "remove", "repeated", "replaced_matches"]


def replace(
    text: str,
    position: int,
    max_length: int,
    new_text: str,
    *,
    granularity: Granularity | str | None = None,
) -> str:
    """Return ``text`` with ``max_length`` units at ``position`` replaced by ``new_text``.

    Bounds are clamped exactly like :func:`~stringkit.text.addressing.infix`,
    so a position past the end appends and a huge length replaces the tail.
    """

    span = clamped_range_at(text, position, max_length, granularity=granularity)
    return text[: span.start.offset] + new_text + text[span.end.offset :]


def remove(
    text: str,
    position: int,
    max_length: int | None = None,
    *,
    granularity: Granularity | str | None = None,
) -> str:
    """Return ``text`` without ``max_length`` units at ``position`` (the whole tail by default)."""

    span = clamped_range_at(text, position, max_length, granularity=granularity)
    return text[: span.start.offset] + text[span.end.offset :]


def repeated(text: str, count: int) -> str:
    """Return ``text`` repeated ``count`` times."""

    if count < 0:
        raise ValueError("count must be non-negative")
    return text * count


def replaced_matches(
    text: str,
    pattern: str,
    replacement: str,
    options: CompareOptions = CompareOptions.NONE,
) -> str:
    """Return ``text`` with every regex match of ``pattern`` replaced.

    ``replacement`` is a template; ``\\1`` and ``\\g<name>`` refer to groups.
    The pattern is compiled up front, so malformed input raises
    :class:`~stringkit.errors.PatternInvalidError` before any substitution.
    """

    compiled = compile_pattern(pattern, options)
    return compiled.sub(replacement, text)
