"""Caret-oriented word helpers."""

from __future__ import annotations

import unicodedata

from ..core.ranges import Cursor, MatchRange
from ..core.units import Granularity, split_units, unit_boundaries

__all__ = ["select_word_offsets", "select_word_range", "collapse_spaces_at"]

# A caret sitting on one of these, right after a word, selects that word.
_TRAILING_BREAKS = frozenset(" :!?,.")
_EXTRA_WORD_CHARACTERS = frozenset("@_")


def select_word_offsets(
    text: str,
    pin: int,
    *,
    granularity: Granularity | str | None = None,
) -> tuple[int, int] | None:
    """Return the ``(start, end)`` unit offsets of the word around caret ``pin``.

    Word units are letters, marks, digits, ``@`` and ``_``. When the caret is
    on one of `` :!?,.`` (or at the very end) directly after a word unit, it
    first moves one unit left, so ``"hello|, world"`` selects ``hello``.
    Returns ``None`` for texts shorter than two units, for ``pin`` outside
    ``[0, count]`` and when no word touches the caret.
    """

    units = split_units(text, granularity)
    count = len(units)
    if pin < 0 or pin > count:
        return None
    if count <= 1:
        return None

    if pin > 0 and _is_word_unit(units[pin - 1]):
        if pin == count or _is_trailing_break(units[pin]):
            pin -= 1

    start = pin
    while start >= 0 and start < count and _is_word_unit(units[start]):
        start -= 1

    end = pin
    while end < count and _is_word_unit(units[end]):
        end += 1

    if start == end:
        return None
    return start + 1, end


def select_word_range(
    text: str,
    pin: int,
    *,
    granularity: Granularity | str | None = None,
) -> MatchRange | None:
    """Cursor-range variant of :func:`select_word_offsets`."""

    offsets = select_word_offsets(text, pin, granularity=granularity)
    if offsets is None:
        return None
    bounds = unit_boundaries(text, granularity)
    return MatchRange(Cursor(bounds[offsets[0]]), Cursor(bounds[offsets[1]]))


def collapse_spaces_at(
    text: str,
    pin: int,
    *,
    granularity: Granularity | str | None = None,
) -> tuple[int, str]:
    """Make the run of spaces around ``pin`` exactly one space wide.

    A space is inserted when there is none. Returns the unit offset where the
    single space now sits together with the new text.
    """

    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    pin = max(0, min(pin, count))

    def unit(index: int) -> str:
        return text[bounds[index] : bounds[index + 1]]

    start = pin
    while start > 0 and unit(start - 1) == " ":
        start -= 1
    end = pin
    while end < count and unit(end) == " ":
        end += 1
    return start, text[: bounds[start]] + " " + text[bounds[end] :]


def _is_word_unit(unit: str) -> bool:
    return any(
        char.isalnum() or char in _EXTRA_WORD_CHARACTERS or unicodedata.category(char).startswith("M")
        for char in unit
    )


def _is_trailing_break(unit: str) -> bool:
    return any(char in _TRAILING_BREAKS for char in unit)
