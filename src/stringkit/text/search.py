"""Single and multi-occurrence search over string units.

:func:`find` is the one search primitive; everything else scans with it.
Multi-occurrence scans are non-overlapping and strictly left to right:

    >>> offsets_of("Hello, playground, playground, playground", "play")
    [7, 19, 31]

After a non-empty match the scan resumes at the match end. After an empty
match it resumes one unit past the match start, so zero-width patterns
cannot stall the scan. A scan stops once it reaches the end of the text
unless it got there by stepping past an empty match; that final probe is why
an empty pattern reports ``count + 1`` matches.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from typing import Iterator

import regex

from ..core.options import CompareOptions, compile_pattern, fold
from ..core.ranges import Cursor, MatchRange
from ..core.units import Granularity, split_units, unit_boundaries, unit_index_of
from ..errors import ErrorCode, OffsetOutOfRangeError

__all__ = [
    "find",
    "index_of",
    "end_index_of",
    "indices_of",
    "ranges_of",
    "offsets_of",
    "unit_ranges_of",
    "replacing_occurrences",
    "removed_occurrences",
]

LOGGER = logging.getLogger(__name__)

GranularityArg = Granularity | str | None


class _UnitSearcher:
    """Search state for one haystack/needle/options triple.

    Literal mode folds each unit separately and joins the keys, so a native
    ``str.find`` over the folded text can be mapped back to unit indices. Hits
    that start or end inside a unit are skipped.
    """

    def __init__(
        self,
        haystack: str,
        needle: str,
        options: CompareOptions,
        granularity: GranularityArg,
    ) -> None:
        self.haystack = haystack
        self.options = options
        self.bounds = unit_boundaries(haystack, granularity)
        self.count = len(self.bounds) - 1
        if options & CompareOptions.REGULAR_EXPRESSION:
            self._pattern = compile_pattern(needle, options)
            return
        self._pattern = None
        self._needle = "".join(fold(unit, options) for unit in split_units(needle, granularity))
        keys = [
            fold(haystack[self.bounds[i] : self.bounds[i + 1]], options) for i in range(self.count)
        ]
        self._folded = "".join(keys)
        key_starts = [0]
        for key in keys:
            key_starts.append(key_starts[-1] + len(key))
        self._key_starts = key_starts
        self._unit_starting_at: dict[int, int] = {}
        self._unit_ending_at: dict[int, int] = {}
        for index, offset in enumerate(key_starts):
            self._unit_starting_at.setdefault(offset, index)
            self._unit_ending_at[offset] = index

    def find(self, lower: int, upper: int) -> tuple[int, int] | None:
        """Return the ``(start, end)`` unit indices of a match within ``[lower, upper]``."""

        if self._pattern is not None:
            return self._find_pattern(self._pattern, lower, upper)
        return self._find_literal(lower, upper)

    def _find_literal(self, lower: int, upper: int) -> tuple[int, int] | None:
        needle = self._needle
        backwards = bool(self.options & CompareOptions.BACKWARDS)
        anchored = bool(self.options & CompareOptions.ANCHORED)
        if not needle:
            return (upper, upper) if backwards else (lower, lower)
        folded = self._folded
        lo = self._key_starts[lower]
        hi = self._key_starts[upper]
        size = len(needle)
        if anchored:
            pos = hi - size if backwards else lo
            if pos < lo or not folded.startswith(needle, pos, hi):
                return None
            return self._aligned(pos, pos + size, lower, upper)
        if backwards:
            pos = folded.rfind(needle, lo, hi)
            while pos != -1:
                hit = self._aligned(pos, pos + size, lower, upper)
                if hit is not None:
                    return hit
                pos = folded.rfind(needle, lo, pos + size - 1)
            return None
        pos = folded.find(needle, lo, hi)
        while pos != -1:
            hit = self._aligned(pos, pos + size, lower, upper)
            if hit is not None:
                return hit
            pos = folded.find(needle, pos + 1, hi)
        return None

    def _aligned(self, start: int, end: int, lower: int, upper: int) -> tuple[int, int] | None:
        first = self._unit_starting_at.get(start)
        last = self._unit_ending_at.get(end)
        if first is None or last is None:
            return None
        first = max(first, lower)
        last = min(last, upper)
        if last < first:
            return None
        return first, last

    def _find_pattern(self, pattern: regex.Pattern[str], lower: int, upper: int) -> tuple[int, int] | None:
        bounds = self.bounds
        lo = bounds[lower]
        hi = bounds[upper]
        # A BACKWARDS pattern is compiled with REVERSE, so match() anchors at hi.
        if self.options & CompareOptions.ANCHORED:
            match = pattern.match(self.haystack, lo, hi)
        else:
            match = pattern.search(self.haystack, lo, hi)
        if match is None:
            return None
        # Snap outward so a match never splits a unit.
        start = bisect_right(bounds, match.start()) - 1
        end = bisect_left(bounds, match.end())
        return start, end


def find(
    haystack: str,
    needle: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    search_range: MatchRange | None = None,
    granularity: GranularityArg = None,
) -> MatchRange | None:
    """Return the first match of ``needle`` in ``haystack`` (last with ``BACKWARDS``).

    ``search_range`` limits the search to a cursor range of ``haystack``.
    Patterns are compiled before any matching, so a malformed regex raises
    :class:`~stringkit.errors.PatternInvalidError` even on empty input.
    """

    searcher = _UnitSearcher(haystack, needle, options, granularity)
    lower, upper = 0, searcher.count
    if search_range is not None:
        lower = _unit_for(searcher.bounds, search_range.start)
        upper = _unit_for(searcher.bounds, search_range.end)
        if lower > upper:
            return None
    hit = searcher.find(lower, upper)
    if hit is None:
        return None
    return _to_range(searcher.bounds, hit)


def index_of(
    text: str,
    needle: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> Cursor | None:
    """Return the cursor where the first match of ``needle`` starts."""

    found = find(text, needle, options, granularity=granularity)
    return found.start if found is not None else None


def end_index_of(
    text: str,
    needle: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> Cursor | None:
    """Return the cursor just past the first match of ``needle``."""

    found = find(text, needle, options, granularity=granularity)
    return found.end if found is not None else None


def indices_of(
    text: str,
    pattern: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> list[Cursor]:
    """Return the start cursor of every non-overlapping match."""

    bounds = unit_boundaries(text, granularity)
    return [Cursor(bounds[start]) for start, _ in _scan(text, pattern, options, granularity)]


def ranges_of(
    text: str,
    pattern: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> list[MatchRange]:
    """Return the cursor range of every non-overlapping match.

    Case-insensitive and regex searches work the same way::

        ranges_of(text, "Play", CompareOptions.CASE_INSENSITIVE)
        ranges_of(text, r"\\bplay\\w+", CompareOptions.REGULAR_EXPRESSION)
    """

    bounds = unit_boundaries(text, granularity)
    return [_to_range(bounds, hit) for hit in _scan(text, pattern, options, granularity)]


def offsets_of(
    text: str,
    pattern: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> list[int]:
    """Return the integer unit offset of every non-overlapping match."""

    return [start for start, _ in _scan(text, pattern, options, granularity)]


def unit_ranges_of(
    text: str,
    pattern: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> list[tuple[int, int]]:
    """Return ``(start, end)`` unit offsets of every non-overlapping match."""

    return list(_scan(text, pattern, options, granularity))


def replacing_occurrences(
    text: str,
    target: str,
    replacement: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> str:
    """Return ``text`` with every non-overlapping match of ``target`` replaced.

    ``replacement`` is inserted literally, also in regex mode; use
    :func:`stringkit.text.editing.replaced_matches` for group templates. An
    empty literal ``target`` leaves the text unchanged.
    """

    if not target and not options & CompareOptions.REGULAR_EXPRESSION:
        return text
    bounds = unit_boundaries(text, granularity)
    pieces: list[str] = []
    cursor = 0
    for start, end in _scan(text, target, options, granularity):
        pieces.append(text[cursor : bounds[start]])
        pieces.append(replacement)
        cursor = bounds[end]
    pieces.append(text[cursor:])
    return "".join(pieces)


def removed_occurrences(
    text: str,
    occurrence: str,
    options: CompareOptions = CompareOptions.NONE,
    *,
    granularity: GranularityArg = None,
) -> str:
    """Return ``text`` with every match of ``occurrence`` removed."""

    return replacing_occurrences(text, occurrence, "", options, granularity=granularity)


def _scan(
    text: str,
    pattern: str,
    options: CompareOptions,
    granularity: GranularityArg,
) -> Iterator[tuple[int, int]]:
    # Scans always run forward.
    options &= ~CompareOptions.BACKWARDS
    searcher = _UnitSearcher(text, pattern, options, granularity)
    scan = 0
    # End of text is only searched on empty text or after an empty match.
    probe_end = True
    while scan < searcher.count or (scan == searcher.count and probe_end):
        hit = searcher.find(scan, searcher.count)
        if hit is None:
            return
        yield hit
        start, end = hit
        if start < end:
            scan = end
            probe_end = False
        else:
            LOGGER.debug("Empty match at unit %d; advancing one unit", start)
            scan = start + 1
            probe_end = True


def _unit_for(bounds: tuple[int, ...], cursor: Cursor) -> int:
    index = unit_index_of(bounds, cursor.offset)
    if index is None:
        raise OffsetOutOfRangeError(
            error_code=ErrorCode.CURSOR_NOT_ON_BOUNDARY,
            message=f"Search range cursor {cursor.offset} does not sit on a unit boundary",
            offset=cursor.offset,
            unit_count=len(bounds) - 1,
        )
    return index


def _to_range(bounds: tuple[int, ...], hit: tuple[int, int]) -> MatchRange:
    return MatchRange(Cursor(bounds[hit[0]]), Cursor(bounds[hit[1]]))
