"""Integer-offset addressing of string units.

Offsets count units (see :mod:`stringkit.core.units`), never storage
positions. Non-negative offsets count from the start; negative offsets count
back from the end, so ``-1`` is the position just before the last unit.

Three error policies coexist:

* strict: :func:`cursor_at`, :func:`char_at`, :func:`unit_slice` and
  :class:`UnitView` raise :class:`~stringkit.errors.OffsetOutOfRangeError`;
* absence: the ``substring*`` family returns ``None`` for invalid bounds;
* clamping: :func:`infix` and friends never fail.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Callable, Iterator, overload

from ..core.ranges import Cursor, MatchRange, UnitSpan
from ..core.units import Granularity, unit_boundaries, unit_index_of
from ..errors import ErrorCode, OffsetOutOfRangeError

__all__ = [
    "UnitView",
    "cursor_at",
    "range_at",
    "closed_range_at",
    "clamped_range_at",
    "position_of",
    "char_at",
    "unit_slice",
    "substring",
    "substring_through",
    "substring_from",
    "substring_to",
    "infix",
    "infix_while",
    "infix_between",
]

GranularityArg = Granularity | str | None


def cursor_at(text: str, n: int, *, granularity: GranularityArg = None) -> Cursor:
    """Return the cursor ``n`` units from the start (or ``-n`` units back from the end)."""

    bounds = unit_boundaries(text, granularity)
    return Cursor(bounds[_resolve(bounds, n)])


def range_at(text: str, lower: int, upper: int, *, granularity: GranularityArg = None) -> MatchRange:
    """Resolve both ends of the half-open integer range ``[lower, upper)``."""

    bounds = unit_boundaries(text, granularity)
    return MatchRange(Cursor(bounds[_resolve(bounds, lower)]), Cursor(bounds[_resolve(bounds, upper)]))


def closed_range_at(
    text: str, lower: int, upper: int, *, granularity: GranularityArg = None
) -> MatchRange:
    """Resolve the closed integer range ``[lower, upper]`` as a half-open cursor range."""

    bounds = unit_boundaries(text, granularity)
    start = _resolve(bounds, lower)
    last = _resolve(bounds, upper)
    if last >= len(bounds) - 1:
        raise _out_of_range(upper, bounds, "Closed range cannot include the end of the string")
    return MatchRange(Cursor(bounds[start]), Cursor(bounds[last + 1]))


def clamped_range_at(
    text: str,
    position: int,
    max_length: int | None = None,
    *,
    granularity: GranularityArg = None,
) -> MatchRange:
    """Resolve ``max_length`` units starting ``position`` units in, clamping both ends.

    ``position`` is clamped to ``[0, count]`` and the length to what remains,
    so every integer input resolves. ``None`` means "to the end"; a negative
    length selects nothing.
    """

    bounds = unit_boundaries(text, granularity)
    start, end = _clamped_indices(len(bounds) - 1, position, max_length)
    return MatchRange(Cursor(bounds[start]), Cursor(bounds[end]))


def position_of(text: str, cursor: Cursor, *, granularity: GranularityArg = None) -> int:
    """Return the integer unit offset of ``cursor`` inside ``text``."""

    bounds = unit_boundaries(text, granularity)
    index = unit_index_of(bounds, cursor.offset)
    if index is None:
        raise OffsetOutOfRangeError(
            error_code=ErrorCode.CURSOR_NOT_ON_BOUNDARY,
            message=f"Cursor {cursor.offset} does not sit on a unit boundary",
            suggestion="Resolve cursors against the same string and granularity",
            offset=cursor.offset,
            unit_count=len(bounds) - 1,
        )
    return index


def char_at(text: str, n: int, *, granularity: GranularityArg = None) -> str:
    """Return the unit at offset ``n``."""

    bounds = unit_boundaries(text, granularity)
    index = _resolve(bounds, n)
    if index >= len(bounds) - 1:
        raise _out_of_range(n, bounds, "No unit at the end of the string")
    return text[bounds[index] : bounds[index + 1]]


def unit_slice(
    text: str,
    start: int | None = None,
    stop: int | None = None,
    *,
    closed: bool = False,
    granularity: GranularityArg = None,
) -> str:
    """Strictly slice ``text`` by unit offsets.

    Covers ``[start, stop)``, ``[start, stop]`` (``closed=True``), and the
    open-ended forms when either bound is ``None``. Bounds that cannot be
    resolved, or a lower bound past the upper bound, raise.
    """

    bounds = unit_boundaries(text, granularity)
    lower = 0 if start is None else _resolve(bounds, start)
    if stop is None:
        upper = len(bounds) - 1
    else:
        upper = _resolve(bounds, stop)
        if closed:
            if upper >= len(bounds) - 1:
                raise _out_of_range(stop, bounds, "Closed range cannot include the end of the string")
            upper += 1
    if lower > upper:
        raise _out_of_range(start, bounds, "Range lower bound exceeds its upper bound")
    return text[bounds[lower] : bounds[upper]]


def substring(text: str, span: Any, *, granularity: GranularityArg = None) -> str | None:
    """Return units ``[start, end)`` of ``text`` or ``None`` when the span is invalid.

    ``span`` is anything :meth:`UnitSpan.from_value` accepts, e.g. ``range(2, 5)``.
    """

    bounds_span = UnitSpan.from_value(span)
    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    if not (0 <= bounds_span.start <= count and 0 <= bounds_span.end <= count):
        return None
    if bounds_span.start > bounds_span.end:
        return None
    return text[bounds[bounds_span.start] : bounds[bounds_span.end]]


def substring_through(text: str, span: Any, *, granularity: GranularityArg = None) -> str | None:
    """Return units ``[start, end]`` (inclusive) of ``text`` or ``None`` when invalid."""

    bounds_span = UnitSpan.from_value(span)
    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    if not (0 <= bounds_span.start < count and 0 <= bounds_span.end < count):
        return None
    if bounds_span.start > bounds_span.end:
        return None
    return text[bounds[bounds_span.start] : bounds[bounds_span.end + 1]]


def substring_from(text: str, i: int, *, granularity: GranularityArg = None) -> str | None:
    """Return the tail of ``text`` starting at offset ``i``.

    ``i`` may be negative to take the last ``-i`` units. Requires ``|i| < count``.
    """

    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    i = operator.index(i)
    if abs(i) >= count:
        return None
    start = i if i >= 0 else count + i
    return text[bounds[start] :]


def substring_to(text: str, i: int, *, granularity: GranularityArg = None) -> str | None:
    """Return the head of ``text`` up to (not including) offset ``i``.

    ``i`` may be negative to drop the last ``-i`` units. Requires ``|i| <= count``.
    """

    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    i = operator.index(i)
    if abs(i) > count:
        return None
    end = i if i >= 0 else count + i
    return text[: bounds[end]]


def infix(
    text: str,
    position: int,
    max_length: int | None = None,
    *,
    granularity: GranularityArg = None,
) -> str:
    """Return up to ``max_length`` units starting ``position`` units in.

    The middle-of-string companion to prefix/suffix slicing. Out-of-range
    positions and lengths are clamped, so this never fails::

        infix("12345", 2, 2)   # "34"
        infix("12345", 2, 10)  # "345"
        infix("12345", 10, 2)  # ""
    """

    bounds = unit_boundaries(text, granularity)
    start, end = _clamped_indices(len(bounds) - 1, position, max_length)
    return text[bounds[start] : bounds[end]]


def infix_while(
    text: str,
    position: int,
    predicate: Callable[[str], bool],
    *,
    granularity: GranularityArg = None,
) -> str:
    """Return the units from ``position`` for as long as ``predicate`` holds.

    ``predicate`` sees one unit at a time and is not called again after it
    first returns ``False``.
    """

    bounds = unit_boundaries(text, granularity)
    count = len(bounds) - 1
    start, _ = _clamped_indices(count, position, 0)
    end = start
    while end < count and predicate(text[bounds[end] : bounds[end + 1]]):
        end += 1
    return text[bounds[start] : bounds[end]]


def infix_between(
    text: str,
    start: Cursor,
    end: Cursor,
    *,
    inclusive: bool = False,
    granularity: GranularityArg = None,
) -> str:
    """Return the text between two cursors; ``inclusive`` also takes the unit at ``end``."""

    stop = end.offset
    if inclusive:
        bounds = unit_boundaries(text, granularity)
        index = unit_index_of(bounds, end.offset)
        if index is None or index >= len(bounds) - 1:
            raise OffsetOutOfRangeError(
                message="Inclusive end cursor must point at a unit",
                offset=end.offset,
                unit_count=len(bounds) - 1,
            )
        stop = bounds[index + 1]
    if start.offset > stop or stop > len(text):
        raise OffsetOutOfRangeError(
            message="Cursor range is reversed or outside the string",
            offset=start.offset,
        )
    return text[start.offset : stop]


class UnitView(Sequence[str]):
    """Read-only sequence of the units of a string.

    Indexing follows :func:`cursor_at`: negative indices count from the end,
    and out-of-range indices *or slice bounds* raise rather than clamp. Slices
    must use a step of 1.
    """

    __slots__ = ("_text", "_bounds")

    def __init__(self, text: str, *, granularity: GranularityArg = None) -> None:
        self._text = text
        self._bounds = unit_boundaries(text, granularity)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._bounds) - 1

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> str: ...

    def __getitem__(self, index: int | slice) -> str:
        bounds = self._bounds
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("UnitView slices must have a step of 1")
            lower = 0 if index.start is None else _resolve(bounds, index.start)
            upper = len(bounds) - 1 if index.stop is None else _resolve(bounds, index.stop)
            if lower > upper:
                raise _out_of_range(index.start, bounds, "Range lower bound exceeds its upper bound")
            return self._text[bounds[lower] : bounds[upper]]
        position = _resolve(bounds, index)
        if position >= len(bounds) - 1:
            raise _out_of_range(index, bounds, "No unit at the end of the string")
        return self._text[bounds[position] : bounds[position + 1]]

    def __iter__(self) -> Iterator[str]:
        bounds = self._bounds
        for i in range(len(bounds) - 1):
            yield self._text[bounds[i] : bounds[i + 1]]

    def cursor(self, n: int) -> Cursor:
        """Return the cursor at unit offset ``n``."""

        return Cursor(self._bounds[_resolve(self._bounds, n)])

    def __repr__(self) -> str:
        return f"UnitView({self._text!r})"


def _resolve(bounds: tuple[int, ...], n: int) -> int:
    n = operator.index(n)
    count = len(bounds) - 1
    if n >= 0:
        if n > count:
            raise _out_of_range(n, bounds)
        return n
    if -n > count:
        raise _out_of_range(n, bounds)
    return count + n


def _clamped_indices(count: int, position: int, max_length: int | None) -> tuple[int, int]:
    start = max(0, min(operator.index(position), count))
    if max_length is None:
        return start, count
    return start, start + max(0, min(operator.index(max_length), count - start))


def _out_of_range(n: Any, bounds: tuple[int, ...], message: str | None = None) -> OffsetOutOfRangeError:
    count = len(bounds) - 1
    return OffsetOutOfRangeError(
        message=message or f"Offset {n} is outside a string of {count} units",
        offset=n,
        unit_count=count,
    )
