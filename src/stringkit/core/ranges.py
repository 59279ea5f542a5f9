"""Value types for positions and spans inside a string."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(slots=True, frozen=True, order=True)
class Cursor:
    """Opaque position on a unit boundary of one particular string.

    ``offset`` is the storage offset (a Python ``str`` index), not a unit
    count. Convert to an integer unit position with
    :func:`stringkit.text.addressing.position_of`. A cursor is only meaningful
    for the string it was resolved against.
    """

    offset: int

    def __post_init__(self) -> None:
        try:
            number = int(self.offset)
        except (TypeError, ValueError) as exc:
            raise ValueError("Cursor offset must be an integer") from exc
        if number < 0:
            raise ValueError("Cursor offset must be non-negative")
        object.__setattr__(self, "offset", number)


@dataclass(slots=True, frozen=True)
class MatchRange(Sequence[Cursor]):
    """Half-open ``[start, end)`` pair of cursors, e.g. one located match."""

    start: Cursor
    end: Cursor

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> Cursor | tuple[Cursor, ...]:
        if isinstance(index, slice):
            return (self.start, self.end)[index]
        if index == 0:
            return self.start
        if index == 1:
            return self.end
        raise IndexError("MatchRange index out of range")

    def __iter__(self) -> Iterator[Cursor]:
        yield self.start
        yield self.end

    @property
    def is_empty(self) -> bool:
        """Return ``True`` for a zero-width range."""

        return self.start == self.end

    @property
    def storage_slice(self) -> slice:
        """Return a ``slice`` selecting the range from the string it belongs to."""

        return slice(self.start.offset, self.end.offset)

    def to_tuple(self) -> tuple[int, int]:
        """Return the storage offsets as a ``(start, end)`` tuple."""

        return (self.start.offset, self.end.offset)

    @classmethod
    def from_offsets(cls, start: int, end: int) -> MatchRange:
        """Build a range from two storage offsets."""

        return cls(Cursor(start), Cursor(end))


@dataclass(slots=True, frozen=True)
class UnitSpan(Sequence[int]):
    """Integer unit bounds as requested by a caller.

    Unlike :class:`MatchRange` nothing is resolved or validated here; a span
    may be reversed or reach past the string. Operations decide what that means.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self._coerce_index(self.start, "start"))
        object.__setattr__(self, "end", self._coerce_index(self.end, "end"))

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"UnitSpan {label} must be an integer")
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"UnitSpan {label} must be an integer") from exc

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.start
        if index == 1:
            return self.end
        raise IndexError("UnitSpan index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return ``end - start`` (negative for reversed spans)."""

        return self.end - self.start

    def to_tuple(self) -> tuple[int, int]:
        """Return the span as a ``(start, end)`` tuple."""

        return (self.start, self.end)

    @classmethod
    def from_value(cls, value: Any) -> UnitSpan:
        """Coerce ``value`` into a :class:`UnitSpan`.

        Accepts spans, ``range`` objects (step 1), ``slice`` objects with both
        bounds, ``{"start", "end"}`` mappings, two-item sequences and objects
        exposing ``start``/``end`` attributes.
        """

        if isinstance(value, UnitSpan):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError("UnitSpan ranges must have a step of 1")
            return cls(value.start, value.stop)
        if isinstance(value, slice):
            if value.step not in (None, 1):
                raise ValueError("UnitSpan slices must have a step of 1")
            if value.start is None or value.stop is None:
                raise ValueError("UnitSpan slices require explicit start and stop")
            return cls(value.start, value.stop)
        if isinstance(value, Mapping):
            start = value.get("start")
            end = value.get("end")
            if start is None or end is None:
                raise ValueError("UnitSpan mappings require start and end keys")
            return cls(start, end)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 2:
                raise ValueError("UnitSpan sequences must have exactly two entries")
            return cls(seq[0], seq[1])
        start = getattr(value, "start", None)
        end = getattr(value, "end", None)
        if start is not None and end is not None:
            return cls(start, end)
        raise TypeError("Unsupported UnitSpan input")


__all__ = ["Cursor", "MatchRange", "UnitSpan"]
