"""Three-way comparison results and string comparators."""

from __future__ import annotations

import locale
from enum import IntEnum
from typing import Callable, Optional, TypeVar

import regex

from ..core.options import CompareOptions, fold

__all__ = [
    "Ordering",
    "ThreeWayComparator",
    "compare",
    "standard_compare",
    "locale_compare",
    "lift",
]

A = TypeVar("A")

_DIGIT_RUN_RE = regex.compile(r"(\d+)")


class Ordering(IntEnum):
    """Result of a three-way comparison of ``lhs`` against ``rhs``."""

    ASCENDING = -1
    SAME = 0
    DESCENDING = 1

    @classmethod
    def coerce(cls, value: int) -> "Ordering":
        """Map a ``cmp``-style integer (any sign) onto an :class:`Ordering`."""

        if isinstance(value, Ordering):
            return value
        if value < 0:
            return cls.ASCENDING
        if value > 0:
            return cls.DESCENDING
        return cls.SAME

    def reversed(self) -> "Ordering":
        return Ordering(-self.value)


ThreeWayComparator = Callable[[A, A], Ordering]


def compare(lhs: str, rhs: str, options: CompareOptions = CompareOptions.NONE) -> Ordering:
    """Compare two strings under ``options``.

    Folding options behave as in search. With ``NUMERIC`` runs of digits
    compare by value, so ``"file9"`` orders before ``"file10"``.
    """

    if options & CompareOptions.NUMERIC:
        left: list = _numeric_key(lhs, options)
        right: list = _numeric_key(rhs, options)
    else:
        left = [fold(lhs, options)]
        right = [fold(rhs, options)]
    if left < right:
        return Ordering.ASCENDING
    if left > right:
        return Ordering.DESCENDING
    return Ordering.SAME


def standard_compare(lhs: str, rhs: str) -> Ordering:
    """Compare the way file browsers sort names: case-insensitive with numeric runs."""

    return compare(lhs, rhs, CompareOptions.CASE_INSENSITIVE | CompareOptions.NUMERIC)


def locale_compare(lhs: str, rhs: str) -> Ordering:
    """Compare using the collation of the current ``LC_COLLATE`` locale."""

    return Ordering.coerce(locale.strcoll(lhs, rhs))


def lift(compare: ThreeWayComparator[A]) -> ThreeWayComparator[Optional[A]]:
    """Lift ``compare`` to optional values, ordering ``None`` before everything else.

    Pairs well with :func:`~stringkit.ordering.descriptors.by_key_compare` when
    the key may be missing::

        by_extension = by_key_compare(file_extension, lift(standard_compare))
    """

    def lifted(lhs: Optional[A], rhs: Optional[A]) -> Ordering:
        if lhs is None and rhs is None:
            return Ordering.SAME
        if lhs is None:
            return Ordering.ASCENDING
        if rhs is None:
            return Ordering.DESCENDING
        return compare(lhs, rhs)

    return lifted


def _numeric_key(text: str, options: CompareOptions) -> list:
    # split() with a capture group alternates text, digits, text, ...
    parts = _DIGIT_RUN_RE.split(text)
    return [int(part) if index % 2 else fold(part, options) for index, part in enumerate(parts)]
