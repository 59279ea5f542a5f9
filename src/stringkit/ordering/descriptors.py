"""Composable sort descriptors.

A sort descriptor is a plain ``(a, b) -> bool`` predicate answering "does
``a`` order strictly before ``b``?". Build them from key functions, chain
them with :func:`combine`, and hand them to :func:`sorted_by`::

    by_last = by_key(lambda person: person.last, less_than=is_before(standard_compare))
    by_first = by_key_compare(lambda person: person.first, standard_compare)
    people = sorted_by(people, by_last, by_first)

A combined descriptor is a strict weak ordering only if each part is one;
nothing here checks that.
"""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Any, Callable, Iterable, TypeVar

from .comparators import Ordering, ThreeWayComparator

__all__ = [
    "SortDescriptor",
    "by_key",
    "by_key_compare",
    "combine",
    "is_before",
    "as_sort_key",
    "sorted_by",
]

Root = TypeVar("Root")
Value = TypeVar("Value")

SortDescriptor = Callable[[Root, Root], bool]


def by_key(
    key: Callable[[Root], Value],
    less_than: Callable[[Value, Value], bool] = operator.lt,
) -> SortDescriptor[Root]:
    """Order values by ``less_than`` applied to their keys (natural ``<`` by default)."""

    def descriptor(lhs: Root, rhs: Root) -> bool:
        return bool(less_than(key(lhs), key(rhs)))

    return descriptor


def by_key_compare(
    key: Callable[[Root], Value],
    compare: ThreeWayComparator[Value],
    *,
    ascending: bool = True,
) -> SortDescriptor[Root]:
    """Order values by a three-way ``compare`` of their keys.

    ``lhs`` precedes ``rhs`` when the comparison yields ``ASCENDING`` (or
    ``DESCENDING`` with ``ascending=False``).
    """

    expected = Ordering.ASCENDING if ascending else Ordering.DESCENDING

    def descriptor(lhs: Root, rhs: Root) -> bool:
        return Ordering.coerce(compare(key(lhs), key(rhs))) is expected

    return descriptor


def combine(descriptors: Iterable[SortDescriptor[Root]]) -> SortDescriptor[Root]:
    """Chain descriptors: the first one that tells ``a`` and ``b`` apart decides.

    Values every descriptor considers equal do not order before each other.
    """

    chain = tuple(descriptors)

    def combined(lhs: Root, rhs: Root) -> bool:
        for precedes in chain:
            if precedes(lhs, rhs):
                return True
            if precedes(rhs, lhs):
                return False
        return False

    return combined


def is_before(compare: ThreeWayComparator[Value]) -> Callable[[Value, Value], bool]:
    """Turn a three-way comparator into a ``less_than`` predicate for :func:`by_key`."""

    def less_than(lhs: Value, rhs: Value) -> bool:
        return Ordering.coerce(compare(lhs, rhs)) is Ordering.ASCENDING

    return less_than


def as_sort_key(descriptor: SortDescriptor[Root]) -> Callable[[Root], Any]:
    """Adapt ``descriptor`` for the ``key=`` argument of :func:`sorted` and ``list.sort``."""

    def three_way(lhs: Root, rhs: Root) -> int:
        if descriptor(lhs, rhs):
            return -1
        if descriptor(rhs, lhs):
            return 1
        return 0

    return cmp_to_key(three_way)


def sorted_by(items: Iterable[Root], *descriptors: SortDescriptor[Root]) -> list[Root]:
    """Return ``items`` stably sorted by the combined ``descriptors``."""

    return sorted(items, key=as_sort_key(combine(descriptors)))
