"""Sort descriptors and three-way comparators."""

from .comparators import Ordering, compare, lift, locale_compare, standard_compare
from .descriptors import (
    SortDescriptor,
    as_sort_key,
    by_key,
    by_key_compare,
    combine,
    is_before,
    sorted_by,
)

__all__ = [
    "Ordering",
    "SortDescriptor",
    "as_sort_key",
    "by_key",
    "by_key_compare",
    "combine",
    "compare",
    "is_before",
    "lift",
    "locale_compare",
    "sorted_by",
    "standard_compare",
]
