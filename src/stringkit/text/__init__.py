"""String operations addressed by integer unit offsets."""

from .addressing import (
    UnitView,
    char_at,
    clamped_range_at,
    closed_range_at,
    cursor_at,
    infix,
    infix_between,
    infix_while,
    position_of,
    range_at,
    substring,
    substring_from,
    substring_through,
    substring_to,
    unit_slice,
)
from .editing import remove, repeated, replace, replaced_matches
from .measure import byte_size, grapheme_count, is_ascii, utf16_length
from .search import (
    end_index_of,
    find,
    index_of,
    indices_of,
    offsets_of,
    ranges_of,
    removed_occurrences,
    replacing_occurrences,
    unit_ranges_of,
)
from .whitespace import condensed_whitespace, trimmed, trimmed_leading, trimmed_trailing
from .words import collapse_spaces_at, select_word_offsets, select_word_range

__all__ = [
    "UnitView",
    "byte_size",
    "char_at",
    "clamped_range_at",
    "closed_range_at",
    "collapse_spaces_at",
    "condensed_whitespace",
    "cursor_at",
    "end_index_of",
    "find",
    "grapheme_count",
    "index_of",
    "indices_of",
    "infix",
    "infix_between",
    "infix_while",
    "is_ascii",
    "offsets_of",
    "position_of",
    "range_at",
    "ranges_of",
    "remove",
    "removed_occurrences",
    "repeated",
    "replace",
    "replaced_matches",
    "replacing_occurrences",
    "select_word_offsets",
    "select_word_range",
    "substring",
    "substring_from",
    "substring_through",
    "substring_to",
    "trimmed",
    "trimmed_leading",
    "trimmed_trailing",
    "unit_ranges_of",
    "unit_slice",
    "utf16_length",
]
