"""stringkit: integer-offset string addressing, multi-match search and sort descriptors."""

from .core import Cursor, Granularity, MatchRange, UnitSpan, split_units, unit_boundaries, unit_count
from .core.options import CompareOptions
from .errors import (
    ConfigurationError,
    ErrorCode,
    OffsetOutOfRangeError,
    PatternInvalidError,
    StringKitError,
)
from .ordering import (
    Ordering,
    SortDescriptor,
    as_sort_key,
    by_key,
    by_key_compare,
    combine,
    compare,
    is_before,
    lift,
    locale_compare,
    sorted_by,
    standard_compare,
)
from .services.settings import Settings, SettingsStore, configure, get_settings, reset_settings
from .utils.logging import setup_logging
from .text import (
    UnitView,
    byte_size,
    char_at,
    clamped_range_at,
    closed_range_at,
    collapse_spaces_at,
    condensed_whitespace,
    cursor_at,
    end_index_of,
    find,
    grapheme_count,
    index_of,
    indices_of,
    infix,
    infix_between,
    infix_while,
    is_ascii,
    offsets_of,
    position_of,
    range_at,
    ranges_of,
    remove,
    removed_occurrences,
    repeated,
    replace,
    replaced_matches,
    replacing_occurrences,
    select_word_offsets,
    select_word_range,
    substring,
    substring_from,
    substring_through,
    substring_to,
    trimmed,
    trimmed_leading,
    trimmed_trailing,
    unit_ranges_of,
    unit_slice,
    utf16_length,
)

__version__ = "0.1.0"

__all__ = [
    "CompareOptions",
    "ConfigurationError",
    "Cursor",
    "ErrorCode",
    "Granularity",
    "MatchRange",
    "OffsetOutOfRangeError",
    "Ordering",
    "PatternInvalidError",
    "Settings",
    "SettingsStore",
    "SortDescriptor",
    "StringKitError",
    "UnitSpan",
    "UnitView",
    "as_sort_key",
    "by_key",
    "by_key_compare",
    "byte_size",
    "char_at",
    "clamped_range_at",
    "closed_range_at",
    "collapse_spaces_at",
    "combine",
    "compare",
    "condensed_whitespace",
    "configure",
    "cursor_at",
    "end_index_of",
    "find",
    "get_settings",
    "grapheme_count",
    "index_of",
    "indices_of",
    "infix",
    "infix_between",
    "infix_while",
    "is_ascii",
    "is_before",
    "lift",
    "locale_compare",
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
    "reset_settings",
    "select_word_offsets",
    "select_word_range",
    "setup_logging",
    "sorted_by",
    "split_units",
    "standard_compare",
    "substring",
    "substring_from",
    "substring_through",
    "substring_to",
    "trimmed",
    "trimmed_leading",
    "trimmed_trailing",
    "unit_boundaries",
    "unit_count",
    "unit_ranges_of",
    "unit_slice",
    "utf16_length",
]
