"""Unit segmentation: the bridge between integer offsets and ``str`` storage offsets.

A *unit* is what integer offsets count. With :attr:`Granularity.GRAPHEME`
(the default) a unit is one extended grapheme cluster, so ``"e\\u0301"`` and
``"\\r\\n"`` each count as a single unit. With :attr:`Granularity.CODE_POINT` a
unit is one Python ``str`` element.

Segmentation is O(n) and memoized per ``(text, granularity)``; ``str`` is
immutable, so a cached table can never go stale. The cache keeps the 64 most
recently segmented strings alive, together with their tables. Offset lookups
against the table are O(1).
"""

from __future__ import annotations

from bisect import bisect_left
from enum import Enum
from functools import lru_cache

import regex

from ..errors import ConfigurationError
from ..services.settings import get_settings

__all__ = ["Granularity", "unit_boundaries", "split_units", "unit_count", "unit_index_of"]

_GRAPHEME_RE = regex.compile(r"\X")


class Granularity(str, Enum):
    """What a single integer offset step moves over."""

    GRAPHEME = "grapheme"
    CODE_POINT = "code_point"

    @classmethod
    def coerce(cls, value: "Granularity | str | None") -> "Granularity":
        """Return ``value`` as a :class:`Granularity`, falling back to the active settings."""

        if isinstance(value, Granularity):
            return value
        if value is None:
            value = get_settings().granularity
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ConfigurationError(
                message=f"Unknown granularity {value!r}",
                suggestion="Use 'grapheme' or 'code_point'",
                setting="granularity",
                value=value,
            ) from exc


def unit_boundaries(text: str, granularity: Granularity | str | None = None) -> tuple[int, ...]:
    """Return the storage offsets of every unit boundary in ``text``.

    The table always starts with ``0`` and ends with ``len(text)``; unit ``i``
    occupies ``text[table[i]:table[i + 1]]``.
    """

    return _boundaries(text, Granularity.coerce(granularity))


def split_units(text: str, granularity: Granularity | str | None = None) -> list[str]:
    """Return the units of ``text`` in order."""

    bounds = unit_boundaries(text, granularity)
    return [text[bounds[i] : bounds[i + 1]] for i in range(len(bounds) - 1)]


def unit_count(text: str, granularity: Granularity | str | None = None) -> int:
    """Return the number of units in ``text``."""

    return len(unit_boundaries(text, granularity)) - 1


def unit_index_of(bounds: tuple[int, ...], storage_offset: int) -> int | None:
    """Return the unit index whose boundary sits at ``storage_offset``, else ``None``."""

    index = bisect_left(bounds, storage_offset)
    if index < len(bounds) and bounds[index] == storage_offset:
        return index
    return None


@lru_cache(maxsize=64)
def _boundaries(text: str, granularity: Granularity) -> tuple[int, ...]:
    if granularity is Granularity.CODE_POINT:
        return tuple(range(len(text) + 1))
    bounds = [0]
    for match in _GRAPHEME_RE.finditer(text):
        bounds.append(match.end())
    return tuple(bounds)
