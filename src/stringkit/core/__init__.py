"""Core value types and unit segmentation."""

from .ranges import Cursor, MatchRange, UnitSpan
from .units import Granularity, split_units, unit_boundaries, unit_count

__all__ = [
    "Cursor",
    "MatchRange",
    "UnitSpan",
    "Granularity",
    "split_units",
    "unit_boundaries",
    "unit_count",
]
