"""Tests for cursor and span value types."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from stringkit.core.ranges import Cursor, MatchRange, UnitSpan


def test_cursor_rejects_negative_offsets() -> None:
    with pytest.raises(ValueError):
        Cursor(-1)


def test_cursors_order_by_offset() -> None:
    assert Cursor(2) < Cursor(5)
    assert sorted([Cursor(4), Cursor(0), Cursor(2)]) == [Cursor(0), Cursor(2), Cursor(4)]


def test_match_range_unpacks_and_slices() -> None:
    text = "Hello, playground"
    match = MatchRange.from_offsets(7, 11)

    start, end = match

    assert (start, end) == (Cursor(7), Cursor(11))
    assert text[match.storage_slice] == "play"
    assert match.to_tuple() == (7, 11)
    assert not match.is_empty
    assert MatchRange.from_offsets(3, 3).is_empty


@pytest.mark.parametrize(
    "value",
    [
        range(2, 5),
        slice(2, 5),
        {"start": 2, "end": 5},
        [2, 5],
        (2, 5),
        SimpleNamespace(start=2, end=5),
        UnitSpan(2, 5),
    ],
)
def test_unit_span_from_value_accepts_common_shapes(value: object) -> None:
    assert UnitSpan.from_value(value).to_tuple() == (2, 5)


def test_unit_span_keeps_reversed_bounds() -> None:
    span = UnitSpan.from_value((5, 1))

    assert span.to_tuple() == (5, 1)
    assert span.length == -4


@pytest.mark.parametrize("value", [range(0, 6, 2), slice(None, 3), {"start": 1}, [1, 2, 3]])
def test_unit_span_from_value_rejects_malformed_input(value: object) -> None:
    with pytest.raises(ValueError):
        UnitSpan.from_value(value)


def test_unit_span_from_value_rejects_strings() -> None:
    with pytest.raises(TypeError):
        UnitSpan.from_value("ab")
