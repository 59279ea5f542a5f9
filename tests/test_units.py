"""Tests for unit segmentation and granularity selection."""

from __future__ import annotations

import pytest

from stringkit.core.units import Granularity, split_units, unit_boundaries, unit_count, unit_index_of
from stringkit.errors import ConfigurationError
from stringkit.services.settings import configure


def test_grapheme_units_keep_clusters_together(mixed_text: str) -> None:
    assert split_units(mixed_text) == ["a\u0301", "b", "c", "\r\n", "d"]
    assert unit_boundaries(mixed_text) == (0, 2, 3, 4, 6, 7)


def test_code_point_units_follow_str_indexing(mixed_text: str) -> None:
    assert unit_count(mixed_text, Granularity.CODE_POINT) == len(mixed_text)
    assert unit_boundaries(mixed_text, "code_point") == tuple(range(len(mixed_text) + 1))


def test_empty_text_has_a_single_boundary() -> None:
    assert unit_boundaries("") == (0,)
    assert unit_count("") == 0


def test_flags_and_modified_emoji_are_one_grapheme() -> None:
    assert unit_count("\U0001F1EB\U0001F1F7") == 1
    assert unit_count("\U0001F44D\U0001F3FD") == 1
    assert unit_count("\U0001F44D\U0001F3FD", "code_point") == 2


def test_coerce_accepts_hyphenated_names() -> None:
    assert Granularity.coerce("Code-Point") is Granularity.CODE_POINT
    assert Granularity.coerce(Granularity.GRAPHEME) is Granularity.GRAPHEME


def test_coerce_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        Granularity.coerce("bytes")

    assert excinfo.value.setting == "granularity"


def test_default_granularity_follows_active_settings() -> None:
    assert unit_count("e\u0301") == 1

    configure(granularity="code_point")

    assert unit_count("e\u0301") == 2


def test_unit_index_of_only_matches_boundaries() -> None:
    bounds = (0, 2, 3, 5)

    assert unit_index_of(bounds, 3) == 2
    assert unit_index_of(bounds, 5) == 3
    assert unit_index_of(bounds, 1) is None
    assert unit_index_of(bounds, 9) is None


def test_boundary_cache_is_bounded() -> None:
    from stringkit.core.units import _boundaries

    for index in range(100):
        unit_boundaries(f"text {index}")

    info = _boundaries.cache_info()
    assert info.maxsize == 64
    assert info.currsize <= 64
