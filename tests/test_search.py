"""Tests for single and multi-occurrence search."""

from __future__ import annotations

import logging

import pytest

from stringkit.core.options import CompareOptions
from stringkit.core.ranges import Cursor
from stringkit.errors import PatternInvalidError
from stringkit.text.addressing import range_at
from stringkit.text.search import (
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

REGEX = CompareOptions.REGULAR_EXPRESSION


def test_playground_offsets_and_ranges(playground: str) -> None:
    assert offsets_of(playground, "play") == [7, 19, 31]
    assert unit_ranges_of(playground, "play") == [(7, 11), (19, 23), (31, 35)]
    assert indices_of(playground, "play") == [Cursor(7), Cursor(19), Cursor(31)]
    assert [playground[found.storage_slice] for found in ranges_of(playground, "play")] == ["play"] * 3


@pytest.mark.parametrize(
    "text, pattern, expected",
    [("aaa", "aa", [0]), ("ababab", "ab", [0, 2, 4]), ("aaaa", "aa", [0, 2]), ("abc", "z", [])],
)
def test_matches_never_overlap(text: str, pattern: str, expected: list[int]) -> None:
    assert offsets_of(text, pattern) == expected


def test_empty_pattern_matches_every_position() -> None:
    assert offsets_of("abc", "") == [0, 1, 2, 3]
    assert unit_ranges_of("abc", "") == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert offsets_of("", "") == [0]
    assert offsets_of("a\u0301b", "") == [0, 1, 2]


def test_empty_match_advances_one_unit_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="stringkit.text.search"):
        assert unit_ranges_of("baa", "a*", REGEX) == [(0, 0), (1, 3)]

    assert "Empty match" in caplog.text


def test_case_insensitive_search(playground: str) -> None:
    assert offsets_of(playground, "PLAY") == []
    assert offsets_of(playground, "PLAY", CompareOptions.CASE_INSENSITIVE) == [7, 19, 31]


def test_case_folding_can_change_length() -> None:
    assert unit_ranges_of("Stra\u00dfe", "STRASSE", CompareOptions.CASE_INSENSITIVE) == [(0, 6)]


def test_regex_search(playground: str) -> None:
    found = ranges_of(playground, r"\bplay\w+", REGEX)

    assert [found_range.to_tuple() for found_range in found] == [(7, 17), (19, 29), (31, 41)]
    assert {playground[found_range.storage_slice] for found_range in found} == {"playground"}


def test_regex_honours_case_insensitivity(playground: str) -> None:
    assert offsets_of(playground, r"HELLO|GROUND", REGEX | CompareOptions.CASE_INSENSITIVE) == [
        0,
        11,
        23,
        35,
    ]


def test_malformed_regex_raises_before_matching() -> None:
    with pytest.raises(PatternInvalidError) as excinfo:
        offsets_of("", "(", REGEX)

    assert excinfo.value.pattern == "("
    assert isinstance(excinfo.value, ValueError)
    with pytest.raises(PatternInvalidError):
        find("anything", "[", REGEX)


def test_matches_respect_grapheme_boundaries() -> None:
    text = "cafe\u0301 cafe"

    assert offsets_of(text, "cafe") == [5]
    assert offsets_of(text, "cafe", granularity="code_point") == [0, 6]
    assert offsets_of(text, "cafe", CompareOptions.DIACRITIC_INSENSITIVE) == [0, 5]


def test_width_insensitive_search() -> None:
    assert offsets_of("\uff21\uff22C", "ABC", CompareOptions.WIDTH_INSENSITIVE) == [0]
    assert offsets_of("\uff21\uff22C", "ABC") == []


def test_regex_matches_snap_to_cluster_boundaries() -> None:
    assert unit_ranges_of("cafe\u0301!", "e", REGEX) == [(3, 4)]


def test_find_forward_backward_and_anchored(playground: str) -> None:
    assert find(playground, "play").to_tuple() == (7, 11)
    assert find(playground, "play", CompareOptions.BACKWARDS).start == Cursor(31)
    assert find(playground, "Hello", CompareOptions.ANCHORED).to_tuple() == (0, 5)
    assert find(playground, "play", CompareOptions.ANCHORED) is None
    assert find(
        playground, "ground", CompareOptions.ANCHORED | CompareOptions.BACKWARDS
    ).to_tuple() == (35, 41)
    assert find(playground, r"play\w+", REGEX | CompareOptions.BACKWARDS).start == Cursor(31)
    assert find("abc", "z") is None


def test_find_within_search_range(playground: str) -> None:
    window = range_at(playground, 8, 30)

    assert find(playground, "play", search_range=window).to_tuple() == (19, 23)
    assert find(playground, "play", CompareOptions.BACKWARDS, search_range=window).to_tuple() == (
        19,
        23,
    )


def test_index_helpers(playground: str) -> None:
    assert index_of(playground, "play") == Cursor(7)
    assert end_index_of(playground, "play") == Cursor(11)
    assert index_of(playground, "missing") is None
    assert end_index_of(playground, "missing") is None


def test_anchored_scan_stops_at_first_gap() -> None:
    assert offsets_of("ababX ab", "ab", CompareOptions.ANCHORED) == [0, 2]


def test_scans_ignore_backwards() -> None:
    assert offsets_of("ababab", "ab", CompareOptions.BACKWARDS) == [0, 2, 4]


def test_replacing_occurrences(playground: str) -> None:
    assert replacing_occurrences(playground, "play", "work") == "Hello, workground, workground, workground"
    assert replacing_occurrences("a1b22", r"\d+", "#", REGEX) == "a#b#"
    assert replacing_occurrences("a1b", r"(\d)", r"\1", REGEX) == "a\\1b"
    assert replacing_occurrences("abc", "", "x") == "abc"
    assert replacing_occurrences("Cat cat", "CAT", "dog", CompareOptions.CASE_INSENSITIVE) == "dog dog"


def test_removed_occurrences() -> None:
    assert removed_occurrences("a-b-c", "-") == "abc"
    assert removed_occurrences("no dashes", "-") == "no dashes"


def test_scan_stops_after_a_match_reaching_the_end() -> None:
    assert unit_ranges_of("aaa", "a*", REGEX) == [(0, 3)]
    assert unit_ranges_of("ab", "x*", REGEX) == [(0, 0), (1, 1), (2, 2)]
    assert replacing_occurrences("aaa", "a*", "#", REGEX) == "#"
    assert replacing_occurrences("baa", "a*", "#", REGEX) == "#b#"


@pytest.mark.parametrize("options", [CompareOptions.NONE, REGEX])
def test_backwards_find_returns_the_last_overlapping_candidate(options: CompareOptions) -> None:
    backwards = options | CompareOptions.BACKWARDS

    assert find("aaa", "aa", backwards).to_tuple() == (1, 3)
    assert find("aaa", "aa", backwards | CompareOptions.ANCHORED).to_tuple() == (1, 3)
    assert find("aab", "aa", backwards | CompareOptions.ANCHORED) is None
