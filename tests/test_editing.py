"""Tests for splicing helpers."""

from __future__ import annotations

import pytest

from stringkit.core.options import CompareOptions
from stringkit.errors import PatternInvalidError
from stringkit.text.editing import remove, repeated, replace, replaced_matches


@pytest.mark.parametrize(
    "text, position, length, new_text, expected",
    [
        ("Hello world", 6, 5, "there", "Hello there"),
        ("abc", 10, 2, "!", "abc!"),
        ("abc", 1, 100, "X", "aX"),
        ("abc", -5, 1, "X", "Xbc"),
        ("abc", 1, -1, "X", "aXbc"),
        ("abc", 1, 0, "X", "aXbc"),
    ],
)
def test_replace_clamps_like_infix(
    text: str, position: int, length: int, new_text: str, expected: str
) -> None:
    assert replace(text, position, length, new_text) == expected


def test_replace_counts_clusters() -> None:
    assert replace("a\u0301bc", 0, 1, "A") == "Abc"
    assert replace("a\u0301bc", 0, 1, "A", granularity="code_point") == "A\u0301bc"


def test_remove() -> None:
    assert remove("Hello world", 5) == "Hello"
    assert remove("Hello world", 5, 1) == "Helloworld"
    assert remove("abc", 10) == "abc"
    assert remove("x\r\ny", 1, 1) == "xy"


def test_repeated() -> None:
    assert repeated("ab", 3) == "ababab"
    assert repeated("ab", 0) == ""
    with pytest.raises(ValueError):
        repeated("ab", -1)


def test_replaced_matches_expands_groups() -> None:
    assert replaced_matches("2024-01-31", r"(\d+)-(\d+)-(\d+)", r"\3/\2/\1") == "31/01/2024"
    assert replaced_matches("Cat cat", "cat", "dog", CompareOptions.CASE_INSENSITIVE) == "dog dog"


def test_replaced_matches_rejects_malformed_patterns() -> None:
    with pytest.raises(PatternInvalidError) as excinfo:
        replaced_matches("text", "(unclosed", "x")

    assert excinfo.value.to_dict()["error"] == "pattern_invalid"
