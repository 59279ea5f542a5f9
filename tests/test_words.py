"""Tests for caret-oriented word selection and space collapsing."""

from __future__ import annotations

import pytest

from stringkit.text.words import collapse_spaces_at, select_word_offsets, select_word_range


@pytest.mark.parametrize(
    "pin, expected",
    [(0, (0, 5)), (3, (0, 5)), (5, (0, 5)), (6, None), (7, (7, 12)), (9, (7, 12)), (12, (7, 12))],
)
def test_select_word_around_caret(pin: int, expected: tuple[int, int] | None) -> None:
    assert select_word_offsets("hello, world", pin) == expected


@pytest.mark.parametrize("pin", [0, 3, 12])
def test_email_addresses_are_one_word(pin: int) -> None:
    assert select_word_offsets("user@example.com", pin) == (0, 12)


def test_underscores_join_words() -> None:
    assert select_word_offsets("snake_case word", 2) == (0, 10)


@pytest.mark.parametrize("text, pin", [("a", 0), ("", 0), ("hello", 6), ("hello", -1)])
def test_select_word_returns_none_when_out_of_reach(text: str, pin: int) -> None:
    assert select_word_offsets(text, pin) is None


def test_select_word_range_slices_whole_clusters() -> None:
    text = "cafe\u0301 bar"

    assert select_word_offsets(text, 2) == (0, 4)
    assert text[select_word_range(text, 2).storage_slice] == "cafe\u0301"
    assert "hello, world"[select_word_range("hello, world", 8).storage_slice] == "world"
    assert select_word_range("hello, world", 6) is None


@pytest.mark.parametrize(
    "text, pin, expected",
    [
        ("a   b", 2, (1, "a b")),
        ("ab", 1, (1, "a b")),
        ("a b", 1, (1, "a b")),
        ("a b", 2, (1, "a b")),
        ("ab", 9, (2, "ab ")),
    ],
)
def test_collapse_spaces_at(text: str, pin: int, expected: tuple[int, str]) -> None:
    assert collapse_spaces_at(text, pin) == expected
