"""Test the testing module."""

import pytest

from utilkit.testing import cases, raises_with_message


def test_raises_with_message_matches_literal_text() -> None:
    with raises_with_message(ValueError, "bad value (x) [y]") as info:
        raise ValueError("bad value (x) [y]")

    assert info.type is ValueError


def test_raises_with_message_rejects_partial_message() -> None:
    with pytest.raises((AssertionError, pytest.fail.Exception)):
        with raises_with_message(ValueError, "bad"):
            raise ValueError("bad value")


def test_raises_with_message_rejects_other_exception_types() -> None:
    with pytest.raises(KeyError):
        with raises_with_message(ValueError, "'missing'"):
            raise KeyError("missing")


def test_cases_builds_parametrize_marker() -> None:
    marker = cases("a, b", {"first": (1, 2), "second": (3, 4)})

    assert marker.name == "parametrize"
    assert marker.args == ("a, b", [(1, 2), (3, 4)])
    assert marker.kwargs == {"ids": ["first", "second"]}


@cases("word, length", {"short": ("ab", 2), "longer": ("abcd", 4)})
def test_cases_parametrizes_tests(word: str, length: int) -> None:
    assert len(word) == length
