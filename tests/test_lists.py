"""Test the lists module."""

import pytest

from utilkit.utils import chunked, first, flatten, partition, unique


def test_chunked_splits_with_short_tail() -> None:
    assert chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunked([], 3) == []


def test_chunked_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        chunked([1, 2], 0)


def test_flatten_one_level() -> None:
    assert flatten([[1, 2], [], [3, [4]]]) == [1, 2, 3, [4]]


def test_unique_preserves_first_occurrence() -> None:
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert unique(["a", "B", "b", "A"], key=str.lower) == ["a", "B"]


def test_first() -> None:
    assert first([4, 5, 6]) == 4
    assert first([4, 5, 6], lambda n: n > 4) == 5
    assert first([], default="none") == "none"
    assert first([1, 3], lambda n: n % 2 == 0) is None


def test_partition() -> None:
    evens, odds = partition(lambda n: n % 2 == 0, range(6))

    assert evens == [0, 2, 4]
    assert odds == [1, 3, 5]
