"""Helpers for lists and other finite iterables."""
from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

__all__ = ["chunked", "first", "flatten", "partition", "unique"]

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive chunks of at most ``size`` elements.

    Raises:
        ValueError: If ``size`` is smaller than one.
    """
    if size < 1:
        raise ValueError(f"chunk size must be at least 1, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def flatten(nested: Iterable[Iterable[T]]) -> list[T]:
    """Flatten one level of nesting."""
    return [item for inner in nested for item in inner]


def unique(items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> list[T]:
    """Drop duplicates while keeping the first occurrence of each item.

    Args:
        items: Items to de-duplicate.
        key: Optional function computing the identity of an item.

    Returns:
        The de-duplicated items in their original order.
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        marker = key(item) if key else item
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def first(
    items: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
    default: Any = None,
) -> T | Any:
    """Return the first item (matching ``predicate`` if given) or ``default``."""
    for item in items:
        if predicate is None or predicate(item):
            return item
    return default


def partition(predicate: Callable[[T], bool], items: Iterable[T]) -> tuple[list[T], list[T]]:
    """Split items into ``(matching, rest)`` preserving order."""
    matching: list[T] = []
    rest: list[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest
