"""Helpers for optional values, i.e. anything that may be ``None``."""
from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

__all__ = ["first_present", "map_maybe", "or_else", "or_else_get", "require"]

T = TypeVar("T")
R = TypeVar("R")


def or_else(value: T | None, default: T) -> T:
    """Return ``value`` unless it is ``None``."""
    return default if value is None else value


def or_else_get(value: T | None, factory: Callable[[], T]) -> T:
    """Like :func:`or_else` but only builds the default when needed."""
    return factory() if value is None else value


def map_maybe(value: T | None, func: Callable[[T], R]) -> R | None:
    """Apply ``func`` to ``value`` if present, else propagate ``None``."""
    return None if value is None else func(value)


def first_present(*values: T | None) -> T | None:
    """Return the first argument that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None


def require(value: T | None, message: str = "value is required") -> T:
    """Return ``value`` or fail loudly.

    Raises:
        ValueError: If ``value`` is ``None``.
    """
    if value is None:
        raise ValueError(message)
    return value
