"""Dictionary helpers.

Every function returns a new dictionary; inputs are never modified.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

__all__ = ["deep_merge", "get_path", "invert", "omit", "pick"]


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Nested mappings present on both sides are merged; any other value from
    ``override`` replaces the one in ``base``.

    Args:
        base: Mapping providing defaults.
        override: Mapping whose values win.

    Returns:
        A new merged dictionary.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def pick(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    """Return only the given keys that exist in ``mapping``."""
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    """Return ``mapping`` without the given keys."""
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}


def invert(mapping: Mapping[Any, Hashable]) -> dict[Hashable, Any]:
    """Swap keys and values.

    Raises:
        ValueError: If two keys share the same value.
    """
    inverted: dict[Hashable, Any] = {}
    for key, value in mapping.items():
        if value in inverted:
            raise ValueError(f"duplicate value {value!r} for keys {inverted[value]!r} and {key!r}")
        inverted[value] = key
    return inverted


def get_path(
    mapping: Mapping[str, Any], path: str, default: Any = None, sep: str = "."
) -> Any:
    """Look up a nested value by a separated key path such as ``"db.host"``."""
    current: Any = mapping
    for part in path.split(sep):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current
