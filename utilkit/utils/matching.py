"""Regular-expression helpers.

String patterns are compiled once and cached; compiled patterns are used as-is.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

__all__ = ["matches", "matches_any", "named_groups", "search_group"]

Pattern = str | re.Pattern[str]


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _as_regex(pattern: Pattern) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else _compile(pattern)


def matches(pattern: Pattern, text: str) -> bool:
    """Return ``True`` if ``pattern`` matches the whole of ``text``."""
    return _as_regex(pattern).fullmatch(text) is not None


def search_group(
    pattern: Pattern, text: str, group: int | str = 0, default: str | None = None
) -> str | None:
    """Return a group of the first match of ``pattern`` in ``text``.

    Args:
        pattern: Regular expression to search for.
        text: Text to search.
        group: Group index or name to return.
        default: Returned when nothing matches or the group did not take part.

    Returns:
        The matched group text or ``default``.
    """
    found = _as_regex(pattern).search(text)
    if found is None:
        return default
    value = found.group(group)
    return default if value is None else value


def named_groups(pattern: Pattern, text: str) -> dict[str, str] | None:
    """Return the named groups of the first match, or ``None`` without a match."""
    found = _as_regex(pattern).search(text)
    return None if found is None else found.groupdict()


def matches_any(patterns: Iterable[Pattern], text: str) -> bool:
    """Return ``True`` if any pattern is found somewhere in ``text``."""
    return any(_as_regex(pattern).search(text) for pattern in patterns)
