"""Utility helpers for `utilkit`.

Reusable, mostly side-effect free helpers grouped by the kind of value they
work on.
"""

from .dicts import deep_merge, get_path, invert, omit, pick
from .lists import chunked, first, flatten, partition, unique
from .matching import matches, matches_any, named_groups, search_group
from .maybe import first_present, map_maybe, or_else, or_else_get, require
from .paths import ensure_dir, expand, relative_or_none, with_suffix_if_missing
from .strings import camel_case, is_blank, slugify, snake_case, truncate

__all__ = [
    "camel_case",
    "chunked",
    "deep_merge",
    "ensure_dir",
    "expand",
    "first",
    "first_present",
    "flatten",
    "get_path",
    "invert",
    "is_blank",
    "map_maybe",
    "matches",
    "matches_any",
    "named_groups",
    "omit",
    "or_else",
    "or_else_get",
    "partition",
    "pick",
    "relative_or_none",
    "require",
    "search_group",
    "slugify",
    "snake_case",
    "truncate",
    "unique",
    "with_suffix_if_missing",
]
