"""Top-level package for `utilkit`.

Exposes package metadata and the inflector functions, which are the most
commonly used part of the library. The smaller helpers live in
:mod:`utilkit.utils`.
"""

from .__about__ import __version__
from .inflector import humanize, pluralize, quantify, to_string_with_commas

__all__ = [
    "__version__",
    "humanize",
    "pluralize",
    "quantify",
    "to_string_with_commas",
]
