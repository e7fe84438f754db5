"""String helpers.

Functions here are side-effect free and never mutate their input.
"""
from __future__ import annotations

import re

__all__ = ["camel_case", "is_blank", "slugify", "snake_case", "truncate"]

_WORD_BOUNDARY = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


def is_blank(text: str | None) -> bool:
    """Return ``True`` for ``None``, empty and whitespace-only strings."""
    return text is None or not text.strip()


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to ``max_length``, adding ``suffix`` if truncated.

    Args:
        text: Text to truncate.
        max_length: Maximum length including the suffix.
        suffix: Marker appended when the text is cut.

    Returns:
        The original text when it fits, else the cut text with the suffix.

    Raises:
        ValueError: If ``max_length`` cannot even hold the suffix.
    """
    if max_length < len(suffix):
        raise ValueError(f"max_length {max_length} is shorter than suffix {suffix!r}")
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def slugify(name: str) -> str:
    """Convert a display name to a filesystem-safe slug.

    Args:
        name: Human-readable name.

    Returns:
        Lowercase slug with hyphens, ``"unnamed"`` if nothing is left.
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower().strip()).strip("-")
    return slug or "unnamed"


def _words(text: str) -> list[str]:
    return [word.lower() for word in _WORD_BOUNDARY.findall(text)]


def snake_case(text: str) -> str:
    """Convert ``camelCase``, ``PascalCase``, kebab or spaced text to snake_case."""
    return "_".join(_words(text))


def camel_case(text: str) -> str:
    """Convert snake, kebab, spaced or PascalCase text to camelCase."""
    words = _words(text)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])
