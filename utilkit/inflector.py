"""Inflection and number formatting helpers.

Functions here are pure and keep no state between calls: byte-size
humanization, regular English pluralization, count/noun quantification and
comma grouping of numbers.

Irregular nouns are out of scope. Layer a lookup table in front of
:func:`pluralize` when you need them::

    IRREGULAR = {"child": "children", "mouse": "mice"}

    def plural(word: str) -> str:
        return IRREGULAR.get(word) or pluralize(word)
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal, localcontext

__all__ = [
    "BYTE_UNITS",
    "PLURAL_RULES",
    "humanize",
    "pluralize",
    "quantify",
    "to_string_with_commas",
]

#: Decimal byte units, largest first. Scanned in order by :func:`humanize`.
BYTE_UNITS: tuple[tuple[int, str], ...] = (
    (10**24, "YB"),
    (10**21, "ZB"),
    (10**18, "EB"),
    (10**15, "PB"),
    (10**12, "TB"),
    (10**9, "GB"),
    (10**6, "MB"),
    (10**3, "kB"),
)

_ONE_DECIMAL = Decimal("0.1")

# Matches one comma-separated group in the *reversed* number string.
_REVERSED_GROUP = re.compile(r"\D*(?:\d*\.)?\d{1,3}\D*")


def humanize(byte_count: int) -> str:
    """Render a byte count with the largest decimal unit it reaches.

    The scaled value is rounded half-up to exactly one decimal place and the
    trailing zero is kept, so ``1000`` becomes ``"1.0kB"``. Counts below one
    kilobyte are printed as-is with a ``B`` suffix.

    Args:
        byte_count: Non-negative number of bytes.

    Returns:
        The humanized size, e.g. ``"999B"``, ``"1.2MB"``.

    Raises:
        TypeError: If ``byte_count`` is not an integer.
        ValueError: If ``byte_count`` is negative.
    """
    if isinstance(byte_count, bool) or not isinstance(byte_count, int):
        raise TypeError(f"byte_count must be an int, got {type(byte_count).__name__}")
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")

    for threshold, suffix in BYTE_UNITS:
        if byte_count >= threshold:
            with localcontext() as ctx:
                ctx.prec = byte_count.bit_length() // 3 + 4
                scaled = (Decimal(byte_count) / threshold).quantize(
                    _ONE_DECIMAL, rounding=ROUND_HALF_UP
                )
            return f"{scaled:f}{suffix}"
    return f"{byte_count}B"


def _ends_with_sibilant(word: str) -> bool:
    return word.endswith(("s", "sh", "ch"))


def _ends_with_o(word: str) -> bool:
    return word.endswith("o")


def _ends_with_consonant_y(word: str) -> bool:
    return len(word) > 1 and word[-1] == "y" and word[-2] not in "aeio"


#: Ordered ``(predicate, transform)`` pairs; the first matching predicate wins.
#: Predicates receive the lowercased word, transforms the original one.
PLURAL_RULES: tuple[tuple[Callable[[str], bool], Callable[[str], str]], ...] = (
    (_ends_with_sibilant, lambda word: word + "es"),
    (_ends_with_o, lambda word: word + "es"),
    (_ends_with_consonant_y, lambda word: word[:-1] + "ies"),
    (lambda _word: True, lambda word: word + "s"),
)


def pluralize(word: str) -> str:
    """Return the regular plural of an English noun.

    Also works for third-person weak verbs (``"walk"`` -> ``"walks"``).

    Args:
        word: Singular noun.

    Returns:
        The pluralized word.
    """
    lowered = word.lower()
    for matches, transform in PLURAL_RULES:
        if matches(lowered):
            return transform(word)
    return word  # pragma: no cover - the last rule always matches


def quantify(word: str, count: int | float | Decimal) -> str:
    """Pair a count with the correctly inflected noun.

    Args:
        word: Singular noun.
        count: Quantity; only exactly ``1`` keeps the singular.

    Returns:
        A string such as ``"2,000 items"``.
    """
    noun = word if count == 1 else pluralize(word)
    return f"{to_string_with_commas(count)} {noun}"


def _canonical(n: int | float | Decimal | str) -> str:
    if isinstance(n, str):
        return n
    if isinstance(n, Decimal):
        return format(n, "f")
    if isinstance(n, float):
        if not math.isfinite(n):
            return str(n)
        return format(Decimal(repr(n)), "f")
    return str(n)


def to_string_with_commas(n: int | float | Decimal | str) -> str:
    """Insert thousands separators into the integer part of a number.

    The fractional part, the sign and any currency marker are left alone:
    ``"$1234.5"`` becomes ``"$1,234.5"``. Already grouped input is not
    recognized and gains extra separators, so never feed the output back in.

    Args:
        n: A number, or a string holding one.

    Returns:
        The comma-grouped string. Strings without digits are returned as-is.
    """
    text = _canonical(n)
    groups = _REVERSED_GROUP.findall(text[::-1])
    if not groups:
        return text
    return ",".join(groups)[::-1]
