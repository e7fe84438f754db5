"""pytest convenience helpers.

Import from test modules only; this module depends on pytest, which is an
optional (``test`` extra) dependency.
"""
from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

import pytest

__all__ = ["cases", "raises_with_message"]


@contextmanager
def raises_with_message(
    exc_type: type[BaseException], message: str
) -> Iterator[pytest.ExceptionInfo[BaseException]]:
    """Expect ``exc_type`` raised with exactly ``message``.

    Unlike ``pytest.raises(match=...)`` the message is compared literally and
    as a whole, so regex metacharacters need no escaping.

    Args:
        exc_type: Expected exception class.
        message: Expected ``str(exception)``.

    Yields:
        The pytest ``ExceptionInfo`` for further inspection.
    """
    with pytest.raises(exc_type, match=f"^{re.escape(message)}$") as info:
        yield info


def cases(argnames: str | Sequence[str], table: Mapping[str, Any]) -> pytest.MarkDecorator:
    """Build a ``pytest.mark.parametrize`` marker from a table of named cases.

    Args:
        argnames: Argument names, as accepted by ``pytest.mark.parametrize``.
        table: Mapping of readable case id to the argument values for that case.

    Returns:
        The parametrize marker with ids taken from the table keys.
    """
    return pytest.mark.parametrize(argnames, list(table.values()), ids=list(table))
