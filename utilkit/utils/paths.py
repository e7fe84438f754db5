"""Filesystem path helpers."""
from __future__ import annotations

import logging
import os
from pathlib import Path

__all__ = ["ensure_dir", "expand", "relative_or_none", "with_suffix_if_missing"]

logger = logging.getLogger(__name__)


def expand(path: str | os.PathLike[str]) -> Path:
    """Expand ``~`` and environment variables, then resolve to an absolute path."""
    return Path(os.path.expandvars(os.fspath(path))).expanduser().resolve()


def ensure_dir(path: str | os.PathLike[str]) -> Path:
    """Create ``path`` (and parents) if missing and return it.

    Raises:
        NotADirectoryError: If ``path`` exists and is not a directory.
    """
    directory = Path(path)
    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"{directory} exists and is not a directory")
        return directory
    directory.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory %s", directory)
    return directory


def with_suffix_if_missing(path: str | os.PathLike[str], suffix: str) -> Path:
    """Append ``suffix`` unless the path already has one."""
    candidate = Path(path)
    return candidate if candidate.suffix else candidate.with_suffix(suffix)


def relative_or_none(
    path: str | os.PathLike[str], base: str | os.PathLike[str]
) -> Path | None:
    """Return ``path`` relative to ``base``, or ``None`` when it lies outside."""
    try:
        return Path(path).relative_to(base)
    except ValueError:
        return None
