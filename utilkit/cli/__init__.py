"""Command-line interface for `utilkit`."""

from .app import app

__all__ = ["app"]
