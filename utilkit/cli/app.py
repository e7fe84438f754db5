"""Typer-based CLI application for `utilkit`.

Exposes the inflector functions on the command line. Library code never reads
configuration; this module is the only place settings and logging are wired
up.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

import typer
from rich.console import Console

from ..__about__ import __title__, __version__
from ..config import get_settings
from ..inflector import humanize, pluralize, quantify, to_string_with_commas

app = typer.Typer(help="utilkit command-line interface")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"{__title__} {__version__}")
        raise typer.Exit()


def parse_number(value: str) -> int | Decimal:
    """Parse a command-line number, preferring ``int`` over ``Decimal``.

    Raises:
        ValueError: If ``value`` is not a finite number.
    """
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"not a number: {value!r}")
    return number


def _fail(error: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Root command callback.

    Configures logging from settings before any subcommand runs.

    Args:
        ctx: Typer context object.
        version: If provided, prints version and exits.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    ctx.ensure_object(dict)


@app.command("humanize")
def humanize_command(
    byte_count: int = typer.Argument(..., help="Number of bytes", metavar="BYTES"),
) -> None:
    """Print a byte count with a human-readable unit."""
    logger.debug("Humanizing %d bytes", byte_count)
    try:
        console.print(humanize(byte_count))
    except (ValueError, TypeError) as error:
        _fail(error)


@app.command("pluralize")
def pluralize_command(word: str = typer.Argument(..., help="Singular noun")) -> None:
    """Print the regular plural of a noun."""
    console.print(pluralize(word))


@app.command("quantify")
def quantify_command(
    word: str = typer.Argument(..., help="Singular noun"),
    count: str = typer.Argument(..., help="Quantity"),
) -> None:
    """Print a count followed by the correctly inflected noun."""
    try:
        console.print(quantify(word, parse_number(count)))
    except (ValueError, TypeError) as error:
        _fail(error)


@app.command("commas")
def commas_command(value: str = typer.Argument(..., help="Number to group")) -> None:
    """Print a number with thousands separators."""
    try:
        number: int | Decimal | str = parse_number(value)
    except ValueError:
        logger.debug("Grouping %r as plain text", value)
        number = value
    console.print(to_string_with_commas(number))


if __name__ == "__main__":  # pragma: no cover
    app()
