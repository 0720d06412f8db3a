"""csvdata CLI -- inspect and narrow CSV fixture files from the terminal."""

import logging
from typing import Optional, Tuple

import click

from .errors import CsvDataError


def _split_step(step: str) -> Tuple[Optional[str], str]:
    """Parse ``COLUMN=VALUE``; a bare ``VALUE`` (or ``=VALUE``) targets the first column."""
    column, sep, value = step.partition("=")
    if not sep:
        return None, step
    return (column or None), value


def _fail(console, exc: Exception) -> None:
    from rich.markup import escape

    console.print(f"[red]{escape(str(exc))}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="csvdata")
@click.option("--verbose", "-v", is_flag=True, help="Log loading and narrowing steps.")
def cli(verbose):
    """csvdata -- Load CSV fixture files into narrowable tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )


@cli.command()
@click.argument("file")
@click.option("--filter", "-f", "filters", multiple=True, help="Keep rows matching COLUMN=VALUE (or VALUE for the first column).")
@click.option("--exclude", "-x", "excludes", multiple=True, help="Drop rows matching COLUMN=VALUE (or VALUE for the first column).")
@click.option("--preserve-spaces", is_flag=True, help="Keep leading/trailing whitespace in cells.")
@click.option("--limit", "-n", default=20, help="Maximum rows to show.")
def show(file, filters, excludes, preserve_spaces, limit):
    """Load FILE, apply filters and exclusions, and print the remaining rows."""
    from rich.console import Console
    from rich.table import Table

    from .loader import load

    console = Console()

    try:
        data = load(file, preserve_spaces)
        for step in filters:
            column, value = _split_step(step)
            if column is None:
                data.filter(value)
            else:
                data.filter(column, value)
        for step in excludes:
            column, value = _split_step(step)
            if column is None:
                data.exclude(value)
            else:
                data.exclude(column, value)
    except CsvDataError as exc:
        _fail(console, exc)

    table = Table(title=file)
    for column in data.columns:
        table.add_column(column, style="cyan")
    for row in data.rows()[:limit]:
        table.add_row(*row.values())

    console.print(table)
    console.print(f"[bold]{data.length()} rows[/bold]")
    if data.length() > limit:
        console.print(f"[dim]... showing {limit} of {data.length()} rows[/dim]")


@cli.command()
@click.argument("file")
@click.option("--preserve-spaces", is_flag=True, help="Keep leading/trailing whitespace in cells.")
def columns(file, preserve_spaces):
    """Print the header of FILE and its row count."""
    from rich.console import Console
    from rich.panel import Panel

    from .loader import load

    console = Console()

    try:
        data = load(file, preserve_spaces)
    except CsvDataError as exc:
        _fail(console, exc)

    summary = data.summary()
    console.print(Panel(
        f"[bold]{summary.source}[/bold]\n"
        f"Columns: {', '.join(summary.columns)}  |  Rows: {summary.rows:,}",
        title="Columns",
    ))


if __name__ == "__main__":
    cli()
