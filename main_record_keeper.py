"""Mini README: Entry point CLI for the Record Keeper expense tracker.

This script exposes a Typer CLI with ``add``, ``delete``, ``display`` and
``stats`` commands. Every command opens the current month's record file,
acts on it in memory and rewrites it once before exiting. Settings come from
``RECORDKEEPER_*`` environment variables unless overridden on the command
line.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console

from recordkeeper import __version__
from recordkeeper.configuration import RecordKeeperSettings, get_settings
from recordkeeper.errors import EmptyAggregationInput, IndexOutOfRange, PersistenceError
from recordkeeper.interface import render_no_records, render_records, render_stats
from recordkeeper.logging_utils import configure_root_logger
from recordkeeper.records import compute_all, compute_for_date, format_date, parse_date
from recordkeeper.session import RecordSession

cli = typer.Typer(
    name="record-keeper",
    help="A simple CLI application to store your expense information.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Record Keeper {__version__}")
        raise typer.Exit()


@cli.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", help="Directory holding the monthly record files."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Record Keeper stores your expenses in one file per month."""

    settings = get_settings()
    if data_dir is not None:
        settings = RecordKeeperSettings(data_directory=data_dir, log_level=settings.log_level)
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


def _open_session(ctx: typer.Context) -> RecordSession:
    return RecordSession.for_month(ctx.obj)


@contextmanager
def _reporting_persistence_errors() -> Iterator[None]:
    """Turn unusable record files into a message and exit code 1."""

    try:
        yield
    except PersistenceError as error:
        err_console.print(f"Error: {error}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from error


@cli.command()
def add(
    ctx: typer.Context,
    description: str = typer.Option(..., "--description", "-d", help="Description of the entry."),
    value: float = typer.Option(..., "--value", "-v", help="Expense amount; negative for refunds."),
) -> None:
    """Adds an entry to the record table."""

    with _reporting_persistence_errors():
        with _open_session(ctx) as store:
            index = store.add(description, value)
    console.print(f"Recorded entry {index}.", highlight=False)


@cli.command()
def delete(
    ctx: typer.Context,
    index: int = typer.Option(..., "--index", "-i", help="Index of the entry to delete."),
) -> None:
    """Deletes an entry from the record table."""

    failure: Optional[IndexOutOfRange] = None
    with _reporting_persistence_errors():
        with _open_session(ctx) as store:
            try:
                removed = store.delete(index)
            except IndexOutOfRange as error:
                failure = error
    if failure is not None:
        err_console.print(f"Error: {failure}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)
    console.print(f"Deleted entry {index} ({removed.description}).", markup=False, highlight=False, soft_wrap=True)


@cli.command()
def display(ctx: typer.Context) -> None:
    """Displays the current record table."""

    with _reporting_persistence_errors():
        with _open_session(ctx) as store:
            records = store.list()
    if not records:
        render_no_records(console)
        return
    render_records(records, console)


@cli.command()
def stats(
    ctx: typer.Context,
    on_date: Optional[str] = typer.Option(
        None, "--date", "-d", help="Only include entries recorded on this DD-MM-YYYY date."
    ),
) -> None:
    """Prints the stats related to the current month."""

    selected: Optional[date] = None
    if on_date:
        try:
            selected = parse_date(on_date)
        except ValueError as error:
            raise typer.BadParameter(str(error), param_hint="'--date'") from error

    with _reporting_persistence_errors():
        with _open_session(ctx) as store:
            if store.is_empty():
                summary = None
            else:
                try:
                    summary = compute_all(store) if selected is None else compute_for_date(store, selected)
                except EmptyAggregationInput:
                    console.print(f"No records found for {format_date(selected)}.", highlight=False)
                    return
    if summary is None:
        render_no_records(console)
        return
    render_stats(summary, console)


if __name__ == "__main__":
    cli()
