"""Mini README: Terminal rendering for records and statistics.

Structure:
    * render_records - rich table with Index/Date/Description/Value columns.
    * render_stats - four labelled expenditure lines.
    * render_no_records - guidance shown when the month has no entries.

Renderers take an explicit ``Console`` so the CLI and tests can redirect
output without touching global state.
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..records import ExpenseRecord, Stats, format_date

NO_RECORDS_MESSAGE = "No records inserted yet."
NO_RECORDS_HINT = "To insert a record, use the `add` command."


def _format_value(value: float) -> str:
    return f"{value:.15g}"


def build_record_table(records: Sequence[ExpenseRecord]) -> Table:
    """Return a table with one row per record, in index order."""

    table = Table(box=box.SQUARE, header_style="bold green", padding=(0, 1))
    table.add_column("Index", justify="right")
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Value", justify="right")
    for record in records:
        table.add_row(
            str(record.index),
            format_date(record.date),
            escape(record.description),
            _format_value(record.value),
        )
    return table


def render_records(records: Sequence[ExpenseRecord], console: Console) -> None:
    console.print(build_record_table(records))


def render_stats(stats: Stats, console: Console) -> None:
    """Print the labelled minimum, maximum, total and average lines."""

    console.print(f"Minimum Expenditure : {_format_value(stats.min)}", highlight=False)
    console.print(f"Maximum Expenditure : {_format_value(stats.max)}", highlight=False)
    console.print(f"Total Expenditure : {_format_value(stats.total)}", highlight=False)
    console.print(f"Average Expenditure : {_format_value(stats.avg)}", highlight=False)


def render_no_records(console: Console) -> None:
    console.print(NO_RECORDS_MESSAGE)
    console.print(NO_RECORDS_HINT, markup=False)
