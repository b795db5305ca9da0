"""Mini README: Tests for the rich-based display helpers."""

from __future__ import annotations

from datetime import date
from io import StringIO

from rich.console import Console

from recordkeeper.interface import render_no_records, render_records, render_stats
from recordkeeper.records import ExpenseRecord, Stats


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def test_render_stats_prints_four_labelled_lines() -> None:
    console, buffer = _console()

    render_stats(Stats(min=-5.0, max=20.0, avg=11.25, total=45.0, count=4), console)

    assert buffer.getvalue().splitlines() == [
        "Minimum Expenditure : -5",
        "Maximum Expenditure : 20",
        "Total Expenditure : 45",
        "Average Expenditure : 11.25",
    ]


def test_render_records_keeps_markup_in_descriptions_literal() -> None:
    console, buffer = _console()

    render_records(
        [ExpenseRecord(index=1, date=date(2024, 3, 9), description="[bold]Gift[/bold]", value=19.99)],
        console,
    )

    output = buffer.getvalue()
    assert "[bold]Gift[/bold]" in output
    assert "09-03-2024" in output
    assert "19.99" in output


def test_render_no_records_prints_hint() -> None:
    console, buffer = _console()

    render_no_records(console)

    assert buffer.getvalue().splitlines() == [
        "No records inserted yet.",
        "To insert a record, use the `add` command.",
    ]
