"""Mini README: Expense records and their statistics.

This package holds the core of Record Keeper: the densely indexed
``RecordStore`` and the statistics helpers that aggregate it. Both operate on
typed ``ExpenseRecord`` values and never touch files directly beyond the
store's ``load``/``save`` delegation to ``recordkeeper.storage``.
"""

from .statistics import Stats, compute_all, compute_for_date
from .store import ExpenseRecord, RecordStore, format_date, parse_date, utc_today

__all__ = [
    "ExpenseRecord",
    "RecordStore",
    "Stats",
    "compute_all",
    "compute_for_date",
    "format_date",
    "parse_date",
    "utc_today",
]
