"""Mini README: Aggregate statistics over expense records.

Structure:
    * Stats - min/max/total/average snapshot, never persisted.
    * compute_all - statistics over every record in a store.
    * compute_for_date - statistics over records dated exactly ``on``.

Both helpers raise ``EmptyAggregationInput`` when nothing matches instead of
returning an average computed with a zero divisor.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from datetime import date
from typing import Iterable

from ..errors import EmptyAggregationInput
from ..logging_utils import get_logger
from .store import ExpenseRecord, RecordStore, format_date

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Stats:
    """Summary of the values in a selection of records."""

    min: float
    max: float
    avg: float
    total: float
    count: int


def _aggregate(records: Iterable[ExpenseRecord], selection: str) -> Stats:
    """Fold record values into ``Stats``, seeding min/max from the first value.

    A NaN value makes both min and max NaN regardless of where it appears.
    """

    count = 0
    total = 0.0
    minimum = maximum = 0.0
    for record in records:
        value = record.value
        if count == 0 or math.isnan(value):
            minimum = maximum = value
        elif not math.isnan(minimum):
            minimum = min(minimum, value)
            maximum = max(maximum, value)
        total += value
        count += 1
    if count == 0:
        LOGGER.debug("No records to aggregate for %s", selection)
        raise EmptyAggregationInput(selection)
    return Stats(min=minimum, max=maximum, avg=total / count, total=total, count=count)


def compute_all(store: RecordStore) -> Stats:
    """Aggregate every record in ``store``."""

    return _aggregate(store, "all records")


def compute_for_date(store: RecordStore, on: date) -> Stats:
    """Aggregate only the records dated exactly ``on``."""

    matching = (record for record in store if record.date == on)
    return _aggregate(matching, format_date(on))
