"""Mini README: Tests for the statistics engine.

Checks the min/max/total/average aggregation, exact date filtering, and the
explicit empty-selection error used instead of dividing by zero.
"""

from __future__ import annotations

import math
from datetime import date

import pytest

from recordkeeper.errors import EmptyAggregationInput
from recordkeeper.records import ExpenseRecord, RecordStore, compute_all, compute_for_date

FIRST = date(2024, 3, 1)
SECOND = date(2024, 3, 2)


def _store(entries: list[tuple[date, float]]) -> RecordStore:
    return RecordStore(
        ExpenseRecord(index=position, date=on, description=f"entry {position}", value=value)
        for position, (on, value) in enumerate(entries, start=1)
    )


def test_compute_all_aggregates_every_value() -> None:
    stats = compute_all(_store([(FIRST, 10.0), (FIRST, -5.0), (SECOND, 20.0), (SECOND, 20.0)]))

    assert stats.min == pytest.approx(-5.0)
    assert stats.max == pytest.approx(20.0)
    assert stats.total == pytest.approx(45.0)
    assert stats.avg == pytest.approx(11.25)
    assert stats.count == 4


def test_compute_for_date_ignores_other_dates() -> None:
    """Only records on the requested date should contribute."""

    stats = compute_for_date(_store([(FIRST, 10.0), (SECOND, 20.0), (FIRST, 30.0)]), FIRST)

    assert stats.min == pytest.approx(10.0)
    assert stats.max == pytest.approx(30.0)
    assert stats.total == pytest.approx(40.0)
    assert stats.avg == pytest.approx(20.0)
    assert stats.count == 2


def test_min_is_seeded_from_first_matching_record() -> None:
    """A low value on a non-matching first row must not leak into the minimum."""

    stats = compute_for_date(_store([(SECOND, -100.0), (FIRST, 7.0), (FIRST, 9.0)]), FIRST)

    assert stats.min == pytest.approx(7.0)
    assert stats.max == pytest.approx(9.0)


def test_all_negative_values_keep_a_negative_maximum() -> None:
    stats = compute_all(_store([(FIRST, -3.0), (FIRST, -8.0)]))

    assert stats.max == pytest.approx(-3.0)
    assert stats.min == pytest.approx(-8.0)


def test_single_record_statistics() -> None:
    stats = compute_all(_store([(FIRST, 42.0)]))

    assert (stats.min, stats.max, stats.total, stats.avg) == (42.0, 42.0, 42.0, 42.0)


def test_empty_store_raises_empty_aggregation_input() -> None:
    with pytest.raises(EmptyAggregationInput):
        compute_all(RecordStore())


def test_date_without_matches_raises_empty_aggregation_input() -> None:
    with pytest.raises(EmptyAggregationInput, match="03-03-2024"):
        compute_for_date(_store([(FIRST, 10.0)]), date(2024, 3, 3))


@pytest.mark.parametrize("values", [[math.nan, 5.0, 7.0], [5.0, math.nan, 7.0], [5.0, 7.0, math.nan]])
def test_nan_value_gives_the_same_stats_in_any_position(values: list[float]) -> None:
    """Aggregation must not depend on where a NaN sits in the record order."""

    stats = compute_all(_store([(FIRST, value) for value in values]))

    assert math.isnan(stats.min)
    assert math.isnan(stats.max)
    assert math.isnan(stats.total)
    assert stats.count == 3
