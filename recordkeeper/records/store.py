"""Mini README: In-memory record store for one month of expenses.

Structure:
    * ExpenseRecord - immutable dataclass for a single dated expense.
    * RecordStore - ordered collection owning index assignment and deletion.
    * utc_today - default clock; the current date is taken in UTC.
    * format_date / parse_date - ``DD-MM-YYYY`` conversions shared with the CLI.

Indices are 1-based and always dense: ``add`` appends ``len + 1`` and
``delete`` renumbers every later record down by one. Records are parsed into
typed fields once, when the store is built from persisted rows, so the
statistics and display layers never re-parse text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from ..errors import IndexOutOfRange, PersistenceError
from ..logging_utils import get_logger
from ..storage import csv_file

LOGGER = get_logger(__name__)

DATE_FORMAT = "%d-%m-%Y"


def utc_today() -> date:
    """Return the current UTC date, used for record dates and month files."""

    return datetime.now(timezone.utc).date()


def format_date(value: date) -> str:
    """Render a date the way record files and the CLI expect it."""

    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    """Parse a ``DD-MM-YYYY`` string, raising ``ValueError`` when malformed."""

    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError) as error:
        raise ValueError(f"Dates must use the DD-MM-YYYY format, got {value!r}") from error


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """Represent one expense entry."""

    index: int
    date: date
    description: str
    value: float

    def as_row(self) -> Dict[str, str]:
        """Export the record as a CSV row keyed by column title."""

        return {
            "Index": str(self.index),
            "Date": format_date(self.date),
            "Description": self.description,
            "Value": repr(self.value),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]], line: int) -> "ExpenseRecord":
        """Build a typed record from a persisted row, naming the bad field on failure."""

        fields: Dict[str, str] = {}
        for column in csv_file.HEADER:
            raw = row.get(column)
            if raw is None:
                raise ValueError(f"row {line} is missing the {column} column")
            fields[column] = raw
        try:
            index = int(fields["Index"])
        except ValueError as error:
            raise ValueError(f"row {line} has a non-integer Index {fields['Index']!r}") from error
        try:
            value = float(fields["Value"])
        except ValueError as error:
            raise ValueError(f"row {line} has a non-numeric Value {fields['Value']!r}") from error
        try:
            recorded_on = parse_date(fields["Date"])
        except ValueError as error:
            raise ValueError(f"row {line}: {error}") from error
        return cls(index=index, date=recorded_on, description=fields["Description"], value=value)


class RecordStore:
    """Ordered, densely indexed collection of expense records."""

    def __init__(
        self,
        records: Optional[Iterable[ExpenseRecord]] = None,
        *,
        clock: Callable[[], date] = utc_today,
    ) -> None:
        self._records: List[ExpenseRecord] = []
        self._clock = clock
        for record in records or ():
            self._register(record)
        LOGGER.debug("Record store initialised with %s records", len(self._records))

    def _register(self, record: ExpenseRecord) -> None:
        """Append an existing record, enforcing that indices stay ``1..N``."""

        expected = len(self._records) + 1
        if record.index != expected:
            raise ValueError(f"Expected record index {expected}, found {record.index}")
        self._records.append(record)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping[str, Optional[str]]],
        *,
        clock: Callable[[], date] = utc_today,
    ) -> "RecordStore":
        """Build a store from persisted rows in file order.

        Raises ``ValueError`` on the first malformed row; rows are never skipped.
        """

        records = [ExpenseRecord.from_row(row, line) for line, row in enumerate(rows, start=2)]
        return cls(records, clock=clock)

    @classmethod
    def load(cls, path: Path, *, clock: Callable[[], date] = utc_today) -> "RecordStore":
        """Load the store behind ``path``; a missing file yields an empty store."""

        rows = csv_file.load_rows(path)
        try:
            store = cls.from_rows(rows, clock=clock)
        except ValueError as error:
            LOGGER.debug("Refusing to load corrupt record file %s: %s", path, error)
            raise PersistenceError(path, str(error)) from error
        LOGGER.debug("Loaded %s records from %s", len(store), path)
        return store

    def to_rows(self) -> List[Dict[str, str]]:
        """Return every record as a CSV row, in index order."""

        return [record.as_row() for record in self._records]

    def save(self, path: Path) -> None:
        """Rewrite ``path`` with the full current contents of the store."""

        csv_file.save_rows(path, self.to_rows())
        LOGGER.debug("Saved %s records to %s", len(self._records), path)

    def add(self, description: str, value: float) -> int:
        """Append a record dated today and return its assigned index."""

        record = ExpenseRecord(
            index=len(self._records) + 1,
            date=self._clock(),
            description=description,
            value=float(value),
        )
        self._records.append(record)
        LOGGER.info("Added record %s (%s, %s)", record.index, description, record.value)
        return record.index

    def delete(self, index: int) -> ExpenseRecord:
        """Remove the record at the 1-based ``index`` and renumber later records."""

        if index < 1 or index > len(self._records):
            LOGGER.debug("Delete of index %s rejected; store holds %s records", index, len(self._records))
            raise IndexOutOfRange(index, len(self._records))
        position = index - 1
        removed = self._records.pop(position)
        for shifted in range(position, len(self._records)):
            self._records[shifted] = replace(self._records[shifted], index=shifted + 1)
        LOGGER.info("Deleted record %s; %s records renumbered", index, len(self._records) - position)
        return removed

    def list(self) -> List[ExpenseRecord]:
        """Return the records in index order."""

        return list(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExpenseRecord]:
        return iter(list(self._records))
