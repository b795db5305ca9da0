"""Mini README: Error taxonomy shared by the record store and the CLI.

Structure:
    * RecordKeeperError - common base so the CLI can catch everything we raise.
    * PersistenceError - backing file unreadable, corrupt or unwritable.
    * IndexOutOfRange - delete target does not exist in the store.
    * EmptyAggregationInput - statistics requested over zero records.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RecordKeeperError(Exception):
    """Base class for every error raised by Record Keeper."""


class PersistenceError(RecordKeeperError):
    """The backing record file could not be loaded or saved."""

    def __init__(self, path: Optional[Path], reason: str) -> None:
        self.path = path
        self.reason = reason
        location = f" '{path}'" if path is not None else ""
        super().__init__(f"Record file{location} is unusable: {reason}")


class IndexOutOfRange(RecordKeeperError, IndexError):
    """Raised when deleting an index outside ``1..len(store)``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length == 0:
            detail = "the record table is empty"
        else:
            detail = f"valid indices are 1 to {length}"
        super().__init__(f"No record with index {index}; {detail}.")


class EmptyAggregationInput(RecordKeeperError, ValueError):
    """Raised when statistics are requested over an empty selection."""

    def __init__(self, selection: str = "all records") -> None:
        self.selection = selection
        super().__init__(f"No data to aggregate for {selection}.")
