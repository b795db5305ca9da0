"""Mini README: CSV persistence for monthly record files.

Structure:
    * HEADER - column titles every record file starts with.
    * backing_file - deterministic ``MM-YYYY`` path for a calendar month.
    * load_rows - read a record file into dictionaries keyed by column.
    * save_rows - atomically replace a record file with new rows.

Files are rewritten in full on every save: rows go to a temporary file in
the same directory which is then moved over the target with ``os.replace``.
No locking is performed, so two invocations writing the same month at once
are not supported.
"""

from __future__ import annotations

import csv
import os
import sys
import tempfile
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from ..errors import PersistenceError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

HEADER = ("Index", "Date", "Description", "Value")


def _lift_field_size_limit() -> None:
    """Allow descriptions of any length; the csv module caps fields at 128 KiB."""

    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 2


def backing_file(directory: Path, on: date) -> Path:
    """Return the record file for the month containing ``on``."""

    return directory / f"{on.month:02d}-{on.year:04d}"


def load_rows(path: Path) -> List[Dict[str, Optional[str]]]:
    """Read every data row from ``path``.

    A missing or zero-byte file holds no records. A header other than
    ``HEADER`` or an unreadable file raises ``PersistenceError``.
    """

    if not path.exists():
        LOGGER.debug("Record file %s does not exist yet", path)
        return []
    _lift_field_size_limit()
    try:
        with path.open("r", newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            header = next(reader, None)
            if header is None:
                return []
            if tuple(column.strip() for column in header) != HEADER:
                raise PersistenceError(path, f"unexpected header {header!r}")
            rows: List[Dict[str, Optional[str]]] = []
            for values in reader:
                if not values:
                    continue
                if len(values) > len(HEADER):
                    raise PersistenceError(path, f"row {reader.line_num} has {len(values)} columns")
                padded = list(values) + [None] * (len(HEADER) - len(values))
                rows.append(dict(zip(HEADER, padded)))
    except (OSError, UnicodeDecodeError, csv.Error) as error:
        LOGGER.debug("Failed to read record file %s: %s", path, error)
        raise PersistenceError(path, str(error)) from error
    return rows


def save_rows(path: Path, rows: Iterable[Mapping[str, str]]) -> None:
    """Replace ``path`` with ``rows``, creating the data directory on first use."""

    temp_path: Optional[str] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        descriptor, temp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(descriptor, "w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=HEADER)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        os.replace(temp_path, path)
        temp_path = None
    except (OSError, csv.Error) as error:
        LOGGER.debug("Failed to write record file %s: %s", path, error)
        raise PersistenceError(path, str(error)) from error
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            os.remove(temp_path)
