"""Mini README: Load/act/save session around a monthly record store.

Structure:
    * RecordSession - context manager owning the store for one command.

Usage:
    ``with RecordSession.for_month(settings) as store:`` loads the current
    month's file on entry and rewrites it once on a clean exit. When the
    block raises, nothing is saved, so a failing command can lose its
    in-memory change but never persists a half-applied one.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import TracebackType
from typing import Callable, Optional, Type

from .configuration import RecordKeeperSettings
from .logging_utils import get_logger
from .records import RecordStore, utc_today
from .storage import backing_file

LOGGER = get_logger(__name__)


class RecordSession:
    """Own a ``RecordStore`` for the lifetime of a single command."""

    def __init__(self, path: Path, *, clock: Callable[[], date] = utc_today) -> None:
        self.path = path
        self._clock = clock
        self._store: Optional[RecordStore] = None

    @classmethod
    def for_month(
        cls,
        settings: RecordKeeperSettings,
        *,
        clock: Callable[[], date] = utc_today,
    ) -> "RecordSession":
        """Open the session on the record file for the current month."""

        return cls(backing_file(settings.data_directory, clock()), clock=clock)

    def __enter__(self) -> RecordStore:
        LOGGER.debug("Opening record session on %s", self.path)
        self._store = RecordStore.load(self.path, clock=self._clock)
        return self._store

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        store, self._store = self._store, None
        if exc_type is not None:
            LOGGER.info("Command failed; %s left unchanged", self.path)
            return
        if store is not None:
            store.save(self.path)
