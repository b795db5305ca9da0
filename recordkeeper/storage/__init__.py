"""Mini README: Persistence collaborators for Record Keeper.

The ``csv_file`` module owns the on-disk format: one CSV file per calendar
month with the ``Index, Date, Description, Value`` header. It deals only in
plain rows so the record store stays the single owner of typed records.
"""

from .csv_file import HEADER, backing_file, load_rows, save_rows

__all__ = ["HEADER", "backing_file", "load_rows", "save_rows"]
