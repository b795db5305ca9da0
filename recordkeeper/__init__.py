"""Mini README: Core package initializer for Record Keeper.

Record Keeper stores personal expenses in one CSV file per month and
summarises them from the command line. The package exposes the logger
factory here; the record store, statistics and persistence helpers live in
the ``records`` and ``storage`` subpackages.
"""

from .logging_utils import get_logger

__version__ = "0.1.0"

__all__ = ["__version__", "get_logger"]
