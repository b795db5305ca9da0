"""Mini README: Application-wide logging helpers for Record Keeper.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the stderr handler and adjusts the level.

Usage:
    Modules import ``get_logger`` to obtain contextual loggers. The CLI calls
    ``configure_root_logger`` again once settings are known so that the level
    follows ``RECORDKEEPER_LOG_LEVEL`` or the ``--verbose`` flag. Only one
    handler is ever attached, even when the helper runs repeatedly.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Attach the shared stderr handler once and apply the requested level."""

    global _HANDLER
    root_logger = logging.getLogger()
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(_HANDLER)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
