"""Mini README: Centralised configuration models and helpers for Record Keeper.

Structure:
    * RecordKeeperSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to resolve the data directory holding the monthly
    record files and the logging level. Values come from ``RECORDKEEPER_*``
    environment variables or a local ``.env`` file. The data directory is
    only created when the first record file is written.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class RecordKeeperSettings(BaseSettings):
    """Runtime configuration for the Record Keeper CLI."""

    data_directory: Path = Field(
        Path("~/.rcdata"),
        description="Directory holding one record file per calendar month.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; the CLI --verbose flag forces DEBUG.",
    )

    class Config:
        env_prefix = "RECORDKEEPER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand ``~`` so the directory resolves per user."""

        return Path(value).expanduser()

    @validator("log_level")
    def _check_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> RecordKeeperSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return RecordKeeperSettings()
