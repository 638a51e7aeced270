"""Mini README: Centralised configuration for Tellerlog.

Structure:
    * TellerlogSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``TELLERLOG_*`` environment variables or a local
    ``.env`` file. Drivers use them to pick the default export destination,
    the upper bound accepted for a single amount, the log level, and where the
    HTTP interface binds.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class TellerlogSettings(BaseSettings):
    """Runtime configuration for the Tellerlog drivers."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line entry point.",
    )
    export_directory: Path = Field(
        Path("exports"),
        description="Directory used when an export is requested without a full path.",
    )
    default_export_name: str = Field(
        "transactions.txt",
        description="File name used for exports when the caller supplies none.",
    )
    max_amount: Decimal = Field(
        Decimal("1000000000"),
        description="Largest amount a teller may record in a single transaction.",
        gt=0,
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "TELLERLOG_"
        env_file = ".env"
        case_sensitive = False

    @validator("export_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories; the directory is created at export time."""

        return Path(value).expanduser()

    @validator("default_export_name")
    def _plain_file_name(cls, value: str) -> str:
        name = Path(value).name
        if not name:
            raise ValueError("default_export_name must name a file")
        return name


@lru_cache()
def get_settings() -> TellerlogSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TellerlogSettings()
