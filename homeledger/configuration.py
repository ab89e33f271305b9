"""Mini README: Centralised configuration models and helpers for Home Ledger.

Structure:
    * HomeLedgerSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``HOMELEDGER_*`` environment variables (or a
    local ``.env`` file). Tests build ``HomeLedgerSettings`` directly with
    overrides instead of touching the cached instance.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HomeLedgerSettings(BaseSettings):
    """Runtime configuration for the Home Ledger service."""

    model_config = SettingsConfigDict(
        env_prefix="HOMELEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling reload behaviour and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger file.",
    )
    storage_filename: str = Field(
        "ledger.json",
        description="File inside the data directory acting as the key-value store.",
    )
    storage_key: str = Field(
        "myAccounts",
        description="Key of the slot holding the JSON array of entries.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    cache_name: str = Field(
        "budget-app-v1",
        description="Versioned name of the asset cache bucket.",
    )
    cache_manifest: Tuple[str, ...] = Field(
        ("static/style.css", "static/manifest.json"),
        description="Relative asset paths pre-fetched when the cache worker installs.",
    )
    asset_origin_url: Optional[str] = Field(
        None,
        description=(
            "Origin the cache worker pre-fetches from over HTTP."
            " Leave unset to read assets from the bundled static directory."
        ),
    )
    export_filename_prefix: str = Field(
        "household_ledger",
        description="Prefix of the downloaded CSV file name.",
    )
    csv_header: Tuple[str, str, str] = Field(
        ("date", "description", "amount"),
        description="Column labels written as the first CSV row.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON storage file."""

        return self.data_directory / self.storage_filename

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> HomeLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return HomeLedgerSettings()
