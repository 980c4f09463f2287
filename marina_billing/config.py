"""
Configuration settings for the marina billing ledger.

Uses Pydantic Settings to load environment variables (or a local `.env` file)
for the ledger file location, the store capacity, the monthly per-foot rates
and logging.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from marina_billing.domain.models import DEFAULT_CAPACITY, DEFAULT_MONTHLY_RATES, LocationKind


class Settings(BaseSettings):
    # Storage
    data_file: Path = Field(Path("BoatData.csv"), alias="MARINA_DATA_FILE")
    capacity: int = Field(DEFAULT_CAPACITY, ge=0, alias="MARINA_CAPACITY")

    # Monthly rates, per foot of boat length
    rate_slip: float = Field(DEFAULT_MONTHLY_RATES[LocationKind.SLIP], alias="MARINA_RATE_SLIP")
    rate_land: float = Field(DEFAULT_MONTHLY_RATES[LocationKind.LAND], alias="MARINA_RATE_LAND")
    rate_trailer: float = Field(
        DEFAULT_MONTHLY_RATES[LocationKind.TRAILER], alias="MARINA_RATE_TRAILOR"
    )
    rate_storage: float = Field(
        DEFAULT_MONTHLY_RATES[LocationKind.STORAGE], alias="MARINA_RATE_STORAGE"
    )

    # Application
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def monthly_rates(self) -> Dict[LocationKind, float]:
        return {
            LocationKind.SLIP: self.rate_slip,
            LocationKind.LAND: self.rate_land,
            LocationKind.TRAILER: self.rate_trailer,
            LocationKind.STORAGE: self.rate_storage,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
