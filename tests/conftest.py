"""
Pytest configuration for the marina billing ledger.

Provides fixtures for:
- Settings isolation (environment variables, `.env` lookup, settings cache)
- Sample boat records and populated stores
- Ledger files on disk
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from marina_billing.config import get_settings
from marina_billing.domain.models import (
    BoatRecord,
    LandLocation,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marina_billing.store import RecordStore

_SETTINGS_ENV = (
    "MARINA_DATA_FILE",
    "MARINA_CAPACITY",
    "MARINA_RATE_SLIP",
    "MARINA_RATE_LAND",
    "MARINA_RATE_TRAILOR",
    "MARINA_RATE_STORAGE",
    "LOG_LEVEL",
    "LOG_JSON",
)

SAMPLE_LINES = [
    "Big Brother,20,slip,27,1200.00",
    "Brooks,34,trailor,AAR666,99.00",
    "Sea Sprite,18,land,C,300.50",
    "Mystic,40,storage,12,0.00",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Run every test with default settings and the temp dir as working directory,
    so neither the host environment nor a stray `.env` leaks in.
    """
    for var in _SETTINGS_ENV:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def big_brother() -> BoatRecord:
    return BoatRecord(
        name="Big Brother",
        length=20,
        location=SlipLocation(slip_number=27),
        amount_owed=1200.00,
    )


@pytest.fixture
def sample_records(big_brother: BoatRecord) -> List[BoatRecord]:
    """One record per location kind, deliberately not in name order."""
    return [
        BoatRecord(
            name="Sea Sprite",
            length=18,
            location=LandLocation(bay_letter="C"),
            amount_owed=300.50,
        ),
        big_brother,
        BoatRecord(
            name="mystic",
            length=40,
            location=StorageLocation(storage_number=12),
            amount_owed=0.0,
        ),
        BoatRecord(
            name="Brooks",
            length=34,
            location=TrailerLocation(license_tag="AAR666"),
            amount_owed=99.00,
        ),
    ]


@pytest.fixture
def store(sample_records: List[BoatRecord]) -> RecordStore:
    populated = RecordStore()
    for record in sample_records:
        populated.add(record)
    return populated


@pytest.fixture
def ledger_file(tmp_path: Path) -> Path:
    path = tmp_path / "BoatData.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
