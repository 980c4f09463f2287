from pathlib import Path

import pytest

from marina_billing import config
from marina_billing.codec import load_all
from marina_billing.domain.models import LocationKind
from scripts import generate_data


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.data_file == Path("BoatData.csv")
    assert settings.capacity == 120
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.monthly_rates() == {
        LocationKind.SLIP: 12.50,
        LocationKind.LAND: 14.00,
        LocationKind.TRAILER: 25.00,
        LocationKind.STORAGE: 11.20,
    }


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MARINA_DATA_FILE", "/srv/marina/boats.csv")
    monkeypatch.setenv("MARINA_CAPACITY", "8")
    monkeypatch.setenv("MARINA_RATE_TRAILOR", "30.5")

    settings = config.get_settings()

    assert settings.data_file == Path("/srv/marina/boats.csv")
    assert settings.capacity == 8
    assert settings.monthly_rates()[LocationKind.TRAILER] == 30.5


def test_settings_read_dotenv_file(tmp_path: Path):
    (tmp_path / ".env").write_text("MARINA_CAPACITY=3\n", encoding="utf-8")

    assert config.get_settings().capacity == 3


def test_settings_are_cached():
    assert config.get_settings() is config.get_settings()


def test_generate_data_writes_loadable_ledger(tmp_path: Path):
    path = tmp_path / "sample.csv"

    written = generate_data._generate_ledger(path, boats=30, seed=123)

    assert written == 30
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 30
    store = load_all(path)
    assert len(store) == 30
    assert len({name.lower() for name in store.names()}) == 30


def test_generate_data_is_deterministic(tmp_path: Path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"

    generate_data._generate_ledger(first, boats=10, seed=7)
    generate_data._generate_ledger(second, boats=10, seed=7)

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")
