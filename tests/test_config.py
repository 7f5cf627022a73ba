"""Tests for settings and engine construction from configuration."""

import json
from decimal import Decimal

import pytest

from payrun_engine.api.app import build_engine, create_app
from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.calculators.tax_calculator import DEFAULT_TAX_BRACKETS, InvalidTaxTableError
from payrun_engine.config import Settings, get_settings
from payrun_engine.services.store import PayrollStore

ENV_VARS = (
    "ENGINE_VERSION",
    "HOST",
    "PORT",
    "DEBUG",
    "LOG_LEVEL",
    "TAX_TABLE_PATH",
    "SEED_DEMO_DATA",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests
    monkeypatch.setattr("payrun_engine.config.load_dotenv", lambda: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.engine_version == "1.0.0"
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.tax_table_path is None
        assert settings.seed_demo_data is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ENGINE_VERSION", "2.3.1")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "True")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()
        assert settings.engine_version == "2.3.1"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "DEBUG"

    def test_empty_tax_table_path_is_unset(self, monkeypatch):
        monkeypatch.setenv("TAX_TABLE_PATH", "")
        assert Settings.from_env().tax_table_path is None

    def test_cached(self):
        assert get_settings() is get_settings()


class TestBuildEngine:
    """Test engine construction from settings."""

    def test_default_table(self, monkeypatch):
        monkeypatch.setenv("ENGINE_VERSION", "9.9.9")
        engine = build_engine()

        assert engine.engine_version == "9.9.9"
        assert engine.tax_calculator.table == DEFAULT_TAX_BRACKETS

    def test_table_from_file(self, monkeypatch, tmp_path):
        path = tmp_path / "flat.json"
        path.write_text(json.dumps([{"min": 0, "max": None, "rate": 0.3, "base": 0}]))
        monkeypatch.setenv("TAX_TABLE_PATH", str(path))

        engine = build_engine()
        assert len(engine.tax_calculator.table) == 1
        # 30% of (1000 - 0 + 0.01)
        assert engine.tax_calculator.calculate_tax(Decimal("1000")) == Decimal("300.00")

    def test_invalid_table_file(self, monkeypatch, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"min": 10, "max": None, "rate": 0.3}]))
        monkeypatch.setenv("TAX_TABLE_PATH", str(path))

        with pytest.raises(InvalidTaxTableError):
            build_engine()


class TestDemoSeeding:
    """Test the demo data flag in the app factory."""

    def test_empty_by_default(self):
        app = create_app(engine=PayrollEngine(engine_version="test"))
        assert app.state.store.list_employees() == []

    def test_seeded_when_enabled(self, monkeypatch):
        monkeypatch.setenv("SEED_DEMO_DATA", "true")
        app = create_app(engine=PayrollEngine(engine_version="test"))

        assert [e.id for e in app.state.store.list_employees()] == ["e-alice", "e-bob"]
        assert len(app.state.store.list_timesheets()) == 2

    def test_given_store_not_seeded(self, monkeypatch):
        monkeypatch.setenv("SEED_DEMO_DATA", "true")
        store = PayrollStore()
        create_app(store=store, engine=PayrollEngine(engine_version="test"))
        assert store.list_employees() == []
