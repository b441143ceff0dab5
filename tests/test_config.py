"""Tests for settings and the simulation stats stub."""

from app.core.config import Settings
from app.services.simulation_stats import StubSimulationStatsProvider


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MONGODB_DB", raising=False)
        monkeypatch.delenv("SIMULATIONS_AVAILABLE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.mongodb_uri.startswith("mongodb://")
        assert settings.mongodb_db == "recruitment_platform"
        assert settings.jwt_algorithm == "HS256"
        assert settings.simulations_available == 5

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MONGODB_DB", "staging")
        monkeypatch.setenv("SIMULATIONS_AVAILABLE", "8")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings(_env_file=None)

        assert settings.mongodb_db == "staging"
        assert settings.simulations_available == 8
        assert settings.log_json is False


class TestStubSimulationStats:

    def test_counts(self):
        provider = StubSimulationStatsProvider(available=5)
        assert provider.completed_count("any") == 0
        assert provider.available_count("any") == 5

    def test_default_comes_from_settings(self):
        assert StubSimulationStatsProvider().available_count("any") == 5
