"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from vaccine_registry.configs.database import DatabaseSettings
from vaccine_registry.configs.settings import Settings


class TestDatabaseSettings:
    """Tests for DatabaseSettings URL construction."""

    def test_url_built_from_fields(self) -> None:
        settings = DatabaseSettings(host="db", port=6543, user="u", password="p", db="vx")

        assert settings.async_database_url.startswith("postgresql+asyncpg://u:p@db:6543/vx")
        assert not settings.is_sqlite

    def test_require_sslmode_adds_ssl_param(self) -> None:
        settings = DatabaseSettings(sslmode="require")

        assert settings.async_database_url.endswith("?ssl=require")

    def test_url_override_wins(self) -> None:
        settings = DatabaseSettings(url="sqlite+aiosqlite:///:memory:", host="ignored")

        assert settings.async_database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.is_sqlite


class TestSettings:
    """Tests for the aggregated Settings."""

    def test_log_level_is_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_environment_variables_are_prefixed(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_DB", "from_env")
        monkeypatch.setenv("API_PREFIX", "/api/v1")

        settings = Settings()

        assert settings.database.db == "from_env"
        assert settings.api.prefix == "/api/v1"

    def test_prefix_is_applied_to_routes(self, test_settings) -> None:
        from fastapi.testclient import TestClient

        from vaccine_registry.api.main import create_app

        test_settings.api.prefix = "/api/v1"

        with TestClient(create_app(test_settings)) as client:
            assert client.get("/api/v1/health").status_code == 200
            assert client.get("/health").status_code == 404
