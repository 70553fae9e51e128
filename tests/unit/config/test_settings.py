"""Unit tests for configuration management."""

import pytest
from pydantic import ValidationError

# Import directly from settings module to keep the cache under test control
from dynamic_crud.config.settings import Settings, get_settings


@pytest.mark.unit
def test_missing_database_url_raises_error(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert "DATABASE_URL" in str(exc_info.value)
    get_settings.cache_clear()


@pytest.mark.unit
def test_production_rejects_sqlite(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///test.db")

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert "Production environment" in str(exc_info.value)


@pytest.mark.unit
def test_production_accepts_server_database(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("DATABASE_URL", "mysql+pymysql://app@db/app")

    settings = Settings(_env_file=None)
    assert settings.ENVIRONMENT == "prod"


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///test.db")
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.validate_identifiers is True
    assert settings.quote_identifiers is False
    assert settings.read_isolation_level is None
    assert settings.DB_POOL_SIZE == 5


@pytest.mark.unit
def test_prefixed_options_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///test.db")
    monkeypatch.setenv("DYNCRUD_QUOTE_IDENTIFIERS", "true")
    monkeypatch.setenv("DYNCRUD_READ_ISOLATION_LEVEL", "READ COMMITTED")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.quote_identifiers is True
    assert settings.read_isolation_level == "READ COMMITTED"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("DATABASE_URL", "sqlite:///cached.db")

    assert get_settings() is get_settings()
    get_settings.cache_clear()
