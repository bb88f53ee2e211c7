"""Unit tests for settings loading."""

import pytest

from tenantkit.config import Settings, load_settings
from tenantkit.database import get_engine_url_and_connect_args
from tenantkit.errors import ConfigurationError


def test_missing_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ConfigurationError, match="Missing DATABASE_URL"):
        load_settings(_env_file=None)


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/app")
    settings = load_settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/app"


@pytest.mark.parametrize(
    "raw",
    ["postgres://u:p@db/app", "postgresql://u:p@db/app", "postgresql+asyncpg://u:p@db/app"],
)
def test_url_scheme_normalized(raw):
    settings = Settings(_env_file=None, database_url=raw)
    assert settings.database_url == "postgresql+asyncpg://u:p@db/app"


def test_defaults(settings):
    assert settings.default_key_label == "primary"
    assert settings.ghl_base_url == "https://services.leadconnectorhq.com"
    assert settings.ghl_version == "2021-07-28"
    assert not settings.is_production


def test_sslmode_stripped_and_moved_to_connect_args():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db/app?sslmode=require")
    url, connect_args = get_engine_url_and_connect_args(settings)
    assert "sslmode" not in url
    assert "ssl" in connect_args


def test_production_enables_ssl(settings):
    settings.app_env = "production"
    _, connect_args = get_engine_url_and_connect_args(settings)
    assert connect_args["ssl"].check_hostname is False


def test_development_has_no_ssl(settings):
    _, connect_args = get_engine_url_and_connect_args(settings)
    assert connect_args == {}


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_database_url_is_missing(monkeypatch, blank):
    monkeypatch.setenv("DATABASE_URL", blank)
    with pytest.raises(ConfigurationError, match="Missing DATABASE_URL"):
        load_settings(_env_file=None)


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/app")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level_is_configuration_error(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/app")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings(_env_file=None)


@pytest.mark.parametrize("query", ["sslmode=disable", "sslmode=allow", "ssl=false"])
def test_ssl_explicitly_off(query):
    settings = Settings(_env_file=None, database_url=f"postgresql://u:p@localhost/app?{query}")
    url, connect_args = get_engine_url_and_connect_args(settings)
    assert connect_args == {}
    assert url == "postgresql+asyncpg://u:p@localhost/app"


def test_sslmode_disable_wins_over_production():
    settings = Settings(
        _env_file=None,
        database_url="postgresql://u:p@localhost/app?sslmode=disable",
        app_env="production",
    )
    _, connect_args = get_engine_url_and_connect_args(settings)
    assert connect_args == {}


def test_other_query_params_kept():
    settings = Settings(
        _env_file=None, database_url="postgresql://u:p@db/app?sslmode=require&application_name=tk"
    )
    url, connect_args = get_engine_url_and_connect_args(settings)
    assert url.endswith("?application_name=tk")
    assert "ssl" in connect_args
