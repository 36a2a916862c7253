"""Unit tests for fastql settings."""

import pytest
from pydantic import ValidationError

from fastql.constants import Dialect
from fastql.settings import _reload_settings, _Settings, get_settings


class TestSettingsDefaults:
    """Values used when nothing is configured."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.dialect is Dialect.SQLSERVER
        assert settings.strict_table_resolution is False
        assert settings.default_select_top == 1000
        assert settings.parameter_prefix is None
        assert settings.log_level == "INFO"

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        first = get_settings()
        assert get_settings(force_reload=True) is not first


class TestSettingsEnvironment:
    """FASTQL_-prefixed environment variables."""

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FASTQL_DIALECT", "postgres")
        monkeypatch.setenv("FASTQL_STRICT_TABLE_RESOLUTION", "1")
        monkeypatch.setenv("FASTQL_DEFAULT_SELECT_TOP", "50")
        monkeypatch.setenv("FASTQL_PARAMETER_PREFIX", ":")
        monkeypatch.setenv("FASTQL_LOG_LEVEL", "debug")

        settings = _reload_settings()

        assert settings.dialect is Dialect.POSTGRES
        assert settings.strict_table_resolution is True
        assert settings.default_select_top == 50
        assert settings.parameter_prefix == ":"
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        """The conftest runs each test from tmp_path, so .env is read from there."""
        (tmp_path / ".env").write_text("FASTQL_DIALECT=postgres\n")
        assert _reload_settings().dialect is Dialect.POSTGRES

    def test_empty_prefix_means_dialect_default(self, monkeypatch):
        monkeypatch.setenv("FASTQL_PARAMETER_PREFIX", "")
        assert _reload_settings().parameter_prefix is None


class TestSettingsValidation:
    """Rejected configuration."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"dialect": "oracle"},
            {"default_select_top": 0},
            {"parameter_prefix": "?"},
            {"log_level": "verbose"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            _Settings(**kwargs)
