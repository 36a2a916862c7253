import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from fastql.constants.dialect import Dialect
from .base import FastqlBaseSettings


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class _Settings(FastqlBaseSettings):
    """Process-wide defaults for statement generation.

    These values are only defaults: every builder accepts an explicit
    dialect and strictness, so generation calls stay independent of
    ambient state when the caller wants them to be.

    Environment Variables:
        FASTQL_DIALECT: ``sqlserver`` (default) or ``postgres``
        FASTQL_STRICT_TABLE_RESOLUTION: raise instead of returning an empty
            table name for entities without table metadata
        FASTQL_DEFAULT_SELECT_TOP: row cap for column selects (default 1000)
        FASTQL_PARAMETER_PREFIX: override the dialect placeholder prefix
        FASTQL_LOG_LEVEL: level used by ``setup_logging``
    """

    model_config = SettingsConfigDict(
        env_prefix="FASTQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    dialect: Dialect = Field(
        default=Dialect.SQLSERVER,
        description="Default target dialect when a builder is created without one."
    )
    strict_table_resolution: bool = Field(
        default=False,
        description="Raise UnresolvedTableError instead of rendering an empty table name "
                    "for entity types without table metadata."
    )
    default_select_top: int = Field(
        default=1000,
        gt=0,
        description="Row cap applied by column selects when no explicit cap is given."
    )
    parameter_prefix: Optional[str] = Field(
        default=None,
        description="Placeholder prefix override ('@' or ':'). "
                    "When unset each dialect uses its own prefix."
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for fastql loggers configured through setup_logging()."
    )

    @field_validator("parameter_prefix")
    @classmethod
    def validate_parameter_prefix(cls, v: Optional[str]) -> Optional[str]:
        """Only named placeholder styles are supported."""
        if v is None or v == "":
            return None
        if v not in ("@", ":"):
            raise ValueError(f"Invalid parameter prefix '{v}'. Use '@' or ':'.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}'. Use one of {sorted(_LOG_LEVELS)}.")
        return level


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from environment variables on first access.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        settings2 = get_settings()
        assert settings is settings2

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()
        logging.getLogger(__name__).debug(
            "Loaded fastql settings",
            extra={"dialect": _settings.dialect.value, "strict": _settings.strict_table_resolution},
        )

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
