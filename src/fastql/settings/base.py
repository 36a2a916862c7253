from pydantic_settings import BaseSettings, SettingsConfigDict


class FastqlBaseSettings(BaseSettings):
    """Base class for fastql settings.

    Loads values from environment variables (and a ``.env`` file when
    present). Subclasses narrow the environment namespace through
    ``env_prefix`` in their own ``model_config``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
