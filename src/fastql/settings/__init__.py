"""Settings module providing configuration management for fastql.

Built on Pydantic Settings: values are type-checked on load and read from
``FASTQL_``-prefixed environment variables or a ``.env`` file.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from fastql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    <Dialect.SQLSERVER: 'sqlserver'>
"""

from .main import _Settings, get_settings, _reload_settings
from .base import FastqlBaseSettings

__all__ = [
    "_Settings",
    "get_settings",
    "_reload_settings",
    "FastqlBaseSettings",
]
