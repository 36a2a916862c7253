"""Dialect Factory.

This module provides a factory for creating dialect adapters. The dialect
is normally passed explicitly per generation call; when it is omitted the
factory falls back to the configured default from settings.
"""

from typing import Dict, Optional, Type, Union

from fastql.common.exceptions import UnsupportedDialectError
from fastql.constants.dialect import Dialect
from fastql.query_builder.base import BaseDialect
from fastql.query_builder.postgres.dialect import PostgresDialect
from fastql.query_builder.sqlserver.dialect import SqlServerDialect


DialectLike = Union[Dialect, str, BaseDialect, None]


class DialectFactory:
    """Factory for creating dialect adapters.

    Example:
        >>> sqlserver = DialectFactory.create(Dialect.SQLSERVER)
        >>> postgres = DialectFactory.create("postgres")
        >>> default = DialectFactory.create()  # From settings
    """

    _registry: Dict[Dialect, Type[BaseDialect]] = {
        Dialect.SQLSERVER: SqlServerDialect,
        Dialect.POSTGRES: PostgresDialect,
    }

    @classmethod
    def create(
        cls,
        dialect: DialectLike = None,
        parameter_prefix: Optional[str] = None,
    ) -> BaseDialect:
        """Create the adapter for ``dialect``.

        Args:
            dialect: Dialect enum, its value, an adapter instance (returned
                unchanged) or None to use ``settings.dialect``.
            parameter_prefix: Placeholder prefix override; falls back to
                ``settings.parameter_prefix`` and then to the dialect default.

        Returns:
            Dialect adapter instance.

        Raises:
            UnsupportedDialectError: If the dialect is not supported.
        """
        if isinstance(dialect, BaseDialect):
            return dialect

        if dialect is None or parameter_prefix is None:
            from fastql.settings import get_settings
            settings = get_settings()
            if dialect is None:
                dialect = settings.dialect
            if parameter_prefix is None:
                parameter_prefix = settings.parameter_prefix

        try:
            key = Dialect(str(getattr(dialect, "value", dialect)).lower())
        except ValueError as exc:
            raise UnsupportedDialectError(
                f"Unsupported dialect: {dialect}. "
                f"Supported dialects: {', '.join(d.value for d in Dialect)}",
                details={"dialect": str(dialect)},
                cause=exc,
            ) from exc

        return cls._registry[key](parameter_prefix=parameter_prefix)


def get_dialect(dialect: DialectLike = None, parameter_prefix: Optional[str] = None) -> BaseDialect:
    """Get a dialect adapter, defaulting to the configured dialect."""
    return DialectFactory.create(dialect, parameter_prefix)


def get_sqlserver_dialect(parameter_prefix: Optional[str] = None) -> SqlServerDialect:
    """Get a SQL Server adapter with full type information."""
    return SqlServerDialect(parameter_prefix=parameter_prefix)


def get_postgres_dialect(parameter_prefix: Optional[str] = None) -> PostgresDialect:
    """Get a Postgres adapter with full type information."""
    return PostgresDialect(parameter_prefix=parameter_prefix)
