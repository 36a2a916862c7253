"""Query builder module: classification, accumulation and dialect rendering.

Builders only generate SQL strings; nothing here executes a statement.

Architecture:
    - classifier.py: role-based field participation per statement kind
    - accumulator.py: per-statement column collection and rendering
    - base.py: abstract dialect adapter
    - sqlserver/: SQL Server adapter (brackets, SCOPE_IDENTITY, OUTPUT, TOP)
    - postgres/: Postgres adapter (RETURNING, LASTVAL, ::casts, LIMIT)
    - factory.py: adapter selection, defaulting to settings

Example:
    >>> from fastql.query_builder import StatementAccumulator, get_dialect
    >>> acc = StatementAccumulator("[dbo].[Users]", get_dialect("sqlserver"))
    >>> _ = acc.add("Name", "Name")
    >>> acc.render_insert()
    'INSERT INTO [dbo].[Users](Name) VALUES(@Name)'
"""

from fastql.query_builder.accumulator import AccumulatedColumn, StatementAccumulator
from fastql.query_builder.base import BaseDialect
from fastql.query_builder.classifier import is_identity, participates
from fastql.query_builder.factory import (
    DialectFactory,
    get_dialect,
    get_postgres_dialect,
    get_sqlserver_dialect,
)
from fastql.query_builder.postgres.dialect import PostgresDialect
from fastql.query_builder.sqlserver.dialect import SqlServerDialect

__all__ = [
    "AccumulatedColumn",
    "StatementAccumulator",
    "BaseDialect",
    "participates",
    "is_identity",
    "DialectFactory",
    "get_dialect",
    "get_sqlserver_dialect",
    "get_postgres_dialect",
    "SqlServerDialect",
    "PostgresDialect",
]
