"""SQL Server dialect adapter."""

from fastql.query_builder.sqlserver.dialect import SqlServerDialect

__all__ = ["SqlServerDialect"]
