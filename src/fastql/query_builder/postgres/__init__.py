"""PostgreSQL dialect adapter."""

from fastql.query_builder.postgres.dialect import PostgresDialect

__all__ = ["PostgresDialect"]
