"""SQL Server (T-SQL) dialect adapter."""

from typing import Dict, List

from fastql.constants.dialect import Dialect
from fastql.constants.sql import TypeCast
from fastql.query_builder.accumulator import StatementAccumulator
from fastql.query_builder.base import BaseDialect


class SqlServerDialect(BaseDialect):
    """Dialect adapter for SQL Server style targets.

    Key Features:
        - Bracket-quoted identifiers (``[schema].[table]``)
        - ``@name`` placeholders
        - Identity retrieval via ``; SELECT SCOPE_IDENTITY();``
        - Whole-row return via ``OUTPUT INSERTED.*``
        - ``TOP(n)`` row cap

    Differences from Postgres:
        - No ``RETURNING``: identity-returning inserts append a second
          statement instead of a single-round-trip clause
        - No ``::`` cast operator: casts are rendered as ``CAST(x AS type)``
        - Booleans are written as ``1``/``0``
    """

    dialect = Dialect.SQLSERVER
    default_parameter_prefix = "@"

    CAST_TYPES: Dict[TypeCast, str] = {
        TypeCast.JSONB: "NVARCHAR(MAX)",
        TypeCast.TIMESTAMP: "DATETIME2",
        TypeCast.TIME: "TIME",
        TypeCast.DATE: "DATE",
    }

    def cast(self, expression: str, cast: TypeCast) -> str:
        target = self.CAST_TYPES.get(TypeCast.coerce(cast))
        if target is None:
            return expression
        return f"CAST({expression} AS {target})"

    def _format_bool(self, value: bool) -> str:
        return "1" if value else "0"

    def _format_bytes(self, value: bytes) -> str:
        return f"0x{value.hex().upper()}"

    def quote_identifier(self, identifier: str, identifier_type: str = "column") -> str:
        """Square-bracket quoting, brackets in the input are dropped first."""
        return f"[{self._clean_identifier(identifier, identifier_type)}]"

    def insert_with_identity(self, accumulator: StatementAccumulator) -> str:
        return f"{accumulator.render_insert()}; SELECT SCOPE_IDENTITY();"

    def insert_returning_object(self, accumulator: StatementAccumulator) -> str:
        return self.terminate(accumulator.render_insert(output_clause="OUTPUT INSERTED.*"))

    def select_columns(self, table: str, columns: List[str], where: str, top: int) -> str:
        column_list = self.format_column_list(columns)
        return self.terminate(f"SELECT TOP({top}) {column_list} FROM {table} WHERE {where}")
