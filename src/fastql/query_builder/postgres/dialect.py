"""PostgreSQL dialect adapter."""

from typing import List

from fastql.constants.dialect import Dialect
from fastql.constants.sql import CAST_MARKER, TypeCast
from fastql.query_builder.accumulator import StatementAccumulator
from fastql.query_builder.base import BaseDialect


class PostgresDialect(BaseDialect):
    """Dialect adapter for PostgreSQL targets.

    Key Features:
        - Unquoted identifiers; table references follow the table
          descriptor's output mode
        - ``:name`` placeholders
        - ``expr::type`` casts on the value expression
        - ``RETURNING`` for identity and whole-row return, ``LASTVAL()``
          when no identity column is declared
        - ``LIMIT n`` row cap
    """

    dialect = Dialect.POSTGRES
    default_parameter_prefix = ":"

    def cast(self, expression: str, cast: TypeCast) -> str:
        cast = TypeCast.coerce(cast)
        if cast == TypeCast.NONE:
            return expression
        return f"{expression}{CAST_MARKER}{cast.value}"

    def _format_bool(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def _format_bytes(self, value: bytes) -> str:
        return f"'\\x{value.hex()}'"

    def quote_identifier(self, identifier: str, identifier_type: str = "column") -> str:
        """Identifiers are validated and left unquoted."""
        return self._clean_identifier(identifier, identifier_type)

    def insert_with_identity(self, accumulator: StatementAccumulator) -> str:
        insert = accumulator.render_insert()
        if accumulator.identity_column:
            return self.terminate(f"{insert} RETURNING {accumulator.render_identity()}")
        return f"{insert}; SELECT LASTVAL();"

    def insert_returning_object(self, accumulator: StatementAccumulator) -> str:
        insert = accumulator.render_insert()
        return self.terminate(f"{insert} RETURNING {accumulator.render_returning_columns()}")

    def select_columns(self, table: str, columns: List[str], where: str, top: int) -> str:
        column_list = self.format_column_list(columns)
        return self.terminate(f"SELECT {column_list} FROM {table} WHERE {where} LIMIT {top}")
