import json
import math
import re
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Sequence, TYPE_CHECKING
from uuid import UUID

from fastql.common.exceptions import ErrorCode, FastqlError, InvalidIdentifierError
from fastql.constants.dialect import Dialect
from fastql.constants.sql import TypeCast

if TYPE_CHECKING:
    from fastql.query_builder.accumulator import StatementAccumulator


_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_\-]*$')
_MAX_IDENTIFIER_LENGTH = 128


def _is_non_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return not value.is_finite()
    return isinstance(value, float) and not math.isfinite(value)


class BaseDialect(ABC):
    """Base interface for dialect adapters.

    A dialect adapter is a pure selection of prefix/suffix text: placeholder
    prefix, cast syntax, literal formatting, identifier quoting and the way
    identity or whole-row retrieval is composed around an INSERT. It never
    decides which columns take part in a statement; that belongs to the
    classifier and the accumulator.

    One adapter instance is chosen per generation call and holds no state
    besides its configured placeholder prefix.
    """

    dialect: Dialect
    default_parameter_prefix: str = "@"

    def __init__(self, parameter_prefix: Optional[str] = None):
        """Initialize dialect adapter.

        Args:
            parameter_prefix: Optional placeholder prefix ('@' or ':').
                If not provided, the dialect's default prefix is used.
        """
        self.parameter_prefix = parameter_prefix or self.default_parameter_prefix

    @property
    def name(self) -> str:
        return self.dialect.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(parameter_prefix={self.parameter_prefix!r})"

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def placeholder(self, name: Any) -> str:
        """Render a named parameter placeholder, e.g. ``@Name``."""
        return f"{self.parameter_prefix}{name}"

    @abstractmethod
    def cast(self, expression: str, cast: TypeCast) -> str:
        """Apply a type cast to a value expression.

        Args:
            expression: Rendered placeholder or literal
            cast: Cast hint; ``TypeCast.NONE`` returns the expression as is

        Returns:
            Expression with the dialect's cast syntax applied
        """
        pass

    def format_literal(self, value: Any) -> str:
        """Format a Python value as a SQL literal.

        Args:
            value: Value bound directly into the statement text

        Returns:
            SQL literal text

        Raises:
            FastqlError: If a float or Decimal is NaN or infinite
        """
        if value is None:
            return "NULL"
        if isinstance(value, Enum):
            return self.format_literal(value.value)
        if isinstance(value, bool):
            return self._format_bool(value)
        if isinstance(value, str):
            return self.quote_string(value)
        if _is_non_finite(value):
            raise FastqlError(
                f"Cannot bind non-finite number {value!r} as a SQL literal",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"value": str(value)},
            )
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        if isinstance(value, datetime):
            return self.quote_string(value.isoformat(sep=" "))
        if isinstance(value, (date, time)):
            return self.quote_string(value.isoformat())
        if isinstance(value, UUID):
            return self.quote_string(str(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self._format_bytes(bytes(value))
        if isinstance(value, (dict, list, tuple)):
            return self.quote_string(json.dumps(value, default=str))
        return self.quote_string(str(value))

    @abstractmethod
    def _format_bool(self, value: bool) -> str:
        pass

    @abstractmethod
    def _format_bytes(self, value: bytes) -> str:
        pass

    def quote_string(self, value: str) -> str:
        """Quote a string value for SQL.

        Args:
            value: String value to quote

        Returns:
            Properly quoted and escaped string
        """
        # Escape single quotes by doubling them
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    @abstractmethod
    def quote_identifier(self, identifier: str, identifier_type: str = "column") -> str:
        """Quote an identifier for safe SQL usage.

        Args:
            identifier: Identifier to quote
            identifier_type: Type of identifier for error messages

        Returns:
            Quoted identifier
        """
        pass

    def format_column_list(self, columns: Sequence[str]) -> str:
        """Format a list of columns for SQL.

        Args:
            columns: List of column names

        Returns:
            Comma-separated list of quoted columns, or ``*`` when empty
        """
        if not columns:
            return "*"
        return ", ".join(self.quote_identifier(col) for col in columns)

    def _clean_identifier(self, identifier: str, identifier_type: str = "column") -> str:
        identifier = identifier.strip().replace("]", "").replace("[", "")
        self._validate_identifier(identifier, identifier_type)
        return identifier

    def _validate_identifier(self, identifier: str, identifier_type: str = "column") -> None:
        """Validate an identifier for SQL injection protection.

        Args:
            identifier: The identifier to validate
            identifier_type: Type of identifier for error messages

        Raises:
            InvalidIdentifierError: If identifier is invalid
        """
        if not identifier:
            raise InvalidIdentifierError(
                f"Empty {identifier_type} name",
                details={"identifier_type": identifier_type},
            )

        if len(identifier) > _MAX_IDENTIFIER_LENGTH:
            raise InvalidIdentifierError(
                f"{identifier_type} name too long: {identifier}",
                details={"identifier": identifier, "identifier_type": identifier_type},
            )

        # Letters, digits, underscores and hyphens only
        if not _IDENTIFIER_PATTERN.match(identifier):
            raise InvalidIdentifierError(
                f"Invalid {identifier_type} name: {identifier}",
                details={"identifier": identifier, "identifier_type": identifier_type},
            )

    # ------------------------------------------------------------------
    # Statement composition
    # ------------------------------------------------------------------

    def terminate(self, sql: str) -> str:
        """End a statement with a single semicolon."""
        return f"{sql.rstrip().rstrip(';')};"

    @abstractmethod
    def insert_with_identity(self, accumulator: "StatementAccumulator") -> str:
        """Compose an INSERT that also reports the generated identity.

        Args:
            accumulator: Accumulator holding the insert columns

        Returns:
            Terminated statement text
        """
        pass

    @abstractmethod
    def insert_returning_object(self, accumulator: "StatementAccumulator") -> str:
        """Compose an INSERT that returns the written row.

        Args:
            accumulator: Accumulator holding the insert columns

        Returns:
            Terminated statement text
        """
        pass

    @abstractmethod
    def select_columns(self, table: str, columns: List[str], where: str, top: int) -> str:
        """Build a row-capped SELECT of explicit columns (or ``*``).

        Args:
            table: Resolved table reference
            columns: Column names; empty selects ``*``
            where: WHERE condition (without the WHERE keyword)
            top: Maximum number of rows

        Returns:
            Terminated statement text
        """
        pass
