from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for fastql operations.

    This enum provides categorized error codes that can be used
    to identify error types without inspecting messages.
    Each category has a specific prefix for easy identification.

    Attributes:
        VALIDATION_*: Input validation errors
        METADATA_*: Entity and table metadata errors
        STATEMENT_*: Statement construction errors
        DIALECT_*: Dialect selection errors
    """

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_IDENTIFIER = "VALIDATION_002"

    # Metadata errors
    UNRESOLVED_TABLE = "METADATA_001"
    INVALID_ENTITY = "METADATA_002"

    # Statement errors
    DUPLICATE_FIELD = "STATEMENT_001"
    EMPTY_STATEMENT = "STATEMENT_002"
    MISSING_WHERE_CLAUSE = "STATEMENT_003"

    # Dialect errors
    UNSUPPORTED_DIALECT = "DIALECT_001"


class FastqlError(Exception):
    """Base exception for all fastql errors.

    Every error raised by the generator is a metadata-consistency error
    surfaced synchronously to the caller. There is nothing transient to
    retry, so unlike I/O errors these carry no retry hint.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    default_code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize fastql error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum, defaults to the
                class-level ``default_code``
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from fastql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": self.error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "FastqlError":
        """Create the most specific exception registered for an error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for FastqlError

        Returns:
            FastqlError (or subclass) instance
        """
        error_cls = _ERROR_CLASSES.get(error_code, cls)
        return error_cls(message=message, error_code=error_code, **kwargs)


class DuplicateFieldError(FastqlError):
    """Two fields resolved to the same column within one statement."""

    default_code = ErrorCode.DUPLICATE_FIELD


class EmptyStatementError(FastqlError):
    """No field qualified for an INSERT/UPDATE/SELECT column list."""

    default_code = ErrorCode.EMPTY_STATEMENT


class MissingWhereClauseError(FastqlError):
    """A statement that requires a WHERE fragment was built without one."""

    default_code = ErrorCode.MISSING_WHERE_CLAUSE


class UnresolvedTableError(FastqlError):
    """Entity type has no table metadata (strict resolution only)."""

    default_code = ErrorCode.UNRESOLVED_TABLE


class InvalidEntityError(FastqlError):
    """Object passed as an entity type cannot be described."""

    default_code = ErrorCode.INVALID_ENTITY


class InvalidIdentifierError(FastqlError):
    """Caller-supplied identifier failed validation."""

    default_code = ErrorCode.INVALID_IDENTIFIER


class UnsupportedDialectError(FastqlError):
    """Requested dialect is not supported."""

    default_code = ErrorCode.UNSUPPORTED_DIALECT


_ERROR_CLASSES = {
    ErrorCode.DUPLICATE_FIELD: DuplicateFieldError,
    ErrorCode.EMPTY_STATEMENT: EmptyStatementError,
    ErrorCode.MISSING_WHERE_CLAUSE: MissingWhereClauseError,
    ErrorCode.UNRESOLVED_TABLE: UnresolvedTableError,
    ErrorCode.INVALID_ENTITY: InvalidEntityError,
    ErrorCode.INVALID_IDENTIFIER: InvalidIdentifierError,
    ErrorCode.UNSUPPORTED_DIALECT: UnsupportedDialectError,
}


# Helper functions for common error scenarios
def duplicate_field_error(column_name: str, table: str) -> DuplicateFieldError:
    """Create a duplicate field error.

    Args:
        column_name: Column that was added twice
        table: Table reference of the statement under construction

    Returns:
        DuplicateFieldError with DUPLICATE_FIELD code
    """
    return DuplicateFieldError(
        f"Column '{column_name}' was already declared for {table or '<unresolved table>'}",
        details={"column": column_name, "table": table},
    )


def empty_statement_error(statement: str, table: str) -> EmptyStatementError:
    """Create an empty statement error.

    Args:
        statement: Statement kind being rendered (INSERT, UPDATE, ...)
        table: Table reference of the statement

    Returns:
        EmptyStatementError with EMPTY_STATEMENT code
    """
    return EmptyStatementError(
        f"Cannot render {statement} for {table or '<unresolved table>'}: no columns qualified",
        details={"statement": statement, "table": table},
    )


def missing_where_clause_error(statement: str, table: str) -> MissingWhereClauseError:
    """Create a missing WHERE clause error.

    Args:
        statement: Statement kind being rendered (UPDATE, SELECT, DELETE)
        table: Table reference of the statement

    Returns:
        MissingWhereClauseError with MISSING_WHERE_CLAUSE code
    """
    return MissingWhereClauseError(
        f"Cannot render {statement} for {table or '<unresolved table>'}: WHERE clause not provided",
        details={"statement": statement, "table": table},
    )


def unresolved_table_error(entity_type: type) -> UnresolvedTableError:
    """Create an unresolved table error.

    Args:
        entity_type: Entity class without table metadata

    Returns:
        UnresolvedTableError with UNRESOLVED_TABLE code
    """
    name = getattr(entity_type, "__qualname__", repr(entity_type))
    return UnresolvedTableError(
        f"Entity {name} has no table metadata; decorate it with @table(...)",
        details={"entity": name},
    )
