"""Common utilities and exceptions for fastql.

Exception Design:
    All exceptions inherit from FastqlError and carry an ErrorCode for
    categorization. The specific subclasses exist so callers can catch a
    single failure kind (duplicate column, empty statement, missing WHERE)
    without inspecting codes.
"""

from fastql.common.exceptions import (
    FastqlError,
    ErrorCode,
    DuplicateFieldError,
    EmptyStatementError,
    MissingWhereClauseError,
    UnresolvedTableError,
    InvalidEntityError,
    InvalidIdentifierError,
    UnsupportedDialectError,
    # Helper functions
    duplicate_field_error,
    empty_statement_error,
    missing_where_clause_error,
    unresolved_table_error,
)

__all__ = [
    # Base Exception and Error Codes
    "FastqlError",
    "ErrorCode",
    # Specific errors
    "DuplicateFieldError",
    "EmptyStatementError",
    "MissingWhereClauseError",
    "UnresolvedTableError",
    "InvalidEntityError",
    "InvalidIdentifierError",
    "UnsupportedDialectError",
    # Helper functions
    "duplicate_field_error",
    "empty_statement_error",
    "missing_where_clause_error",
    "unresolved_table_error",
]
