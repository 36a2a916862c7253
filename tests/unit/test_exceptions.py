"""Unit tests for fastql exceptions."""

import logging

import pytest

from fastql.common.exceptions import (
    DuplicateFieldError,
    EmptyStatementError,
    ErrorCode,
    FastqlError,
    InvalidEntityError,
    MissingWhereClauseError,
    UnresolvedTableError,
    UnsupportedDialectError,
    duplicate_field_error,
    empty_statement_error,
    missing_where_clause_error,
    unresolved_table_error,
)


class TestFastqlError:
    """Base exception behaviour."""

    def test_default_code(self):
        error = FastqlError("bad input")
        assert error.error_code is ErrorCode.VALIDATION_ERROR
        assert str(error) == "[VALIDATION_001] bad input"

    def test_subclass_default_code(self):
        assert EmptyStatementError("x").error_code is ErrorCode.EMPTY_STATEMENT
        assert MissingWhereClauseError("x").error_code is ErrorCode.MISSING_WHERE_CLAUSE

    def test_cause_in_message(self):
        error = InvalidEntityError("cannot describe", cause=NameError("Foo"))
        assert str(error) == "[METADATA_002] cannot describe (caused by: NameError: Foo)"

    def test_to_dict(self):
        error = DuplicateFieldError("dup", details={"column": "Name"})
        assert error.to_dict() == {
            "type": "DuplicateFieldError",
            "message": "dup",
            "error_code": "STATEMENT_001",
            "error_name": "DUPLICATE_FIELD",
            "details": {"column": "Name"},
        }

    @pytest.mark.parametrize(
        "code, expected",
        [
            (ErrorCode.DUPLICATE_FIELD, DuplicateFieldError),
            (ErrorCode.UNRESOLVED_TABLE, UnresolvedTableError),
            (ErrorCode.UNSUPPORTED_DIALECT, UnsupportedDialectError),
            (ErrorCode.VALIDATION_ERROR, FastqlError),
        ],
    )
    def test_from_error_code(self, code, expected):
        error = FastqlError.from_error_code(code, "message")
        assert type(error) is expected
        assert error.error_code is code

    def test_logged_on_creation(self, caplog):
        with caplog.at_level(logging.ERROR, logger="fastql.common.exceptions"):
            FastqlError("visible", details={"k": "v"})

        record = caplog.records[-1]
        assert record.getMessage() == "visible"
        assert record.error_code == "VALIDATION_001"
        assert record.details == {"k": "v"}

    def test_catchable_as_base(self):
        with pytest.raises(FastqlError):
            raise MissingWhereClauseError("no where")


class TestHelpers:
    """Factory helpers for common failures."""

    def test_duplicate_field(self):
        error = duplicate_field_error("Name", "[dbo].[Users]")
        assert isinstance(error, DuplicateFieldError)
        assert error.message == "Column 'Name' was already declared for [dbo].[Users]"

    def test_empty_statement_unresolved_table(self):
        error = empty_statement_error("INSERT", "")
        assert error.message == "Cannot render INSERT for <unresolved table>: no columns qualified"

    def test_missing_where(self):
        error = missing_where_clause_error("UPDATE", "[dbo].[Users]")
        assert error.details == {"statement": "UPDATE", "table": "[dbo].[Users]"}

    def test_unresolved_table(self):
        class Invoice:
            pass

        error = unresolved_table_error(Invoice)
        assert "decorate it with @table" in error.message
        assert error.details["entity"].endswith("Invoice")
