"""Unit tests for the statement accumulator."""

import pytest

from fastql.common.exceptions import (
    DuplicateFieldError,
    EmptyStatementError,
    ErrorCode,
    MissingWhereClauseError,
)
from fastql.constants.sql import TypeCast
from fastql.query_builder import PostgresDialect, SqlServerDialect, StatementAccumulator


@pytest.fixture
def sqlserver():
    return SqlServerDialect()


@pytest.fixture
def postgres():
    return PostgresDialect()


class TestAdd:
    """Column collection and the uniqueness invariant."""

    def test_preserves_insertion_order(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")
        acc.add("Email", "Email")
        acc.add("Age", "Age")

        assert len(acc) == 3
        assert [c.column_name for c in acc.columns] == ["Name", "Email", "Age"]

    def test_duplicate_column_rejected(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")

        with pytest.raises(DuplicateFieldError) as exc_info:
            acc.add("Name", "DisplayName")

        assert exc_info.value.error_code == ErrorCode.DUPLICATE_FIELD
        assert exc_info.value.details["column"] == "Name"
        assert len(acc) == 1

    def test_duplicate_detection_is_exact(self, sqlserver):
        """Column names that differ only by case are distinct entries."""
        acc = StatementAccumulator("t", sqlserver)
        acc.add("Name", "a")
        acc.add("name", "b")
        assert len(acc) == 2

    def test_alias_defaults_to_binding_without_cast_marker(self, postgres):
        acc = StatementAccumulator("t", postgres)
        column = acc.add("payload", "payload::jsonb")
        assert column.alias == "payload"

    def test_alias_defaults_to_column_for_values(self, postgres):
        acc = StatementAccumulator("t", postgres, binder=postgres.format_literal)
        column = acc.add("Age", 42)
        assert column.alias == "Age"

    def test_cast_is_coerced(self, postgres):
        acc = StatementAccumulator("t", postgres)
        column = acc.add("CreatedAt", "CreatedAt", "TIMESTAMP")
        assert column.cast is TypeCast.TIMESTAMP


class TestRenderInsert:
    """INSERT rendering."""

    def test_placeholders(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")
        acc.add("Email", "Email")

        assert acc.render_insert() == "INSERT INTO [dbo].[Users](Name, Email) VALUES(@Name, @Email)"

    def test_literal_values(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver, binder=sqlserver.format_literal)
        acc.add("Name", "O'Brien")
        acc.add("Active", True)
        acc.add("Nickname", None)

        assert acc.render_insert() == (
            "INSERT INTO [dbo].[Users](Name, Active, Nickname) VALUES('O''Brien', 1, NULL)"
        )

    def test_cast_applies_to_value_not_column(self, postgres):
        acc = StatementAccumulator("dbo.Users", postgres)
        acc.add("Name", "Name")
        acc.add("CreatedAt", "CreatedAt", TypeCast.TIMESTAMP)

        assert acc.render_insert() == (
            "INSERT INTO dbo.Users(Name, CreatedAt) VALUES(:Name, :CreatedAt::timestamp)"
        )

    def test_output_clause(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")
        assert acc.render_insert(output_clause="OUTPUT INSERTED.*") == (
            "INSERT INTO [dbo].[Users](Name) OUTPUT INSERTED.* VALUES(@Name)"
        )

    def test_empty_rejected(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        with pytest.raises(EmptyStatementError):
            acc.render_insert()

    def test_identity_is_not_a_column(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.mark_identity("Id")
        acc.add("Name", "Name")

        assert acc.identity_column == "Id"
        assert acc.render_insert() == "INSERT INTO [dbo].[Users](Name) VALUES(@Name)"


class TestRenderUpdate:
    """UPDATE rendering and its preconditions."""

    def test_set_list(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")
        acc.add("Email", "Email")

        assert acc.render_update("Id = @Id") == (
            "UPDATE [dbo].[Users] SET Name = @Name, Email = @Email WHERE Id = @Id"
        )

    def test_where_from_constructor(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver, where="Id = 1")
        acc.add("Name", "Name")
        assert acc.render_update().endswith("WHERE Id = 1")

    @pytest.mark.parametrize("where", [None, "", "   "])
    def test_missing_where_rejected(self, sqlserver, where):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Name", "Name")
        with pytest.raises(MissingWhereClauseError):
            acc.render_update(where)

    def test_empty_rejected(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        with pytest.raises(EmptyStatementError):
            acc.render_update("Id = 1")

    def test_missing_where_checked_first(self, sqlserver):
        """With neither columns nor WHERE, the WHERE error wins."""
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        with pytest.raises(MissingWhereClauseError):
            acc.render_update("")

    def test_sqlserver_cast(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Events]", sqlserver)
        acc.add("Payload", "Payload", TypeCast.JSONB)
        assert acc.render_update("Id = 1") == (
            "UPDATE [dbo].[Events] SET Payload = CAST(@Payload AS NVARCHAR(MAX)) WHERE Id = 1"
        )


class TestRenderSelect:
    """SELECT projection rendering."""

    def test_aliases_only_when_names_differ(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Id", "Id")
        acc.add("user_name", "Name")

        assert acc.render_select("Id = 1") == (
            "SELECT Id, user_name AS Name FROM [dbo].[Users] WHERE Id = 1"
        )

    def test_missing_where_rejected(self, sqlserver):
        acc = StatementAccumulator("[dbo].[Users]", sqlserver)
        acc.add("Id", "Id")
        with pytest.raises(MissingWhereClauseError):
            acc.render_select("")


class TestReturningColumns:
    """Projection list for RETURNING/OUTPUT."""

    def test_identity_first(self, postgres):
        acc = StatementAccumulator("dbo.Users", postgres)
        acc.add("Name", "Name")
        acc.mark_identity("Id")
        acc.add("CreatedAt", "CreatedAt", TypeCast.TIMESTAMP)

        assert acc.render_returning_columns() == "Id, Name, CreatedAt"

    def test_cast_marker_does_not_leak_into_alias(self, postgres):
        acc = StatementAccumulator("dbo.Events", postgres)
        acc.add("payload", "payload::jsonb")
        assert acc.render_returning_columns() == "payload"

    def test_mapped_columns_aliased(self, postgres):
        acc = StatementAccumulator("dbo.Users", postgres)
        acc.mark_identity("user_id", alias="Id")
        acc.add("user_name", "Name")

        assert acc.render_returning_columns() == "user_id AS Id, user_name AS Name"

    def test_identity_not_repeated_when_also_a_column(self, postgres):
        acc = StatementAccumulator("dbo.Users", postgres)
        acc.mark_identity("Id")
        acc.add("Id", "Id")
        acc.add("Name", "Name")

        assert acc.render_returning_columns() == "Id, Name"

    def test_empty_rejected(self, postgres):
        acc = StatementAccumulator("dbo.Users", postgres)
        acc.mark_identity("Id")
        with pytest.raises(EmptyStatementError):
            acc.render_returning_columns()

    def test_render_identity_without_mark(self, postgres):
        assert StatementAccumulator("t", postgres).render_identity() == ""
