"""Statement accumulator.

Collects the (column, binding, cast) triples of one statement under
construction and renders them as INSERT, UPDATE or SELECT text.

The way a binding is turned into SQL is a strategy function supplied at
construction time:

- ``dialect.placeholder`` (default): the binding is a parameter name and is
  rendered as ``@Name`` / ``:Name``.
- ``dialect.format_literal``: the binding is a value and is rendered as a
  SQL literal.

Both generation modes therefore share one rendering path.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, TYPE_CHECKING, Union

from fastql.common.exceptions import (
    duplicate_field_error,
    empty_statement_error,
    missing_where_clause_error,
)
from fastql.constants.sql import CAST_MARKER, TypeCast

if TYPE_CHECKING:
    from fastql.query_builder.base import BaseDialect


Binder = Callable[[Any], str]


@dataclass(frozen=True)
class AccumulatedColumn:
    """One column of a statement under construction.

    Attributes:
        column_name: Resolved storage column name.
        binding: Parameter name or bound value, interpreted by the binder.
        cast: Cast applied to the rendered binding.
        alias: Name the column is reported back as (the field's own name).
    """
    column_name: str
    binding: Any
    cast: TypeCast
    alias: str


def strip_cast_marker(name: str) -> str:
    """``CreatedAt::timestamp`` -> ``CreatedAt``."""
    return name.split(CAST_MARKER, 1)[0]


def project(column_name: str, alias: Optional[str]) -> str:
    """Render ``column AS alias``, or just ``column`` when they match."""
    if not alias or alias == column_name:
        return column_name
    return f"{column_name} AS {alias}"


class StatementAccumulator:
    """Ordered, column-unique collection for one statement.

    Created per generation call, filled through :meth:`add`, rendered once
    and discarded. No two entries share a column name.
    """

    def __init__(
        self,
        table: str,
        dialect: "BaseDialect",
        binder: Optional[Binder] = None,
        where: Optional[str] = None,
    ):
        """Initialize the accumulator.

        Args:
            table: Resolved table reference (may be empty when unresolved).
            dialect: Dialect adapter supplying cast syntax.
            binder: Binding strategy; defaults to the dialect's placeholder.
            where: Default WHERE condition (without the WHERE keyword) used by
                UPDATE/SELECT rendering when none is passed explicitly.
        """
        self.table = table
        self.dialect = dialect
        self._binder: Binder = binder or dialect.placeholder
        self._where = where
        self._columns: Dict[str, AccumulatedColumn] = {}
        self._identity: Optional[Tuple[str, str]] = None

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return (
            f"StatementAccumulator(table={self.table!r}, dialect={self.dialect.name!r}, "
            f"columns={list(self._columns)!r})"
        )

    @property
    def columns(self) -> Tuple[AccumulatedColumn, ...]:
        return tuple(self._columns.values())

    @property
    def identity_column(self) -> Optional[str]:
        return self._identity[0] if self._identity else None

    def add(
        self,
        column_name: str,
        binding: Any,
        cast: Union[TypeCast, str, None] = TypeCast.NONE,
        *,
        alias: Optional[str] = None,
    ) -> AccumulatedColumn:
        """Append one column.

        Args:
            column_name: Storage column name.
            binding: Parameter name (placeholder mode) or value (literal mode).
            cast: Cast suffix applied to the binding expression.
            alias: Reported name; defaults to a string binding with any
                ``::cast`` suffix removed, else to the column name.

        Returns:
            The accumulated column.

        Raises:
            DuplicateFieldError: If ``column_name`` was already added.
        """
        if column_name in self._columns:
            raise duplicate_field_error(column_name, self.table)

        if alias is None:
            alias = strip_cast_marker(binding) if isinstance(binding, str) else column_name

        column = AccumulatedColumn(
            column_name=column_name,
            binding=binding,
            cast=TypeCast.coerce(cast),
            alias=strip_cast_marker(alias),
        )
        self._columns[column_name] = column
        return column

    def mark_identity(self, column_name: str, alias: Optional[str] = None) -> None:
        """Record the identity column for identity-return rendering.

        The column is not added to the column set.
        """
        self._identity = (column_name, alias or column_name)

    def render_binding(self, column: AccumulatedColumn) -> str:
        """Render the value expression of a column, cast applied."""
        expression = self._binder(column.binding)
        return self.dialect.cast(expression, column.cast)

    def render_insert(self, output_clause: str = "") -> str:
        """Render ``INSERT INTO t(cols) [output] VALUES(bindings)``.

        Args:
            output_clause: Text placed between the column list and VALUES,
                e.g. ``OUTPUT INSERTED.*``.

        Raises:
            EmptyStatementError: If no columns were added.
        """
        self._require_columns("INSERT")
        names = ", ".join(c.column_name for c in self._columns.values())
        values = ", ".join(self.render_binding(c) for c in self._columns.values())
        output = f" {output_clause}" if output_clause else ""
        return f"INSERT INTO {self.table}({names}){output} VALUES({values})"

    def render_update(self, where: Optional[str] = None) -> str:
        """Render ``UPDATE t SET col = binding, ... WHERE condition``.

        Raises:
            MissingWhereClauseError: If no WHERE condition is available.
            EmptyStatementError: If no columns were added.
        """
        condition = self._require_where("UPDATE", where)
        self._require_columns("UPDATE")
        assignments = ", ".join(
            f"{c.column_name} = {self.render_binding(c)}" for c in self._columns.values()
        )
        return f"UPDATE {self.table} SET {assignments} WHERE {condition}"

    def render_select(self, where: Optional[str] = None) -> str:
        """Render ``SELECT col AS alias, ... FROM t WHERE condition``.

        Raises:
            MissingWhereClauseError: If no WHERE condition is available.
            EmptyStatementError: If no columns were added.
        """
        condition = self._require_where("SELECT", where)
        self._require_columns("SELECT")
        projection = ", ".join(project(c.column_name, c.alias) for c in self._columns.values())
        return f"SELECT {projection} FROM {self.table} WHERE {condition}"

    def render_identity(self) -> str:
        """Projection of the identity column alone (empty when unmarked)."""
        if not self._identity:
            return ""
        return project(*self._identity)

    def render_returning_columns(self) -> str:
        """Projection list for RETURNING/OUTPUT clauses.

        Identity column first (when marked), then every accumulated column
        aliased by its field name.

        Raises:
            EmptyStatementError: If no columns were added.
        """
        self._require_columns("RETURNING")
        parts = []
        if self._identity and self._identity[0] not in self._columns:
            parts.append(self.render_identity())
        parts.extend(
            project(c.column_name, strip_cast_marker(c.alias)) for c in self._columns.values()
        )
        return ", ".join(parts)

    def _require_columns(self, statement: str) -> None:
        if not self._columns:
            raise empty_statement_error(statement, self.table)

    def _require_where(self, statement: str, where: Optional[str]) -> str:
        condition = where if where is not None else self._where
        condition = (condition or "").strip()
        if not condition:
            raise missing_where_clause_error(statement, self.table)
        return condition
