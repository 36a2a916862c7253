"""Entity statement builder.

``FastqlBuilder`` walks an entity type's declared fields in order, applies
the role classifier and feeds the qualifying fields to a fresh
``StatementAccumulator``; the accumulator and the dialect adapter then
render the statement.

Two binding modes are offered for every write:

- ``*_query(entity, ...)``: values of the given instance are rendered as
  SQL literals.
- ``*_statement(...)``: named placeholders (``@Name`` / ``:Name``) are
  rendered; :meth:`FastqlBuilder.parameters` returns the matching values.

Example:
    >>> @table("Users", schema="dbo")
    ... class User(BaseModel):
    ...     id: Annotated[int, PrimaryKey] = 0
    ...     name: str = ""
    >>>
    >>> builder = FastqlBuilder(User, dialect=Dialect.SQLSERVER)
    >>> builder.insert_statement(return_identity=True)
    'INSERT INTO [dbo].[Users](name) VALUES(@name); SELECT SCOPE_IDENTITY();'
    >>> builder.delete_query("id = 5")
    'DELETE FROM [dbo].[Users] WHERE id = 5;'
"""

import functools
from typing import Any, Callable, Dict, Generic, Optional, Sequence, Type, TypeVar, Union

from fastql.common.exceptions import (
    ErrorCode,
    FastqlError,
    InvalidEntityError,
    missing_where_clause_error,
)
from fastql.constants.dialect import Dialect
from fastql.constants.sql import QueryType
from fastql.logging import get_logger, statement_context
from fastql.metadata.registry import describe_entity
from fastql.metadata.resolver import resolve_table_name
from fastql.query_builder.accumulator import StatementAccumulator
from fastql.query_builder.base import BaseDialect
from fastql.query_builder.classifier import is_identity, participates
from fastql.query_builder.factory import get_dialect
from fastql.types.descriptors import EntityDescriptor
from fastql.utils.decorators import traced

logger = get_logger(__name__)

E = TypeVar("E")
F = TypeVar("F", bound=Callable[..., str])


def _span_attributes(builder: "FastqlBuilder", *args: Any, **kwargs: Any) -> Dict[str, Any]:
    return {
        "fastql.entity": builder.descriptor.name,
        "fastql.dialect": builder.dialect.name,
    }


def _generation(operation: str) -> Callable[[F], F]:
    """Trace a generation method and scope logging context to it."""

    def decorator(func: F) -> F:
        @traced(f"fastql.{operation}", attribute_getter=_span_attributes)
        @functools.wraps(func)
        def wrapper(self: "FastqlBuilder", *args: Any, **kwargs: Any) -> str:
            with statement_context(entity=self.descriptor.name, operation=operation):
                sql = func(self, *args, **kwargs)
                logger.debug("Generated statement", extra={"sql": sql, "dialect": self.dialect.name})
                return sql

        return wrapper  # type: ignore[return-value]

    return decorator


class FastqlBuilder(Generic[E]):
    """Generates INSERT/UPDATE/SELECT/DELETE text for one entity type.

    The builder is cheap and holds no per-statement state: every call
    builds and discards its own accumulator, and the entity descriptor is
    read from the shared cache.

    Attributes:
        entity_type: Described entity class.
        descriptor: Cached field/table descriptor for ``entity_type``.
        dialect: Dialect adapter used for every statement of this builder.
        strict: Raise UnresolvedTableError instead of rendering ``""`` for
            entity types without table metadata.
        select_top: Default row cap for :meth:`select_columns_query`.
    """

    def __init__(
        self,
        entity_type: Type[E],
        dialect: Union[Dialect, str, BaseDialect, None] = None,
        strict: Optional[bool] = None,
        parameter_prefix: Optional[str] = None,
        select_top: Optional[int] = None,
    ):
        """Initialize the builder.

        Args:
            entity_type: Entity class (an instance is accepted and its class used).
            dialect: Target dialect; defaults to ``settings.dialect``.
            strict: Strict table resolution; defaults to
                ``settings.strict_table_resolution``.
            parameter_prefix: Placeholder prefix override ('@' or ':').
            select_top: Row cap for column selects; defaults to
                ``settings.default_select_top``.
        """
        if not isinstance(entity_type, type):
            entity_type = type(entity_type)

        if strict is None or select_top is None:
            from fastql.settings import get_settings
            settings = get_settings()
            if strict is None:
                strict = settings.strict_table_resolution
            if select_top is None:
                select_top = settings.default_select_top

        self.entity_type: Type[E] = entity_type
        self.descriptor: EntityDescriptor = describe_entity(entity_type)
        self.dialect: BaseDialect = get_dialect(dialect, parameter_prefix)
        self.strict = strict
        self.select_top = select_top

    def __repr__(self) -> str:
        return f"FastqlBuilder({self.entity_type.__name__}, dialect={self.dialect.name!r})"

    def table_name(self) -> str:
        """Resolved table reference, ``""`` when unresolved and not strict."""
        return resolve_table_name(self.entity_type, strict=self.strict, descriptor=self.descriptor.table)

    # ------------------------------------------------------------------
    # INSERT
    # ------------------------------------------------------------------

    @_generation("insert_query")
    def insert_query(self, entity: E, return_identity: bool = False) -> str:
        """INSERT with the entity's values rendered as literals.

        Args:
            entity: Instance whose values are written.
            return_identity: Also report the generated identity
                (``SCOPE_IDENTITY()`` / ``RETURNING`` / ``LASTVAL()``).
        """
        accumulator = self._walk(QueryType.INSERT, entity=self._check_entity(entity))
        return self._render_insert(accumulator, return_identity)

    @_generation("insert_statement")
    def insert_statement(self, return_identity: bool = False) -> str:
        """INSERT with named placeholders for every insertable field."""
        accumulator = self._walk(QueryType.INSERT)
        return self._render_insert(accumulator, return_identity)

    @_generation("insert_return_object_query")
    def insert_return_object_query(self, entity: E) -> str:
        """INSERT returning the written row, values rendered as literals."""
        accumulator = self._walk(QueryType.INSERT_RETURNING, entity=self._check_entity(entity))
        return self.dialect.insert_returning_object(accumulator)

    @_generation("insert_return_object_statement")
    def insert_return_object_statement(self) -> str:
        """INSERT returning the written row, with named placeholders."""
        accumulator = self._walk(QueryType.INSERT_RETURNING)
        return self.dialect.insert_returning_object(accumulator)

    # ------------------------------------------------------------------
    # UPDATE
    # ------------------------------------------------------------------

    @_generation("update_query")
    def update_query(self, entity: E, where: str) -> str:
        """UPDATE of every updatable field with the entity's values as literals.

        Args:
            entity: Instance whose values are written.
            where: WHERE condition (without the WHERE keyword).
        """
        accumulator = self._walk(QueryType.UPDATE, entity=self._check_entity(entity), where=where)
        return self.dialect.terminate(accumulator.render_update())

    @_generation("update_statement")
    def update_statement(self, where: str) -> str:
        """UPDATE of every updatable field with named placeholders."""
        accumulator = self._walk(QueryType.UPDATE, where=where)
        return self.dialect.terminate(accumulator.render_update())

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------

    @_generation("select_query")
    def select_query(self, where: str) -> str:
        """``SELECT * FROM <table> WHERE <where>;``"""
        table = self.table_name()
        condition = self._require_where("SELECT", where, table)
        return self.dialect.terminate(f"SELECT * FROM {table} WHERE {condition}")

    @_generation("select_columns_query")
    def select_columns_query(
        self,
        columns: Optional[Sequence[str]],
        where: str,
        top: Optional[int] = None,
    ) -> str:
        """Row-capped SELECT of explicit columns.

        Args:
            columns: Column names, or a single column name; ``*`` is selected
                when empty or None.
            where: WHERE condition (without the WHERE keyword).
            top: Row cap (``TOP(n)`` / ``LIMIT n``); defaults to ``select_top``.

        Raises:
            FastqlError: If the row cap is not positive.
            InvalidIdentifierError: If a column name is not a valid identifier.
        """
        table = self.table_name()
        condition = self._require_where("SELECT", where, table)
        cap = self.select_top if top is None else top
        if cap <= 0:
            raise FastqlError(
                f"Row cap must be positive, got {cap}",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"top": cap},
            )
        if isinstance(columns, str):
            columns = [columns]
        return self.dialect.select_columns(table, list(columns or []), condition, cap)

    @_generation("select_statement")
    def select_statement(self, where: str) -> str:
        """SELECT of every non-computed field, aliased by field name."""
        accumulator = self._walk(QueryType.SELECT, where=where)
        return self.dialect.terminate(accumulator.render_select())

    # ------------------------------------------------------------------
    # DELETE
    # ------------------------------------------------------------------

    @_generation("delete_query")
    def delete_query(self, where: str) -> str:
        """``DELETE FROM <table> WHERE <where>;`` (no per-field walk)."""
        table = self.table_name()
        condition = self._require_where("DELETE", where, table)
        return self.dialect.terminate(f"DELETE FROM {table} WHERE {condition}")

    # ------------------------------------------------------------------
    # Dispatch and parameters
    # ------------------------------------------------------------------

    def build_query(
        self,
        query_type: Union[QueryType, str],
        entity: Optional[E] = None,
        where: Optional[str] = None,
        *,
        return_identity: bool = False,
        columns: Optional[Sequence[str]] = None,
        top: Optional[int] = None,
    ) -> str:
        """Build SQL for ``query_type``.

        Value-bound variants are used when ``entity`` is given, placeholder
        variants otherwise. For SELECT, passing ``columns`` selects the
        row-capped column variant instead of the aliased projection.

        Raises:
            ValueError: If the query type is unknown.
        """
        query_type = QueryType(query_type)
        value_bound = entity is not None

        if query_type == QueryType.INSERT:
            if value_bound:
                return self.insert_query(entity, return_identity=return_identity)
            return self.insert_statement(return_identity=return_identity)
        if query_type == QueryType.INSERT_RETURNING:
            if value_bound:
                return self.insert_return_object_query(entity)
            return self.insert_return_object_statement()
        if query_type == QueryType.UPDATE:
            if value_bound:
                return self.update_query(entity, where or "")
            return self.update_statement(where or "")
        if query_type == QueryType.SELECT:
            if columns is not None:
                return self.select_columns_query(columns, where or "", top=top)
            return self.select_statement(where or "")
        return self.delete_query(where or "")

    def parameters(self, entity: E, query_type: Union[QueryType, str] = QueryType.INSERT) -> Dict[str, Any]:
        """Values for the placeholders of the matching ``*_statement``.

        Args:
            entity: Instance providing the values.
            query_type: INSERT, INSERT_RETURNING or UPDATE.

        Returns:
            Mapping of placeholder name (field name) to value, in column
            order. Empty for statement kinds without value bindings.
        """
        query_type = QueryType(query_type)
        entity = self._check_entity(entity)
        if query_type not in (QueryType.INSERT, QueryType.INSERT_RETURNING, QueryType.UPDATE):
            return {}
        return {
            f.name: self._field_value(entity, f.name)
            for f in self.descriptor.fields
            if participates(f.roles, query_type)
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _walk(
        self,
        query_type: QueryType,
        entity: Optional[E] = None,
        where: Optional[str] = None,
    ) -> StatementAccumulator:
        binder = self.dialect.format_literal if entity is not None else None
        accumulator = StatementAccumulator(self.table_name(), self.dialect, binder=binder, where=where)
        track_identity = query_type in (QueryType.INSERT, QueryType.INSERT_RETURNING)

        for field in self.descriptor.fields:
            if track_identity and is_identity(field.roles):
                accumulator.mark_identity(field.column, alias=field.name)

            if not participates(field.roles, query_type):
                continue

            binding = field.name if entity is None else self._field_value(entity, field.name)
            accumulator.add(field.column, binding, field.cast, alias=field.name)

        return accumulator

    def _render_insert(self, accumulator: StatementAccumulator, return_identity: bool) -> str:
        if return_identity:
            return self.dialect.insert_with_identity(accumulator)
        return self.dialect.terminate(accumulator.render_insert())

    def _check_entity(self, entity: Any) -> E:
        if not isinstance(entity, self.entity_type):
            raise InvalidEntityError(
                f"Expected an instance of {self.entity_type.__qualname__}, "
                f"got {type(entity).__qualname__}",
                details={"entity": self.entity_type.__qualname__, "received": type(entity).__qualname__},
            )
        return entity

    def _field_value(self, entity: E, name: str) -> Any:
        try:
            return getattr(entity, name)
        except AttributeError as exc:
            raise InvalidEntityError(
                f"{type(entity).__qualname__} instance has no value for field '{name}'",
                details={"entity": self.entity_type.__qualname__, "field": name},
                cause=exc,
            ) from exc

    @staticmethod
    def _require_where(statement: str, where: Optional[str], table: str) -> str:
        condition = (where or "").strip()
        if not condition:
            raise missing_where_clause_error(statement, table)
        return condition
