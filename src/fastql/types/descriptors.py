"""Descriptor types for entity mapping.

This module contains the read-only metadata consumed by the statement
generator:

- ``TableDescriptor``: table binding attached once per entity type.
- ``FieldDescriptor``: optional per-field column override and cast hint,
  declared as an ``Annotated`` marker.
- ``FieldRole``: bitset of role markers deciding statement participation.
- ``FieldMetadata`` / ``EntityDescriptor``: the resolved, pre-built view of
  an entity type used by the builder. Built once per type and cached.

Per-field markers are plain frozen dataclasses and flags rather than
Pydantic models so they can sit inside ``Annotated`` on Pydantic entities
without being treated as schema hooks.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional, Tuple, Union

from pydantic import ConfigDict, Field, field_validator

from fastql.constants.naming import OutputName
from fastql.constants.sql import TypeCast
from fastql.types.base import FastqlBaseModel


class TableDescriptor(FastqlBaseModel):
    """Table binding for an entity type.

    Attributes:
        name: Table name.
        schema_name: Owning schema. Defaults to ``dbo``.
        output: How the table reference is rendered (see ``OutputName``).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=128)
    schema_name: str = Field(default="dbo", min_length=1, max_length=128, alias="schema")
    output: OutputName = Field(default=OutputName.DEFAULT)

    @field_validator("name", "schema_name")
    @classmethod
    def strip_identifier(cls, v: str) -> str:
        """Reject blank names after trimming whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("table and schema names cannot be blank")
        return v


@dataclass(frozen=True)
class FieldDescriptor:
    """Column mapping for one entity field.

    Absence of a descriptor means "use the field's own name as the column
    name, no cast".

    Example:
        >>> from typing import Annotated
        >>> created_at: Annotated[datetime, FieldDescriptor("created_at", TypeCast.TIMESTAMP)]
    """
    column: Optional[str] = None
    cast: Union[TypeCast, str] = TypeCast.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "cast", TypeCast.coerce(self.cast))
        if self.column is not None and not self.column.strip():
            raise ValueError("FieldDescriptor column cannot be blank")


class FieldRole(IntFlag):
    """Role markers for an entity field, combinable with ``|``.

    Participation rules:
        INSERT: none of PRIMARY_KEY, NOT_INSERTABLE, SELECT_ONLY, COMPUTED
        UPDATE: none of PRIMARY_KEY, NOT_UPDATABLE, SELECT_ONLY, COMPUTED
        SELECT: not COMPUTED
        identity: PRIMARY_KEY
    """
    NONE = 0
    PRIMARY_KEY = 1
    NOT_INSERTABLE = 2
    NOT_UPDATABLE = 4
    SELECT_ONLY = 8
    COMPUTED = 16


@dataclass(frozen=True)
class FieldMetadata:
    """Resolved mapping for one declared entity field."""
    name: str
    column: str
    cast: TypeCast = TypeCast.NONE
    roles: FieldRole = FieldRole.NONE

    @property
    def is_primary_key(self) -> bool:
        return bool(self.roles & FieldRole.PRIMARY_KEY)


@dataclass(frozen=True)
class EntityDescriptor:
    """Pre-built descriptor table for one entity type.

    Attributes:
        entity_type: The described class.
        table: Attached table binding, or None when the type has none.
        fields: Public fields in declaration order.
    """
    entity_type: type
    table: Optional[TableDescriptor]
    fields: Tuple[FieldMetadata, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.entity_type.__name__

    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)
