"""Entity metadata: declaration markers, table binding and descriptor lookup.

Declaring an entity:
    >>> from typing import Annotated
    >>> from pydantic import BaseModel
    >>> from fastql.metadata import table, PrimaryKey, FieldDescriptor
    >>>
    >>> @table("Users", schema="dbo")
    ... class User(BaseModel):
    ...     id: Annotated[int, PrimaryKey] = 0
    ...     name: str = ""
    ...     created_at: Annotated[str, FieldDescriptor("CreatedAt", "timestamp")] = ""
"""

from fastql.metadata.decorators import TABLE_METADATA_ATTR, get_table_metadata, table
from fastql.metadata.markers import (
    PK,
    Computed,
    NotInsertable,
    NotUpdatable,
    PrimaryKey,
    SelectOnly,
)
from fastql.metadata.registry import clear_descriptor_cache, describe_entity
from fastql.metadata.resolver import format_table_reference, resolve_table_name
from fastql.types.descriptors import FieldDescriptor, FieldRole, TableDescriptor

__all__ = [
    "table",
    "get_table_metadata",
    "TABLE_METADATA_ATTR",
    "describe_entity",
    "clear_descriptor_cache",
    "format_table_reference",
    "resolve_table_name",
    "FieldDescriptor",
    "FieldRole",
    "TableDescriptor",
    "PrimaryKey",
    "PK",
    "NotInsertable",
    "NotUpdatable",
    "SelectOnly",
    "Computed",
]
