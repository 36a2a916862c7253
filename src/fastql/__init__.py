from fastql.__version__ import __version__
from fastql.builder import FastqlBuilder

from fastql.metadata import (
    table,
    PrimaryKey,
    PK,
    NotInsertable,
    NotUpdatable,
    SelectOnly,
    Computed,
    describe_entity,
    clear_descriptor_cache,
    resolve_table_name,
)
from fastql.types import FieldDescriptor, FieldRole, TableDescriptor

from fastql.constants import Dialect, OutputName, QueryType, TypeCast

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
)

from fastql.query_builder import get_dialect
from fastql.settings import get_settings
from fastql.logging import setup_logging


__all__ = [
    "__version__",

    "FastqlBuilder",

    # Declaration
    "table",
    "PrimaryKey",
    "PK",
    "NotInsertable",
    "NotUpdatable",
    "SelectOnly",
    "Computed",
    "FieldDescriptor",
    "FieldRole",
    "TableDescriptor",
    "describe_entity",
    "clear_descriptor_cache",
    "resolve_table_name",

    # Enums
    "Dialect",
    "OutputName",
    "QueryType",
    "TypeCast",

    # Exceptions (public API)
    "FastqlError",
    "ErrorCode",
    "DuplicateFieldError",
    "EmptyStatementError",
    "MissingWhereClauseError",
    "UnresolvedTableError",
    "InvalidEntityError",
    "InvalidIdentifierError",
    "UnsupportedDialectError",

    "get_dialect",
    "get_settings",
    "setup_logging",
]
