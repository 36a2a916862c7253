"""Table naming constants."""

from enum import Enum


class OutputName(str, Enum):
    """How a table reference is rendered from its descriptor.

    Values:
        DEFAULT: ``[schema].[table]``
        TABLE_AND_SCHEMA: ``schema.table``
        ONLY_TABLE: ``table``
    """

    DEFAULT = "default"
    TABLE_AND_SCHEMA = "table_and_schema"
    ONLY_TABLE = "only_table"
