"""SQL and statement-related constants.

This module contains the fundamental statement enums shared by the
classifier, the accumulator, the dialect adapters and the entity builder.

These constants are in Layer 0 as they represent core SQL concepts
that can be used by any layer without creating circular dependencies.
"""

from enum import Enum
from typing import Optional, Union


class QueryType(str, Enum):
    """Statement kind produced by the entity builder.

    INSERT_RETURNING is the insert variant that reports the written row
    (or its identity) back to the caller; its field participation is the
    same as INSERT.
    """

    SELECT = "SELECT"
    INSERT = "INSERT"
    INSERT_RETURNING = "INSERT_RETURNING"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class TypeCast(str, Enum):
    """Type-cast hint applied to the value written for a field.

    Casts are rendered on the binding expression, never on the destination
    column identifier. ``NONE`` is the empty string so that a plain ``""``
    cast suffix normalizes to it.
    """

    NONE = ""
    JSONB = "jsonb"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"

    @classmethod
    def coerce(cls, value: Optional[Union["TypeCast", str]]) -> "TypeCast":
        """Normalize a cast hint given as enum, string or None."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# Separator used by Postgres-style casts; also stripped from aliases.
CAST_MARKER = "::"
