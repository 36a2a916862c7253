"""Dialect constants and enumerations."""

from enum import Enum


class Dialect(str, Enum):
    """Target SQL engine.

    Values:
        SQLSERVER: T-SQL style.
            - Bracket-quoted identifiers
            - ``SCOPE_IDENTITY()`` for identity retrieval
            - ``OUTPUT INSERTED.*`` for whole-row return
            - ``TOP(n)`` row cap

        POSTGRES: PostgreSQL style.
            - Unquoted identifiers
            - ``RETURNING`` / ``LASTVAL()`` for identity retrieval
            - ``::type`` casts
            - ``LIMIT n`` row cap
    """

    SQLSERVER = "sqlserver"
    POSTGRES = "postgres"
