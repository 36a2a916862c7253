"""Constants module for fastql.

This module contains all constant values and enumerations used throughout
fastql. As Layer 0 in the architecture, this module has no dependencies on
other fastql modules.

Organization:
    - sql: Statement kinds and type-cast hints
    - dialect: Supported target SQL engines
    - naming: Table reference formatting modes
"""

from fastql.constants.dialect import Dialect
from fastql.constants.naming import OutputName
from fastql.constants.sql import CAST_MARKER, QueryType, TypeCast

__all__ = [
    "Dialect",
    "OutputName",
    "QueryType",
    "TypeCast",
    "CAST_MARKER",
]
