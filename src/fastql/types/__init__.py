"""Type definitions for fastql.

This module provides the descriptor types consumed by the statement
generator: table and field descriptors, role flags and the resolved
per-entity descriptor table.
"""

from .base import FastqlBaseModel
from .descriptors import (
    EntityDescriptor,
    FieldDescriptor,
    FieldMetadata,
    FieldRole,
    TableDescriptor,
)

__all__ = [
    'FastqlBaseModel',
    'EntityDescriptor',
    'FieldDescriptor',
    'FieldMetadata',
    'FieldRole',
    'TableDescriptor',
]
