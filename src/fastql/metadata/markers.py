"""Annotated markers for declaring field roles.

Use these inside ``typing.Annotated`` on entity fields. Markers combine
with ``|`` and several may be listed in one ``Annotated``:

    >>> id: Annotated[int, PrimaryKey] = 0
    >>> code: Annotated[str, NotUpdatable | NotInsertable] = ""
    >>> payload: Annotated[dict, FieldDescriptor("payload", TypeCast.JSONB), SelectOnly] = {}
"""

from fastql.types.descriptors import FieldRole

PrimaryKey = FieldRole.PRIMARY_KEY
PK = FieldRole.PRIMARY_KEY
NotInsertable = FieldRole.NOT_INSERTABLE
NotUpdatable = FieldRole.NOT_UPDATABLE
SelectOnly = FieldRole.SELECT_ONLY
Computed = FieldRole.COMPUTED

__all__ = [
    "PrimaryKey",
    "PK",
    "NotInsertable",
    "NotUpdatable",
    "SelectOnly",
    "Computed",
]
