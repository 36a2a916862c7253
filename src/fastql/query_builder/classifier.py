"""Field classification by role.

Decides, per statement kind, whether a field participates in the column
list and whether it is the identity column. Every rule is a membership
test against the field's ``FieldRole`` bitset.
"""

from typing import Dict

from fastql.constants.sql import QueryType
from fastql.types.descriptors import FieldRole

INSERT_EXCLUDED = (
    FieldRole.PRIMARY_KEY | FieldRole.NOT_INSERTABLE | FieldRole.SELECT_ONLY | FieldRole.COMPUTED
)
UPDATE_EXCLUDED = (
    FieldRole.PRIMARY_KEY | FieldRole.NOT_UPDATABLE | FieldRole.SELECT_ONLY | FieldRole.COMPUTED
)
SELECT_EXCLUDED = FieldRole.COMPUTED

_EXCLUSIONS: Dict[QueryType, FieldRole] = {
    QueryType.INSERT: INSERT_EXCLUDED,
    QueryType.INSERT_RETURNING: INSERT_EXCLUDED,
    QueryType.UPDATE: UPDATE_EXCLUDED,
    QueryType.SELECT: SELECT_EXCLUDED,
}


def participates(roles: FieldRole, query_type: QueryType) -> bool:
    """Return True if a field with ``roles`` belongs in the column list.

    DELETE has no column list, so nothing participates in it.
    """
    excluded = _EXCLUSIONS.get(QueryType(query_type))
    if excluded is None:
        return False
    return not roles & excluded


def is_identity(roles: FieldRole) -> bool:
    """Primary-key fields are the identity reported back after an insert.

    This holds even though the same flag keeps the column out of INSERT.
    """
    return bool(roles & FieldRole.PRIMARY_KEY)
