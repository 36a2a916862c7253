"""Table reference resolution."""

from typing import Any, Optional

from fastql.common.exceptions import unresolved_table_error
from fastql.constants.naming import OutputName
from fastql.logging import get_logger
from fastql.metadata.decorators import get_table_metadata
from fastql.types.descriptors import TableDescriptor

logger = get_logger(__name__)


def format_table_reference(descriptor: TableDescriptor) -> str:
    """Render the table reference text for a descriptor.

    Args:
        descriptor: Table binding.

    Returns:
        ``name`` for ONLY_TABLE, ``schema.name`` for TABLE_AND_SCHEMA and
        ``[schema].[name]`` otherwise.
    """
    output = OutputName(descriptor.output)
    if output == OutputName.ONLY_TABLE:
        return descriptor.name
    if output == OutputName.TABLE_AND_SCHEMA:
        return f"{descriptor.schema_name}.{descriptor.name}"
    return f"[{descriptor.schema_name}].[{descriptor.name}]"


def resolve_table_name(
    entity_type: Any,
    strict: bool = False,
    descriptor: Optional[TableDescriptor] = None,
) -> str:
    """Resolve the fully qualified table reference for an entity type.

    Entity types without table metadata resolve to an empty string so that
    callers keep producing (broken but non-crashing) SQL text. Pass
    ``strict=True`` to raise instead.

    Args:
        entity_type: Entity class or instance.
        strict: Raise UnresolvedTableError when no table metadata exists.
        descriptor: Already resolved descriptor, skips the attribute lookup.

    Returns:
        Table reference text, or ``""`` when unresolved and not strict.

    Raises:
        UnresolvedTableError: If ``strict`` and the type has no table metadata.
    """
    if not isinstance(entity_type, type):
        entity_type = type(entity_type)

    table = descriptor or get_table_metadata(entity_type)
    if table is None:
        if strict:
            raise unresolved_table_error(entity_type)
        logger.warning(
            "Entity has no table metadata; rendering empty table name",
            extra={"entity": entity_type.__qualname__},
        )
        return ""

    return format_table_reference(table)
