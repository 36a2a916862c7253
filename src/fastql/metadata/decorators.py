"""Entity decorators for table metadata configuration."""

from typing import Callable, Type, TypeVar, Union

from fastql.constants.naming import OutputName
from fastql.types.descriptors import TableDescriptor

T = TypeVar("T", bound=type)

TABLE_METADATA_ATTR = "_table_metadata"


def table(
    name: str,
    schema: str = "dbo",
    output: Union[str, OutputName] = OutputName.DEFAULT,
) -> Callable[[T], T]:
    """Decorator binding an entity class to a table.

    Args:
        name: Table name.
        schema: Owning schema, ``dbo`` by default.
        output: How the table reference is rendered. ``DEFAULT`` renders
            ``[schema].[name]``, ``TABLE_AND_SCHEMA`` renders ``schema.name``
            and ``ONLY_TABLE`` renders ``name``.

    Returns:
        Decorated class with TableDescriptor attached as _table_metadata attribute.

    Example:
        >>> @table("Users", schema="dbo")
        ... class User(BaseModel):
        ...     id: Annotated[int, PrimaryKey] = 0
        ...     name: str = ""
    """
    descriptor = TableDescriptor(name=name, schema=schema, output=OutputName(output))

    def decorator(cls: T) -> T:
        setattr(cls, TABLE_METADATA_ATTR, descriptor)
        return cls

    return decorator


def get_table_metadata(entity_type: Type) -> Union[TableDescriptor, None]:
    """Return the TableDescriptor attached to ``entity_type``, if any.

    The lookup follows normal attribute inheritance, so subclasses of a
    decorated entity share its table binding unless they are decorated
    themselves.
    """
    descriptor = getattr(entity_type, TABLE_METADATA_ATTR, None)
    if isinstance(descriptor, TableDescriptor):
        return descriptor
    return None
