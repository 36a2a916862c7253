"""Descriptor registry.

Builds the ``EntityDescriptor`` for an entity type once and caches it, so
statement generation never re-inspects type annotations per call.

Supported entity shapes:
    - Pydantic models (``model_fields``, declaration order)
    - Dataclasses (``dataclasses.fields``)
    - Plain classes with class-level annotations (base classes first)

Field metadata is read from ``typing.Annotated`` extras: any
``FieldDescriptor`` sets column/cast, any ``FieldRole`` is OR-ed into the
field's role set. Names starting with ``_`` and ``ClassVar`` annotations
are not entity fields.
"""

import dataclasses
import inspect
import threading
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    List,
    Tuple,
    Type,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel

from fastql.common.exceptions import InvalidEntityError
from fastql.constants.sql import TypeCast
from fastql.logging import get_logger
from fastql.metadata.decorators import get_table_metadata
from fastql.types.descriptors import EntityDescriptor, FieldDescriptor, FieldMetadata, FieldRole

logger = get_logger(__name__)

_cache: Dict[type, EntityDescriptor] = {}
_lock = threading.Lock()


def describe_entity(entity_type: Type[Any]) -> EntityDescriptor:
    """Return the cached descriptor table for ``entity_type``.

    Args:
        entity_type: Entity class (or an instance, whose class is used).

    Returns:
        EntityDescriptor with table binding and fields in declaration order.

    Raises:
        InvalidEntityError: If the type declares no public fields.
    """
    if not isinstance(entity_type, type):
        entity_type = type(entity_type)

    descriptor = _cache.get(entity_type)
    if descriptor is not None:
        return descriptor

    with _lock:
        descriptor = _cache.get(entity_type)
        if descriptor is None:
            descriptor = _build_descriptor(entity_type)
            _cache[entity_type] = descriptor
            logger.debug(
                "Built entity descriptor",
                extra={"entity": entity_type.__qualname__, "field_count": len(descriptor.fields)},
            )
    return descriptor


def clear_descriptor_cache() -> int:
    """Drop every cached descriptor.

    Returns:
        Number of descriptors removed.
    """
    with _lock:
        count = len(_cache)
        _cache.clear()
    return count


def _build_descriptor(entity_type: type) -> EntityDescriptor:
    fields = tuple(
        _resolve_field(name, extras)
        for name, extras in _declared_fields(entity_type)
    )
    if not fields:
        raise InvalidEntityError(
            f"Entity {entity_type.__qualname__} declares no public fields",
            details={"entity": entity_type.__qualname__},
        )
    return EntityDescriptor(
        entity_type=entity_type,
        table=get_table_metadata(entity_type),
        fields=fields,
    )


def _resolve_field(name: str, extras: Iterable[Any]) -> FieldMetadata:
    column = name
    cast = TypeCast.NONE
    roles = FieldRole.NONE

    for marker in extras:
        if isinstance(marker, FieldDescriptor):
            if marker.column is not None:
                column = marker.column.strip()
            cast = TypeCast.coerce(marker.cast)
        elif isinstance(marker, FieldRole):
            roles |= marker

    return FieldMetadata(name=name, column=column, cast=cast, roles=roles)


def _declared_fields(entity_type: type) -> Iterator[Tuple[str, Tuple[Any, ...]]]:
    if issubclass(entity_type, BaseModel):
        for name, info in entity_type.model_fields.items():
            if not name.startswith("_"):
                yield name, tuple(info.metadata)
        return

    hints = _type_hints(entity_type)

    if dataclasses.is_dataclass(entity_type):
        for f in dataclasses.fields(entity_type):
            if not f.name.startswith("_"):
                yield f.name, _annotated_extras(hints.get(f.name))
        return

    for name in _annotation_order(entity_type):
        hint = hints.get(name)
        if name.startswith("_") or _is_classvar(hint):
            continue
        yield name, _annotated_extras(hint)


def _type_hints(entity_type: type) -> Dict[str, Any]:
    try:
        return get_type_hints(entity_type, include_extras=True)
    except (NameError, TypeError) as exc:
        raise InvalidEntityError(
            f"Cannot resolve annotations of {entity_type.__qualname__}: {exc}",
            details={"entity": entity_type.__qualname__},
            cause=exc,
        ) from exc


def _annotation_order(entity_type: type) -> List[str]:
    seen: Dict[str, None] = {}
    for klass in reversed(entity_type.__mro__):
        for name in inspect.get_annotations(klass):
            seen.setdefault(name, None)
    return list(seen)


def _annotated_extras(hint: Any) -> Tuple[Any, ...]:
    if hint is not None and get_origin(hint) is Annotated:
        return tuple(get_args(hint)[1:])
    return ()


def _is_classvar(hint: Any) -> bool:
    if hint is None:
        return False
    if get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    return hint is ClassVar or get_origin(hint) is ClassVar
