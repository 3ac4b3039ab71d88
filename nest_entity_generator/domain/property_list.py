"""
Editing operations for the caller-owned property list.

Each function takes the current sequence and returns a new tuple; the input
is never modified. Property order is significant because it is the order in
which fields are rendered.
"""

import logging
from dataclasses import fields as dataclass_fields
from typing import Any, Iterable, Tuple

from ..constants import DefaultConfig
from ..exceptions import InvalidPropertyError, PropertyNotFoundError
from .models import DataType, PropertyDescriptor, new_property_id


logger = logging.getLogger(__name__)

PropertyList = Tuple[PropertyDescriptor, ...]


def _check_data_type(name: str, data_type: Any) -> None:
    """Reject data types outside the supported set at the list boundary."""
    if data_type and not isinstance(data_type, DataType) and not DataType.is_valid(data_type):
        raise InvalidPropertyError(
            f"Unsupported data type '{data_type}' for property '{name}'",
            property_name=name,
            data_type=data_type,
        )


def _check_field_names(keys: Iterable[str]) -> None:
    """Reject keywords that are not PropertyDescriptor fields (document keys like dataType)."""
    known = {f.name for f in dataclass_fields(PropertyDescriptor)}
    unknown = sorted(set(keys) - known)
    if unknown:
        raise InvalidPropertyError(
            f"Unknown property field(s): {', '.join(unknown)}",
            context={"known_fields": ', '.join(sorted(known))},
        )


def _index_of(properties: PropertyList, property_id: str) -> int:
    for index, prop in enumerate(properties):
        if prop.id == property_id:
            return index
    raise PropertyNotFoundError(property_id)


def add_property(
    properties: Iterable[PropertyDescriptor],
    name: str,
    data_type: Any = DefaultConfig.PROPERTY_DATA_TYPE,
    **fields: Any,
) -> PropertyList:
    """
    Append a new property built from ``name``, ``data_type`` and ``fields``.

    Raises:
        InvalidPropertyError: if the name or data type is empty, the data
            type is not supported, or a keyword is not a property field.
            ``properties`` is left as it was.
    """
    current = tuple(properties)
    _check_field_names(fields)
    _check_data_type(name, data_type)
    fields.setdefault("id", new_property_id())
    prop = PropertyDescriptor(name=name, data_type=data_type, **fields)
    logger.debug(f"Added property '{prop.name}' ({prop.data_type}) with id {prop.id}")
    return current + (prop,)


def update_property(
    properties: Iterable[PropertyDescriptor], property_id: str, **changes: Any
) -> PropertyList:
    """
    Merge ``changes`` into the property whose id is ``property_id``.

    Raises:
        PropertyNotFoundError: if no property has that id.
        InvalidPropertyError: if the edit would leave the name or type empty
            or names a field that does not exist.
    """
    current = tuple(properties)
    index = _index_of(current, property_id)
    _check_field_names(changes)
    changes.pop("id", None)
    if "data_type" in changes:
        _check_data_type(changes.get("name", current[index].name), changes["data_type"])
    edited = current[index].replace(**changes)
    logger.debug(f"Updated property {property_id}: {sorted(changes)}")
    return current[:index] + (edited,) + current[index + 1:]


def remove_property(properties: Iterable[PropertyDescriptor], property_id: str) -> PropertyList:
    """Drop the property with ``property_id``; unknown ids leave the list unchanged."""
    current = tuple(properties)
    remaining = tuple(prop for prop in current if prop.id != property_id)
    if len(remaining) == len(current):
        logger.debug(f"No property with id {property_id} to remove")
    return remaining


def move_property(
    properties: Iterable[PropertyDescriptor], property_id: str, new_index: int
) -> PropertyList:
    """
    Move a property to ``new_index``, clamped to the bounds of the list.

    Raises:
        PropertyNotFoundError: if no property has that id.
    """
    current = list(properties)
    prop = current.pop(_index_of(tuple(current), property_id))
    new_index = max(0, min(new_index, len(current)))
    current.insert(new_index, prop)
    return tuple(current)
