"""
Core domain models for NestJS Entity Generator.

An entity is described by an ``EntityDescriptor`` holding an ordered tuple of
``PropertyDescriptor`` values. Both are frozen: callers build new descriptors
instead of editing them, and the renderer only ever reads them.
"""

import itertools
import time
from dataclasses import dataclass, field, replace as dataclass_replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from ..constants import DefaultConfig
from ..exceptions import InvalidPropertyError


class DataType(str, Enum):
    """Property types offered to the user. Tokens are emitted unchanged."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "Date"
    TEXT = "text"
    VARCHAR = "varchar"
    INT = "int"
    BIGINT = "bigint"
    DECIMAL = "decimal"
    FLOAT = "float"
    JSON = "json"

    @classmethod
    def values(cls) -> List[str]:
        """Return every type token in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def is_valid(cls, token: Any) -> bool:
        """Check whether ``token`` is one of the supported type tokens."""
        return isinstance(token, str) and token in cls._value2member_map_


_id_counter = itertools.count()


def new_property_id() -> str:
    """
    Generate an opaque identifier for a new property.

    Time based like the form that creates properties, with a process-wide
    counter appended so two calls in the same clock tick never collide.
    """
    return f"{time.time_ns()}-{next(_id_counter)}"


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    One field definition within an entity.

    ``id`` only identifies the property inside an editable list. It takes no
    part in equality and never reaches the rendered output.
    """

    name: str
    data_type: Union[str, DataType]
    default_value: Optional[str] = None
    length: Optional[str] = None
    is_optional: bool = False
    is_unique: bool = False
    allow_null: bool = False
    is_primary_key: bool = False
    id: str = field(default_factory=new_property_id, compare=False)

    def __post_init__(self):
        if isinstance(self.data_type, DataType):
            object.__setattr__(self, "data_type", self.data_type.value)

        if not self.name:
            raise InvalidPropertyError(
                "Property name is required",
                data_type=self.data_type,
            )
        if not self.data_type:
            raise InvalidPropertyError(
                f"Property '{self.name}' has no data type",
                property_name=self.name,
            )

    @property
    def is_nullable(self) -> bool:
        """True when the emitted type carries the nullability marker."""
        return self.is_optional or self.allow_null

    def replace(self, **changes: Any) -> "PropertyDescriptor":
        """Return a copy with ``changes`` applied, validated like a new property."""
        return dataclass_replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase document representation."""
        return {
            'id': self.id,
            'name': self.name,
            'dataType': self.data_type,
            'defaultValue': self.default_value,
            'length': self.length,
            'isOptional': self.is_optional,
            'isUnique': self.is_unique,
            'allowNull': self.allow_null,
            'isPrimaryKey': self.is_primary_key,
        }


@dataclass(frozen=True)
class EntityDescriptor:
    """
    Top-level description of one generated entity class.

    ``name`` is free text; the class identifier is derived from it at render
    time. ``table_name`` may be empty, see ``TableNameFallback``.
    """

    name: str
    table_name: str = ""
    include_timestamps: bool = DefaultConfig.INCLUDE_TIMESTAMPS
    properties: Tuple[PropertyDescriptor, ...] = ()

    def __post_init__(self):
        # Accept any iterable but store an immutable snapshot
        if not isinstance(self.properties, tuple):
            object.__setattr__(self, "properties", tuple(self.properties))

    def with_properties(self, properties) -> "EntityDescriptor":
        """Return a copy holding a different property sequence."""
        return dataclass_replace(self, properties=tuple(properties))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase document representation."""
        return {
            'name': self.name,
            'tableName': self.table_name,
            'includeTimestamps': self.include_timestamps,
            'properties': [prop.to_dict() for prop in self.properties],
        }
