# File: nest_entity_generator/descriptor_schema.py
"""
Validation of entity documents read from YAML or JSON.

This is the input boundary: documents are checked here (non-empty names,
supported data types, numeric lengths) before any descriptor is built, so the
renderer never sees malformed properties.
"""

import logging
import re
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .constants import DefaultConfig
from .domain.models import DataType, EntityDescriptor, PropertyDescriptor, new_property_id
from .exceptions import DescriptorLoadError


logger = logging.getLogger(__name__)


class PropertySchema(BaseModel):
    """Schema for one entry of the ``properties`` list."""

    id: Optional[str] = Field(default=None, description="Opaque list identity; generated when absent.")
    name: str = Field(..., min_length=1, description="Field identifier.")
    data_type: str = Field(..., alias="dataType", min_length=1, description="One of the supported type tokens.")
    default_value: Optional[str] = Field(default=None, alias="defaultValue", description="Default literal.")
    length: Optional[str] = Field(default=None, description="Column width, digits only.")
    is_optional: bool = Field(default=False, alias="isOptional")
    is_unique: bool = Field(default=False, alias="isUnique")
    allow_null: bool = Field(default=False, alias="allowNull")
    is_primary_key: bool = Field(default=False, alias="isPrimaryKey")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", "default_value", "length", mode="before")
    @classmethod
    def coerce_scalar_to_str(cls, v: Any) -> Optional[str]:
        """YAML turns ``length: 255`` into an int; keep the text form."""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("data_type")
    @classmethod
    def check_data_type(cls, v: str) -> str:
        """Ensure the type is one of the supported tokens."""
        if not DataType.is_valid(v):
            raise ValueError(
                f"Unsupported data type '{v}'. Supported types are: {', '.join(DataType.values())}"
            )
        return v

    @field_validator("length")
    @classmethod
    def check_length(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the length is a plain non-negative integer when given."""
        if v is None or v == "":
            return v
        stripped = v.strip()
        if not re.fullmatch(r"[0-9]+", stripped):
            raise ValueError(f"Length must contain only digits, got '{v}'")
        return stripped

    def to_descriptor(self) -> PropertyDescriptor:
        return PropertyDescriptor(
            id=self.id or new_property_id(),
            name=self.name,
            data_type=self.data_type,
            default_value=self.default_value,
            length=self.length,
            is_optional=self.is_optional,
            is_unique=self.is_unique,
            allow_null=self.allow_null,
            is_primary_key=self.is_primary_key,
        )


class EntitySchema(BaseModel):
    """Pydantic schema defining the structure of an entity document."""

    name: str = Field(..., min_length=1, description="Entity name; the class name is derived from it.")
    table_name: str = Field(default="", alias="tableName", description="Table name for @Entity.")
    include_timestamps: bool = Field(default=DefaultConfig.INCLUDE_TIMESTAMPS, alias="includeTimestamps")
    properties: List[PropertySchema] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("table_name", mode="before")
    @classmethod
    def none_table_name_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("properties", mode="before")
    @classmethod
    def none_properties_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @model_validator(mode="after")
    def warn_on_duplicates(self) -> "EntitySchema":
        """Duplicate field names are legal input but produce invalid TypeScript."""
        counts = Counter(prop.name for prop in self.properties)
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            logger.warning(
                f"Entity '{self.name}' declares duplicate properties: {', '.join(duplicates)}"
            )
        return self

    def to_descriptor(self) -> EntityDescriptor:
        """Build the immutable descriptor consumed by the renderer."""
        return EntityDescriptor(
            name=self.name,
            table_name=self.table_name,
            include_timestamps=self.include_timestamps,
            properties=tuple(prop.to_descriptor() for prop in self.properties),
        )


def _format_validation_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        loc_parts = [str(loc_item) for loc_item in item.get("loc", ())]
        loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
        messages.append(f"{loc_str}: {item.get('msg', 'Unknown validation error')}")
    return messages


def parse_entity(data: Dict[str, Any], source: str = "<dict>") -> EntityDescriptor:
    """
    Validate a raw entity document and build its descriptor.

    Raises:
        DescriptorLoadError: if the document does not match ``EntitySchema``.
    """
    if not isinstance(data, dict):
        raise DescriptorLoadError(
            f"Entity document must be a mapping, got {type(data).__name__}",
            source=source,
        )
    try:
        schema = EntitySchema.model_validate(data)
    except ValidationError as e:
        errors = _format_validation_errors(e)
        for message in errors:
            logger.debug(f"Validation error in {source}: {message}")
        raise DescriptorLoadError(
            f"Entity document {source} is invalid ({len(errors)} error(s))",
            source=source,
            errors=errors,
        ) from e

    logger.debug(f"Entity document {source} validated against schema.")
    return schema.to_descriptor()


def load_entity_file(path: Union[str, Path]) -> EntityDescriptor:
    """
    Read an entity document from a YAML or JSON file.

    JSON is accepted because it is valid YAML.

    Raises:
        DescriptorLoadError: if the file is missing, unparsable or invalid.
    """
    entity_file = Path(path)
    if not entity_file.is_file():
        raise DescriptorLoadError(f"Entity file not found: {entity_file}", source=str(entity_file))

    try:
        with open(entity_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DescriptorLoadError(
            f"Error parsing entity file {entity_file}: {e}",
            source=str(entity_file),
        ) from e
    except UnicodeDecodeError as e:
        raise DescriptorLoadError(
            f"Entity file {entity_file} is not valid UTF-8: {e}",
            source=str(entity_file),
        ) from e
    except OSError as e:
        raise DescriptorLoadError(
            f"Error reading entity file {entity_file}: {e}",
            source=str(entity_file),
        ) from e

    logger.debug(f"Loaded entity document from {entity_file}")
    return parse_entity(data, source=str(entity_file))
