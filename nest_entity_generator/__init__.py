"""
NestJS Entity Generator.

Describe an entity (name, table, typed properties) and render it as a
TypeORM entity class.
"""

from .domain import (
    DataType,
    EntityDescriptor,
    PropertyDescriptor,
    add_property,
    update_property,
    remove_property,
    move_property,
)
from .exceptions import (
    EntityGeneratorError,
    InvalidPropertyError,
    PropertyNotFoundError,
    DescriptorLoadError,
    ConfigurationError,
    CodeGenerationError,
)
from .renderer import render

__version__ = "0.1.0"

__all__ = [
    'DataType',
    'EntityDescriptor',
    'PropertyDescriptor',
    'add_property',
    'update_property',
    'remove_property',
    'move_property',
    'render',
    'EntityGeneratorError',
    'InvalidPropertyError',
    'PropertyNotFoundError',
    'DescriptorLoadError',
    'ConfigurationError',
    'CodeGenerationError',
]
