"""
Domain module for NestJS Entity Generator.

This module contains the entity description model and the pure rules that
turn it into decorators and field declarations, independent of templates,
files and the command line.
"""

from .models import (
    DataType,
    PropertyDescriptor,
    EntityDescriptor,
    new_property_id
)

from .naming import (
    to_class_name,
    to_snake_case,
    default_table_name
)

from .columns import (
    COLUMN_OPTION_RULES,
    ColumnOptionRule,
    column_options,
    format_column_decorator,
    property_decorators,
    format_field_declaration,
    field_declaration
)

from .property_list import (
    PropertyList,
    add_property,
    update_property,
    remove_property,
    move_property
)

__all__ = [
    # Core models
    'DataType',
    'PropertyDescriptor',
    'EntityDescriptor',
    'new_property_id',

    # Naming
    'to_class_name',
    'to_snake_case',
    'default_table_name',

    # Column rules
    'COLUMN_OPTION_RULES',
    'ColumnOptionRule',
    'column_options',
    'format_column_decorator',
    'property_decorators',
    'format_field_declaration',
    'field_declaration',

    # Property list editing
    'PropertyList',
    'add_property',
    'update_property',
    'remove_property',
    'move_property'
]
