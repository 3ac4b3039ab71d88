"""
Decorator and field-line rules for entity properties.

The ``@Column`` options are produced by an ordered rule table so that the
option order (length, default, unique, nullable) is fixed in one place and
each rule can be tested on its own.
"""

from typing import Callable, List, NamedTuple, Optional

from ..constants import Decorators, Formatting
from .models import PropertyDescriptor


class ColumnOptionRule(NamedTuple):
    """Maps a property to one ``@Column`` option fragment, or ``None``."""

    option: str
    render: Callable[[PropertyDescriptor], Optional[str]]


def _length_option(prop: PropertyDescriptor) -> Optional[str]:
    # Numeric literal, emitted unquoted
    return f"length: {prop.length}" if prop.length else None


def _default_option(prop: PropertyDescriptor) -> Optional[str]:
    return f"default: '{prop.default_value}'" if prop.default_value else None


def _unique_option(prop: PropertyDescriptor) -> Optional[str]:
    return "unique: true" if prop.is_unique else None


def _nullable_option(prop: PropertyDescriptor) -> Optional[str]:
    return "nullable: true" if prop.allow_null else None


COLUMN_OPTION_RULES: List[ColumnOptionRule] = [
    ColumnOptionRule("length", _length_option),
    ColumnOptionRule("default", _default_option),
    ColumnOptionRule("unique", _unique_option),
    ColumnOptionRule("nullable", _nullable_option),
]


def column_options(prop: PropertyDescriptor) -> List[str]:
    """Return the ``@Column`` option fragments that apply, in rule order."""
    fragments = []
    for rule in COLUMN_OPTION_RULES:
        fragment = rule.render(prop)
        if fragment is not None:
            fragments.append(fragment)
    return fragments


def format_column_decorator(options: List[str]) -> str:
    """
    Join option fragments into a ``@Column`` decorator.

    >>> format_column_decorator([])
    '@Column()'
    >>> format_column_decorator(["length: 50", "unique: true"])
    '@Column({ length: 50, unique: true })'
    """
    if not options:
        return f"{Decorators.COLUMN}()"
    return f"{Decorators.COLUMN}({{ {', '.join(options)} }})"


def property_decorators(prop: PropertyDescriptor) -> List[str]:
    """
    Return the decorators for a user-defined property.

    A primary-key property only gets ``@PrimaryGeneratedColumn()``; its
    length, default, unique and nullable settings are ignored.
    """
    if prop.is_primary_key:
        return [Decorators.PRIMARY_GENERATED_COLUMN]
    return [format_column_decorator(column_options(prop))]


def format_field_declaration(name: str, type_token: str, nullable: bool = False) -> str:
    """Assemble ``name?: type`` without indentation or the trailing semicolon."""
    marker = Formatting.NULLABLE_MARKER if nullable else ""
    return f"{name}{marker}: {type_token}"


def field_declaration(prop: PropertyDescriptor) -> str:
    """Return the declaration of a user-defined property; the type token passes through as-is."""
    return format_field_declaration(prop.name, prop.data_type, prop.is_nullable)
