"""
Naming convention utilities for NestJS Entity Generator.

This module converts the free-text entity name typed by the user into the
identifiers used in generated code.
"""

import re

import inflect


# Initialize inflect engine for pluralization
p = inflect.engine()


def to_class_name(name: str) -> str:
    """
    Derive the class identifier from an entity name.

    Only the first character is uppercased; spaces, hyphens and the case of
    the remaining characters are left exactly as typed.

    Example:
        >>> to_class_name("user")
        'User'
        >>> to_class_name("blogPost")
        'BlogPost'
        >>> to_class_name("")
        ''
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")
    return name[:1].upper() + name[1:]


def to_snake_case(name: str) -> str:
    """
    Convert CamelCase or PascalCase to snake_case.

    Spaces and hyphens are treated as word separators.

    Example:
        >>> to_snake_case("UserAccount")
        'user_account'
        >>> to_snake_case("XMLHttpRequest")
        'xml_http_request'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    name = re.sub(r"[\s\-]+", "_", name.strip())
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def default_table_name(entity_name: str) -> str:
    """
    Build a conventional table name for an entity: snake_case and plural.

    Only the last word is pluralized.

    Example:
        >>> default_table_name("User")
        'users'
        >>> default_table_name("BlogCategory")
        'blog_categories'
    """
    snake = to_snake_case(entity_name)
    if not snake:
        return snake

    head, _, last = snake.rpartition("_")
    plural = p.plural_noun(last) or last
    return f"{head}_{plural}" if head else plural
