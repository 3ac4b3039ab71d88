"""
Entity Renderer.

Turns an ``EntityDescriptor`` into the source text of a TypeORM entity class.
``render`` is pure: it performs no I/O beyond reading the bundled template
once, never mutates its input, and returns byte-identical text for equal
descriptors.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, NamedTuple

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
)

from .constants import (
    Decorators,
    FieldNames,
    Formatting,
    TableNameFallback,
    Templates,
    TypeORMSymbols,
)
from .domain.columns import field_declaration, format_field_declaration, property_decorators
from .domain.models import EntityDescriptor
from .domain.naming import default_table_name, to_class_name
from .exceptions import CodeGenerationError


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"


class RenderedField(NamedTuple):
    """One field block of the class body: its decorator lines and declaration."""

    decorators: List[str]
    declaration: str


@lru_cache(maxsize=None)
def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment, built once per process."""
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,  # TypeScript output; values are emitted verbatim
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
    )


def header_symbols(include_timestamps: bool) -> List[str]:
    """Return the names imported from typeorm, in their fixed order."""
    symbols = list(TypeORMSymbols.BASE)
    if include_timestamps:
        symbols.extend(TypeORMSymbols.TIMESTAMPS)
    return symbols


def resolve_table_name(entity: EntityDescriptor, table_name_fallback: str = TableNameFallback.VERBATIM) -> str:
    """
    Return the table name for the ``@Entity`` argument.

    A non-empty ``table_name`` is always used verbatim. An empty one is kept
    as-is under the ``verbatim`` strategy, or derived from the entity name
    under ``snake_plural``.
    """
    if entity.table_name:
        return entity.table_name
    if table_name_fallback == TableNameFallback.SNAKE_PLURAL:
        return default_table_name(entity.name)
    if table_name_fallback != TableNameFallback.VERBATIM:
        raise ValueError(
            f"Unknown table name fallback '{table_name_fallback}'. "
            f"Expected one of: {', '.join(TableNameFallback.ALL)}"
        )
    return entity.table_name


def build_fields(entity: EntityDescriptor) -> List[RenderedField]:
    """
    Build the ordered field blocks of the class body.

    The generated ``id`` primary key always comes first, then the user
    properties in list order, then ``createdAt``/``updatedAt`` when
    timestamps are enabled. A user property flagged as primary key does not
    replace the generated ``id``.
    """
    fields = [
        RenderedField(
            [Decorators.PRIMARY_GENERATED_COLUMN],
            format_field_declaration(FieldNames.IMPLICIT_PRIMARY_KEY, FieldNames.IMPLICIT_PRIMARY_KEY_TYPE),
        )
    ]

    for prop in entity.properties:
        fields.append(RenderedField(property_decorators(prop), field_declaration(prop)))

    if entity.include_timestamps:
        fields.append(RenderedField(
            [Decorators.CREATE_DATE_COLUMN],
            format_field_declaration(FieldNames.CREATED_AT, FieldNames.TIMESTAMP_TYPE),
        ))
        fields.append(RenderedField(
            [Decorators.UPDATE_DATE_COLUMN],
            format_field_declaration(FieldNames.UPDATED_AT, FieldNames.TIMESTAMP_TYPE),
        ))

    return fields


def render(entity: EntityDescriptor, table_name_fallback: str = TableNameFallback.VERBATIM) -> str:
    """
    Render ``entity`` as a TypeORM entity class.

    Args:
        entity: The entity to render. Its properties are assumed to have
            passed the boundary checks (non-empty name and data type).
        table_name_fallback: What to do when ``entity.table_name`` is empty.

    Returns:
        The class source. The text ends with the closing brace, with no
        trailing newline.

    Raises:
        CodeGenerationError: if the bundled template is missing or broken.
    """
    context = {
        "module": TypeORMSymbols.MODULE,
        "imports": header_symbols(entity.include_timestamps),
        "table_name": resolve_table_name(entity, table_name_fallback),
        "class_name": to_class_name(entity.name),
        "fields": build_fields(entity),
        "indent": Formatting.INDENT,
        "statement_end": Formatting.STATEMENT_END,
    }

    try:
        template = setup_jinja_env().get_template(Templates.ENTITY)
        code = template.render(context)
    except TemplateError as e:
        raise CodeGenerationError(
            f"Could not render entity '{entity.name}': {e}",
            entity=entity.name,
            template=Templates.ENTITY,
        ) from e

    logger.debug(
        f"Rendered entity {context['class_name']!r} with {len(entity.properties)} properties"
    )
    return code
