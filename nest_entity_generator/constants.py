"""
Centralized constants for NestJS Entity Generator.

TypeORM symbols, decorator spellings and defaults live here so the rendering
rules never hard-code them inline.
"""

from typing import List


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    TABLE_NAME_FALLBACK = "verbatim"
    USE_COLORS = True
    VERBOSE = False

    # Draft property defaults, as offered by the property form
    PROPERTY_DATA_TYPE = "string"
    INCLUDE_TIMESTAMPS = True


class TableNameFallback:
    """Strategies for an entity whose table name was left empty."""

    VERBATIM = "verbatim"          # emit @Entity('') unchanged
    SNAKE_PLURAL = "snake_plural"  # BlogPost -> blog_posts

    ALL = [VERBATIM, SNAKE_PLURAL]


# =============================================================================
# TYPEORM OUTPUT
# =============================================================================

class TypeORMSymbols:
    """Names imported from the 'typeorm' module by generated entities."""

    MODULE = "typeorm"

    COLUMN = "Column"
    CREATE_DATE_COLUMN = "CreateDateColumn"
    ENTITY = "Entity"
    PRIMARY_GENERATED_COLUMN = "PrimaryGeneratedColumn"
    UPDATE_DATE_COLUMN = "UpdateDateColumn"

    # Order is significant: it is the order of the emitted import list
    BASE: List[str] = [COLUMN, CREATE_DATE_COLUMN, ENTITY, PRIMARY_GENERATED_COLUMN]
    TIMESTAMPS: List[str] = [UPDATE_DATE_COLUMN]


class Decorators:
    """Rendered decorator text."""

    PRIMARY_GENERATED_COLUMN = "@PrimaryGeneratedColumn()"
    CREATE_DATE_COLUMN = "@CreateDateColumn()"
    UPDATE_DATE_COLUMN = "@UpdateDateColumn()"
    COLUMN = "@Column"


class FieldNames:
    """Fields the renderer always owns."""

    IMPLICIT_PRIMARY_KEY = "id"
    IMPLICIT_PRIMARY_KEY_TYPE = "number"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TIMESTAMP_TYPE = "Date"


class Formatting:
    """Whitespace and punctuation of the emitted class body."""

    INDENT = "  "
    NULLABLE_MARKER = "?"
    STATEMENT_END = ";"


# =============================================================================
# TEMPLATES
# =============================================================================

class Templates:
    """Jinja2 template names."""

    ENTITY = "entity.ts.j2"
