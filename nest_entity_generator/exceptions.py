"""
Custom exception hierarchy for NestJS Entity Generator.

Every error raised by the generator carries structured context and recovery
suggestions so the CLI can print something actionable instead of a bare
traceback.
"""

from typing import Dict, Any, Optional, List


class EntityGeneratorError(Exception):
    """
    Base exception for all NestJS Entity Generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class InvalidPropertyError(EntityGeneratorError, ValueError):
    """Raised when a property descriptor is missing its name or data type."""

    def __init__(self, message: str, property_name: str = None, data_type: str = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if property_name:
            context['property_name'] = property_name
        if data_type:
            context['data_type'] = data_type

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Give every property a non-empty name",
                "Pick a data type from: string, number, boolean, Date, text, varchar, "
                "int, bigint, decimal, float, json",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="INVALID_PROPERTY"
        )


class PropertyNotFoundError(EntityGeneratorError):
    """Raised when an edit targets a property id that is not in the list."""

    def __init__(self, property_id: str, **kwargs):
        context = dict(kwargs.get('context') or {})
        context['property_id'] = property_id

        super().__init__(
            f"No property with id '{property_id}'",
            context=context,
            suggestions=kwargs.get('suggestions', []),
            error_code="PROPERTY_NOT_FOUND"
        )


class DescriptorLoadError(EntityGeneratorError):
    """Raised when an entity document cannot be read or fails validation."""

    def __init__(self, message: str, source: str = None, errors: List[str] = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if source:
            context['source'] = source
        if errors:
            context['errors'] = "; ".join(errors)

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the entity file is valid YAML or JSON",
                "Make sure 'name' is set and every property has 'name' and 'dataType'",
                "Use camelCase keys (tableName, includeTimestamps, dataType, ...)",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="DESCRIPTOR_LOAD_ERROR"
        )


class ConfigurationError(EntityGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify option values against the documented choices",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class CodeGenerationError(EntityGeneratorError):
    """Raised when the entity template cannot be loaded or rendered."""

    def __init__(self, message: str, entity: str = None, template: str = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if entity:
            context['entity'] = entity
        if template:
            context['template'] = template

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Verify the package templates were installed",
                "Reinstall the package if template files are missing",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )
