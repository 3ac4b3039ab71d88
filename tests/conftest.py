# File: tests/conftest.py
# Shared fixtures for the entity generator tests.

import pytest
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from nest_entity_generator.domain.models import EntityDescriptor, PropertyDescriptor


@pytest.fixture
def email_property() -> PropertyDescriptor:
    return PropertyDescriptor(
        id="p-email",
        name="email",
        data_type="string",
        is_unique=True,
        allow_null=False,
        is_optional=False,
    )


@pytest.fixture
def user_entity(email_property: PropertyDescriptor) -> EntityDescriptor:
    """The User/users entity used throughout the renderer tests."""
    return EntityDescriptor(
        name="User",
        table_name="users",
        include_timestamps=True,
        properties=(email_property,),
    )


@pytest.fixture
def user_document() -> Dict[str, Any]:
    """The same entity as ``user_entity`` in document (camelCase) form."""
    return {
        "name": "User",
        "tableName": "users",
        "includeTimestamps": True,
        "properties": [
            {"name": "email", "dataType": "string", "isUnique": True},
        ],
    }


@pytest.fixture
def write_entity_file(tmp_path: Path) -> Callable[..., Path]:
    """Returns a helper that dumps a document to a YAML file under tmp_path."""

    def _write(document: Any, filename: str = "entity.yaml") -> Path:
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(document, f, sort_keys=False)
        return path

    return _write
