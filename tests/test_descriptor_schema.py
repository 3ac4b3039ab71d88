"""
Tests for entity document validation and loading.
"""

import json
import logging
from unittest import TestCase

import pytest

from nest_entity_generator.descriptor_schema import (
    EntitySchema,
    PropertySchema,
    load_entity_file,
    parse_entity,
)
from nest_entity_generator.domain.models import EntityDescriptor, PropertyDescriptor
from nest_entity_generator.exceptions import DescriptorLoadError
from nest_entity_generator.renderer import render


class TestPropertySchema(TestCase):

    def test_aliases_and_defaults(self):
        schema = PropertySchema.model_validate({"name": "email", "dataType": "string"})
        assert schema.data_type == "string"
        assert schema.is_unique is False
        assert schema.length is None

    def test_populate_by_field_name(self):
        schema = PropertySchema(name="email", data_type="string", is_unique=True)
        assert schema.is_unique

    def test_numeric_length_from_yaml_becomes_text(self):
        schema = PropertySchema.model_validate({"name": "code", "dataType": "varchar", "length": 255})
        assert schema.length == "255"

    def test_boolean_default_becomes_lowercase_text(self):
        schema = PropertySchema.model_validate({"name": "flag", "dataType": "boolean", "defaultValue": True})
        assert schema.default_value == "true"

    def test_non_numeric_length_rejected(self):
        with pytest.raises(ValueError):
            PropertySchema.model_validate({"name": "code", "dataType": "varchar", "length": "abc"})

    def test_unknown_data_type_rejected(self):
        with pytest.raises(ValueError):
            PropertySchema.model_validate({"name": "code", "dataType": "uuid"})

    def test_to_descriptor_generates_id_when_missing(self):
        prop = PropertySchema.model_validate({"name": "code", "dataType": "int"}).to_descriptor()
        assert isinstance(prop, PropertyDescriptor)
        assert prop.id

    def test_to_descriptor_keeps_given_id(self):
        prop = PropertySchema.model_validate({"id": 17, "name": "code", "dataType": "int"}).to_descriptor()
        assert prop.id == "17"


class TestParseEntity(TestCase):

    def test_user_document(self):
        entity = parse_entity({
            "name": "User",
            "tableName": "users",
            "includeTimestamps": True,
            "properties": [{"name": "email", "dataType": "string", "isUnique": True}],
        })
        assert isinstance(entity, EntityDescriptor)
        assert entity.name == "User"
        assert entity.table_name == "users"
        assert entity.properties[0].is_unique

    def test_defaults(self):
        entity = parse_entity({"name": "Tag"})
        assert entity.table_name == ""
        assert entity.include_timestamps is True
        assert entity.properties == ()

    def test_null_table_name_and_properties(self):
        entity = parse_entity({"name": "Tag", "tableName": None, "properties": None})
        assert entity.table_name == ""
        assert entity.properties == ()

    def test_extra_keys_ignored(self):
        entity = parse_entity({"name": "Tag", "relationships": [], "properties": [
            {"name": "label", "dataType": "string", "comment": "ignored"},
        ]})
        assert entity.properties[0].name == "label"

    def test_missing_name(self):
        with pytest.raises(DescriptorLoadError) as exc_info:
            parse_entity({"tableName": "tags"}, source="tags.yaml")
        assert exc_info.value.context["source"] == "tags.yaml"
        assert "name" in exc_info.value.context["errors"]

    def test_error_locations_point_at_property(self):
        with pytest.raises(DescriptorLoadError) as exc_info:
            parse_entity({"name": "Tag", "properties": [
                {"name": "ok", "dataType": "string"},
                {"name": "", "dataType": "nope"},
            ]})
        errors = exc_info.value.context["errors"]
        assert "properties -> 1 -> name" in errors
        assert "properties -> 1 -> dataType" in errors

    def test_non_mapping_document(self):
        with pytest.raises(DescriptorLoadError):
            parse_entity(["not", "a", "mapping"])

    def test_property_order_preserved(self):
        entity = parse_entity({"name": "Tag", "properties": [
            {"name": n, "dataType": "string"} for n in ("c", "a", "b")
        ]})
        assert [p.name for p in entity.properties] == ["c", "a", "b"]


def test_duplicate_property_names_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="nest_entity_generator.descriptor_schema"):
        EntitySchema.model_validate({"name": "Tag", "properties": [
            {"name": "label", "dataType": "string"},
            {"name": "label", "dataType": "text"},
        ]})
    assert "duplicate properties: label" in caplog.text


def test_load_yaml_file_and_render(write_entity_file, user_document):
    path = write_entity_file(user_document)
    code = render(load_entity_file(path))
    assert "@Entity('users')" in code
    assert "  @Column({ unique: true })\n  email: string;" in code


def test_load_json_file(tmp_path, user_document):
    path = tmp_path / "user.json"
    path.write_text(json.dumps(user_document), encoding="utf-8")
    entity = load_entity_file(str(path))
    assert entity.name == "User"


def test_load_missing_file(tmp_path):
    with pytest.raises(DescriptorLoadError) as exc_info:
        load_entity_file(tmp_path / "missing.yaml")
    assert "not found" in exc_info.value.message


def test_load_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unclosed\n", encoding="utf-8")
    with pytest.raises(DescriptorLoadError):
        load_entity_file(path)


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(DescriptorLoadError):
        load_entity_file(path)


def test_load_invalid_utf8_file(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"name: \xff\xfe\n")
    with pytest.raises(DescriptorLoadError) as exc_info:
        load_entity_file(path)
    assert "not valid UTF-8" in exc_info.value.message
    assert exc_info.value.context["source"] == str(path)


@pytest.mark.parametrize("length", ["²", "１２", "12.5", "-3"])
def test_non_ascii_digit_lengths_rejected(length):
    with pytest.raises(ValueError):
        PropertySchema.model_validate({"name": "code", "dataType": "varchar", "length": length})
