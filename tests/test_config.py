"""
Tests for configuration loading and validation.
"""

from argparse import Namespace

import pytest

from nest_entity_generator.config import GeneratorConfig, load_config, validate_config
from nest_entity_generator.exceptions import ConfigurationError


def test_defaults_without_file_or_args():
    config = load_config(None)
    assert config.table_name_fallback == "verbatim"
    assert config.output_path is None
    assert config.use_colors is True
    assert config.verbose is False


def test_yaml_file_values(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("table_name_fallback: snake_plural\nverbose: true\n", encoding="utf-8")

    config = load_config(str(config_file), Namespace())
    assert config.table_name_fallback == "snake_plural"
    assert config.verbose is True


def test_cli_args_override_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("table_name_fallback: snake_plural\noutput_path: a.ts\n", encoding="utf-8")

    args = Namespace(table_name_fallback="verbatim", output_path=None, verbose=None, entity_file="x.yaml")
    config = load_config(str(config_file), args)
    assert config.table_name_fallback == "verbatim"
    # None means "not given", so the file value stays
    assert config.output_path == "a.ts"


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config.table_name_fallback == "verbatim"


def test_invalid_yaml_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("table_name_fallback: [oops\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(str(config_file))
    assert exc_info.value.context["config_file"] == str(config_file)


def test_non_mapping_file_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(config_file))


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(str(config_file)).use_colors is True


def test_invalid_fallback_value():
    with pytest.raises(ConfigurationError) as exc_info:
        validate_config({"table_name_fallback": "camel"})
    assert "table_name_fallback" in exc_info.value.context
    assert exc_info.value.error_code == "CONFIG_ERROR"


def test_blank_output_path_is_unset():
    assert GeneratorConfig(output_path="  ").output_path is None


def test_dict_style_access():
    config = GeneratorConfig(verbose=True)
    assert config["verbose"] is True
    assert config.get("missing", "x") == "x"


def test_invalid_utf8_config_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_bytes(b"verbose: \xff\xfe\n")
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(str(config_file))
    assert "not valid UTF-8" in exc_info.value.message
