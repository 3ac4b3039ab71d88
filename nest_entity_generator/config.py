"""
Generator configuration.

Settings come from an optional YAML file and are overridden by command line
arguments that were explicitly given, then validated with pydantic.
"""

from argparse import Namespace
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .constants import DefaultConfig
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class GeneratorConfig(BaseModel):
    """Pydantic schema for the generator settings."""

    table_name_fallback: Literal["verbatim", "snake_plural"] = Field(
        default=DefaultConfig.TABLE_NAME_FALLBACK,
        description="How to fill @Entity() when the table name is empty.",
    )
    output_path: Optional[str] = Field(
        default=None,
        description="File to write the entity to. Standard output when unset.",
    )
    use_colors: bool = Field(
        default=DefaultConfig.USE_COLORS, description="Color log output on a TTY."
    )
    verbose: bool = Field(
        default=DefaultConfig.VERBOSE, description="Enable DEBUG logging."
    )

    model_config = ConfigDict(extra="ignore")

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        """Allow dict.get() style access."""
        return getattr(self, key, default)

    @field_validator("output_path", mode="before")
    @classmethod
    def check_output_path(cls, v: Any) -> Optional[str]:
        """Treat an empty path as unset."""
        if v is None:
            return None
        if not isinstance(v, (str, Path)):
            raise TypeError(f"output_path must be a string, got {type(v).__name__}")
        v = str(v).strip()
        return v or None


def validate_config(config_dict: Dict[str, Any], config_file: Optional[str] = None) -> GeneratorConfig:
    """
    Validate a raw configuration dictionary against ``GeneratorConfig``.

    Raises:
        ConfigurationError: listing every invalid option.
    """
    try:
        validated_config = GeneratorConfig.model_validate(config_dict)
    except ValidationError as e:
        logger.critical("Configuration validation failed! Please check your config file or arguments.")
        problems = {}
        for error in e.errors():
            loc_str = " -> ".join(str(part) for part in error.get("loc", ())) or "Model Level"
            problems[loc_str] = error.get("msg", "Unknown validation error")
        raise ConfigurationError(
            f"Invalid configuration ({len(problems)} error(s))",
            config_file=config_file,
            context=problems,
        ) from e

    logger.debug("Configuration dictionary parsed and validated successfully against schema.")
    return validated_config


def load_config(config_path: Optional[str], cli_args: Optional[Namespace] = None) -> GeneratorConfig:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.

    A missing file is only a warning. A file that is not valid YAML, or not a
    mapping, is a ``ConfigurationError``.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Error parsing YAML file {config_path}: {e}", config_file=config_path
                ) from e
            except UnicodeDecodeError as e:
                raise ConfigurationError(
                    f"Config file {config_path} is not valid UTF-8: {e}", config_file=config_path
                ) from e

            if isinstance(yaml_config, dict):
                raw_config.update(yaml_config)
                logger.debug(f"Loaded configuration from {config_path}")
            elif yaml_config is not None:
                raise ConfigurationError(
                    f"Config file {config_path} must contain a mapping", config_file=config_path
                )
        else:
            logger.warning(f"Config file not found at {config_path}. Using defaults and CLI arguments.")

    # 2. Override with CLI arguments (only those explicitly provided)
    overridden_keys = set()
    if cli_args is not None:
        for key, value in vars(cli_args).items():
            if value is not None and key in GeneratorConfig.model_fields:
                raw_config[key] = value
                overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {sorted(overridden_keys)}")

    return validate_config(raw_config, config_file=config_path)
