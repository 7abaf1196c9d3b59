"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cmdline_parser.config.defaults import DEFAULT_CONFIG_YAML
from cmdline_parser.config.schema import Config
from cmdline_parser.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "cmdline-parser" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "cmdline-parser" / "conf.d"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _parse_yaml(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {source} must be a mapping")
    return data


def _build_config(data: dict[str, Any], source: str) -> Config:
    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    logger.debug("Loading configuration file %s", path)
    with open(path, encoding="utf-8") as f:
        return _parse_yaml(f.read(), str(path))


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Merge every YAML file of a drop-in directory, in file name order."""
    if not dropin_dir.is_dir():
        return {}

    merged: dict[str, Any] = {}
    for path in sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml")):
        merged = deep_merge(merged, load_yaml_file(path))
    return merged


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from defaults, main file and drop-in directory.

    Args:
        config_path: Path to main config file (default: ~/.config/cmdline-parser/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/cmdline-parser/conf.d/)

    Returns:
        Configuration with later sources overriding earlier ones

    Raises:
        ConfigError: If a file is not valid YAML or fails validation
    """
    config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)
    dropin_dir = DEFAULT_DROPIN_DIR if dropin_dir is None else Path(dropin_dir)

    data = _parse_yaml(DEFAULT_CONFIG_YAML, "defaults")
    for layer in (load_yaml_file(config_path), load_dropin_directory(dropin_dir)):
        data = deep_merge(data, layer)

    return _build_config(data, str(config_path))


def load_config_from_string(yaml_string: str) -> Config:
    """Build a configuration from YAML text alone, without defaults."""
    return _build_config(_parse_yaml(yaml_string, "<string>"), "<string>")
