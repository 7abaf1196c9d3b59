"""Pytest configuration and fixtures."""

import pytest

from cmdline_parser.config.loader import load_config_from_string
from cmdline_parser.config.schema import Config


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
output:
  format: json
  show_tokens: true

logging:
  level: debug

themes:
  default:
    styles:
      short-command: "bold red"
      long-command: "bold blue"
      argument: "green"
      default: "white"
  Plain:
    styles:
      default: ""
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()
