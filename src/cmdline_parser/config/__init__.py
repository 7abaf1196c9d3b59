"""Configuration loading and schema definitions."""

from cmdline_parser.config.loader import load_config
from cmdline_parser.config.schema import (
    Config,
    LoggingConfig,
    OutputConfig,
    Theme,
)

__all__ = [
    "Config",
    "LoggingConfig",
    "OutputConfig",
    "Theme",
    "load_config",
]
