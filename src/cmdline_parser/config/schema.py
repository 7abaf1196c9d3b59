"""Pydantic models for configuration schema."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

# Highlight classes used by the interactive editor
STYLE_CLASSES = ("short-command", "long-command", "argument", "general", "image-path", "default")

BUILTIN_STYLES: dict[str, str] = {
    "short-command": "ansicyan bold",
    "long-command": "ansiblue bold",
    "argument": "ansigreen",
    "general": "",
    "image-path": "ansimagenta",
    "default": "",
}


class OutputConfig(BaseModel):
    """Output options for the cmdline-parse tool."""

    format: Literal["text", "json", "yaml"] = Field(default="text", description="Output format")
    show_tokens: bool = Field(default=False, description="Include lexer tokens in the output")
    show_general: bool = Field(default=True, description="Include standalone general parameters")


class LoggingConfig(BaseModel):
    """Logging options."""

    level: str = Field(default="WARNING", description="Log level name")
    format: str = Field(default="%(levelname)s %(name)s: %(message)s", description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> str:
        """Normalize and check the log level name."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Theme(BaseModel):
    """Theme definition with styles for highlight classes."""

    name: str = Field(description="Theme name, e.g., 'default'")
    styles: dict[str, str] = Field(
        default_factory=dict,
        description="Highlight class to prompt_toolkit style mapping",
    )

    def get_style(self, style_class: str) -> str:
        """Get the style for a highlight class, falling back to 'default'."""
        if style_class in self.styles:
            return self.styles[style_class]
        return self.styles.get("default", "")


class Config(BaseModel):
    """Top-level configuration."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    themes: dict[str, Theme] = Field(default_factory=dict)

    @field_validator("themes", mode="before")
    @classmethod
    def parse_themes(cls, v: dict[str, Any] | None) -> dict[str, Theme]:
        """Parse theme definitions."""
        result: dict[str, Theme] = {}
        for name, data in (v or {}).items():
            if isinstance(data, Theme):
                result[name.lower()] = data
            elif isinstance(data, dict):
                result[name.lower()] = Theme(name=name, **data)
        return result

    def get_theme(self, name: str | None = None) -> Theme:
        """Get theme by name, or default theme."""
        if name and name.lower() in self.themes:
            return self.themes[name.lower()]
        if "default" in self.themes:
            return self.themes["default"]
        return Theme(name="default", styles=dict(BUILTIN_STYLES))
