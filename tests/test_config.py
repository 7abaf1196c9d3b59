"""Tests for the config module."""

import tempfile
from pathlib import Path

import pytest

from cmdline_parser.config.loader import (
    deep_merge,
    load_config,
    load_config_from_string,
    load_dropin_directory,
    load_yaml_file,
)
from cmdline_parser.config.schema import BUILTIN_STYLES, Config, Theme
from cmdline_parser.errors import ConfigError


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_simple_dicts(self):
        """Test merging simple dictionaries."""
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}

        result = deep_merge(base, override)

        assert result == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self):
        """Test merging nested dictionaries."""
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        override = {"a": {"y": 5, "z": 6}}

        result = deep_merge(base, override)

        assert result == {"a": {"x": 1, "y": 5, "z": 6}, "b": 3}

    def test_base_not_modified(self):
        """Test that the base dictionary is left unchanged."""
        base = {"a": {"x": 1}}

        deep_merge(base, {"a": {"x": 2}})

        assert base == {"a": {"x": 1}}


class TestLoadConfigFromString:
    """Tests for load_config_from_string function."""

    def test_load_minimal_config(self):
        """Test loading minimal configuration."""
        config = load_config_from_string("output:\n  format: yaml\n")

        assert config.output.format == "yaml"
        assert config.output.show_tokens is False

    def test_load_empty(self):
        """Test loading an empty document."""
        config = load_config_from_string("")

        assert config.output.format == "text"
        assert config.logging.level == "WARNING"

    def test_sample_config(self, sample_config):
        """Test the sample configuration fixture."""
        assert sample_config.output.format == "json"
        assert sample_config.output.show_tokens is True
        assert sample_config.logging.level == "DEBUG"
        assert "plain" in sample_config.themes

    def test_invalid_format(self):
        """Test that an unknown output format is rejected."""
        with pytest.raises(ConfigError):
            load_config_from_string("output:\n  format: xml\n")

    def test_invalid_log_level(self):
        """Test that an unknown log level is rejected."""
        with pytest.raises(ConfigError):
            load_config_from_string("logging:\n  level: chatty\n")

    def test_invalid_yaml(self):
        """Test that malformed YAML raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config_from_string("output: [unclosed\n")

    def test_not_a_mapping(self):
        """Test that a non-mapping document raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config_from_string("- a\n- b\n")


class TestConfig:
    """Tests for Config class."""

    def test_get_theme_by_name(self, sample_config):
        """Test getting theme by name, ignoring case."""
        theme = sample_config.get_theme("PLAIN")

        assert theme.name == "Plain"

    def test_get_theme_default(self, sample_config):
        """Test fallback to the default theme."""
        assert sample_config.get_theme("missing").name == "default"
        assert sample_config.get_theme().get_style("short-command") == "bold red"

    def test_builtin_theme(self, empty_config):
        """Test the built-in theme when none is configured."""
        theme = empty_config.get_theme()

        assert theme.styles == BUILTIN_STYLES

    def test_theme_style_fallback(self):
        """Test that missing styles fall back to 'default'."""
        theme = Theme(name="t", styles={"default": "white"})

        assert theme.get_style("argument") == "white"
        assert Theme(name="t").get_style("argument") == ""

    def test_empty_config(self):
        """Test default values of an empty Config."""
        config = Config()

        assert config.output.show_general is True
        assert config.themes == {}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_nonexistent_files(self):
        """Test that missing files give the defaults."""
        config = load_config(
            config_path="/nonexistent/config.yaml",
            dropin_dir="/nonexistent/conf.d",
        )

        assert config.output.format == "text"
        assert "default" in config.themes
        assert "mono" in config.themes

    def test_load_from_file(self):
        """Test loading a main configuration file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.yaml"
            config_path.write_text("output:\n  format: json\n")

            config = load_config(config_path=config_path, dropin_dir=Path(tmpdir) / "conf.d")

            assert config.output.format == "json"
            # Defaults are still merged in
            assert "default" in config.themes

    def test_dropin_overrides(self):
        """Test that drop-in files override the main file in sorted order."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.yaml"
            config_path.write_text("output:\n  format: json\n  show_tokens: true\n")
            dropin_dir = Path(tmpdir) / "conf.d"
            dropin_dir.mkdir()
            (dropin_dir / "10-format.yaml").write_text("output:\n  format: yaml\n")
            (dropin_dir / "20-theme.yaml").write_text(
                "themes:\n  default:\n    styles:\n      argument: italic\n"
            )

            config = load_config(config_path=config_path, dropin_dir=dropin_dir)

            assert config.output.format == "yaml"
            assert config.output.show_tokens is True
            assert config.get_theme().get_style("argument") == "italic"
            assert config.get_theme().get_style("short-command") == "ansicyan bold"

    def test_invalid_file(self):
        """Test that an invalid file raises ConfigError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.yaml"
            config_path.write_text("logging:\n  level: nope\n")

            with pytest.raises(ConfigError):
                load_config(config_path=config_path, dropin_dir=tmpdir)

    def test_load_yaml_file_missing(self):
        """Test that a missing YAML file gives an empty dict."""
        assert load_yaml_file(Path("/nonexistent/file.yaml")) == {}

    def test_load_dropin_directory_missing(self):
        """Test that a missing drop-in directory gives an empty dict."""
        assert load_dropin_directory(Path("/nonexistent/conf.d")) == {}
