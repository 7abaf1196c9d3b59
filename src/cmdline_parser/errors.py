"""Exception types for cmdline-parser."""

from __future__ import annotations


class CmdLineParserError(Exception):
    """Base exception for cmdline-parser."""


class IndexOutOfBoundsError(CmdLineParserError, IndexError):
    """Raised when a parameter index is outside the valid range."""


class InvalidValueError(CmdLineParserError, ValueError):
    """Raised when a size or capacity control is given an invalid value."""


class InvalidStateError(CmdLineParserError, RuntimeError):
    """Raised when the lexer reaches a state outside its state set."""


class ConfigError(CmdLineParserError):
    """Raised when a configuration file cannot be loaded or validated."""
