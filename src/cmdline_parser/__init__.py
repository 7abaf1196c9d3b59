"""Command line parser with short/long commands, quoting and escaping."""

from cmdline_parser.core import (
    Parameter,
    ParamType,
    ParseResult,
    Parser,
    Token,
    TokenKind,
    parse,
    tokenize,
)
from cmdline_parser.errors import (
    CmdLineParserError,
    ConfigError,
    IndexOutOfBoundsError,
    InvalidStateError,
    InvalidValueError,
)

__version__ = "0.1.0"

__all__ = [
    "Parameter",
    "ParamType",
    "ParseResult",
    "Parser",
    "Token",
    "TokenKind",
    "parse",
    "tokenize",
    "CmdLineParserError",
    "ConfigError",
    "IndexOutOfBoundsError",
    "InvalidStateError",
    "InvalidValueError",
]
