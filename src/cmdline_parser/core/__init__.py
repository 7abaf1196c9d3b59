"""Core functionality: lexer, assembler, queries and process command line."""

from cmdline_parser.core.lexer import Token, TokenKind, detokenize, tokenize
from cmdline_parser.core.models import Parameter, ParamType, ParseResult
from cmdline_parser.core.parser import Parser, assemble, parse
from cmdline_parser.core.process import build_command_line, get_command_line, quote_argument

__all__ = [
    "Token",
    "TokenKind",
    "detokenize",
    "tokenize",
    "Parameter",
    "ParamType",
    "ParseResult",
    "Parser",
    "assemble",
    "parse",
    "build_command_line",
    "get_command_line",
    "quote_argument",
]
