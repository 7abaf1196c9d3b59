"""Interactive editor components."""

from cmdline_parser.editor.lexer import CommandLineLexer
from cmdline_parser.editor.prompt import read_command_line

__all__ = ["CommandLineLexer", "read_command_line"]
