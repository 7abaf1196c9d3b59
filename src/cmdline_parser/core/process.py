"""Command line of the current process.

Windows hands programs the raw command line string, which is used as is
(with backslashes doubled so paths survive the escape character). Other
platforms only provide the argument vector, so the command line is rebuilt
from it with every argument quoted and escaped for the lexer.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence

from cmdline_parser.core.lexer import (
    CHAR_COMMAND_INTRO,
    CHAR_ESCAPE,
    CHAR_QUOTE_DOUBLE,
    CHAR_QUOTE_SINGLE,
    WHITESPACE_MAX_ORD,
)

logger = logging.getLogger(__name__)

# Arguments the lexer reads as commands when left untouched
_COMMAND_PATTERN = re.compile(r"-[A-Za-z]+|--[A-Za-z0-9_][A-Za-z0-9_-]*")

_SPECIAL_CHARS = frozenset((CHAR_ESCAPE, CHAR_QUOTE_SINGLE, CHAR_QUOTE_DOUBLE))


def quote_argument(arg: str) -> str:
    """Quote and escape one argument so the lexer reads it back unchanged.

    Args:
        arg: A single, already split argument

    Returns:
        The argument as it should appear in a command line string

    Examples:
        >>> quote_argument("-vf")
        '-vf'
        >>> quote_argument("my file.txt")
        '"my file.txt"'
        >>> quote_argument("-5")
        '\\\\-5'
    """
    if not arg:
        return CHAR_QUOTE_DOUBLE * 2

    if _COMMAND_PATTERN.fullmatch(arg):
        return arg

    parts: list[str] = []
    if arg.startswith(CHAR_COMMAND_INTRO):
        # Keep a leading dash from being taken for a command intro
        parts.append(CHAR_ESCAPE)
    for char in arg:
        if char in _SPECIAL_CHARS:
            parts.append(CHAR_ESCAPE)
        parts.append(char)
    escaped = "".join(parts)

    if any(ord(char) <= WHITESPACE_MAX_ORD for char in arg):
        return f"{CHAR_QUOTE_DOUBLE}{escaped}{CHAR_QUOTE_DOUBLE}"
    return escaped


def build_command_line(argv: Sequence[str]) -> str:
    """Rebuild a command line string from an argument vector."""
    return " ".join(quote_argument(arg) for arg in argv)


def escape_windows_command_line(command_line: str) -> str:
    """Double every backslash of a raw Windows command line."""
    return command_line.replace(CHAR_ESCAPE, CHAR_ESCAPE * 2)


def _windows_command_line() -> str:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32
    kernel32.GetCommandLineW.restype = wintypes.LPWSTR
    return kernel32.GetCommandLineW() or ""


def get_command_line() -> str:
    """Get the command line of the current process as a single string."""
    if sys.platform == "win32":
        command_line = escape_windows_command_line(_windows_command_line())
    else:
        command_line = build_command_line(sys.argv)
    logger.debug("Process command line: %r", command_line)
    return command_line
