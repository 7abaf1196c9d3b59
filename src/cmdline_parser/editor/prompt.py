"""Interactive command line prompt using prompt_toolkit."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.styles import Style

from cmdline_parser.config.loader import load_config
from cmdline_parser.config.schema import Config
from cmdline_parser.editor.lexer import CommandLineLexer


def create_style(lexer: CommandLineLexer) -> Style:
    """Create prompt_toolkit style from the lexer's theme."""
    return Style.from_dict(lexer.get_style_dict())


def read_command_line(
    default: str = "",
    config: Config | None = None,
    theme: str | None = None,
    message: str = "> ",
) -> str:
    """Read a command line interactively with highlighting.

    Args:
        default: Initial text of the prompt
        config: Configuration object (loads default if None)
        theme: Theme name
        message: Prompt message

    Returns:
        The entered command line
    """
    config = config or load_config()
    lexer = CommandLineLexer(config, config.get_theme(theme))
    session: PromptSession[str] = PromptSession(
        message=message,
        lexer=lexer,
        style=create_style(lexer),
    )
    return session.prompt(default=default)
