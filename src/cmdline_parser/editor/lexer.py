"""prompt_toolkit lexer highlighting command lines by parameter role."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer

from cmdline_parser.config.schema import STYLE_CLASSES
from cmdline_parser.core.lexer import Token, TokenKind, tokenize

if TYPE_CHECKING:
    from cmdline_parser.config.schema import Config, Theme


def token_roles(tokens: list[Token]) -> list[str]:
    """Assign a highlight class to every token.

    General tokens become ``argument`` once a command has been seen, and the
    first token is the ``image-path`` when it is general text.
    """
    roles: list[str] = []
    seen_command = False

    for index, token in enumerate(tokens):
        if token.kind is TokenKind.SHORT_COMMAND:
            seen_command = True
            roles.append("short-command")
        elif token.kind is TokenKind.LONG_COMMAND:
            seen_command = True
            roles.append("long-command")
        elif index == 0:
            roles.append("image-path")
        elif seen_command:
            roles.append("argument")
        else:
            roles.append("general")

    return roles


class CommandLineLexer(Lexer):
    """Lexer for command line syntax highlighting."""

    def __init__(self, config: Config, theme: Theme | None = None) -> None:
        """Initialize the lexer.

        Args:
            config: Configuration object
            theme: Theme to use for styles
        """
        self.config = config
        self.theme = theme or config.get_theme()
        self._styles = self._build_styles()

    def _build_styles(self) -> dict[str, str]:
        """Build prompt_toolkit style dictionary from theme."""
        return {style_class: self.theme.get_style(style_class) for style_class in STYLE_CLASSES}

    def get_style_dict(self) -> dict[str, str]:
        """Get the style dictionary for prompt_toolkit."""
        return self._styles

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        """Lex a document and return a function that returns styled text for each line."""
        lines = document.lines
        styled_lines = [self.style_line(line) for line in lines]

        def get_line(line_number: int) -> StyleAndTextTuples:
            if 0 <= line_number < len(styled_lines):
                return styled_lines[line_number]
            return []

        return get_line

    def style_line(self, text: str) -> StyleAndTextTuples:
        """Style a single command line."""
        tokens = tokenize(text)
        styled: StyleAndTextTuples = []
        last_end = 0

        for token, role in zip(tokens, token_roles(tokens)):
            if token.start > last_end:
                styled.append(("", text[last_end : token.start]))
            styled.append((f"class:{role}", token.raw))
            last_end = token.end

        if last_end < len(text):
            styled.append(("", text[last_end:]))

        return styled
