"""Command line lexer: a character-level state machine with quote/escape handling."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto

from cmdline_parser.errors import InvalidStateError

logger = logging.getLogger(__name__)

CHAR_COMMAND_INTRO = "-"
CHAR_QUOTE_SINGLE = "'"
CHAR_QUOTE_DOUBLE = '"'
CHAR_ESCAPE = "\\"

# Any control character or space (code point <= 32) separates tokens
WHITESPACE_MAX_ORD = 32

CHARS_COMMAND_SHORT = frozenset(string.ascii_letters)
CHARS_COMMAND_LONG = frozenset(string.ascii_letters + string.digits + "_-")


class CharClass(Enum):
    """Lexical class of a single character."""

    WHITESPACE = auto()
    COMMAND_INTRO = auto()
    QUOTE_SINGLE = auto()
    QUOTE_DOUBLE = auto()
    ESCAPE = auto()
    OTHER = auto()


class LexerState(Enum):
    """States of the lexer state machine."""

    WHITESPACE = auto()
    COMMAND_INTRO = auto()
    COMMAND_INTRO_DOUBLE = auto()
    COMMAND_SHORT = auto()
    COMMAND_LONG = auto()
    QUOTED_SINGLE = auto()
    QUOTED_DOUBLE = auto()
    ESCAPE = auto()
    ESCAPE_QUOTED_SINGLE = auto()
    ESCAPE_QUOTED_DOUBLE = auto()
    TEXT = auto()


class Action(Enum):
    """What the lexer does with the current character."""

    SKIP = auto()  # whitespace between tokens
    START = auto()  # character opens a new token
    ABSORB = auto()  # character extends the open token
    EMIT_GENERAL = auto()  # open token ends before this character
    EMIT_SHORT = auto()
    EMIT_LONG = auto()


class TokenKind(Enum):
    """Kind of a lexer token."""

    GENERAL = auto()
    SHORT_COMMAND = auto()
    LONG_COMMAND = auto()


class QuoteState(Enum):
    """Sub-states used when resolving quotes and escapes in token text."""

    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()
    ESCAPE = auto()
    ESCAPE_SINGLE = auto()
    ESCAPE_DOUBLE = auto()


@dataclass
class Token:
    """A token from the command line.

    Attributes:
        kind: Token kind
        raw: The unmodified span as it appears in the command line
        position: 1-based position of the token in the command line
            (for split compound short commands, the position of the letter)
        text: Processed text (resolved general text, command letter or name)
        start: Start of ``raw`` in the original string (0-based)
    """

    kind: TokenKind
    raw: str
    position: int
    text: str
    start: int

    @property
    def end(self) -> int:
        """End of ``raw`` in the original string (exclusive)."""
        return self.start + len(self.raw)

    @property
    def is_command(self) -> bool:
        """Check if token is a short or long command."""
        return self.kind is not TokenKind.GENERAL


# States entered from a token-internal state on a quote or escape character
_QUOTE_OR_ESCAPE_STATES: dict[CharClass, LexerState] = {
    CharClass.QUOTE_SINGLE: LexerState.QUOTED_SINGLE,
    CharClass.QUOTE_DOUBLE: LexerState.QUOTED_DOUBLE,
    CharClass.ESCAPE: LexerState.ESCAPE,
}

_OPENING_STATES: dict[CharClass, LexerState] = {
    CharClass.COMMAND_INTRO: LexerState.COMMAND_INTRO,
    CharClass.OTHER: LexerState.TEXT,
    **_QUOTE_OR_ESCAPE_STATES,
}

_EMIT_KINDS: dict[Action, TokenKind] = {
    Action.EMIT_GENERAL: TokenKind.GENERAL,
    Action.EMIT_SHORT: TokenKind.SHORT_COMMAND,
    Action.EMIT_LONG: TokenKind.LONG_COMMAND,
}

_ESCAPE_RETURN: dict[QuoteState, QuoteState] = {
    QuoteState.ESCAPE: QuoteState.NONE,
    QuoteState.ESCAPE_SINGLE: QuoteState.SINGLE,
    QuoteState.ESCAPE_DOUBLE: QuoteState.DOUBLE,
}


def classify(char: str) -> CharClass:
    """Get the lexical class of a character."""
    if ord(char) <= WHITESPACE_MAX_ORD:
        return CharClass.WHITESPACE
    if char == CHAR_COMMAND_INTRO:
        return CharClass.COMMAND_INTRO
    if char == CHAR_QUOTE_SINGLE:
        return CharClass.QUOTE_SINGLE
    if char == CHAR_QUOTE_DOUBLE:
        return CharClass.QUOTE_DOUBLE
    if char == CHAR_ESCAPE:
        return CharClass.ESCAPE
    return CharClass.OTHER


def transition(
    state: LexerState, char_class: CharClass, char: str = ""
) -> tuple[LexerState, Action]:
    """Compute the next lexer state and the action for one character.

    Args:
        state: Current lexer state
        char_class: Class of the current character
        char: The character itself, consulted only for the ``OTHER`` class
            (and the command intro inside long commands) to tell command
            characters from plain text

    Returns:
        Tuple of (new_state, action)

    Raises:
        InvalidStateError: If ``state`` is not a known lexer state
    """
    match state:
        case LexerState.WHITESPACE:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.SKIP
            return _OPENING_STATES[char_class], Action.START

        case LexerState.COMMAND_INTRO:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.EMIT_GENERAL
            if char_class is CharClass.COMMAND_INTRO:
                return LexerState.COMMAND_INTRO_DOUBLE, Action.ABSORB
            if char_class is CharClass.OTHER:
                if char in CHARS_COMMAND_SHORT:
                    return LexerState.COMMAND_SHORT, Action.ABSORB
                return LexerState.TEXT, Action.ABSORB
            return _QUOTE_OR_ESCAPE_STATES[char_class], Action.ABSORB

        case LexerState.COMMAND_INTRO_DOUBLE:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.EMIT_GENERAL
            if char_class is CharClass.COMMAND_INTRO:
                # three or more dashes are plain text
                return LexerState.TEXT, Action.ABSORB
            if char_class is CharClass.OTHER:
                if char in CHARS_COMMAND_LONG:
                    return LexerState.COMMAND_LONG, Action.ABSORB
                return LexerState.TEXT, Action.ABSORB
            return _QUOTE_OR_ESCAPE_STATES[char_class], Action.ABSORB

        case LexerState.COMMAND_SHORT:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.EMIT_SHORT
            if char_class is CharClass.COMMAND_INTRO:
                return LexerState.TEXT, Action.ABSORB
            if char_class is CharClass.OTHER:
                if char in CHARS_COMMAND_SHORT:
                    return LexerState.COMMAND_SHORT, Action.ABSORB
                return LexerState.TEXT, Action.ABSORB
            return _QUOTE_OR_ESCAPE_STATES[char_class], Action.ABSORB

        case LexerState.COMMAND_LONG:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.EMIT_LONG
            if char_class in (CharClass.COMMAND_INTRO, CharClass.OTHER):
                if char in CHARS_COMMAND_LONG:
                    return LexerState.COMMAND_LONG, Action.ABSORB
                return LexerState.TEXT, Action.ABSORB
            return _QUOTE_OR_ESCAPE_STATES[char_class], Action.ABSORB

        case LexerState.QUOTED_SINGLE:
            if char_class is CharClass.QUOTE_SINGLE:
                return LexerState.TEXT, Action.ABSORB
            if char_class is CharClass.ESCAPE:
                return LexerState.ESCAPE_QUOTED_SINGLE, Action.ABSORB
            return LexerState.QUOTED_SINGLE, Action.ABSORB

        case LexerState.QUOTED_DOUBLE:
            if char_class is CharClass.QUOTE_DOUBLE:
                return LexerState.TEXT, Action.ABSORB
            if char_class is CharClass.ESCAPE:
                return LexerState.ESCAPE_QUOTED_DOUBLE, Action.ABSORB
            return LexerState.QUOTED_DOUBLE, Action.ABSORB

        # An escape always consumes exactly one following character
        case LexerState.ESCAPE:
            return LexerState.TEXT, Action.ABSORB

        case LexerState.ESCAPE_QUOTED_SINGLE:
            return LexerState.QUOTED_SINGLE, Action.ABSORB

        case LexerState.ESCAPE_QUOTED_DOUBLE:
            return LexerState.QUOTED_DOUBLE, Action.ABSORB

        case LexerState.TEXT:
            if char_class is CharClass.WHITESPACE:
                return LexerState.WHITESPACE, Action.EMIT_GENERAL
            if char_class in (CharClass.COMMAND_INTRO, CharClass.OTHER):
                return LexerState.TEXT, Action.ABSORB
            return _QUOTE_OR_ESCAPE_STATES[char_class], Action.ABSORB

        case _:
            raise InvalidStateError(f"Invalid lexer state: {state!r}")


def resolve_text(raw: str) -> str:
    """Resolve quoting and escaping in a raw general token.

    Quote characters delimit literal regions and are dropped; an escape
    character passes the following character through unconditionally.
    A dangling escape at the end of the span is kept as a literal backslash.

    Examples:
        >>> resolve_text('"hello world"')
        'hello world'
        >>> resolve_text(r'"say \\"hi\\""')
        'say "hi"'
        >>> resolve_text('"a""b"')
        'ab'
    """
    parts: list[str] = []
    state = QuoteState.NONE

    for char in raw:
        if state in _ESCAPE_RETURN:
            parts.append(char)
            state = _ESCAPE_RETURN[state]
        elif state is QuoteState.NONE:
            if char == CHAR_QUOTE_SINGLE:
                state = QuoteState.SINGLE
            elif char == CHAR_QUOTE_DOUBLE:
                state = QuoteState.DOUBLE
            elif char == CHAR_ESCAPE:
                state = QuoteState.ESCAPE
            else:
                parts.append(char)
        elif state is QuoteState.SINGLE:
            if char == CHAR_QUOTE_SINGLE:
                state = QuoteState.NONE
            elif char == CHAR_ESCAPE:
                state = QuoteState.ESCAPE_SINGLE
            else:
                parts.append(char)
        else:
            if char == CHAR_QUOTE_DOUBLE:
                state = QuoteState.NONE
            elif char == CHAR_ESCAPE:
                state = QuoteState.ESCAPE_DOUBLE
            else:
                parts.append(char)

    if state in _ESCAPE_RETURN:
        parts.append(CHAR_ESCAPE)

    return "".join(parts)


class Lexer:
    """State machine lexer for command lines."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.state = LexerState.WHITESPACE
        self.tokens: list[Token] = []
        self._token_start = 0

    def tokenize(self) -> list[Token]:
        """Tokenize the command line into tokens."""
        self.state = LexerState.WHITESPACE
        self.tokens = []
        self._token_start = 0

        for pos, char in enumerate(self.text):
            new_state, action = transition(self.state, classify(char), char)
            if action is Action.START:
                self._token_start = pos
            elif action in _EMIT_KINDS:
                self._emit(_EMIT_KINDS[action], pos)
            self.state = new_state

        self._flush()
        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(self.tokens))
        return self.tokens

    def _flush(self) -> None:
        """Emit the token still open at the end of input."""
        match self.state:
            case LexerState.WHITESPACE:
                pass
            case LexerState.COMMAND_SHORT:
                self._emit(TokenKind.SHORT_COMMAND, len(self.text))
            case LexerState.COMMAND_LONG:
                self._emit(TokenKind.LONG_COMMAND, len(self.text))
            case _:
                self._emit(TokenKind.GENERAL, len(self.text))

    def _emit(self, kind: TokenKind, end: int) -> None:
        """Emit the open token, which ends before ``end``."""
        start = self._token_start
        raw = self.text[start:end]

        if kind is TokenKind.SHORT_COMMAND and len(raw) > 2:
            # Split compound short commands (-abc -> -a b c)
            for i, letter in enumerate(raw[1:]):
                offset = start + 1 + i
                self.tokens.append(
                    Token(
                        kind=kind,
                        raw=raw[:2] if i == 0 else letter,
                        position=offset + 1,
                        text=letter,
                        start=start if i == 0 else offset,
                    )
                )
            return

        match kind:
            case TokenKind.SHORT_COMMAND:
                text = raw[1]
            case TokenKind.LONG_COMMAND:
                text = raw[2:]
            case _:
                text = resolve_text(raw)

        self.tokens.append(Token(kind=kind, raw=raw, position=start + 1, text=text, start=start))


def tokenize(text: str) -> list[Token]:
    """Tokenize a command line string.

    Args:
        text: The command line string to tokenize

    Returns:
        List of Token objects

    Examples:
        >>> tokens = tokenize('app.exe -vf "my file.txt" --level 3')
        >>> [t.text for t in tokens]
        ['app.exe', 'v', 'f', 'my file.txt', 'level', '3']
    """
    return Lexer(text).tokenize()


def detokenize(tokens: list[Token], text: str) -> str:
    """Rebuild a command line from token raw spans.

    Whitespace between tokens is taken from the original string, so
    ``detokenize(tokenize(text), text) == text``.

    Args:
        tokens: Tokens produced from ``text``
        text: The original command line

    Returns:
        Command line string
    """
    parts: list[str] = []
    last_end = 0

    for token in tokens:
        parts.append(text[last_end : token.start])
        parts.append(token.raw)
        last_end = token.end

    parts.append(text[last_end:])
    return "".join(parts)
