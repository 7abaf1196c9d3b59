"""Assembly of lexer tokens into parameters, and the stateful Parser facade."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from cmdline_parser.core import query
from cmdline_parser.core.lexer import Token, TokenKind, tokenize
from cmdline_parser.core.models import Parameter, ParamType, ParseResult
from cmdline_parser.core.process import get_command_line
from cmdline_parser.errors import IndexOutOfBoundsError, InvalidValueError

logger = logging.getLogger(__name__)

_COMMAND_TYPES: dict[TokenKind, ParamType] = {
    TokenKind.SHORT_COMMAND: ParamType.SHORT_COMMAND,
    TokenKind.LONG_COMMAND: ParamType.LONG_COMMAND,
}


def assemble(tokens: Sequence[Token], command_line: str = "") -> ParseResult:
    """Turn a token sequence into parameters.

    Every general token following a command is recorded as an argument of
    the most recent command (until the next command appears), and is also
    added as a standalone general parameter.

    Args:
        tokens: Tokens in command line order
        command_line: The command line the tokens came from

    Returns:
        ParseResult with parameters, image path and command count
    """
    result = ParseResult(command_line=command_line)
    last_command: Parameter | None = None

    for token in tokens:
        if token.kind is TokenKind.GENERAL:
            if last_command is not None:
                last_command.arguments.append(token.text)
            result.parameters.append(Parameter(kind=ParamType.GENERAL, text=token.text))
        else:
            last_command = Parameter(kind=_COMMAND_TYPES[token.kind], text=token.text)
            result.parameters.append(last_command)
            result.command_count += 1

    if result.parameters and result.parameters[0].kind is ParamType.GENERAL:
        result.image_path = result.parameters[0].text

    logger.debug(
        "Assembled %d parameters (%d commands) from %d tokens",
        result.count,
        result.command_count,
        len(tokens),
    )
    return result


def parse(command_line: str) -> ParseResult:
    """Parse a command line string.

    Examples:
        >>> result = parse('app -f file1.txt')
        >>> [(p.kind.name, p.text, p.arguments) for p in result.parameters]
        [('GENERAL', 'app', []), ('SHORT_COMMAND', 'f', ['file1.txt']), ('GENERAL', 'file1.txt', [])]
        >>> result.image_path
        'app'
    """
    return assemble(tokenize(command_line), command_line)


class Parser:
    """Parsed command line with parameter access and command queries."""

    def __init__(self, command_line: str | None = None) -> None:
        """Initialize the parser.

        Args:
            command_line: Command line to parse; None leaves the parser empty
        """
        self._result = ParseResult()
        self._capacity = 0
        if command_line is not None:
            self.parse(command_line)

    @classmethod
    def from_process(cls) -> Parser:
        """Create a parser for the command line of the current process."""
        return cls(get_command_line())

    def parse(self, command_line: str | None = None) -> None:
        """Parse a command line, replacing any previous result.

        Args:
            command_line: Command line to parse; None parses the command
                line of the current process
        """
        self.clear()
        if command_line is None:
            command_line = get_command_line()
        self._result = parse(command_line)

    def clear(self) -> None:
        """Drop the parsed result."""
        self._result = ParseResult()
        self._capacity = 0

    @property
    def result(self) -> ParseResult:
        return self._result

    @property
    def command_line(self) -> str:
        return self._result.command_line

    @property
    def image_path(self) -> str:
        return self._result.image_path

    @property
    def count(self) -> int:
        """Number of all parameters."""
        return self._result.count

    @property
    def command_count(self) -> int:
        """Number of commands (short and long) among the parameters.

        Not suitable for iterating over parameters, use ``count`` for that.
        """
        return self._result.command_count

    @property
    def parameters(self) -> list[Parameter]:
        return list(self._result.parameters)

    @property
    def capacity(self) -> int:
        """Number of reserved parameter slots (never below ``count``)."""
        return max(self._capacity, self.count)

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < 0:
            raise InvalidValueError(f"Invalid capacity ({value})")
        if value < self.count:
            removed = self._result.parameters[value:]
            del self._result.parameters[value:]
            self._result.command_count -= sum(1 for param in removed if param.is_command)
        self._capacity = value

    @property
    def low_index(self) -> int:
        return 0

    @property
    def high_index(self) -> int:
        return self.count - 1

    def check_index(self, index: int) -> bool:
        """Check if index is a valid parameter index."""
        return self.low_index <= index <= self.high_index

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._result.parameters)

    def __getitem__(self, index: int) -> Parameter:
        if not self.check_index(index):
            raise IndexOutOfBoundsError(f"Parameter index ({index}) out of bounds")
        return self._result.parameters[index]

    def first(self) -> Parameter:
        return self[self.low_index]

    def last(self) -> Parameter:
        return self[self.high_index]

    def index_of(self, text: str, case_sensitive: bool = True) -> int | None:
        """Find the first parameter whose text matches (see ``query.find_index``)."""
        return query.find_index(self._result.parameters, text, case_sensitive)

    def has_short(self, letter: str) -> bool:
        return query.has_short(self._result.parameters, letter)

    def has_long(self, name: str) -> bool:
        return query.has_long(self._result.parameters, name)

    def has_either(self, letter: str, name: str) -> bool:
        return query.has_either(self._result.parameters, letter, name)

    def data_for_short(self, letter: str) -> Parameter | None:
        return query.data_for_short(self._result.parameters, letter)

    def data_for_long(self, name: str) -> Parameter | None:
        return query.data_for_long(self._result.parameters, name)

    def data_for_either(self, letter: str, name: str) -> Parameter | None:
        return query.data_for_either(self._result.parameters, letter, name)
