"""Parameter data model shared by the assembler and the query functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ParamType(Enum):
    """Type of a parsed parameter.

    BOTH is only used for aggregated command data, never stored.
    """

    GENERAL = auto()
    SHORT_COMMAND = auto()
    LONG_COMMAND = auto()
    BOTH = auto()


@dataclass
class Parameter:
    """A parsed parameter.

    Attributes:
        kind: Parameter type
        text: Command letter, command name, or resolved general text
        arguments: Arguments in the order they appear in the command line
    """

    kind: ParamType
    text: str
    arguments: list[str] = field(default_factory=list)

    @property
    def is_command(self) -> bool:
        """Check if parameter is a command (short, long or both)."""
        return self.kind is not ParamType.GENERAL


@dataclass
class ParseResult:
    """Result of parsing one command line."""

    command_line: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    image_path: str = ""
    command_count: int = 0

    @property
    def count(self) -> int:
        """Number of all parameters (commands and general)."""
        return len(self.parameters)
