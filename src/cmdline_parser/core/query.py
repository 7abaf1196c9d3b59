"""Read-only lookups over a list of parsed parameters."""

from __future__ import annotations

from collections.abc import Sequence

from cmdline_parser.core.models import Parameter, ParamType


def find_index(parameters: Sequence[Parameter], text: str, case_sensitive: bool = True) -> int | None:
    """Find the first parameter of any type whose text matches.

    Args:
        parameters: Parameters to search
        text: Text to look for
        case_sensitive: Compare exactly, or ignoring case

    Returns:
        Index of the first match, or None if absent
    """
    if case_sensitive:
        for i, param in enumerate(parameters):
            if param.text == text:
                return i
    else:
        text_lower = text.lower()
        for i, param in enumerate(parameters):
            if param.text.lower() == text_lower:
                return i
    return None


def _is_short(param: Parameter, letter: str) -> bool:
    return param.kind is ParamType.SHORT_COMMAND and param.text == letter


def _is_long(param: Parameter, name: str) -> bool:
    return param.kind is ParamType.LONG_COMMAND and param.text.lower() == name.lower()


def has_short(parameters: Sequence[Parameter], letter: str) -> bool:
    """Check if a short command is present at least once (case-sensitive)."""
    return any(_is_short(param, letter) for param in parameters)


def has_long(parameters: Sequence[Parameter], name: str) -> bool:
    """Check if a long command is present at least once (case-insensitive)."""
    return any(_is_long(param, name) for param in parameters)


def has_either(parameters: Sequence[Parameter], letter: str, name: str) -> bool:
    """Check if either form of a command is present at least once."""
    return has_short(parameters, letter) or has_long(parameters, name)


def data_for_short(parameters: Sequence[Parameter], letter: str) -> Parameter | None:
    """Collect arguments from all occurrences of a short command.

    Returns:
        Parameter of type SHORT_COMMAND carrying the arguments of every
        occurrence in command line order, or None if the command is absent
    """
    occurrences = [param for param in parameters if _is_short(param, letter)]
    if not occurrences:
        return None
    arguments = [arg for param in occurrences for arg in param.arguments]
    return Parameter(kind=ParamType.SHORT_COMMAND, text=letter, arguments=arguments)


def data_for_long(parameters: Sequence[Parameter], name: str) -> Parameter | None:
    """Collect arguments from all occurrences of a long command.

    Returns:
        Parameter of type LONG_COMMAND (text set to ``name`` as queried),
        or None if the command is absent
    """
    occurrences = [param for param in parameters if _is_long(param, name)]
    if not occurrences:
        return None
    arguments = [arg for param in occurrences for arg in param.arguments]
    return Parameter(kind=ParamType.LONG_COMMAND, text=name, arguments=arguments)


def data_for_either(parameters: Sequence[Parameter], letter: str, name: str) -> Parameter | None:
    """Collect arguments from all occurrences of either form of a command.

    When only one form is present, the result carries that form's type and
    text. When both are present, the type is BOTH and the text is the long
    form. Arguments keep command line order across both forms.

    Returns:
        Aggregated Parameter, or None if neither form is present
    """
    result: Parameter | None = None

    for param in parameters:
        if _is_short(param, letter):
            if result is None:
                result = Parameter(kind=ParamType.SHORT_COMMAND, text=letter)
            elif result.kind is ParamType.LONG_COMMAND:
                result.kind = ParamType.BOTH
        elif _is_long(param, name):
            if result is None:
                result = Parameter(kind=ParamType.LONG_COMMAND, text=name)
            elif result.kind is ParamType.SHORT_COMMAND:
                result.kind = ParamType.BOTH
                result.text = name
        else:
            continue
        result.arguments.extend(param.arguments)

    return result
