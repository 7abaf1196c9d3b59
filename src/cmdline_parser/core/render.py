"""Rendering of parse results as text, JSON or YAML."""

from __future__ import annotations

import json
from typing import Any

import yaml

from cmdline_parser.core.lexer import Token
from cmdline_parser.core.models import ParamType, ParseResult

FORMATS = ("text", "json", "yaml")

# Short labels for the text report
_TYPE_LABELS: dict[ParamType, str] = {
    ParamType.GENERAL: "general",
    ParamType.SHORT_COMMAND: "short",
    ParamType.LONG_COMMAND: "long",
    ParamType.BOTH: "both",
}


def result_to_dict(
    result: ParseResult,
    tokens: list[Token] | None = None,
    show_general: bool = True,
) -> dict[str, Any]:
    """Convert a parse result to plain data.

    Args:
        result: Parse result
        tokens: Lexer tokens to include, if any
        show_general: Include standalone general parameters

    Returns:
        Dictionary suitable for JSON/YAML serialization
    """
    data: dict[str, Any] = {
        "command_line": result.command_line,
        "image_path": result.image_path,
        "count": result.count,
        "command_count": result.command_count,
        "parameters": [
            {
                "type": _TYPE_LABELS[param.kind],
                "text": param.text,
                "arguments": list(param.arguments),
            }
            for param in result.parameters
            if show_general or param.is_command
        ],
    }
    if tokens is not None:
        data["tokens"] = [
            {
                "kind": token.kind.name.lower(),
                "raw": token.raw,
                "position": token.position,
                "text": token.text,
            }
            for token in tokens
        ]
    return data


def render_text(
    result: ParseResult,
    tokens: list[Token] | None = None,
    show_general: bool = True,
) -> str:
    """Render a parse result as a human-readable report."""
    lines = [
        f"image path: {result.image_path}",
        f"parameters: {result.count} ({result.command_count} commands)",
    ]

    for index, param in enumerate(result.parameters):
        if not show_general and not param.is_command:
            continue
        prefix = {ParamType.SHORT_COMMAND: "-", ParamType.LONG_COMMAND: "--"}.get(param.kind, "")
        line = f"  [{index}] {_TYPE_LABELS[param.kind]:<7} {prefix}{param.text}"
        if param.arguments:
            line += " <- " + ", ".join(repr(arg) for arg in param.arguments)
        lines.append(line)

    if tokens is not None:
        lines.append("tokens:")
        for token in tokens:
            lines.append(f"  @{token.position:<4} {token.kind.name.lower():<13} {token.raw!r} -> {token.text!r}")

    return "\n".join(lines)


def render(
    result: ParseResult,
    fmt: str = "text",
    tokens: list[Token] | None = None,
    show_general: bool = True,
) -> str:
    """Render a parse result in the given format.

    Raises:
        ValueError: If the format is not one of FORMATS
    """
    match fmt:
        case "text":
            return render_text(result, tokens, show_general)
        case "json":
            return json.dumps(result_to_dict(result, tokens, show_general), indent=2)
        case "yaml":
            return yaml.safe_dump(
                result_to_dict(result, tokens, show_general),
                sort_keys=False,
                allow_unicode=True,
            ).rstrip("\n")
        case _:
            raise ValueError(f"Unknown output format: {fmt}")
