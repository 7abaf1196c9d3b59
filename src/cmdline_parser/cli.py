"""Command-line interface for cmdline-parser."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cmdline_parser import __version__
from cmdline_parser.config.loader import load_config
from cmdline_parser.config.schema import LoggingConfig
from cmdline_parser.core.lexer import tokenize
from cmdline_parser.core.parser import assemble
from cmdline_parser.core.process import build_command_line
from cmdline_parser.core.render import FORMATS, render
from cmdline_parser.editor.prompt import read_command_line

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="cmdline-parse",
        description="Show how a command line splits into commands, arguments and general text",
        epilog='Example: cmdline-parse -- app.exe -vf "my file.txt" --level 3',
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/cmdline-parser/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/cmdline-parser/conf.d/)",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        help="Output format (default from configuration: text)",
    )

    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Include lexer tokens in the output",
    )

    parser.add_argument(
        "--commands-only",
        action="store_true",
        help="Leave standalone general parameters out of the output",
    )

    parser.add_argument(
        "--line",
        "-l",
        metavar="TEXT",
        help="Parse TEXT verbatim instead of the trailing arguments",
    )

    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Enter the command line in a highlighting prompt",
    )

    parser.add_argument(
        "--theme",
        "-t",
        metavar="NAME",
        help="Theme to use for the interactive prompt",
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Log level (default from configuration: WARNING)",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "command",
        nargs="*",
        help="Command line to parse (use -- to separate from options)",
    )

    return parser.parse_args(args)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging from configuration."""
    logging.basicConfig(level=config.level, format=config.format)


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    # Load configuration
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
        if parsed.log_level:
            config.logging = LoggingConfig(level=parsed.log_level, format=config.logging.format)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.logging)

    # Override config options
    if parsed.format:
        config.output.format = parsed.format
    if parsed.tokens:
        config.output.show_tokens = True
    if parsed.commands_only:
        config.output.show_general = False

    try:
        if parsed.line is not None:
            command_line = parsed.line
        elif parsed.interactive:
            command_line = read_command_line(
                default=build_command_line(parsed.command),
                config=config,
                theme=parsed.theme,
            )
        else:
            command_line = build_command_line(parsed.command)

        if not command_line:
            print("Error: No command line provided", file=sys.stderr)
            print("Usage: cmdline-parse [options] -- <command line>", file=sys.stderr)
            return 1

        logger.debug("Parsing command line: %r", command_line)
        tokens = tokenize(command_line)
        result = assemble(tokens, command_line)

        print(
            render(
                result,
                config.output.format,
                tokens=tokens if config.output.show_tokens else None,
                show_general=config.output.show_general,
            )
        )
        return 0

    except (KeyboardInterrupt, EOFError):
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
