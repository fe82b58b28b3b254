"""
CLI App - Main entry point for the paradigm-dojo command line tool.

Reads names (arguments, a file, or stdin, one per line), prints the
bulleted list to stdout, and sends every diagnostic to stderr.
"""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import TextIO

from paradigm_dojo import __version__
from paradigm_dojo.application import compare_paradigms, iter_transformers
from paradigm_dojo.core.domain import ListStyle, Paradigm
from paradigm_dojo.core.exceptions import (
    ConfigError,
    ConfigValidationError,
    InvalidArgumentError,
)
from paradigm_dojo.core.ports import LOG_FORMATS, AppConfig
from paradigm_dojo.core.services import create_config_provider, transform

from .exit_codes import ExitCode
from .logging import get_logger, setup_logging
from .output import Console


logger = logging.getLogger("CLI")


def exit_code_help() -> str:
    """Describe every exit code for the help epilog."""
    lines = [f"  {int(code):<4} {code.description}" for code in ExitCode]
    return "\nExit codes:\n" + "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """
    Create the command-line argument parser for paradigm-dojo.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="paradigm-dojo",
        description="Turn a list of names into a bulleted list, three different ways",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # AsciiDoc list from arguments
  paradigm-dojo toto bob titi

  # Markdown list from a file, one name per line
  paradigm-dojo --style markdown -f names.txt

  # Pipe names through the object-oriented implementation
  printf 'toto\\nbob\\n' | paradigm-dojo --paradigm object

  # Check that all three paradigms agree
  paradigm-dojo --compare toto bob titi

  # List available paradigms
  paradigm-dojo --list-paradigms
"""
        + exit_code_help(),
    )

    # Input
    parser.add_argument("names", nargs="*", help="Names to list (default: read from --input or stdin)")
    parser.add_argument(
        "--input", "-f", type=str, help="Read names from this file, one per line"
    )

    # Transformation
    parser.add_argument(
        "--style",
        "-s",
        choices=[s.value for s in ListStyle],
        default=None,
        help="List style: asciidoc ('* ' items, default) or markdown ('- ' items)",
    )
    parser.add_argument(
        "--paradigm",
        "-p",
        choices=[p.value for p in Paradigm],
        default=None,
        help="Implementation to run (default: functional)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every paradigm and fail if their outputs differ",
    )
    parser.add_argument(
        "--list-paradigms", action="store_true", help="List available paradigms and exit"
    )

    # Configuration
    parser.add_argument(
        "--config", "-c", type=str, help="Path to config file (.paradigm-dojo.yaml, .paradigm-dojo.toml)"
    )

    # Output
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose diagnostics")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print errors and the result")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--log-format",
        choices=list(LOG_FORMATS),
        default=None,
        help="Log format: text (default) or json",
    )
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def cli_overrides_from_args(args: argparse.Namespace) -> dict:
    """Collect config values given explicitly on the command line."""
    return {
        "style": args.style,
        "paradigm": args.paradigm,
        "verbose": True if args.verbose else None,
        "log_format": args.log_format,
        "log_file": args.log_file,
    }


def load_config(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration from file, environment, and CLI flags.

    Raises:
        ConfigError: If the config file is unreadable or values are invalid.
    """
    provider = create_config_provider(
        config_file=args.config,
        cli_overrides=cli_overrides_from_args(args),
    )
    config = provider.load()
    logger.debug(f"Loaded config from {provider.name}")
    return config


def read_names(args: argparse.Namespace, stdin: TextIO, console: Console) -> list[str]:
    """
    Collect names from arguments, the input file, or stdin.

    Lines keep their content exactly, minus the line ending, so blank lines
    become empty names.

    Raises:
        FileNotFoundError: If --input names a missing file.
        OSError: If the input cannot be read.
        UnicodeDecodeError: If the input is not valid UTF-8.
    """
    if args.names:
        return list(args.names)

    if args.input:
        with Path(args.input).open(encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]

    if hasattr(stdin, "isatty") and stdin.isatty():
        console.info("Reading names from stdin, one per line (Ctrl-D to finish)")
    return [line.rstrip("\r\n") for line in stdin]


def utf8_stdin() -> TextIO:
    """Standard input decoded as UTF-8, the same as --input files."""
    return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")


def list_paradigms(stdout: TextIO) -> int:
    """Print one line per paradigm."""
    for transformer in iter_transformers():
        print(f"{transformer.paradigm.value:<12} {transformer.name}", file=stdout)
    return ExitCode.SUCCESS


def run_compare(names: list[str], style: ListStyle, console: Console, stdout: TextIO) -> int:
    """
    Run every paradigm on the names and report whether they agree.

    Args:
        names: Names to transform.
        style: List style for every paradigm.
        console: Console for the report.
        stdout: Stream for the shared result.

    Returns:
        Exit code.
    """
    comparison = compare_paradigms(names, style)
    mismatched = set(comparison.mismatches())

    console.header(f"Paradigm comparison ({style.display_name}, {len(names)} names)")
    rows = []
    for paradigm, output in comparison.outputs.items():
        first_line = output.split("\n", 1)[0]
        rows.append(
            [
                paradigm.display_name,
                "MISMATCH" if paradigm in mismatched else "match",
                repr(first_line) + (" ..." if "\n" in output else ""),
            ]
        )
    console.table(["Paradigm", "Status", "First item"], rows)
    console.print()

    if not comparison.consistent:
        console.error(
            "Paradigms disagree: " + ", ".join(p.display_name for p in comparison.mismatches())
        )
        return ExitCode.VALIDATION_ERROR

    console.success("All paradigms produced the same output")
    if comparison.result:
        print(comparison.result, file=stdout)
    return ExitCode.SUCCESS


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """
    Main entry point for the paradigm-dojo CLI.

    Args:
        argv: Arguments to parse; defaults to sys.argv[1:].
        stdin: Stream to read names from; defaults to sys.stdin decoded as UTF-8.
        stdout: Stream for the result; defaults to sys.stdout.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    stdout = stdout or sys.stdout

    parser = create_parser()
    args = parser.parse_args(argv)

    console = Console(
        color=not args.no_color,
        quiet=args.quiet,
        stream=sys.stderr,
    )

    if args.list_paradigms:
        return list_paradigms(stdout)

    try:
        config = load_config(args)
    except ConfigValidationError as e:
        console.config_errors(e.errors)
        return ExitCode.CONFIG_ERROR
    except ConfigError as e:
        console.error(str(e))
        return ExitCode.CONFIG_ERROR

    if args.quiet:
        level = logging.ERROR
    elif config.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    try:
        setup_logging(
            level=level,
            log_format=config.log_format,
            log_file=config.log_file,
            static_fields={"service": "paradigm-dojo", "version": __version__},
        )
    except OSError as e:
        console.error(f"Cannot open log file {config.log_file}: {e.strerror or e}")
        return ExitCode.ERROR

    if stdin is None and not args.names and not args.input:
        stdin = utf8_stdin()

    try:
        names = read_names(args, stdin, console)
    except FileNotFoundError:
        console.error(f"Input file not found: {args.input}")
        return ExitCode.FILE_NOT_FOUND
    except OSError as e:
        console.error(f"Cannot read input {args.input or '<stdin>'}: {e.strerror or e}")
        return ExitCode.ERROR
    except UnicodeDecodeError as e:
        console.error(f"Input {args.input or '<stdin>'} is not valid UTF-8: {e.reason}")
        return ExitCode.ERROR
    except KeyboardInterrupt:
        console.print()
        console.warning("Cancelled")
        return ExitCode.CANCELLED

    run_logger = get_logger("CLI", style=config.style.value, paradigm=config.paradigm.value)
    run_logger.debug(f"Read {len(names)} names")

    try:
        if args.compare:
            return run_compare(names, config.style, console, stdout)
        result = transform(names, style=config.style, paradigm=config.paradigm)
    except InvalidArgumentError as e:
        console.error(str(e))
        return ExitCode.VALIDATION_ERROR

    if result:
        print(result, file=stdout)
    return ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
