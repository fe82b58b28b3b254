"""
Output - Console output formatting for diagnostics.

The transformation result goes to stdout untouched; everything printed
through Console is decoration meant for a human, written to stderr by the
CLI so that pipes only ever see the bulleted list.
"""

import sys
from typing import TextIO


class Colors:
    """
    ANSI color codes for terminal output.

    Attributes:
        RESET: Reset all formatting to default.
        BOLD: Make text bold.
        DIM: Make text dimmed/faded.
        RED: Red text color.
        GREEN: Green text color.
        YELLOW: Yellow text color.
        CYAN: Cyan text color.
    """

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


class Symbols:
    """Unicode symbols for terminal output."""

    CHECK = "✓"
    CROSS = "✗"
    DOT = "•"
    WARN = "⚠"
    INFO = "ℹ"

    BOX_H = "─"


class Console:
    """
    Console output helper with colors and formatting.

    Attributes:
        color: Whether to use ANSI color codes.
        quiet: Whether to suppress everything but errors.
        stream: Where output is written.
    """

    def __init__(
        self,
        color: bool = True,
        quiet: bool = False,
        stream: TextIO | None = None,
    ):
        """
        Initialize the console output helper.

        Args:
            color: Enable colored output. Automatically disabled if the stream is not a TTY.
            quiet: Suppress most output, only show errors.
            stream: Output stream. Defaults to stdout.
        """
        self.stream = stream or sys.stdout
        self.color = color and hasattr(self.stream, "isatty") and self.stream.isatty()
        self.quiet = quiet

    def _c(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "", force: bool = False) -> None:
        """
        Print a line.

        Args:
            text: Text to print. Defaults to empty string for blank line.
            force: Print even in quiet mode.
        """
        if self.quiet and not force:
            return
        print(text, file=self.stream)

    def header(self, text: str) -> None:
        """Print a prominent header with borders."""
        if self.quiet:
            return
        width = max(len(text) + 4, 50)
        border = self._c(Symbols.BOX_H * width, Colors.CYAN) if self.color else "-" * width

        self.print()
        self.print(border)
        self.print(self._c(f"  {text}", Colors.BOLD, Colors.CYAN))
        self.print(border)
        self.print()

    def success(self, text: str) -> None:
        """Print a success message with checkmark."""
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))

    def error(self, text: str) -> None:
        """Print an error message. Always prints, even in quiet mode."""
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED), force=True)

    def config_errors(self, errors: list[str]) -> None:
        """Print every configuration error, then a hint on where config comes from."""
        self.error("Configuration is invalid:")
        for error in errors:
            self.print(self._c(f"    {Symbols.DOT} {error}", Colors.RED), force=True)
        self.print(
            self._c(
                "    Check .paradigm-dojo.yaml, DOJO_* environment variables, or CLI flags",
                Colors.DIM,
            ),
            force=True,
        )

    def warning(self, text: str) -> None:
        """Print a warning message with warning symbol."""
        self.print(self._c(f"  {Symbols.WARN} {text}", Colors.YELLOW))

    def info(self, text: str) -> None:
        """Print an info message with info symbol."""
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))

    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a formatted table with headers.

        Args:
            headers: List of column header strings.
            rows: List of rows, where each row is a list of cell values.
        """
        if self.quiet:
            return
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  " + "  ".join(
            self._c(h.ljust(widths[i]), Colors.BOLD) for i, h in enumerate(headers)
        )
        self.print(header_line)
        self.print("  " + "  ".join("-" * w for w in widths))

        for row in rows:
            row_line = "  " + "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            )
            self.print(row_line)
