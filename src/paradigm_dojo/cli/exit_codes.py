"""
Exit Codes - Process exit statuses for the paradigm-dojo CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """
    Exit codes returned by ``main()``.

    Attributes:
        SUCCESS: Result printed.
        ERROR: Unexpected failure.
        CONFIG_ERROR: Config file unreadable or holding invalid values.
        FILE_NOT_FOUND: Input file does not exist.
        VALIDATION_ERROR: Invalid arguments, or paradigms disagreed.
        CANCELLED: Interrupted by the user.
    """

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    FILE_NOT_FOUND = 3
    VALIDATION_ERROR = 4
    CANCELLED = 130

    @property
    def description(self) -> str:
        """Short description for help text."""
        return {
            ExitCode.SUCCESS: "Success",
            ExitCode.ERROR: "Unexpected error",
            ExitCode.CONFIG_ERROR: "Configuration error",
            ExitCode.FILE_NOT_FOUND: "Input file not found",
            ExitCode.VALIDATION_ERROR: "Invalid input or paradigm mismatch",
            ExitCode.CANCELLED: "Cancelled by user",
        }[self]
