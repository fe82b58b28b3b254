"""
Exceptions - Centralized exception hierarchy for paradigm-dojo.

Hierarchy:
    DojoError
    ├── InvalidArgumentError   - Absent or malformed caller arguments
    ├── ConfigError            - Configuration problems
    │   ├── ConfigFileError        - Config file missing/unreadable/unparsable
    │   └── ConfigValidationError  - Config values out of range
    └── ParadigmMismatchError  - Paradigms disagreed on the same input

The list transformation itself never raises: every error here is either a
caller mistake surfaced immediately, or an ambient (config/CLI) failure.
"""

from __future__ import annotations


__all__ = [
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "DojoError",
    "InvalidArgumentError",
    "ParadigmMismatchError",
]


class DojoError(Exception):
    """
    Base exception for all paradigm-dojo errors.

    Attributes:
        message: Human-readable error message.
        cause: Optional underlying exception.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class InvalidArgumentError(DojoError, ValueError):
    """
    Raised when a caller passes an absent or malformed argument.

    This is a programmer error: it is never retried or recovered from.
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.argument = argument


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(DojoError):
    """Base class for configuration errors."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.config_path = config_path

    def __str__(self) -> str:
        base = super().__str__()
        if self.config_path:
            return f"{base} [{self.config_path}]"
        return base


class ConfigFileError(ConfigError):
    """Config file could not be found, read, or parsed."""


class ConfigValidationError(ConfigError):
    """
    Config was readable but holds invalid values.

    Attributes:
        errors: Every validation message collected, not just the first.
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        config_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, config_path=config_path, cause=cause)
        self.errors = list(errors or [])


# =============================================================================
# Paradigm Errors
# =============================================================================


class ParadigmMismatchError(DojoError):
    """
    Raised when paradigms produce different output for the same input.

    Attributes:
        outputs: Mapping of paradigm name to the output it produced.
    """

    def __init__(self, message: str, outputs: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.outputs = dict(outputs or {})
