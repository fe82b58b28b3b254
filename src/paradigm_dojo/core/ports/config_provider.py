"""
Configuration Provider Port - Abstract interface for configuration.

Implementations:
- FileConfigProvider: Load from YAML/TOML config files or pyproject.toml
- EnvironmentConfigProvider: Load from env vars and .env, layered on a file
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm


LOG_FORMATS = ("text", "json")


@dataclass
class AppConfig:
    """Complete application configuration."""

    style: ListStyle = ListStyle.ASCIIDOC
    paradigm: Paradigm = Paradigm.FUNCTIONAL

    # Logging
    verbose: bool = False
    log_format: str = "text"
    log_file: str | None = None

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.style, ListStyle):
            errors.append(f"Invalid list style: {self.style!r}")
        if not isinstance(self.paradigm, Paradigm):
            errors.append(f"Invalid paradigm: {self.paradigm!r}")
        if self.log_format not in LOG_FORMATS:
            errors.append(
                f"Invalid log format: {self.log_format!r} (expected one of {', '.join(LOG_FORMATS)})"
            )

        return errors


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.

    Configuration can come from various sources:
    - YAML/TOML config files
    - Environment variables and .env files
    - Command line arguments
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load configuration from source.

        Returns:
            Complete application configuration

        Raises:
            ConfigError: If the source cannot be read or holds invalid values
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a single configuration value.

        Args:
            key: Dotted configuration key (e.g., 'logging.verbose')
            default: Default if not found

        Returns:
            Configuration value
        """
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration without loading.

        Returns:
            List of validation errors (empty if valid)
        """
        ...
