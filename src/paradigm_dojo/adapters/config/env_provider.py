"""
Environment Configuration Provider - Load configuration from env vars.

Precedence, lowest first:
1. Built-in defaults
2. Config file (.paradigm-dojo.yaml, .paradigm-dojo.toml, pyproject.toml)
3. .env file in the working directory
4. Process environment variables
5. CLI overrides

Environment variables:
- DOJO_STYLE: asciidoc | markdown
- DOJO_PARADIGM: procedural | object | functional
- DOJO_VERBOSE: true | false
- DOJO_LOG_FORMAT: text | json
- DOJO_LOG_FILE: path to a log file
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from paradigm_dojo.core.exceptions import ConfigError, ConfigValidationError
from paradigm_dojo.core.ports.config_provider import AppConfig, ConfigProviderPort

from .file_provider import FileConfigProvider
from .settings import build_app_config, normalize_overrides, setting_for_key


ENV_VARS: dict[str, str] = {
    "style": "DOJO_STYLE",
    "paradigm": "DOJO_PARADIGM",
    "verbose": "DOJO_VERBOSE",
    "log_format": "DOJO_LOG_FORMAT",
    "log_file": "DOJO_LOG_FILE",
}


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider layering env vars on top of a config file.

    The .env file is read without touching os.environ, and real environment
    variables always win over it.
    """

    def __init__(
        self,
        config_file: Path | str | None = None,
        cli_overrides: dict[str, Any] | None = None,
        env_file: Path | str | None = None,
        environ: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the environment config provider.

        Args:
            config_file: Explicit config file; auto-detected when None
            cli_overrides: Values that win over everything else
            env_file: .env file to read; defaults to ./.env
            environ: Environment mapping; defaults to os.environ
        """
        self._file_provider = FileConfigProvider(config_path=config_file)
        self._cli_overrides = normalize_overrides(cli_overrides)
        self._env_file = Path(env_file) if env_file else None
        self._environ = environ
        self.logger = logging.getLogger("EnvironmentConfigProvider")

    @property
    def name(self) -> str:
        path = self._file_provider.config_file_path
        if path:
            return f"environment + file ({path})"
        return "environment"

    @property
    def config_file_path(self) -> Path | None:
        """Get the config file layered underneath the environment."""
        return self._file_provider.config_file_path

    def load(self) -> AppConfig:
        path = self._file_provider.config_file_path
        return build_app_config(self.settings(), source=str(path) if path else None)

    def get(self, key: str, default: Any = None) -> Any:
        setting = setting_for_key(key)
        if setting is None:
            return self._file_provider.get(key, default)
        return self.settings().get(setting, default)

    def validate(self) -> list[str]:
        try:
            self.load()
        except ConfigValidationError as e:
            return e.errors
        except ConfigError as e:
            return [str(e)]
        return []

    def settings(self) -> dict[str, Any]:
        """Get merged flat setting values from every layer."""
        values = self._file_provider.settings(include_overrides=False)
        values.update(self._env_settings())
        values.update(self._cli_overrides)
        return values

    def _env_settings(self) -> dict[str, Any]:
        env: dict[str, Any] = {}

        env_file = self._env_file or Path.cwd() / ".env"
        if env_file.is_file():
            self.logger.debug(f"Reading {env_file}")
            env.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})

        env.update(os.environ if self._environ is None else self._environ)

        values = {}
        for setting, var in ENV_VARS.items():
            if env.get(var):
                values[setting] = env[var]
        return values
