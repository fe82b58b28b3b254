"""
File Configuration Provider - Load configuration from YAML or TOML files.

Looks for, in order:
- .paradigm-dojo.yaml / .paradigm-dojo.yml
- .paradigm-dojo.toml
- pyproject.toml ([tool.paradigm-dojo] section)

in the current directory, then in the user's home directory.

Example .paradigm-dojo.yaml:

```yaml
style: markdown
paradigm: object

logging:
  verbose: true
  format: json
  file: dojo.log
```
"""

import logging
from pathlib import Path
from typing import Any

import yaml


try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for older Python

from paradigm_dojo.core.exceptions import ConfigError, ConfigFileError, ConfigValidationError
from paradigm_dojo.core.ports.config_provider import AppConfig, ConfigProviderPort

from .settings import (
    SETTING_KEYS,
    build_app_config,
    extract_settings,
    lookup_dotted,
    normalize_overrides,
    setting_for_key,
)


CONFIG_FILE_NAMES = [
    ".paradigm-dojo.yaml",
    ".paradigm-dojo.yml",
    ".paradigm-dojo.toml",
    "pyproject.toml",
]

PYPROJECT_SECTION = "paradigm-dojo"


class FileConfigProvider(ConfigProviderPort):
    """
    Configuration provider that reads a single config file.

    CLI overrides, when given, take precedence over file values.
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        cli_overrides: dict[str, Any] | None = None,
        search_paths: list[Path] | None = None,
    ) -> None:
        """
        Initialize the file config provider.

        Args:
            config_path: Explicit config file; auto-detected when None
            cli_overrides: Values that win over the file (flat setting names)
            search_paths: Directories to search; defaults to cwd then home
        """
        self._explicit_path = Path(config_path) if config_path else None
        self._cli_overrides = normalize_overrides(cli_overrides)
        self._search_paths = search_paths
        self._resolved = False
        self._config_path: Path | None = None
        self._data: dict[str, Any] | None = None
        self.logger = logging.getLogger("FileConfigProvider")

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        path = self.config_file_path
        if path:
            return f"file ({path})"
        return "file"

    @property
    def config_file_path(self) -> Path | None:
        """Get the config file in use, or None when none was found."""
        if not self._resolved:
            self._config_path = self._find_config_file()
            self._resolved = True
        return self._config_path

    def load(self) -> AppConfig:
        path = self.config_file_path
        return build_app_config(self.settings(), source=str(path) if path else None)

    def get(self, key: str, default: Any = None) -> Any:
        setting = setting_for_key(key)
        if setting is not None and setting in self._cli_overrides:
            return self._cli_overrides[setting]

        dotted = SETTING_KEYS.get(key, key)
        value = lookup_dotted(self._load_data(), dotted)
        return default if value is None else value

    def validate(self) -> list[str]:
        try:
            self.load()
        except ConfigValidationError as e:
            return e.errors
        except ConfigError as e:
            return [str(e)]
        return []

    # -------------------------------------------------------------------------
    # File Handling
    # -------------------------------------------------------------------------

    def settings(self, include_overrides: bool = True) -> dict[str, Any]:
        """
        Get flat setting values from the file.

        Args:
            include_overrides: Apply CLI overrides on top of file values

        Raises:
            ConfigFileError: If the file is missing or unparsable
        """
        values = extract_settings(self._load_data())
        if include_overrides:
            values.update(self._cli_overrides)
        return values

    def _find_config_file(self) -> Path | None:
        if self._explicit_path is not None:
            return self._explicit_path

        search_paths = self._search_paths
        if search_paths is None:
            search_paths = [Path.cwd(), Path.home()]

        for directory in search_paths:
            for file_name in CONFIG_FILE_NAMES:
                candidate = directory / file_name
                if not candidate.is_file():
                    continue
                if file_name == "pyproject.toml" and not self._has_pyproject_section(candidate):
                    continue
                self.logger.debug(f"Found config file: {candidate}")
                return candidate

        return None

    def _has_pyproject_section(self, path: Path) -> bool:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            return False
        return PYPROJECT_SECTION in data.get("tool", {})

    def _load_data(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        path = self.config_file_path
        if path is None:
            self._data = {}
            return self._data

        if not path.is_file():
            raise ConfigFileError("Config file not found", config_path=str(path))

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileError("Cannot read config file", config_path=str(path), cause=e) from e

        if path.suffix.lower() in (".yaml", ".yml"):
            data = self._parse_yaml(content, path)
        else:
            data = self._parse_toml(content, path)

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get(PYPROJECT_SECTION, {})

        if not isinstance(data, dict):
            raise ConfigFileError(
                "Config file must contain a mapping at the top level",
                config_path=str(path),
            )

        self.logger.debug(f"Loaded config from {path}")
        self._data = data
        return self._data

    def _parse_yaml(self, content: str, path: Path) -> Any:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigFileError("Invalid YAML syntax", config_path=str(path), cause=e) from e
        return {} if data is None else data

    def _parse_toml(self, content: str, path: Path) -> dict[str, Any]:
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigFileError("Invalid TOML syntax", config_path=str(path), cause=e) from e
