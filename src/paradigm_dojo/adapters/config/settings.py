"""
Settings - Flat setting keys shared by every config provider.

Each provider reduces its source to a flat ``{setting: raw value}`` dict
using the keys below; ``build_app_config`` turns that into an AppConfig.
"""

from __future__ import annotations

from typing import Any

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.exceptions import ConfigValidationError, InvalidArgumentError
from paradigm_dojo.core.ports.config_provider import AppConfig


# Flat setting name -> dotted key inside a config file
SETTING_KEYS: dict[str, str] = {
    "style": "style",
    "paradigm": "paradigm",
    "verbose": "logging.verbose",
    "log_format": "logging.format",
    "log_file": "logging.file",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_bool(value: Any) -> bool:
    """
    Parse a boolean from a config or environment value.

    Raises:
        ValueError: If the value is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def setting_for_key(key: str) -> str | None:
    """Map a dotted key or a flat setting name to its flat setting name."""
    if key in SETTING_KEYS:
        return key
    for setting, dotted in SETTING_KEYS.items():
        if dotted == key:
            return setting
    return None


def lookup_dotted(data: dict[str, Any], key: str) -> Any:
    """Walk a nested dict along a dotted key, returning None when absent."""
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def extract_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Pull every known setting present in a nested config mapping."""
    values = {}
    for setting, dotted in SETTING_KEYS.items():
        value = lookup_dotted(data, dotted)
        if value is not None:
            values[setting] = value
    return values


def normalize_overrides(overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Keep known, non-None override values, keyed by flat setting name."""
    values = {}
    for key, value in (overrides or {}).items():
        setting = setting_for_key(key)
        if setting is not None and value is not None:
            values[setting] = value
    return values


def build_app_config(values: dict[str, Any], source: str | None = None) -> AppConfig:
    """
    Build an AppConfig from flat setting values.

    Every problem is collected before raising, so the user sees all of them
    at once.

    Raises:
        ConfigValidationError: If any value is invalid.
    """
    config = AppConfig()
    errors: list[str] = []

    if "style" in values:
        try:
            config.style = _as_enum(ListStyle, values["style"])
        except InvalidArgumentError as e:
            errors.append(e.message)

    if "paradigm" in values:
        try:
            config.paradigm = _as_enum(Paradigm, values["paradigm"])
        except InvalidArgumentError as e:
            errors.append(e.message)

    if "verbose" in values:
        try:
            config.verbose = parse_bool(values["verbose"])
        except ValueError:
            errors.append(f"Invalid verbose flag: {values['verbose']!r}")

    if "log_format" in values:
        config.log_format = str(values["log_format"]).strip().lower()

    if "log_file" in values:
        config.log_file = str(values["log_file"]) or None

    errors.extend(config.validate())

    if errors:
        raise ConfigValidationError(
            f"Invalid configuration: {'; '.join(errors)}",
            errors=errors,
            config_path=source,
        )

    return config


def _as_enum(enum_cls: type[ListStyle] | type[Paradigm], value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    return enum_cls.from_string(value)
