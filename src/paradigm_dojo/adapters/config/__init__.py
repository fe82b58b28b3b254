"""
Configuration Providers - Load AppConfig from files and the environment.
"""

from .env_provider import ENV_VARS, EnvironmentConfigProvider
from .file_provider import CONFIG_FILE_NAMES, PYPROJECT_SECTION, FileConfigProvider


__all__ = [
    "CONFIG_FILE_NAMES",
    "ENV_VARS",
    "PYPROJECT_SECTION",
    "EnvironmentConfigProvider",
    "FileConfigProvider",
]
