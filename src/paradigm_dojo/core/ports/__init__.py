"""
Ports - Abstract interfaces for the formatting capabilities and configuration.

Ports define the contracts that adapters must implement.
"""

from .config_provider import LOG_FORMATS, AppConfig, ConfigProviderPort
from .list_formatter import ListFormatterPort
from .name_formatter import NameFormatterPort
from .transformer import ListTransformerPort


__all__ = [
    "LOG_FORMATS",
    "AppConfig",
    "ConfigProviderPort",
    "ListFormatterPort",
    "ListTransformerPort",
    "NameFormatterPort",
]
