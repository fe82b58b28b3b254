"""
Adapters - Concrete implementations of the core ports.

- formatters/: Name and list-item formatters
- config/: File and environment configuration providers
"""

from .config import EnvironmentConfigProvider, FileConfigProvider
from .formatters import (
    AsciidocListFormat,
    BobNameFormat,
    MarkdownListFormat,
    StandardNameFormat,
    get_list_formatter,
    get_name_formatter,
)


__all__ = [
    "AsciidocListFormat",
    "BobNameFormat",
    "EnvironmentConfigProvider",
    "FileConfigProvider",
    "MarkdownListFormat",
    "StandardNameFormat",
    "get_list_formatter",
    "get_name_formatter",
]
