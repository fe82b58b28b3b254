"""
Formatters - Name and list-item formatting capabilities.
"""

from .lists import LIST_FORMATTERS, AsciidocListFormat, MarkdownListFormat, get_list_formatter
from .names import BobNameFormat, StandardNameFormat, format_name, get_name_formatter


__all__ = [
    "LIST_FORMATTERS",
    "AsciidocListFormat",
    "BobNameFormat",
    "MarkdownListFormat",
    "StandardNameFormat",
    "format_name",
    "get_list_formatter",
    "get_name_formatter",
]
