"""
Domain - Enums, text aliases, and constants for list transformation.
"""

from .enums import ListStyle, Paradigm
from .types import (
    ITEM_SEPARATOR,
    SPECIAL_DISPLAY_NAME,
    SPECIAL_NAME,
    FormattedName,
    ListItem,
    Name,
    NameList,
    Result,
)


__all__ = [
    "ITEM_SEPARATOR",
    "SPECIAL_DISPLAY_NAME",
    "SPECIAL_NAME",
    "FormattedName",
    "ListItem",
    "ListStyle",
    "Name",
    "NameList",
    "Paradigm",
    "Result",
]
