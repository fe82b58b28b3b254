"""
Name Formatters - Concrete NameFormatterPort implementations.

Only two exist, chosen by an exact equality test on the raw name.
"""

from paradigm_dojo.core.domain.types import (
    SPECIAL_DISPLAY_NAME,
    SPECIAL_NAME,
    FormattedName,
    Name,
)
from paradigm_dojo.core.ports.name_formatter import NameFormatterPort


class BobNameFormat(NameFormatterPort):
    """Shouts the special name."""

    def format(self, name: Name) -> FormattedName:
        return SPECIAL_DISPLAY_NAME


class StandardNameFormat(NameFormatterPort):
    """Leaves the name unchanged."""

    def format(self, name: Name) -> FormattedName:
        return name


_BOB = BobNameFormat()
_STANDARD = StandardNameFormat()


def get_name_formatter(name: Name) -> NameFormatterPort:
    """
    Look up the formatter for a name.

    Matching is exact and case-sensitive: "Bob" and "BOB" get the standard
    formatter.
    """
    if name == SPECIAL_NAME:
        return _BOB
    return _STANDARD


def format_name(name: Name) -> FormattedName:
    """Format a name with whichever formatter applies to it."""
    return get_name_formatter(name).format(name)
