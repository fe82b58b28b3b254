"""
Name Formatter Port - Abstract capability for turning a name into a display name.

Implementations:
- BobNameFormat: "bob" becomes "BOB"
- StandardNameFormat: identity
"""

from abc import ABC, abstractmethod

from paradigm_dojo.core.domain.types import FormattedName, Name


__all__ = ["NameFormatterPort"]


class NameFormatterPort(ABC):
    """
    Single-method capability that formats one name.

    Implementations must be pure and total over every string.
    """

    @abstractmethod
    def format(self, name: Name) -> FormattedName:
        """
        Format a name for display.

        Args:
            name: Raw input name

        Returns:
            The display name
        """
        ...
