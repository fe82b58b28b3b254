"""
List Formatter Port - Abstract capability for rendering one list item.

Implementations:
- AsciidocListFormat: "* " prefix
- MarkdownListFormat: "- " prefix
"""

from abc import ABC, abstractmethod

from paradigm_dojo.core.domain.enums import ListStyle
from paradigm_dojo.core.domain.types import FormattedName, ListItem


__all__ = ["ListFormatterPort"]


class ListFormatterPort(ABC):
    """
    Single-method capability that renders a formatted name as a list item.

    One instance is chosen per transformation call and applied to every
    element of that call.
    """

    @property
    @abstractmethod
    def style(self) -> ListStyle:
        """Get the list style this formatter renders."""
        ...

    @abstractmethod
    def format_item(self, formatted_name: FormattedName) -> ListItem:
        """
        Render a formatted name as a list item.

        Args:
            formatted_name: Output of a NameFormatterPort

        Returns:
            The list item text, without trailing newline
        """
        ...
