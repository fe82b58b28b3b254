"""
List Formatters - Concrete ListFormatterPort implementations.

AsciiDoc and Markdown unordered lists differ only in their item marker.
"""

from paradigm_dojo.core.domain.enums import ListStyle
from paradigm_dojo.core.domain.types import FormattedName, ListItem
from paradigm_dojo.core.ports.list_formatter import ListFormatterPort
from paradigm_dojo.core.validation import ensure_style


class AsciidocListFormat(ListFormatterPort):
    """Renders `* item`."""

    @property
    def style(self) -> ListStyle:
        return ListStyle.ASCIIDOC

    def format_item(self, formatted_name: FormattedName) -> ListItem:
        return "* " + formatted_name


class MarkdownListFormat(ListFormatterPort):
    """Renders `- item`."""

    @property
    def style(self) -> ListStyle:
        return ListStyle.MARKDOWN

    def format_item(self, formatted_name: FormattedName) -> ListItem:
        return "- " + formatted_name


LIST_FORMATTERS: dict[ListStyle, ListFormatterPort] = {
    ListStyle.ASCIIDOC: AsciidocListFormat(),
    ListStyle.MARKDOWN: MarkdownListFormat(),
}


def get_list_formatter(style: ListStyle | str) -> ListFormatterPort:
    """
    Look up the list formatter for a style.

    Args:
        style: ListStyle or its name (e.g., 'markdown')

    Returns:
        The shared formatter instance for that style

    Raises:
        InvalidArgumentError: If style is None or unknown
    """
    return LIST_FORMATTERS[ensure_style(style)]
