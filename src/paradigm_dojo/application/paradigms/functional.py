"""
Functional Paradigm - Unary functions applied in order, then a join.
"""

from collections.abc import Callable, Iterable
from functools import partial, reduce
from typing import Any

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.domain.types import (
    ITEM_SEPARATOR,
    SPECIAL_DISPLAY_NAME,
    SPECIAL_NAME,
    FormattedName,
    ListItem,
    Name,
    Result,
)
from paradigm_dojo.core.ports.transformer import ListTransformerPort
from paradigm_dojo.core.validation import ensure_list_function, ensure_names, ensure_style


def format_name(name: Name) -> FormattedName:
    return SPECIAL_DISPLAY_NAME if name == SPECIAL_NAME else name


def format_list_asciidoc(name: FormattedName) -> ListItem:
    return "* " + name


def format_list_markdown(name: FormattedName) -> ListItem:
    return "- " + name


LIST_FUNCTIONS: dict[ListStyle, Callable[[FormattedName], ListItem]] = {
    ListStyle.ASCIIDOC: format_list_asciidoc,
    ListStyle.MARKDOWN: format_list_markdown,
}


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Feed value through each function in order."""
    return reduce(lambda acc, function: function(acc), functions, value)


class FunctionalParadigm(ListTransformerPort):
    """Maps the name function, then the list function, then joins."""

    @property
    def paradigm(self) -> Paradigm:
        return Paradigm.FUNCTIONAL

    def transform(
        self,
        names: Iterable[Name],
        style: ListStyle | str = ListStyle.ASCIIDOC,
    ) -> Result:
        return self.transform_with(names, LIST_FUNCTIONS[ensure_style(style)])

    def transform_with(
        self,
        names: Iterable[Name],
        format_list_function: Callable[[FormattedName], ListItem],
    ) -> Result:
        """
        Transform names with any list-item function.

        Args:
            names: Ordered names
            format_list_function: Renders one formatted name as a list item

        Returns:
            The list items joined with newlines
        """
        values = ensure_names(names)
        format_list_function = ensure_list_function(format_list_function)

        return pipe(
            values,
            partial(map, format_name),
            partial(map, format_list_function),
            ITEM_SEPARATOR.join,
        )
