"""
Object-Oriented Paradigm - Capability objects composed by delegation.

Each formatting decision is owned by a small single-method object:
- the name formatter is looked up per element
- the list formatter is looked up once per call
"""

import logging
from collections.abc import Callable, Iterable

from paradigm_dojo.adapters.formatters import get_list_formatter, get_name_formatter
from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.domain.types import ITEM_SEPARATOR, Name, Result
from paradigm_dojo.core.ports.list_formatter import ListFormatterPort
from paradigm_dojo.core.ports.name_formatter import NameFormatterPort
from paradigm_dojo.core.ports.transformer import ListTransformerPort
from paradigm_dojo.core.validation import ensure_list_formatter, ensure_names


class ObjectParadigm(ListTransformerPort):
    """
    Delegates every decision to a formatter object.

    The lookups are injectable so tests can swap in their own capabilities.
    """

    def __init__(
        self,
        name_formatter_lookup: Callable[[Name], NameFormatterPort] = get_name_formatter,
        list_formatter_lookup: Callable[[ListStyle | str], ListFormatterPort] = get_list_formatter,
    ) -> None:
        self._name_formatter_lookup = name_formatter_lookup
        self._list_formatter_lookup = list_formatter_lookup
        self.logger = logging.getLogger("ObjectParadigm")

    @property
    def paradigm(self) -> Paradigm:
        return Paradigm.OBJECT

    def transform(
        self,
        names: Iterable[Name],
        style: ListStyle | str = ListStyle.ASCIIDOC,
    ) -> Result:
        values = ensure_names(names)
        output_format = self._list_formatter_lookup(style)
        self.logger.debug(f"Using {type(output_format).__name__} for {len(values)} names")
        return self.transform_with(values, output_format)

    def transform_with(self, names: Iterable[Name], output_format: ListFormatterPort) -> Result:
        """
        Transform names with an already chosen list formatter.

        Args:
            names: Ordered names
            output_format: Formatter applied to every item of this call

        Returns:
            The list items joined with newlines
        """
        values = ensure_names(names)
        output_format = ensure_list_formatter(output_format)

        items = []
        for value in values:
            name_formatter = self._name_formatter_lookup(value)
            formatted_name = name_formatter.format(value)
            items.append(output_format.format_item(formatted_name))

        return ITEM_SEPARATOR.join(items)
