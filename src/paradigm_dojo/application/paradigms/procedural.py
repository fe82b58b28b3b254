"""
Procedural Paradigm - Step-by-step string building with an inline style flag.
"""

from collections.abc import Iterable

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.domain.types import Name, Result
from paradigm_dojo.core.ports.transformer import ListTransformerPort
from paradigm_dojo.core.validation import ensure_flag, ensure_names, ensure_style


class ProceduralParadigm(ListTransformerPort):
    """
    Builds the list in one loop.

    The list marker is chosen by a boolean flag checked for every item,
    and the separator is only emitted once a first item exists.
    """

    @property
    def paradigm(self) -> Paradigm:
        return Paradigm.PROCEDURAL

    def transform(
        self,
        names: Iterable[Name],
        style: ListStyle | str = ListStyle.ASCIIDOC,
    ) -> Result:
        is_asciidoctor = ensure_style(style) is ListStyle.ASCIIDOC
        return self.transform_with_flag(names, is_asciidoctor)

    def transform_with_flag(self, names: Iterable[Name], is_asciidoctor: bool = True) -> Result:
        """
        Transform names, selecting the marker with a plain boolean.

        Args:
            names: Ordered names
            is_asciidoctor: True for "* " items, False for "- " items

        Returns:
            The list items joined with newlines

        Raises:
            InvalidArgumentError: If names is malformed or the flag is not a bool
        """
        values = ensure_names(names)
        is_asciidoctor = ensure_flag(is_asciidoctor, "is_asciidoctor")

        result = ""
        separator = ""

        for value in values:
            formatted_value = self._get_formatted_value(value)

            result += separator

            if is_asciidoctor:
                result += "* " + formatted_value
            else:
                result += "- " + formatted_value

            separator = "\n"

        return result

    def _get_formatted_value(self, value: Name) -> str:
        if value == "bob":
            return "BOB"
        else:
            return value
