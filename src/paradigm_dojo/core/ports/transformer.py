"""
List Transformer Port - Abstract interface shared by every paradigm.

Implementations:
- ProceduralParadigm: loop with an inline style flag
- ObjectParadigm: capability objects composed by delegation
- FunctionalParadigm: mapped function values and a join
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.domain.types import Name, Result


__all__ = ["ListTransformerPort"]


class ListTransformerPort(ABC):
    """
    Abstract interface for turning a list of names into a bulleted list.

    Every implementation must honour the same contract:
    - names are formatted then rendered in input order
    - items are joined with a single newline, no leading or trailing one
    - an empty name list yields an empty string
    - None arguments raise InvalidArgumentError
    """

    @property
    @abstractmethod
    def paradigm(self) -> Paradigm:
        """Get the paradigm this transformer demonstrates."""
        ...

    @property
    def name(self) -> str:
        """Get the display name (e.g., 'Procedural')."""
        return self.paradigm.display_name

    @abstractmethod
    def transform(
        self,
        names: Iterable[Name],
        style: ListStyle | str = ListStyle.ASCIIDOC,
    ) -> Result:
        """
        Transform names into a bulleted list.

        Args:
            names: Ordered names
            style: List style, or its name

        Returns:
            The list items joined with newlines

        Raises:
            InvalidArgumentError: If names or style is absent or malformed
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
