"""
Paradigms - Three interchangeable implementations of the list transformation.

- ProceduralParadigm: imperative loop with an inline style flag
- ObjectParadigm: formatter objects looked up and composed by delegation
- FunctionalParadigm: mapped function values and a join reduction
"""

from collections.abc import Iterator

from paradigm_dojo.core.domain.enums import Paradigm
from paradigm_dojo.core.ports.transformer import ListTransformerPort
from paradigm_dojo.core.validation import ensure_paradigm

from .functional import FunctionalParadigm
from .object_oriented import ObjectParadigm
from .procedural import ProceduralParadigm


PARADIGM_CLASSES: dict[Paradigm, type[ListTransformerPort]] = {
    Paradigm.PROCEDURAL: ProceduralParadigm,
    Paradigm.OBJECT: ObjectParadigm,
    Paradigm.FUNCTIONAL: FunctionalParadigm,
}


def get_transformer(paradigm: Paradigm | str) -> ListTransformerPort:
    """
    Create the transformer for a paradigm.

    Args:
        paradigm: Paradigm or its name (e.g., 'object')

    Raises:
        InvalidArgumentError: If paradigm is None or unknown
    """
    return PARADIGM_CLASSES[ensure_paradigm(paradigm)]()


def iter_transformers() -> Iterator[ListTransformerPort]:
    """Yield one transformer per paradigm, in declaration order."""
    for paradigm in Paradigm:
        yield PARADIGM_CLASSES[paradigm]()


__all__ = [
    "PARADIGM_CLASSES",
    "FunctionalParadigm",
    "ObjectParadigm",
    "ProceduralParadigm",
    "get_transformer",
    "iter_transformers",
]
