"""
Paradigm Comparison - Run every paradigm on one input and check they agree.

All paradigms share a single contract, so any difference in output is a bug
in one of them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.domain.types import Name, Result
from paradigm_dojo.core.exceptions import ParadigmMismatchError
from paradigm_dojo.core.ports.transformer import ListTransformerPort
from paradigm_dojo.core.validation import ensure_names, ensure_style

from .paradigms import iter_transformers


logger = logging.getLogger("ParadigmComparison")


@dataclass
class ComparisonResult:
    """Outputs of every paradigm for the same names and style."""

    style: ListStyle
    names: tuple[Name, ...]
    outputs: dict[Paradigm, Result] = field(default_factory=dict)

    @property
    def consistent(self) -> bool:
        """True when every paradigm produced the same output."""
        return len(set(self.outputs.values())) <= 1

    @property
    def result(self) -> Result:
        """
        The shared output.

        Raises:
            ParadigmMismatchError: If the paradigms disagree.
        """
        self.assert_consistent()
        return next(iter(self.outputs.values()), "")

    def mismatches(self) -> list[Paradigm]:
        """
        Paradigms whose output differs from the most common one.

        Ties go to the paradigm declared first.
        """
        if self.consistent:
            return []

        counts: dict[Result, int] = {}
        for output in self.outputs.values():
            counts[output] = counts.get(output, 0) + 1
        majority = max(counts, key=lambda output: counts[output])

        return [p for p, output in self.outputs.items() if output != majority]

    def assert_consistent(self) -> None:
        """Raise ParadigmMismatchError unless every paradigm agreed."""
        if self.consistent:
            return
        disagreeing = ", ".join(p.value for p in self.mismatches())
        raise ParadigmMismatchError(
            f"Paradigms disagree on {self.style.value} output: {disagreeing}",
            outputs={p.value: output for p, output in self.outputs.items()},
        )


def compare_paradigms(
    names: Iterable[Name],
    style: ListStyle | str = ListStyle.ASCIIDOC,
    transformers: Iterable[ListTransformerPort] | None = None,
) -> ComparisonResult:
    """
    Transform the same names with every paradigm.

    Args:
        names: Ordered names
        style: List style, or its name
        transformers: Transformers to compare; defaults to all paradigms

    Returns:
        ComparisonResult holding each paradigm's output
    """
    values = ensure_names(names)
    list_style = ensure_style(style)

    comparison = ComparisonResult(style=list_style, names=values)
    for transformer in transformers if transformers is not None else iter_transformers():
        comparison.outputs[transformer.paradigm] = transformer.transform(values, list_style)

    logger.debug(
        f"Compared {len(comparison.outputs)} paradigms on {len(values)} names: "
        f"{'consistent' if comparison.consistent else 'MISMATCH'}"
    )
    return comparison
