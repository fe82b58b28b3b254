"""
Application Layer - The paradigms and the cross-paradigm comparison.
"""

from .comparison import ComparisonResult, compare_paradigms
from .paradigms import (
    PARADIGM_CLASSES,
    FunctionalParadigm,
    ObjectParadigm,
    ProceduralParadigm,
    get_transformer,
    iter_transformers,
)


__all__ = [
    "PARADIGM_CLASSES",
    "ComparisonResult",
    "FunctionalParadigm",
    "ObjectParadigm",
    "ProceduralParadigm",
    "compare_paradigms",
    "get_transformer",
    "iter_transformers",
]
