"""
paradigm-dojo - One list transformation, three programming paradigms.

Turns a list of names into an AsciiDoc or Markdown bulleted list, with
"bob" shouted as "BOB", implemented procedurally, with objects, and with
functions.
"""

from .core.domain import ListStyle, Paradigm
from .core.exceptions import (
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    DojoError,
    InvalidArgumentError,
    ParadigmMismatchError,
)
from .core.services import create_transformer, transform


__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "DojoError",
    "InvalidArgumentError",
    "ListStyle",
    "Paradigm",
    "ParadigmMismatchError",
    "__version__",
    "create_transformer",
    "transform",
]
