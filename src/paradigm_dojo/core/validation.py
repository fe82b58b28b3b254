"""
Validation - Fail-fast guards at the transformation boundary.

The transformation is total over sequences of strings, so these guards are
the only place anything can go wrong. They raise InvalidArgumentError and
never coerce a bad argument into a plausible one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .domain.enums import ListStyle, Paradigm
from .domain.types import FormattedName, ListItem, Name
from .exceptions import InvalidArgumentError
from .ports.list_formatter import ListFormatterPort


def ensure_names(names: Iterable[Name] | None) -> tuple[Name, ...]:
    """
    Check a NameList and return an immutable snapshot of it.

    Args:
        names: Ordered names to transform.

    Returns:
        The names as a tuple, in input order.

    Raises:
        InvalidArgumentError: If names is None, a bare string, not iterable,
            or holds a non-string element.
    """
    if names is None:
        raise InvalidArgumentError("Name list must not be None", argument="names")
    if isinstance(names, (str, bytes)):
        raise InvalidArgumentError(
            "Name list must be a sequence of names, not a single string",
            argument="names",
        )

    try:
        snapshot = tuple(names)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Name list must be iterable, got {type(names).__name__}",
            argument="names",
            cause=e,
        ) from e

    for index, name in enumerate(snapshot):
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Name at index {index} must be a string, got {type(name).__name__}",
                argument="names",
            )

    return snapshot


def ensure_style(style: ListStyle | str | None) -> ListStyle:
    """Resolve a style selector to a ListStyle, rejecting None."""
    if style is None:
        raise InvalidArgumentError("List style must not be None", argument="style")
    if isinstance(style, ListStyle):
        return style
    return ListStyle.from_string(style)


def ensure_paradigm(paradigm: Paradigm | str | None) -> Paradigm:
    """Resolve a paradigm selector to a Paradigm, rejecting None."""
    if paradigm is None:
        raise InvalidArgumentError("Paradigm must not be None", argument="paradigm")
    if isinstance(paradigm, Paradigm):
        return paradigm
    return Paradigm.from_string(paradigm)


def ensure_flag(flag: bool | None, argument: str = "flag") -> bool:
    """Require a real bool; truthy or falsy stand-ins are rejected."""
    if not isinstance(flag, bool):
        raise InvalidArgumentError(
            f"{argument} must be a bool, got {type(flag).__name__}", argument=argument
        )
    return flag


def ensure_list_function(
    function: Callable[[FormattedName], ListItem] | None,
) -> Callable[[FormattedName], ListItem]:
    """Require a callable list-item function."""
    if function is None:
        raise InvalidArgumentError("List function must not be None", argument="format_list_function")
    if not callable(function):
        raise InvalidArgumentError(
            f"List function must be callable, got {type(function).__name__}",
            argument="format_list_function",
        )
    return function


def ensure_list_formatter(formatter: ListFormatterPort | None) -> ListFormatterPort:
    """Require a ListFormatterPort instance."""
    if formatter is None:
        raise InvalidArgumentError("List formatter must not be None", argument="output_format")
    if not isinstance(formatter, ListFormatterPort):
        raise InvalidArgumentError(
            f"List formatter must be a ListFormatterPort, got {type(formatter).__name__}",
            argument="output_format",
        )
    return formatter
