"""
Domain enums - List styles and programming paradigms.
"""

from __future__ import annotations

from enum import Enum

from paradigm_dojo.core.exceptions import InvalidArgumentError


class ListStyle(Enum):
    """Markup flavour used for list items."""

    ASCIIDOC = "asciidoc"
    MARKDOWN = "markdown"

    @classmethod
    def from_string(cls, value: str) -> ListStyle:
        """
        Parse a list style from its name or a common alias.

        Unknown values are rejected, not defaulted.

        Raises:
            InvalidArgumentError: If the value names no known style.
        """
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"List style must be a string, got {type(value).__name__}", argument="style"
            )

        normalized = value.strip().lower()
        mapping = {
            "asciidoc": cls.ASCIIDOC,
            "asciidoctor": cls.ASCIIDOC,
            "adoc": cls.ASCIIDOC,
            "markdown": cls.MARKDOWN,
            "md": cls.MARKDOWN,
        }

        if normalized not in mapping:
            raise InvalidArgumentError(f"Unknown list style: {value!r}", argument="style")
        return mapping[normalized]

    @property
    def marker(self) -> str:
        """Prefix placed before every list item."""
        return {
            ListStyle.ASCIIDOC: "* ",
            ListStyle.MARKDOWN: "- ",
        }[self]

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return {
            ListStyle.ASCIIDOC: "AsciiDoc",
            ListStyle.MARKDOWN: "Markdown",
        }[self]


class Paradigm(Enum):
    """Structuring discipline used to run the transformation."""

    PROCEDURAL = "procedural"
    OBJECT = "object"
    FUNCTIONAL = "functional"

    @classmethod
    def from_string(cls, value: str) -> Paradigm:
        """Parse a paradigm from its name or a common alias."""
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"Paradigm must be a string, got {type(value).__name__}", argument="paradigm"
            )

        normalized = value.strip().lower().replace("_", "-")
        mapping = {
            "procedural": cls.PROCEDURAL,
            "imperative": cls.PROCEDURAL,
            "object": cls.OBJECT,
            "object-oriented": cls.OBJECT,
            "oo": cls.OBJECT,
            "oop": cls.OBJECT,
            "functional": cls.FUNCTIONAL,
            "fp": cls.FUNCTIONAL,
        }

        if normalized not in mapping:
            raise InvalidArgumentError(f"Unknown paradigm: {value!r}", argument="paradigm")
        return mapping[normalized]

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return {
            Paradigm.PROCEDURAL: "Procedural",
            Paradigm.OBJECT: "Object-oriented",
            Paradigm.FUNCTIONAL: "Functional",
        }[self]
