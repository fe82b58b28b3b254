"""
Services - Factory functions and the canonical transform entry point.

Usage:
    from paradigm_dojo import transform

    transform(["toto", "bob", "titi"])
    # '* toto\\n* BOB\\n* titi'

    transform(["toto", "bob"], style="markdown", paradigm="object")
    # '- toto\\n- BOB'
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .domain.enums import ListStyle, Paradigm
from .domain.types import Name, Result
from .ports.config_provider import ConfigProviderPort
from .ports.transformer import ListTransformerPort


logger = logging.getLogger("Services")


def create_transformer(paradigm: Paradigm | str = Paradigm.FUNCTIONAL) -> ListTransformerPort:
    """
    Create the transformer for a paradigm.

    Args:
        paradigm: Paradigm or its name. Supported:
            - 'procedural' - loop with an inline style flag
            - 'object' - formatter objects composed by delegation
            - 'functional' - mapped functions and a join

    Returns:
        A fresh transformer instance

    Raises:
        InvalidArgumentError: If paradigm is None or unknown
    """
    from paradigm_dojo.application.paradigms import get_transformer

    return get_transformer(paradigm)


def create_config_provider(
    config_file: Path | str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ConfigProviderPort:
    """
    Create the default config provider (config file + environment).

    Args:
        config_file: Explicit config file; auto-detected when None
        cli_overrides: Values that win over every other source
    """
    from paradigm_dojo.adapters.config import EnvironmentConfigProvider

    return EnvironmentConfigProvider(config_file=config_file, cli_overrides=cli_overrides)


def transform(
    names: Iterable[Name],
    style: ListStyle | str = ListStyle.ASCIIDOC,
    paradigm: Paradigm | str = Paradigm.FUNCTIONAL,
) -> Result:
    """
    Turn names into a bulleted list.

    "bob" is shown as "BOB"; every other name is kept as is. Items are
    joined with newlines in input order, and an empty list gives "".

    Args:
        names: Ordered names
        style: 'asciidoc' ("* " items) or 'markdown' ("- " items)
        paradigm: Which implementation to run; all give the same output

    Returns:
        The bulleted list

    Raises:
        InvalidArgumentError: If names, style or paradigm is absent or malformed
    """
    transformer = create_transformer(paradigm)
    logger.debug(f"Transforming with {transformer.name} paradigm")
    return transformer.transform(names, style)
