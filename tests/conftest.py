"""
Shared pytest fixtures for the paradigm-dojo test suite.

Fixture Categories:
- Paradigms: One instance per paradigm, and a parametrized fixture over all
- Formatters: List formatter instances
- Data: Sample name lists and expected outputs
- Environment: Isolation from the developer's config and env vars
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from paradigm_dojo.core.ports import ListTransformerPort


# =============================================================================
# Paradigms
# =============================================================================


@pytest.fixture(params=["procedural", "object", "functional"])
def transformer(request: pytest.FixtureRequest) -> ListTransformerPort:
    """Each paradigm in turn; tests using this run once per paradigm."""
    from paradigm_dojo.application.paradigms import get_transformer

    return get_transformer(request.param)


@pytest.fixture
def procedural():
    from paradigm_dojo.application.paradigms import ProceduralParadigm

    return ProceduralParadigm()


@pytest.fixture
def object_paradigm():
    from paradigm_dojo.application.paradigms import ObjectParadigm

    return ObjectParadigm()


@pytest.fixture
def functional():
    from paradigm_dojo.application.paradigms import FunctionalParadigm

    return FunctionalParadigm()


# =============================================================================
# Sample Data
# =============================================================================


@pytest.fixture
def sample_names() -> list[str]:
    """The canonical example input."""
    return ["toto", "bob", "titi"]


@pytest.fixture
def expected_asciidoc() -> str:
    return "* toto\n* BOB\n* titi"


@pytest.fixture
def expected_markdown() -> str:
    return "- toto\n- BOB\n- titi"


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch: pytest.MonkeyPatch):
    """
    Keep tests away from real config files and DOJO_* variables.

    HOME points at an empty directory so auto-detection never finds a
    developer's personal config.
    """
    from paradigm_dojo.adapters.config import ENV_VARS

    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
