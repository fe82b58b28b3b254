"""
Tests for the service factories and the canonical transform() entry point.
"""

import logging

import pytest

import paradigm_dojo
from paradigm_dojo.adapters.config import EnvironmentConfigProvider
from paradigm_dojo.application.paradigms import (
    FunctionalParadigm,
    ObjectParadigm,
    ProceduralParadigm,
)
from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.exceptions import InvalidArgumentError
from paradigm_dojo.core.services import create_config_provider, create_transformer, transform


class TestCreateTransformer:
    """Tests for create_transformer()."""

    @pytest.mark.parametrize(
        ("paradigm", "cls"),
        [
            (Paradigm.PROCEDURAL, ProceduralParadigm),
            (Paradigm.OBJECT, ObjectParadigm),
            (Paradigm.FUNCTIONAL, FunctionalParadigm),
            ("procedural", ProceduralParadigm),
            ("object", ObjectParadigm),
            ("functional", FunctionalParadigm),
        ],
    )
    def test_creates_matching_class(self, paradigm, cls):
        assert isinstance(create_transformer(paradigm), cls)

    def test_default_is_functional(self):
        assert isinstance(create_transformer(), FunctionalParadigm)

    def test_unknown_paradigm(self):
        with pytest.raises(InvalidArgumentError):
            create_transformer("logic")

    def test_returns_fresh_instances(self):
        assert create_transformer("object") is not create_transformer("object")


class TestCreateConfigProvider:
    """Tests for create_config_provider()."""

    def test_returns_environment_provider(self):
        assert isinstance(create_config_provider(), EnvironmentConfigProvider)

    def test_passes_overrides(self):
        provider = create_config_provider(cli_overrides={"style": "markdown"})
        assert provider.load().style is ListStyle.MARKDOWN


class TestTransform:
    """Tests for transform()."""

    def test_default_is_asciidoc(self, sample_names, expected_asciidoc):
        assert transform(sample_names) == expected_asciidoc

    def test_markdown(self, sample_names, expected_markdown):
        assert transform(sample_names, style=ListStyle.MARKDOWN) == expected_markdown

    def test_style_by_name(self, sample_names, expected_markdown):
        assert transform(sample_names, style="markdown") == expected_markdown

    @pytest.mark.parametrize("paradigm", ["procedural", "object", "functional"])
    def test_every_paradigm(self, paradigm, sample_names, expected_asciidoc):
        assert transform(sample_names, paradigm=paradigm) == expected_asciidoc

    def test_empty(self):
        assert transform([]) == ""

    def test_none_names(self):
        with pytest.raises(InvalidArgumentError):
            transform(None)

    def test_none_style(self, sample_names):
        with pytest.raises(InvalidArgumentError):
            transform(sample_names, style=None)

    def test_none_paradigm(self, sample_names):
        with pytest.raises(InvalidArgumentError):
            transform(sample_names, paradigm=None)

    def test_logs_paradigm_at_debug(self, sample_names, caplog):
        with caplog.at_level(logging.DEBUG, logger="Services"):
            transform(sample_names, paradigm="object")
        assert "Object-oriented" in caplog.text


def test_package_exports():
    """The top-level package exposes the main entry points."""
    assert paradigm_dojo.transform is transform
    assert paradigm_dojo.ListStyle is ListStyle
    assert paradigm_dojo.__version__
