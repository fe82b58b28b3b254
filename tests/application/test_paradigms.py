"""
Tests for the three paradigm implementations.

The shared contract runs once per paradigm through the parametrized
``transformer`` fixture; paradigm-specific entry points are tested below it.
"""

import pytest

from paradigm_dojo.adapters.formatters import AsciidocListFormat, MarkdownListFormat
from paradigm_dojo.application.paradigms import (
    PARADIGM_CLASSES,
    FunctionalParadigm,
    ObjectParadigm,
    ProceduralParadigm,
    get_transformer,
    iter_transformers,
)
from paradigm_dojo.application.paradigms.functional import (
    LIST_FUNCTIONS,
    format_list_asciidoc,
    format_list_markdown,
    format_name,
    pipe,
)
from paradigm_dojo.core.domain.enums import ListStyle, Paradigm
from paradigm_dojo.core.exceptions import InvalidArgumentError
from paradigm_dojo.core.ports import ListTransformerPort, NameFormatterPort


# =============================================================================
# Shared Contract
# =============================================================================


class TestTransformerContract:
    """Behaviour every paradigm must share."""

    def test_asciidoc_scenario(self, transformer, sample_names, expected_asciidoc):
        assert transformer.transform(sample_names, ListStyle.ASCIIDOC) == expected_asciidoc

    def test_markdown_scenario(self, transformer, sample_names, expected_markdown):
        assert transformer.transform(sample_names, ListStyle.MARKDOWN) == expected_markdown

    def test_default_style_is_asciidoc(self, transformer, sample_names, expected_asciidoc):
        assert transformer.transform(sample_names) == expected_asciidoc

    def test_style_by_name(self, transformer, sample_names, expected_markdown):
        assert transformer.transform(sample_names, "markdown") == expected_markdown

    def test_empty_list(self, transformer):
        assert transformer.transform([], ListStyle.ASCIIDOC) == ""
        assert transformer.transform([], ListStyle.MARKDOWN) == ""

    def test_single_element_has_no_separator(self, transformer):
        assert transformer.transform(["bob"]) == "* BOB"
        assert transformer.transform(["toto"], ListStyle.MARKDOWN) == "- toto"

    def test_order_is_preserved(self, transformer):
        assert transformer.transform(["b", "a"]) == "* b\n* a"

    def test_no_leading_or_trailing_separator(self, transformer, sample_names):
        result = transformer.transform(sample_names)
        assert not result.startswith("\n")
        assert not result.endswith("\n")
        assert result.count("\n") == len(sample_names) - 1

    def test_special_case_is_exact(self, transformer):
        assert transformer.transform(["Bob", "BOB", "bobby"]) == "* Bob\n* BOB\n* bobby"

    def test_empty_names_are_kept(self, transformer):
        assert transformer.transform(["", "bob", ""]) == "* \n* BOB\n* "

    def test_names_with_newlines_pass_through(self, transformer):
        assert transformer.transform(["a\nb"]) == "* a\nb"

    def test_input_is_not_mutated(self, transformer, sample_names):
        snapshot = list(sample_names)
        transformer.transform(sample_names)
        assert sample_names == snapshot

    def test_accepts_tuples_and_generators(self, transformer):
        assert transformer.transform(("toto", "bob")) == "* toto\n* BOB"
        assert transformer.transform(n for n in ["toto", "bob"]) == "* toto\n* BOB"

    def test_deterministic(self, transformer, sample_names):
        assert transformer.transform(sample_names) == transformer.transform(sample_names)

    def test_none_names_fail_fast(self, transformer):
        with pytest.raises(InvalidArgumentError):
            transformer.transform(None)

    def test_none_style_fails_fast(self, transformer, sample_names):
        with pytest.raises(InvalidArgumentError):
            transformer.transform(sample_names, None)

    def test_unknown_style_fails_fast(self, transformer, sample_names):
        with pytest.raises(InvalidArgumentError):
            transformer.transform(sample_names, "html")

    def test_bare_string_fails_fast(self, transformer):
        with pytest.raises(InvalidArgumentError):
            transformer.transform("bob")

    def test_implements_port(self, transformer):
        assert isinstance(transformer, ListTransformerPort)
        assert transformer.name == transformer.paradigm.display_name


# =============================================================================
# Procedural
# =============================================================================


class TestProceduralParadigm:
    """Tests for the flag-driven entry point."""

    def test_paradigm(self, procedural):
        assert procedural.paradigm is Paradigm.PROCEDURAL

    def test_flag_true_is_asciidoc(self, procedural, sample_names, expected_asciidoc):
        assert procedural.transform_with_flag(sample_names, is_asciidoctor=True) == expected_asciidoc

    def test_flag_false_is_markdown(self, procedural, sample_names, expected_markdown):
        """Markdown is reachable through the flag, not just through the style enum."""
        assert procedural.transform_with_flag(sample_names, is_asciidoctor=False) == expected_markdown

    def test_flag_defaults_to_asciidoc(self, procedural):
        assert procedural.transform_with_flag(["bob"]) == "* BOB"

    def test_flag_path_validates_names(self, procedural):
        with pytest.raises(InvalidArgumentError):
            procedural.transform_with_flag(None)

    @pytest.mark.parametrize("flag", [None, "markdown", 0, 1, ""])
    def test_flag_must_be_bool(self, procedural, sample_names, flag):
        """Truthy or falsy stand-ins never pick a marker."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            procedural.transform_with_flag(sample_names, flag)

        assert exc_info.value.argument == "is_asciidoctor"

    def test_flag_checked_even_for_empty_list(self, procedural):
        with pytest.raises(InvalidArgumentError):
            procedural.transform_with_flag([], None)


# =============================================================================
# Object-Oriented
# =============================================================================


class TestObjectParadigm:
    """Tests for delegation to formatter objects."""

    def test_paradigm(self, object_paradigm):
        assert object_paradigm.paradigm is Paradigm.OBJECT

    def test_transform_with_explicit_formatter(self, object_paradigm, sample_names):
        assert object_paradigm.transform_with(sample_names, MarkdownListFormat()) == (
            "- toto\n- BOB\n- titi"
        )
        assert object_paradigm.transform_with(sample_names, AsciidocListFormat()) == (
            "* toto\n* BOB\n* titi"
        )

    def test_name_formatter_is_looked_up_per_element(self, sample_names):
        looked_up = []

        class Reverse(NameFormatterPort):
            def format(self, name):
                return name[::-1]

        def lookup(name):
            looked_up.append(name)
            return Reverse()

        paradigm = ObjectParadigm(name_formatter_lookup=lookup)

        assert paradigm.transform(sample_names) == "* otot\n* bob\n* itit"
        assert looked_up == sample_names

    def test_list_formatter_is_looked_up_once_per_call(self, sample_names):
        calls = []

        def lookup(style):
            calls.append(style)
            return MarkdownListFormat()

        paradigm = ObjectParadigm(list_formatter_lookup=lookup)
        paradigm.transform(sample_names, ListStyle.ASCIIDOC)

        assert calls == [ListStyle.ASCIIDOC]

    @pytest.mark.parametrize("output_format", [None, "markdown", format_list_markdown])
    def test_transform_with_rejects_non_formatter(self, object_paradigm, sample_names, output_format):
        with pytest.raises(InvalidArgumentError):
            object_paradigm.transform_with(sample_names, output_format)

    def test_transform_with_checks_formatter_for_empty_list(self, object_paradigm):
        with pytest.raises(InvalidArgumentError):
            object_paradigm.transform_with([], None)

    def test_lookup_returning_none_fails_fast(self, sample_names):
        paradigm = ObjectParadigm(list_formatter_lookup=lambda style: None)

        with pytest.raises(InvalidArgumentError):
            paradigm.transform(sample_names)


# =============================================================================
# Functional
# =============================================================================


class TestFunctionalParadigm:
    """Tests for the function-valued pipeline."""

    def test_paradigm(self, functional):
        assert functional.paradigm is Paradigm.FUNCTIONAL

    def test_transform_with_any_function(self, functional, sample_names):
        assert functional.transform_with(sample_names, lambda n: f"<li>{n}</li>") == (
            "<li>toto</li>\n<li>BOB</li>\n<li>titi</li>"
        )

    def test_transform_with_validates_names(self, functional):
        with pytest.raises(InvalidArgumentError):
            functional.transform_with(None, format_list_asciidoc)

    @pytest.mark.parametrize("function", [None, "- "])
    def test_transform_with_rejects_non_callable(self, functional, sample_names, function):
        with pytest.raises(InvalidArgumentError):
            functional.transform_with(sample_names, function)

    def test_transform_with_checks_function_for_empty_list(self, functional):
        with pytest.raises(InvalidArgumentError):
            functional.transform_with([], None)

    def test_format_name(self):
        assert format_name("bob") == "BOB"
        assert format_name("Bob") == "Bob"

    def test_list_functions(self):
        assert format_list_asciidoc("x") == "* x"
        assert format_list_markdown("x") == "- x"
        assert LIST_FUNCTIONS == {
            ListStyle.ASCIIDOC: format_list_asciidoc,
            ListStyle.MARKDOWN: format_list_markdown,
        }

    def test_pipe_applies_in_order(self):
        assert pipe(2, lambda x: x + 1, lambda x: x * 10) == 30

    def test_pipe_without_functions_is_identity(self):
        assert pipe("same") == "same"


# =============================================================================
# Lookup
# =============================================================================


class TestParadigmLookup:
    """Tests for get_transformer() and iter_transformers()."""

    def test_every_paradigm_has_a_class(self):
        assert set(PARADIGM_CLASSES) == set(Paradigm)

    def test_get_transformer(self):
        assert isinstance(get_transformer(Paradigm.PROCEDURAL), ProceduralParadigm)
        assert isinstance(get_transformer("oo"), ObjectParadigm)
        assert isinstance(get_transformer("fp"), FunctionalParadigm)

    def test_get_transformer_rejects_none(self):
        with pytest.raises(InvalidArgumentError):
            get_transformer(None)

    def test_iter_transformers_order(self):
        assert [t.paradigm for t in iter_transformers()] == list(Paradigm)

    def test_repr(self):
        assert repr(ProceduralParadigm()) == "ProceduralParadigm()"
