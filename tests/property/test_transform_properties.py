"""
Property-based tests for the list transformation.

Every paradigm is checked against the same laws with generated names,
including empty strings, whitespace, unicode, and embedded newlines.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from paradigm_dojo.adapters.formatters import format_name
from paradigm_dojo.application import compare_paradigms
from paradigm_dojo.application.paradigms import get_transformer
from paradigm_dojo.core.domain.enums import ListStyle, Paradigm


# =============================================================================
# Strategies
# =============================================================================

names_strategy = st.lists(st.text(max_size=20), max_size=15)

# Mix in the special name so it shows up far more often than by chance
names_with_bob_strategy = st.lists(
    st.one_of(st.just("bob"), st.text(max_size=10)),
    max_size=15,
)

paradigm_strategy = st.sampled_from(list(Paradigm))
style_strategy = st.sampled_from(list(ListStyle))


def expected_output(names, style):
    return "\n".join(style.marker + ("BOB" if n == "bob" else n) for n in names)


# =============================================================================
# Laws
# =============================================================================


class TestTransformLaws:
    """Laws every paradigm satisfies."""

    @given(names=names_with_bob_strategy, style=style_strategy, paradigm=paradigm_strategy)
    @settings(max_examples=200)
    def test_matches_reference(self, names, style, paradigm):
        """Output equals marker + formatted name per item, joined with newlines."""
        assert get_transformer(paradigm).transform(names, style) == expected_output(names, style)

    @given(names=names_with_bob_strategy, style=style_strategy)
    @settings(max_examples=100)
    def test_all_paradigms_agree(self, names, style):
        assert compare_paradigms(names, style).consistent

    @given(style=style_strategy, paradigm=paradigm_strategy)
    def test_empty_input_gives_empty_output(self, style, paradigm):
        assert get_transformer(paradigm).transform([], style) == ""

    @given(name=st.text(), style=style_strategy, paradigm=paradigm_strategy)
    def test_single_name(self, name, style, paradigm):
        expected = style.marker + ("BOB" if name == "bob" else name)
        assert get_transformer(paradigm).transform([name], style) == expected

    @given(
        head=names_with_bob_strategy,
        tail=names_with_bob_strategy,
        style=style_strategy,
        paradigm=paradigm_strategy,
    )
    def test_concatenation(self, head, tail, style, paradigm):
        """Transforming a concatenation joins the two outputs with one newline."""
        transformer = get_transformer(paradigm)
        combined = transformer.transform(head + tail, style)
        parts = [transformer.transform(part, style) for part in (head, tail) if part]
        assert combined == "\n".join(parts)

    @given(names=names_strategy, style=style_strategy, paradigm=paradigm_strategy)
    def test_deterministic(self, names, style, paradigm):
        transformer = get_transformer(paradigm)
        assert transformer.transform(names, style) == transformer.transform(names, style)

    @given(names=names_with_bob_strategy, paradigm=paradigm_strategy)
    def test_styles_differ_only_in_marker(self, names, paradigm):
        transformer = get_transformer(paradigm)
        asciidoc = transformer.transform(names, ListStyle.ASCIIDOC)
        markdown = transformer.transform(names, ListStyle.MARKDOWN)
        assert len(asciidoc) == len(markdown)
        assert asciidoc.count("\n") == markdown.count("\n")

    @given(name=st.one_of(st.just("bob"), st.just("BOB"), st.text()))
    def test_name_formatting_is_idempotent(self, name):
        assert format_name(format_name(name)) == format_name(name)

    @given(names=names_with_bob_strategy, paradigm=paradigm_strategy)
    def test_input_not_mutated(self, names, paradigm):
        snapshot = list(names)
        get_transformer(paradigm).transform(names)
        assert names == snapshot

    @given(
        names=st.lists(st.text(alphabet=st.characters(exclude_characters="\n"), max_size=10), max_size=15),
        style=style_strategy,
        paradigm=paradigm_strategy,
    )
    def test_line_count_matches_name_count(self, names, style, paradigm):
        """Without embedded newlines there is exactly one line per name."""
        result = get_transformer(paradigm).transform(names, style)
        lines = result.split("\n") if names else []
        assert len(lines) == len(names)
        assert all(line.startswith(style.marker) for line in lines)
