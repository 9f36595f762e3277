"""Hypothesis property-based tests for Localizer loading and lookup.

Properties:
- Every loaded entry resolves to its value; everything else passes through
- Lookups fall back through any number of enclosing contexts
- The full-language value wins over the primary-language value
- Sequence lookups equal element-wise lookups
- Replacing with the same document is idempotent
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from ctxi18n import DocumentElement, Localizer, ParseError
from tests.strategies import (
    context_paths,
    document,
    entry_element,
    entry_tables,
    language_tags,
    plain_text,
)


class TestLoadedEntriesResolve:
    """Loaded entries are found; unknown keys pass through."""

    @given(entry_tables(), language_tags)
    def test_every_entry_resolves(self, table: dict[str, str], language: str) -> None:
        """localize(key) returns the loaded value for every key."""
        localizer = Localizer(language)
        localizer.load_document(document(table, language))

        for key, value in table.items():
            assert localizer.localize(key) == value

    @given(entry_tables(), plain_text, language_tags)
    def test_unknown_key_passes_through(
        self, table: dict[str, str], key: str, language: str
    ) -> None:
        """Keys not in the document come back unchanged."""
        assume(key not in table)
        localizer = Localizer(language)
        localizer.load_document(document(table, language))

        assert localizer.localize(key) == key

    @given(entry_tables(), st.lists(plain_text, max_size=10), language_tags)
    def test_sequence_equals_element_wise(
        self, table: dict[str, str], keys: list[str], language: str
    ) -> None:
        """localize(list) == [localize(k) for k in list]."""
        localizer = Localizer(language)
        localizer.load_document(document(table, language))

        assert localizer.localize(keys) == [localizer.localize(k) for k in keys]


class TestContextFallback:
    """Lookups walk up the whole context chain."""

    @given(context_paths(), plain_text, plain_text)
    def test_root_entry_visible_from_any_depth(
        self, path: list[str], key: str, value: str
    ) -> None:
        """A root entry resolves from every nested context."""
        localizer = Localizer("es")
        localizer.load_document(document({key: value}, "es"))

        assert localizer.context(".".join(path)).localize(key) == value

    @given(context_paths(), plain_text, plain_text, plain_text)
    def test_nearest_context_wins(
        self, path: list[str], key: str, root_value: str, context_value: str
    ) -> None:
        """An entry in the innermost context shadows the root entry."""
        localizer = Localizer("es")
        localizer.load_document(document({key: root_value}, "es"))
        node = localizer.context(".".join(path))
        node.load_document(document({key: context_value}, "es"))

        assert node.localize(key) == context_value
        assert node.context("deeper").localize(key) == context_value
        assert localizer.localize(key) == root_value


class TestLanguagePreference:
    """Full-tag values beat primary-tag values."""

    @given(
        st.sampled_from(["en-us", "es-mx", "fr-ca", "pt-br"]),
        plain_text,
        plain_text,
        st.booleans(),
    )
    def test_full_beats_primary(
        self, language: str, full_value: str, primary_value: str, primary_first: bool
    ) -> None:
        """Value order in the entry is irrelevant."""
        primary = language.partition("-")[0]
        values = (
            {primary: primary_value, language: full_value}
            if primary_first
            else {language: full_value, primary: primary_value}
        )
        localizer = Localizer(language.upper())
        localizer.load_document(
            DocumentElement.build("I18N", children=[entry_element("k", values)])
        )

        assert localizer.localize("k") == full_value


class TestReplaceIdempotent:
    """merge=False with the same document yields the same state."""

    @given(entry_tables(), entry_tables(), language_tags)
    def test_replace_twice(
        self, first: dict[str, str], second: dict[str, str], language: str
    ) -> None:
        """Loading B with merge=False after A leaves exactly B."""
        localizer = Localizer(language)
        localizer.load_document(document(first, language))
        localizer.load_document(document(second, language), merge=False)
        once = dict(localizer.localizations)
        localizer.load_document(document(second, language), merge=False)

        assert dict(localizer.localizations) == once == second


@pytest.mark.fuzz
class TestArbitraryTreesFuzz:
    """Arbitrary element trees either load or raise ParseError."""

    @given(
        st.recursive(
            st.builds(
                DocumentElement.build,
                st.sampled_from(["Key", "Value", "Entry", "Context", "Other"]),
                st.dictionaries(st.sampled_from(["lang", "id"]), language_tags, max_size=2),
                text=plain_text,
            ),
            lambda children: st.builds(
                DocumentElement.build,
                st.sampled_from(["Entry", "Context", "I18N"]),
                st.dictionaries(st.sampled_from(["lang", "id"]), language_tags, max_size=2),
                st.lists(children, max_size=4),
            ),
            max_leaves=20,
        ),
        language_tags,
    )
    def test_only_parse_errors(self, tree: DocumentElement, language: str) -> None:
        """No other exception escapes the loader."""
        localizer = Localizer(language)
        try:
            localizer.load_document(tree)
        except ParseError:
            pass
