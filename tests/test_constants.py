"""Tests for RESERVED_TERMS and is_generic."""

from __future__ import annotations

import pytest

from argname_similarity.constants import RESERVED_TERMS, is_generic
from argname_similarity.scoring import lexical_similarity


class TestReservedTerms:
    def test_contents_and_order(self) -> None:
        assert RESERVED_TERMS == (
            "message",
            "counter",
            "index",
            "object",
            "value",
            "item",
            "key",
        )

    def test_is_immutable(self) -> None:
        assert isinstance(RESERVED_TERMS, tuple)

    def test_terms_are_single_lowercase_words(self) -> None:
        assert all(term.isalpha() and term.islower() for term in RESERVED_TERMS)

    def test_not_applied_to_scoring(self) -> None:
        """Reserved terms still count as shared terms."""
        assert lexical_similarity("value", "value") == 1.0


class TestIsGeneric:
    @pytest.mark.parametrize("name", ["value", "Index", "itemKey", "keyValue"])
    def test_generic_names(self, name: str) -> None:
        assert is_generic(name)

    @pytest.mark.parametrize("name", ["userKey", "keepPath", "values", "KEY"])
    def test_specific_names(self, name: str) -> None:
        assert not is_generic(name)

    @pytest.mark.parametrize("name", ["", "_", "  "])
    def test_names_without_terms_are_not_generic(self, name: str) -> None:
        assert not is_generic(name)
