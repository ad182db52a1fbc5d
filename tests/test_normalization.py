"""Tests for text normalization and word boundary classification.

This module tests normalize_text (lowercasing, diacritic stripping, letter
folding, trimming) and the word boundary character set.
"""

import unicodedata

import pytest
from fixtures.real_data import PLACES

import fuzzyrank as fz


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_lowercases(self):
        assert fz.normalize_text("Hello World") == "hello world"

    def test_strips_diacritics(self):
        assert fz.normalize_text("Crème Brûlée") == "creme brulee"

    def test_already_decomposed_input(self):
        """Combining marks in NFD input are removed as well."""
        decomposed = unicodedata.normalize("NFD", "café")
        assert len(decomposed) == 5
        assert fz.normalize_text(decomposed) == "cafe"

    def test_folds_stroked_l(self):
        """ł has no canonical decomposition and is folded explicitly."""
        assert fz.normalize_text("Łódź") == "lodz"
        assert fz.normalize_text("ł") == "l"

    def test_folds_n_with_tilde(self):
        assert fz.normalize_text("Ñandú") == "nandu"

    def test_trims_surrounding_whitespace(self):
        assert fz.normalize_text("  padded \t\n") == "padded"

    def test_trims_python_whitespace(self):
        """Trimming follows str.strip, which includes NEL and the C0 separators."""
        assert fz.normalize_text("\x85open\x1c\x1d\x1e\x1f") == "open"
        assert fz.normalize_text("\u2003open\u3000") == "open"

    def test_keeps_internal_whitespace(self):
        """Runs of internal spaces are not collapsed."""
        assert fz.normalize_text(" open  file ") == "open  file"

    def test_empty_string(self):
        assert fz.normalize_text("") == ""
        assert fz.normalize_text("   ") == ""

    def test_leaves_other_marks_alone(self):
        """Only marks in the combining diacritical block are stripped."""
        assert fz.normalize_text("snake_case-name") == "snake_case-name"
        assert fz.normalize_text("東京") == "東京"

    @pytest.mark.parametrize("text,expected", PLACES)
    def test_place_names(self, text, expected):
        assert fz.normalize_text(text) == expected

    def test_normalize_alias(self):
        assert fz.normalize is fz.normalize_text

    @pytest.mark.parametrize("text", ["Hello", "Zürich", "  Łódź ", "ÀÉÎÕÜ", ""])
    def test_idempotent(self, text):
        once = fz.normalize_text(text)
        assert fz.normalize_text(once) == once


class TestWordBoundaries:
    """Tests for is_word_boundary."""

    @pytest.mark.parametrize(
        "char", [" ", "[", "]", "(", ")", "-", "–", "—", "'", '"', "‘", "’", "“", "”"]
    )
    def test_boundary_characters(self, char):
        assert fz.is_word_boundary(char)

    @pytest.mark.parametrize("char", ["a", "Z", "0", "_", ".", "/", ":", "+", "\t"])
    def test_non_boundary_characters(self, char):
        assert not fz.is_word_boundary(char)

    def test_none_is_not_a_boundary(self):
        assert not fz.is_word_boundary(None)

    def test_boundary_set_is_frozen(self):
        assert isinstance(fz.WORD_BOUNDARIES, frozenset)
        assert len(fz.WORD_BOUNDARIES) == 14
