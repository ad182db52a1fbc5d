"""Property-based tests for fuzzyrank using Hypothesis.

These tests verify properties that should hold for all inputs:
- Idempotence: normalize(normalize(s)) == normalize(s)
- Tier scores: every score is a tier constant, the multi-word formula,
  or the chunk score of its own ranges
- Ordering: search results are sorted by score
- Inclusion: an item is returned iff one of its fields matches
- Off strategy: no fuzzy-tier results
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

import fuzzyrank as fz
from fuzzyrank import Strategy
from fuzzyrank.matchers import (
    match_fuzzily,
    prepare_query,
    prepare_text,
    score_consecutive_letters,
)

# Strategy for reasonable text (avoid surrogates, keep strings short)
text_strategy = st.text(max_size=60, alphabet=st.characters(blacklist_categories=["Cs"]))

# Small alphabet so that queries actually hit items
palette_text = st.text(alphabet="abcdeé Ł-(", max_size=20)
palette_query = st.text(alphabet="abcdeÉł -", min_size=1, max_size=6)
strategies = st.sampled_from(list(Strategy))
words = st.text(alphabet="abcdefgh", min_size=1, max_size=6)

TIER_SCORES = {0.0, 0.1, 0.5, 0.9, 1.0, 2.0}


class TestNormalizeProperties:
    """Properties of normalize_text."""

    @given(text_strategy)
    @settings(max_examples=300)
    def test_idempotent(self, s: str):
        once = fz.normalize_text(s)
        assert fz.normalize_text(once) == once

    @given(text_strategy)
    @settings(max_examples=100)
    def test_no_surrounding_whitespace(self, s: str):
        result = fz.normalize_text(s)
        assert result == result.strip()


class TestScoreProperties:
    """Every score comes from exactly one tier."""

    @given(palette_text, palette_query, strategies)
    @settings(max_examples=300)
    def test_score_belongs_to_a_tier(self, item: str, query: str, strategy: Strategy):
        text, prepared = prepare_text(item), prepare_query(query)
        result = match_fuzzily(text, prepared, strategy)
        if result is None:
            return
        score, ranges = result

        if score in TIER_SCORES:
            return
        if score == 1.5 + len(prepared.words) * 0.2:
            return
        assert strategy is not Strategy.OFF
        assert score == score_consecutive_letters(ranges, text.normalized)[0]

    @given(palette_text, palette_query)
    @settings(max_examples=200)
    def test_off_never_fuzzy(self, item: str, query: str):
        text, prepared = prepare_text(item), prepare_query(query)
        result = match_fuzzily(text, prepared, Strategy.OFF)
        if result is not None:
            assert result[0] in TIER_SCORES or result[0] == 1.5 + len(prepared.words) * 0.2

    @given(palette_text, palette_query, strategies)
    @settings(max_examples=200)
    def test_fuzzy_ranges_are_ordered_and_in_bounds(
        self, item: str, query: str, strategy: Strategy
    ):
        text, prepared = prepare_text(item), prepare_query(query)
        if match_fuzzily(text, prepared, Strategy.OFF) is not None:
            return
        result = match_fuzzily(text, prepared, strategy)
        if result is None:
            return
        _, ranges = result

        previous_end = -1
        for start, end in ranges:
            assert previous_end < start <= end < len(text.normalized)
            previous_end = end

    @given(palette_text, palette_query)
    @settings(max_examples=200)
    def test_smart_matches_imply_aggressive_matches(self, item: str, query: str):
        """Smart chunks are a subsequence too, so aggressive must succeed."""
        text, prepared = prepare_text(item), prepare_query(query)
        if match_fuzzily(text, prepared, Strategy.SMART) is not None:
            assert match_fuzzily(text, prepared, Strategy.AGGRESSIVE) is not None


class TestMultiWordProperties:
    """The multi-word score depends only on the number of query words."""

    @given(st.lists(words, min_size=2, max_size=5, unique=True), st.randoms())
    @settings(max_examples=200)
    def test_formula(self, query_words, rnd):
        item_words = list(query_words) + ["zz"]
        rnd.shuffle(item_words)
        item = " ".join(item_words)
        query = " ".join(query_words)
        assume(query not in item)

        result = fz.fuzzy_match(item, query)
        assert result is not None
        assert result.score == pytest.approx(1.5 + 0.2 * len(query_words))
        starts = [start for start, _ in result.ranges]
        assert starts == sorted(starts)


class TestSearchProperties:
    """Properties of collection search."""

    @given(st.lists(palette_text, max_size=15), palette_query, strategies)
    @settings(max_examples=200)
    def test_sorted_by_score(self, items, query, strategy):
        results = fz.create_fuzzy_search(items, strategy=strategy)(query)
        scores = [r.score for r in results]
        assert scores == sorted(scores)

    @given(st.lists(palette_text, max_size=15), palette_query, strategies)
    @settings(max_examples=200)
    def test_inclusion(self, items, query, strategy):
        search = fz.create_fuzzy_search(
            list(range(len(items))), get_text=lambda i: [items[i]], strategy=strategy
        )
        found = {r.item for r in search(query)}
        prepared = prepare_query(query)
        expected = set()
        if prepared.normalized:
            expected = {
                i
                for i, item in enumerate(items)
                if match_fuzzily(prepare_text(item), prepared, strategy) is not None
            }
        assert found == expected

    @given(st.lists(st.tuples(palette_text, palette_text), max_size=10), palette_query)
    @settings(max_examples=200)
    def test_best_score_is_min_over_fields(self, items, query):
        search = fz.create_fuzzy_search(items, get_text=list)
        prepared = prepare_query(query)
        for result in search(query):
            field_scores = [
                match_fuzzily(prepare_text(field), prepared, Strategy.SMART)
                for field in result.item
            ]
            assert any(m is not None for m in result.matches)
            assert result.score == min(s[0] for s in field_scores if s is not None)
