"""Tiered matchers and scoring.

A query is tested against an item in a fixed priority order and the first
tier that applies decides the score (lower is better):

- 0:    Exact match
- 0.1:  Case/diacritics-insensitive exact match
- 0.5:  Starts with query
- 0.9:  Contains query at word boundary (exact case)
- 1:    Contains query at word boundary
- 1.5+: Contains all query words (in any order)
- 2:    Contains query anywhere
- 2+:   Fuzzy match (fewer, word-aligned chunks = better)

Highlight ranges from the exact-case tiers index into the original item,
every other tier indexes into the normalized item.
"""

from typing import Callable, Dict, FrozenSet, List, NamedTuple, Optional, Tuple

from fuzzyrank.enums import Strategy
from fuzzyrank.normalize import is_word_boundary, normalize_text
from fuzzyrank.results import HighlightRanges

Match = Tuple[float, HighlightRanges]


class PreparedText(NamedTuple):
    """An item field with its normalized form and word set."""

    original: str
    normalized: str
    words: FrozenSet[str]


class PreparedQuery(NamedTuple):
    """A query with its normalized form and words, in query order."""

    original: str
    normalized: str
    words: List[str]


def prepare_text(text: str) -> PreparedText:
    normalized = normalize_text(text)
    return PreparedText(text, normalized, frozenset(normalized.split(" ")))


def prepare_query(query: str) -> PreparedQuery:
    normalized = normalize_text(query)
    return PreparedQuery(query, normalized, normalized.split(" "))


def _starts_at_boundary(text: str, idx: int) -> bool:
    return idx == 0 or is_word_boundary(text[idx - 1])


def score_consecutive_letters(indices: HighlightRanges, normalized_item: str) -> Match:
    """Score fuzzy match chunks by how well they line up with words.

    Starts from 2 and adds a penalty per chunk: 0.2 for a whole word, 0.4
    for a word prefix, 0.8 for a mid-word run of 3+ characters and 1.6 for
    anything shorter.

    Args:
        indices: Inclusive ``(start, end)`` chunks into ``normalized_item``
        normalized_item: The normalized text the chunks index into

    Returns:
        ``(score, indices)``
    """
    score = 2.0
    last_idx_in_item = len(normalized_item) - 1
    for first_idx, last_idx in indices:
        chunk_length = last_idx - first_idx + 1
        is_start_of_word = first_idx == 0 or normalized_item[first_idx - 1] == " "
        is_end_of_word = last_idx == last_idx_in_item or normalized_item[last_idx + 1] == " "
        if is_start_of_word and is_end_of_word:
            score += 0.2
        elif is_start_of_word:
            score += 0.4
        elif chunk_length >= 3:
            score += 0.8
        else:
            score += 1.6
    return score, indices


def aggressive_fuzzy_match(normalized_item: str, normalized_query: str) -> Optional[Match]:
    """Match the query as a subsequence of the item, greedily from the left.

    Consecutive matched positions are merged into chunks. There is no
    backtracking, so the decomposition is the leftmost one rather than the
    best-scoring one.
    """
    query_len = len(normalized_query)
    if not query_len:
        return None

    indices: HighlightRanges = []
    query_idx = 0
    chunk_first_idx = -1
    chunk_last_idx = -2

    for item_idx, char in enumerate(normalized_item):
        if char != normalized_query[query_idx]:
            continue
        if item_idx != chunk_last_idx + 1:
            if chunk_first_idx >= 0:
                indices.append((chunk_first_idx, chunk_last_idx))
            chunk_first_idx = item_idx
        chunk_last_idx = item_idx
        query_idx += 1
        if query_idx == query_len:
            indices.append((chunk_first_idx, chunk_last_idx))
            return score_consecutive_letters(indices, normalized_item)

    return None


def smart_fuzzy_match(normalized_item: str, normalized_query: str) -> Optional[Match]:
    """Match the query in chunks that start on a word or span 3+ characters.

    A chunk may only start at the beginning of the item, right after a word
    boundary character, or mid-word when the next ``min(3, ...)`` characters
    of item and query agree. Single stray letters inside words are never
    matched.
    """
    query_len = len(normalized_query)
    item_len = len(normalized_item)
    if not query_len:
        return None

    indices: HighlightRanges = []
    query_idx = 0
    search_from = 0

    while True:
        idx = normalized_item.find(normalized_query[query_idx], search_from)
        if idx == -1:
            return None

        if not _starts_at_boundary(normalized_item, idx):
            min_chunk_len = min(3, query_len - query_idx, item_len - idx)
            item_chunk = normalized_item[idx : idx + min_chunk_len]
            if item_chunk != normalized_query[query_idx : query_idx + min_chunk_len]:
                search_from = idx + 1
                continue

        chunk_first_idx = chunk_last_idx = idx
        while (
            chunk_last_idx < item_len
            and query_idx < query_len
            and normalized_item[chunk_last_idx] == normalized_query[query_idx]
        ):
            chunk_last_idx += 1
            query_idx += 1
        chunk_last_idx -= 1
        indices.append((chunk_first_idx, chunk_last_idx))

        if query_idx == query_len:
            return score_consecutive_letters(indices, normalized_item)
        search_from = chunk_last_idx + 1


_FUZZY_MATCHERS: Dict[Strategy, Callable[[str, str], Optional[Match]]] = {
    Strategy.SMART: smart_fuzzy_match,
    Strategy.AGGRESSIVE: aggressive_fuzzy_match,
}


def exact_match(text: PreparedText, query: PreparedQuery) -> Optional[Match]:
    """Check the exact, normalized-exact, prefix and word-boundary contains tiers."""
    item, normalized_item = text.original, text.normalized
    query_len = len(query.original)

    if item == query.original:
        return 0.0, [(0, len(item) - 1)]

    if normalized_item == query.normalized:
        return 0.1, [(0, len(normalized_item) - 1)]

    if normalized_item.startswith(query.normalized):
        return 0.5, [(0, len(query.normalized) - 1)]

    exact_contains_idx = item.find(query.original)
    if exact_contains_idx > -1 and _starts_at_boundary(item, exact_contains_idx):
        return 0.9, [(exact_contains_idx, exact_contains_idx + query_len - 1)]

    # Sized by the original query even though it indexes the normalized item
    contains_idx = normalized_item.find(query.normalized)
    if contains_idx > -1 and _starts_at_boundary(normalized_item, contains_idx):
        return 1.0, [(contains_idx, contains_idx + query_len - 1)]

    return None


def multi_word_match(text: PreparedText, query: PreparedQuery) -> Optional[Match]:
    """Match when every query word is a whole word of the item, in any order."""
    if len(query.words) < 2 or not all(word in text.words for word in query.words):
        return None

    ranges = []
    for word in query.words:
        idx = text.normalized.find(word)
        ranges.append((idx, idx + len(word) - 1))
    ranges.sort(key=lambda r: r[0])
    return 1.5 + len(query.words) * 0.2, ranges


def contains_match(text: PreparedText, query: PreparedQuery) -> Optional[Match]:
    """Match the normalized query anywhere in the normalized item."""
    contains_idx = text.normalized.find(query.normalized)
    if contains_idx == -1:
        return None
    return 2.0, [(contains_idx, contains_idx + len(query.original) - 1)]


def match_fuzzily(
    text: PreparedText,
    query: PreparedQuery,
    strategy: Strategy = Strategy.SMART,
) -> Optional[Match]:
    """Run every tier in priority order and return the first match.

    Args:
        text: Prepared item field
        query: Prepared query
        strategy: Fuzzy fallback used once all other tiers fail

    Returns:
        ``(score, ranges)`` or None if nothing matched
    """
    for tier in (exact_match, multi_word_match, contains_match):
        result = tier(text, query)
        if result is not None:
            return result

    fuzzy_matcher = _FUZZY_MATCHERS.get(strategy)
    if fuzzy_matcher is None:
        return None
    return fuzzy_matcher(text.normalized, query.normalized)


__all__ = [
    "Match",
    "PreparedQuery",
    "PreparedText",
    "aggressive_fuzzy_match",
    "contains_match",
    "exact_match",
    "match_fuzzily",
    "multi_word_match",
    "prepare_query",
    "prepare_text",
    "score_consecutive_letters",
    "smart_fuzzy_match",
]
