"""Batch operations API for fuzzyrank.

List-based helpers for matching one query against many plain strings
without keeping a prepared search around.

Example usage:
    >>> import fuzzyrank.batch as batch

    # Match a query against every string, keeping input order
    >>> results = batch.match_all(["Hello World", "help", "world"], "wor")
    >>> [(r.item, r.score) if r else None for r in results]
    [('Hello World', 1.0), None, ('world', 0.5)]

    # Top N best matches, best (lowest score) first
    >>> matches = batch.best_matches(["apple", "pineapple", "grape"], "apple", limit=2)
    >>> [(m.item, m.score) for m in matches]
    [('apple', 0.0), ('pineapple', 2.0)]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fuzzyrank._utils import normalize_strategy, validate_limit
from fuzzyrank.matchers import match_fuzzily, prepare_query, prepare_text
from fuzzyrank.results import MatchResult

if TYPE_CHECKING:
    from fuzzyrank.enums import Strategy

__all__ = [
    "match_all",
    "best_matches",
]


def match_all(
    strings: list[str],
    query: str,
    strategy: str | Strategy = "smart",
) -> list[MatchResult | None]:
    """Match a query against every string.

    The query is prepared once and reused for every string. Unlike a
    collection search, a blank query is matched like any other.

    Args:
        strings: Strings to match against the query.
        query: The query string.
        strategy: Fuzzy fallback strategy (string or Strategy enum). Options:
            - "off": Exact, prefix and contains tiers only
            - "smart": Word-aligned or 3+ character chunks (default)
            - "aggressive": Any letters in order

    Returns:
        One entry per input string, in input order: a MatchResult, or None
        where the string did not match.
    """
    strat = normalize_strategy(strategy)
    prepared_query = prepare_query(query)
    results: list[MatchResult | None] = []
    for text in strings:
        match = match_fuzzily(prepare_text(text), prepared_query, strat)
        results.append(None if match is None else MatchResult(text, match[0], match[1]))
    return results


def best_matches(
    strings: list[str],
    query: str,
    strategy: str | Strategy = "smart",
    limit: int | None = 5,
) -> list[MatchResult]:
    """Find the top N best matches for a query.

    Args:
        strings: Strings to search.
        query: The query string. A blank query matches nothing.
        strategy: Fuzzy fallback strategy (string or Strategy enum).
        limit: Maximum number of results (None for all).

    Returns:
        Matching MatchResult objects sorted by score ascending.

    Example:
        >>> best_matches(["Hello World", "help"], "help", limit=1)
        [MatchResult(item='help', score=0.0, ranges=[(0, 3)])]
    """
    validate_limit(limit)
    if not prepare_query(query).normalized:
        return []
    matches = [m for m in match_all(strings, query, strategy) if m is not None]
    matches.sort(key=lambda m: m.score)
    return matches if limit is None else matches[:limit]
