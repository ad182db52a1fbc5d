"""
fuzzyrank - Fuzzy search ranking and highlighting for interactive filtering

A small library for ranking the items of a collection against a query the
way command palettes and autocomplete lists do: exact and prefix matches
first, then word-boundary and multi-word matches, then fuzzy matches, with
character ranges to highlight for every result.

Scores are "error levels": lower is better.

Example usage:
    >>> import fuzzyrank as fz

    # Search a collection
    >>> search = fz.create_fuzzy_search(["apple", "banana", "cherry", "grape"])
    >>> [(r.item, r.score, r.matches) for r in search("ban")]
    [('banana', 0.5, [[(0, 2)]])]

    # Match a single string
    >>> result = fz.fuzzy_match("Hello World", "wor")
    >>> (result.score, result.ranges)
    (1.0, [(6, 8)])

    # Render the match
    >>> fz.highlight(result.item, result.ranges)
    'Hello <mark>Wor</mark>ld'
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzyrank.expr  # noqa: F401
from fuzzyrank import batch
from fuzzyrank.enums import Strategy
from fuzzyrank.exceptions import FuzzyRankError, StrategyError, ValidationError
from fuzzyrank.highlight import highlight, highlight_segments
from fuzzyrank.index import FuzzyIndex
from fuzzyrank.matchers import match_fuzzily
from fuzzyrank.normalize import WORD_BOUNDARIES, is_word_boundary, normalize_text

# -----------------------------------------------------------------------------
# Polars Integration
# -----------------------------------------------------------------------------
from fuzzyrank.polars_ext import search_dataframe, search_series
from fuzzyrank.results import (
    FuzzyMatches,
    HighlightRanges,
    MatchResult,
    Range,
    SearchResult,
)
from fuzzyrank.search import (
    FuzzySearch,
    build_search,
    create_fuzzy_search,
    fuzzy_match,
    match_one,
)

__version__ = _get_version("fuzzyrank")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyRankError",
    "ValidationError",
    "StrategyError",
    # Result types
    "Range",
    "HighlightRanges",
    "FuzzyMatches",
    "MatchResult",
    "SearchResult",
    # Enums
    "Strategy",
    # Normalization
    "normalize_text",
    "normalize",
    "is_word_boundary",
    "WORD_BOUNDARIES",
    # Matching
    "match_fuzzily",
    "fuzzy_match",
    "match_one",
    # Collection search
    "FuzzySearch",
    "create_fuzzy_search",
    "build_search",
    # Highlighting
    "highlight",
    "highlight_segments",
    # Batch processing
    "batch",
    # Index classes (high-level)
    "FuzzyIndex",
    # Polars Integration
    "search_series",
    "search_dataframe",
]


# Convenience aliases
normalize = normalize_text
