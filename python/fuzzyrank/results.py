"""Result types returned by matchers and searches."""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Range = Tuple[int, int]
"""Inclusive ``(start, end)`` character indices."""

HighlightRanges = List[Range]
"""Character ranges to highlight, ordered by ascending start."""

FuzzyMatches = List[Optional[HighlightRanges]]
"""Per-field highlight ranges, ``None`` where a field did not match."""


@dataclass
class MatchResult:
    """
    Result of matching a single string against a query.

    Lower scores are better (think "error level"): ``0`` is an exact match,
    ``2`` and above are contains and fuzzy matches.

    Attributes:
        item: The matched text
        score: Match score
        ranges: Ranges to highlight, indexing into either the original or
            the normalized text depending on the tier that matched
    """

    item: str
    score: float
    ranges: HighlightRanges = field(default_factory=list)

    @property
    def matches(self) -> FuzzyMatches:
        """Ranges wrapped as a single-field FuzzyMatches list."""
        return [self.ranges]


@dataclass
class SearchResult(Generic[T]):
    """
    Result of searching a collection.

    Attributes:
        item: The collection element that matched
        score: Best (lowest) score across the element's fields
        matches: One entry per field, ``None`` for fields that did not match
    """

    item: T
    score: float
    matches: FuzzyMatches = field(default_factory=list)

    @property
    def best_ranges(self) -> Optional[HighlightRanges]:
        """Ranges of the first field that matched."""
        return next((m for m in self.matches if m is not None), None)


__all__ = ["FuzzyMatches", "HighlightRanges", "MatchResult", "Range", "SearchResult"]
