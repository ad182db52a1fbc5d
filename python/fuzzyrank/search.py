"""Searching collections and one-off matching.

Example usage:
    >>> from fuzzyrank import create_fuzzy_search, fuzzy_match

    # Search a list of strings
    >>> search = create_fuzzy_search(["apple", "banana", "cherry"])
    >>> [(r.item, r.score, r.matches) for r in search("ban")]
    [('banana', 0.5, [[(0, 2)]])]

    # Search records by key, or several fields at once
    >>> search = create_fuzzy_search(users, key="name")
    >>> search = create_fuzzy_search(users, get_text=lambda u: [u["name"], u["email"]])

    # Match a single string
    >>> fuzzy_match("Hello World", "wor")
    MatchResult(item='Hello World', score=1.0, ranges=[(6, 8)])
"""

import logging
import warnings
from collections.abc import Mapping
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from fuzzyrank._utils import coerce_text, normalize_strategy, validate_limit
from fuzzyrank.enums import Strategy
from fuzzyrank.matchers import PreparedText, match_fuzzily, prepare_query, prepare_text
from fuzzyrank.results import FuzzyMatches, MatchResult, SearchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

TextExtractor = Callable[[Any], Sequence[Optional[str]]]
"""Maps an item to its ordered list of (possibly missing) text fields."""


def key_extractor(key: str) -> TextExtractor:
    """Build an extractor reading a single field from mappings or objects."""

    def extract(item: Any) -> List[Optional[str]]:
        if isinstance(item, Mapping):
            return [item.get(key)]
        return [getattr(item, key, None)]

    return extract


def _identity_extractor(item: Any) -> List[Optional[str]]:
    return [item]


def resolve_extractor(
    key: Optional[str] = None,
    get_text: Optional[TextExtractor] = None,
) -> TextExtractor:
    """Pick the field extractor: ``get_text``, then ``key``, then the item itself."""
    if get_text is not None:
        if key is not None:
            warnings.warn(
                f"Both key={key!r} and get_text were given; key is ignored.",
                UserWarning,
                stacklevel=3,
            )
        return get_text
    if key is not None:
        return key_extractor(key)
    return _identity_extractor


class FuzzySearch(Generic[T]):
    """
    A prepared fuzzy search over a fixed collection.

    Every field of every item is normalized once at construction; calling
    the search with a query only normalizes the query. The collection is not
    re-indexed if its items change afterwards.

    Example:
        >>> search = FuzzySearch(["apple", "banana", "cherry", "grape"])
        >>> search("ban")
        [SearchResult(item='banana', score=0.5, matches=[[(0, 2)]])]
    """

    def __init__(
        self,
        collection: Sequence[T],
        key: Optional[str] = None,
        get_text: Optional[TextExtractor] = None,
        strategy: Union[str, Strategy] = Strategy.SMART,
    ):
        """
        Args:
            collection: Items to search
            key: Field to read from each item when items are records
            get_text: Function returning an item's text fields in order.
                Takes precedence over ``key``. Without either, each item is
                treated as the text itself.
            strategy: Fuzzy fallback strategy ("off", "smart", "aggressive")
        """
        self._strategy = normalize_strategy(strategy)
        extract = resolve_extractor(key=key, get_text=get_text)
        self._prepared: List[Tuple[T, List[PreparedText]]] = [
            (element, [prepare_text(coerce_text(text)) for text in extract(element)])
            for element in collection
        ]
        logger.debug(
            "Prepared fuzzy search over %d items (strategy=%s)",
            len(self._prepared),
            self._strategy.value,
        )

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def items(self) -> List[T]:
        """The searched collection, in its original order."""
        return [element for element, _ in self._prepared]

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchResult[T]]:
        """
        Search the collection.

        Args:
            query: Query string
            limit: Maximum number of results to return (None for all)

        Returns:
            Matching items as SearchResult objects sorted by score, best
            (lowest) first. Empty if the query is blank after normalization.
        """
        validate_limit(limit)
        prepared_query = prepare_query(query)
        if not prepared_query.normalized:
            return []

        results: List[SearchResult[T]] = []
        for element, texts in self._prepared:
            best_score: Optional[float] = None
            matches: FuzzyMatches = []
            for text in texts:
                result = match_fuzzily(text, prepared_query, self._strategy)
                if result is None:
                    matches.append(None)
                    continue
                score, ranges = result
                if best_score is None or score < best_score:
                    best_score = score
                matches.append(ranges)
            if best_score is not None:
                results.append(SearchResult(element, best_score, matches))

        results.sort(key=lambda r: r.score)
        if limit is not None:
            results = results[:limit]
        return results

    __call__ = search

    def __len__(self) -> int:
        return len(self._prepared)

    def __repr__(self) -> str:
        return f"FuzzySearch(strategy={self._strategy.value!r}, size={len(self._prepared)})"


def create_fuzzy_search(
    collection: Sequence[T],
    key: Optional[str] = None,
    get_text: Optional[TextExtractor] = None,
    strategy: Union[str, Strategy] = Strategy.SMART,
) -> FuzzySearch[T]:
    """Create a reusable search function for a collection.

    Args:
        collection: Items to search
        key: Field to read from each item when items are records
        get_text: Function returning an item's text fields (wins over ``key``)
        strategy: Fuzzy fallback strategy, "smart" by default

    Returns:
        A callable FuzzySearch; call it with a query to get sorted results.

    Example:
        >>> search = create_fuzzy_search(users, get_text=lambda u: [u.name, u.email])
        >>> search("john")
    """
    extract = resolve_extractor(key=key, get_text=get_text)
    return FuzzySearch(collection, get_text=extract, strategy=strategy)


def fuzzy_match(text: str, query: str) -> Optional[MatchResult]:
    """Match a single string against a query using the smart strategy.

    Use create_fuzzy_search for collections. Unlike a collection search,
    an empty query is not short-circuited: it falls through the tiers like
    any other query (typically as a prefix match).

    Args:
        text: Text to match
        query: Query string

    Returns:
        MatchResult, or None if no tier matched
    """
    result = match_fuzzily(prepare_text(text), prepare_query(query), Strategy.SMART)
    if result is None:
        return None
    score, ranges = result
    return MatchResult(text, score, ranges)


# Aliases
build_search = create_fuzzy_search
match_one = fuzzy_match

__all__ = [
    "FuzzySearch",
    "TextExtractor",
    "build_search",
    "create_fuzzy_search",
    "fuzzy_match",
    "key_extractor",
    "match_one",
    "resolve_extractor",
]
