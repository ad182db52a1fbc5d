"""FuzzyIndex for repeated fuzzy searches over Polars data or Python lists.

This module provides a high-level interface for preparing a collection once
from a Polars Series, DataFrame columns or a Python list, then running many
queries against it without normalizing the collection again.

Warning:
    The index is a snapshot: rows added to the source Series or DataFrame
    afterwards are not seen. Build a new index instead.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import polars as pl

from fuzzyrank._utils import coerce_text, validate_limit
from fuzzyrank.enums import Strategy
from fuzzyrank.exceptions import ValidationError
from fuzzyrank.results import SearchResult
from fuzzyrank.search import FuzzySearch

logger = logging.getLogger(__name__)

_SEARCH_SERIES_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "match": pl.Utf8,
    "match_idx": pl.Int64,
    "score": pl.Float64,
}


class FuzzyIndex:
    """
    A reusable fuzzy search index.

    Items are either plain strings or, when built from DataFrame columns,
    row dicts whose listed columns are searched as separate fields.

    Example:
        >>> import polars as pl
        >>> from fuzzyrank import FuzzyIndex
        >>>
        >>> # Build index from a Series
        >>> names = pl.Series(["Apple Inc", "Microsoft Corp", "Google LLC"])
        >>> index = FuzzyIndex.from_series(names)
        >>>
        >>> # Search every query in a Series
        >>> queries = pl.Series(["micro", "goog"])
        >>> results = index.search_series(queries)
    """

    def __init__(
        self,
        items: Sequence[Any],
        columns: Optional[List[str]] = None,
        strategy: Union[str, Strategy] = Strategy.SMART,
    ):
        """
        Create a FuzzyIndex.

        Args:
            items: Strings to index, or row dicts when ``columns`` is given
            columns: Keys of each row dict to search, in field order
            strategy: Fuzzy fallback strategy ("off", "smart", "aggressive")
        """
        if columns is not None and not columns:
            raise ValidationError("columns must name at least one column")
        self._items = list(items)
        self._columns = columns
        self._search = FuzzySearch(
            range(len(self._items)),
            get_text=self._fields,
            strategy=strategy,
        )
        logger.debug("Built FuzzyIndex with %d items, columns=%s", len(self._items), columns)

    def _fields(self, idx: int) -> List[Optional[str]]:
        item = self._items[idx]
        if self._columns is None:
            return [item]
        return [item.get(column) for column in self._columns]

    @classmethod
    def from_series(
        cls,
        series: "pl.Series",
        strategy: Union[str, Strategy] = Strategy.SMART,
    ) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a Polars Series.

        Nulls are indexed as empty strings, which never match.

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", "Google"])
            >>> index = FuzzyIndex.from_series(names, strategy="aggressive")
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, strategy=strategy)

    @classmethod
    def from_dataframe(
        cls,
        df: "pl.DataFrame",
        columns: Union[str, List[str]],
        strategy: Union[str, Strategy] = Strategy.SMART,
    ) -> "FuzzyIndex":
        """
        Create a FuzzyIndex over one or more DataFrame columns.

        Args:
            df: Polars DataFrame
            columns: Column name or names to search; each is a separate field
            strategy: Fuzzy fallback strategy

        Raises:
            ValidationError: If a column is missing from the DataFrame
        """
        if isinstance(columns, str):
            columns = [columns]
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValidationError(f"Columns not found in DataFrame: {missing}")
        return cls(df.rows(named=True), columns=list(columns), strategy=strategy)

    @property
    def strategy(self) -> Strategy:
        return self._search.strategy

    def _search_indices(self, query: str, limit: Optional[int]) -> List[SearchResult[int]]:
        return self._search.search(query, limit=limit)

    def search(self, query: str, limit: Optional[int] = 10) -> List[SearchResult]:
        """
        Search the index.

        Args:
            query: Query string
            limit: Maximum number of results to return (None for all)

        Returns:
            List of SearchResult objects holding the indexed items, best first
        """
        return [
            SearchResult(self._items[r.item], r.score, r.matches)
            for r in self._search_indices(query, limit)
        ]

    def search_series(
        self,
        queries: "pl.Series",
        limit: Optional[int] = 1,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: Text of the matched item's first field
            - match_idx: Index of the match in the indexed data
            - score: Match score (lower is better)
        """
        validate_limit(limit)
        rows: List[Dict[str, Any]] = []

        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for result in self._search_indices(str(query), limit):
                row = {
                    "query_idx": query_idx,
                    "match": coerce_text(self._fields(result.item)[0]),
                    "match_idx": result.item,
                    "score": result.score,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        schema = dict(_SEARCH_SERIES_SCHEMA)
        if not include_query:
            del schema["query"]
        return pl.DataFrame(rows, schema=schema)

    def batch_search(
        self,
        queries: List[str],
        limit: Optional[int] = 1,
    ) -> List[List[SearchResult]]:
        """
        Search for multiple queries, returning results for each.

        Returns:
            List of lists, where each inner list contains SearchResult
            objects for the corresponding query
        """
        return [self.search(q, limit=limit) for q in queries]

    def get_items(self) -> List[Any]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def __repr__(self) -> str:
        return f"FuzzyIndex(strategy={self.strategy.value!r}, size={len(self._items)})"
