"""High-level Polars DataFrame operations for fuzzyrank.

Filter and rank the rows of a Series or DataFrame by how well they match a
query, the way a command palette filters its entries.

Functions in This Module
------------------------
- ``search_series()``: Matching values of a Series with their scores
- ``search_dataframe()``: Matching rows of a DataFrame, searched over one or
  more columns, with a score column appended

Example Usage
-------------
>>> import polars as pl
>>> import fuzzyrank as fz
>>>
>>> df = pl.DataFrame({
...     "name": ["Open File", "Save File", "Close Window"],
...     "shortcut": ["ctrl+o", "ctrl+s", "ctrl+w"],
... })
>>> fz.search_dataframe(df, "file", columns="name")

See Also
--------
- ``fuzzyrank.expr``: Polars expression namespace for column operations
- ``fuzzyrank.FuzzyIndex``: Reusable index for repeated searches
"""

from typing import List, Optional, Union

import polars as pl

from fuzzyrank.enums import Strategy
from fuzzyrank.index import FuzzyIndex


def search_series(
    series: "pl.Series",
    query: str,
    strategy: Union[str, Strategy] = Strategy.SMART,
    limit: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Find the values of a Series matching a query.

    Args:
        series: Series of strings to search
        query: Query string
        strategy: Fuzzy fallback strategy (string or Strategy enum)
        limit: Maximum number of rows to return (None for all)

    Returns:
        DataFrame with columns idx, value, score sorted by score ascending.
        Empty for a blank query.

    Example:
        >>> search_series(pl.Series(["apple", "banana", "cherry"]), "ban")
    """
    index = FuzzyIndex.from_series(series, strategy=strategy)
    results = index.search_series(pl.Series([query]), limit=limit, include_query=False)
    return results.select(
        pl.col("match_idx").alias("idx"),
        pl.col("match").alias("value"),
        pl.col("score"),
    )


def search_dataframe(
    df: "pl.DataFrame",
    query: str,
    columns: Union[str, List[str]],
    strategy: Union[str, Strategy] = Strategy.SMART,
    score_column: str = "_score",
    limit: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Find the rows of a DataFrame matching a query in any of the given columns.

    Each row is scored by its best-matching column.

    Args:
        df: DataFrame to search
        query: Query string
        columns: Column name or names to search
        strategy: Fuzzy fallback strategy (string or Strategy enum)
        score_column: Name of the appended score column
        limit: Maximum number of rows to return (None for all)

    Returns:
        The matching rows sorted by score ascending, with ``score_column``
        appended.

    Raises:
        ValidationError: If a column is missing from the DataFrame
    """
    index = FuzzyIndex.from_dataframe(df, columns, strategy=strategy)
    results = index.search_series(pl.Series([query]), limit=limit, include_query=False)
    if results.is_empty():
        return df.head(0).with_columns(pl.lit(None, dtype=pl.Float64).alias(score_column))
    return df[results["match_idx"].to_list()].with_columns(results["score"].alias(score_column))


__all__ = ["search_dataframe", "search_series"]
