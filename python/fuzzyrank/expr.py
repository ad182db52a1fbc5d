"""Polars expression namespace for fuzzy ranking.

This module registers a `.fuzzy` namespace on Polars expressions, so match
scores can be computed directly in expression contexts.

Warning:
    Scores are computed per element with map_elements. For repeated queries
    over the same column, build a FuzzyIndex once instead.

Example:
    >>> import polars as pl
    >>> import fuzzyrank  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Hello World", "Help", "Goodbye"]})
    >>> df.with_columns(score=pl.col("name").fuzzy.score("wor"))
"""

from typing import Union

import polars as pl

from fuzzyrank._utils import normalize_strategy
from fuzzyrank.enums import Strategy
from fuzzyrank.matchers import match_fuzzily, prepare_query, prepare_text
from fuzzyrank.normalize import normalize_text


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy ranking namespace for Polars expressions.

    Access via `.fuzzy` on any string expression. Nulls stay null.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def score(
        self,
        query: str,
        strategy: Union[str, Strategy] = Strategy.SMART,
    ) -> pl.Expr:
        """
        Score each value against a query.

        Args:
            query: Query string
            strategy: Fuzzy fallback strategy (string or Strategy enum)

        Returns:
            Expression producing scores (lower is better), null where the
            value did not match or the query is blank

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.score("hw", strategy="aggressive")
            ... )
        """
        strat = normalize_strategy(strategy)
        prepared_query = prepare_query(query)

        def score_value(value):
            if not prepared_query.normalized:
                return None
            match = match_fuzzily(prepare_text(str(value)), prepared_query, strat)
            return None if match is None else match[0]

        return self._expr.map_elements(score_value, return_dtype=pl.Float64)

    def is_match(
        self,
        query: str,
        strategy: Union[str, Strategy] = Strategy.SMART,
    ) -> pl.Expr:
        """
        Check whether each value matches a query.

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_match("wor"))
        """
        return self.score(query, strategy=strategy).is_not_null()

    def normalize(self) -> pl.Expr:
        """
        Normalize strings for case and diacritic-insensitive comparison.

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").fuzzy.normalize()
            ... )
        """
        return self._expr.map_elements(lambda s: normalize_text(str(s)), return_dtype=pl.Utf8)
