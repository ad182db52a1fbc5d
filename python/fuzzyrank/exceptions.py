"""Exceptions raised by fuzzyrank.

Matching itself never raises; these cover invalid configuration.
"""


class FuzzyRankError(Exception):
    """Base exception for all fuzzyrank errors."""


class ValidationError(FuzzyRankError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class StrategyError(FuzzyRankError, ValueError):
    """Raised when an unknown fuzzy strategy is specified."""


__all__ = ["FuzzyRankError", "StrategyError", "ValidationError"]
