"""Internal utilities for fuzzyrank."""

from typing import Any, Optional, Union

from fuzzyrank.enums import Strategy
from fuzzyrank.exceptions import StrategyError, ValidationError

# Valid strategy names (lowercase)
VALID_STRATEGIES = frozenset(s.value for s in Strategy)


def normalize_strategy(strategy: Union[str, Strategy]) -> Strategy:
    """Convert a strategy name to the Strategy enum.

    Args:
        strategy: Either a Strategy enum value or a string strategy name.

    Returns:
        The matching Strategy member.

    Raises:
        StrategyError: If the strategy name is not recognized.
        TypeError: If strategy is not a string or Strategy enum.

    Example:
        >>> normalize_strategy("Aggressive")
        <Strategy.AGGRESSIVE: 'aggressive'>
    """
    if isinstance(strategy, Strategy):
        return strategy

    if isinstance(strategy, str):
        name = strategy.lower()
        if name in VALID_STRATEGIES:
            return Strategy(name)
        raise StrategyError(
            f"Unknown strategy: '{strategy}'. Valid options: {sorted(VALID_STRATEGIES)}"
        )

    raise TypeError(f"strategy must be str or Strategy enum, got {type(strategy).__name__}")


def coerce_text(value: Any) -> str:
    """Coerce a field value to searchable text; missing values become ""."""
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def validate_limit(limit: Optional[int]) -> Optional[int]:
    if limit is not None and limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    return limit


__all__ = ["VALID_STRATEGIES", "coerce_text", "normalize_strategy", "validate_limit"]
