"""Enums for fuzzyrank API."""

from enum import Enum


class Strategy(str, Enum):
    """Fuzzy fallback strategies.

    The strategy only decides what happens once every exact, prefix and
    contains tier has failed. String values are accepted anywhere a
    strategy is expected.

    Example:
        >>> from fuzzyrank import Strategy, create_fuzzy_search
        >>> search = create_fuzzy_search(["Hello World"], strategy=Strategy.AGGRESSIVE)
        >>> search("hwl")[0].score
        4.4
    """

    OFF = "off"
    """No fuzzy matching, only exact/prefix/contains tiers"""

    SMART = "smart"
    """Matches chunks at word boundaries or runs of 3+ characters (default)"""

    AGGRESSIVE = "aggressive"
    """Classic fuzzy matching: any letters in order"""


__all__ = ["Strategy"]
