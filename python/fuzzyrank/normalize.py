"""Text normalization and word boundary classification.

Every matcher compares queries against a canonical form of the item text:
lowercased, with combining diacritical marks stripped and a couple of
letters that do not decompose folded by hand.

Example:
    >>> from fuzzyrank import normalize_text
    >>> normalize_text("  Łódź Café ")
    'lodz cafe'
"""

import re
import unicodedata
from typing import Optional

_DIACRITICS_RE = re.compile("[\u0300-\u036f]")

# Letters with no canonical decomposition that should still fold to ASCII
_LETTER_FOLDS = str.maketrans({"ł": "l", "ñ": "n"})

WORD_BOUNDARIES = frozenset(" []()-–—'\"‘’“”")
"""Characters that delimit words: space, brackets, dashes and quote marks."""


def normalize_text(text: str) -> str:
    """Normalize a string for case and diacritic-insensitive comparison.

    Args:
        text: The string to normalize.

    Returns:
        The lowercased, NFD-decomposed string with combining marks removed,
        ``ł`` and ``ñ`` folded and surrounding whitespace trimmed. Internal
        whitespace is left untouched.

    Example:
        >>> normalize_text("Crème Brûlée")
        'creme brulee'
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _DIACRITICS_RE.sub("", decomposed).translate(_LETTER_FOLDS).strip()


def is_word_boundary(char: Optional[str]) -> bool:
    """Return True if ``char`` is a word boundary character."""
    return char in WORD_BOUNDARIES


__all__ = ["WORD_BOUNDARIES", "is_word_boundary", "normalize_text"]
