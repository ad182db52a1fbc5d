"""Render highlight ranges for display.

Ranges may index into the normalized text, so they are clamped to the text
being rendered rather than trusted blindly.

Example:
    >>> from fuzzyrank import fuzzy_match, highlight
    >>> result = fuzzy_match("Hello World", "wor")
    >>> highlight(result.item, result.ranges)
    'Hello <mark>Wor</mark>ld'
"""

from typing import Callable, List, Optional, Tuple

from fuzzyrank.results import HighlightRanges


def _default_mark(segment: str) -> str:
    return f"<mark>{segment}</mark>"


def highlight_segments(text: str, ranges: Optional[HighlightRanges]) -> List[Tuple[str, bool]]:
    """Split text into ``(segment, is_highlighted)`` pairs.

    Empty and out-of-bounds ranges are skipped, overlapping parts of later
    ranges are ignored.

    Example:
        >>> highlight_segments("Hello World", [(0, 0), (6, 6)])
        [('H', True), ('ello ', False), ('W', True), ('orld', False)]
    """
    segments: List[Tuple[str, bool]] = []
    cursor = 0
    for start, end in sorted(ranges or []):
        start = max(start, cursor)
        end = min(end, len(text) - 1)
        if end < start:
            continue
        if start > cursor:
            segments.append((text[cursor:start], False))
        segments.append((text[start : end + 1], True))
        cursor = end + 1
    if cursor < len(text):
        segments.append((text[cursor:], False))
    return segments


def highlight(
    text: str,
    ranges: Optional[HighlightRanges],
    mark: Callable[[str], str] = _default_mark,
) -> str:
    """Apply ``mark`` to every highlighted segment of ``text``.

    Args:
        text: Text to render
        ranges: Inclusive ranges from a match result (None renders plain text)
        mark: Function wrapping a highlighted segment,
            e.g. ``lambda s: f"[bold]{s}[/bold]"``

    Returns:
        Text with highlights applied
    """
    return "".join(
        mark(segment) if marked else segment
        for segment, marked in highlight_segments(text, ranges)
    )


__all__ = ["highlight", "highlight_segments"]
