"""
Grapheme cluster segmentation.

Splits strings into user-perceived characters so truncation never
separates a base letter from its combining marks, a surrogate pair,
or the parts of a compound emoji.
"""

from collections.abc import Sequence

import regex

# Unicode extended grapheme cluster (UAX #29), locale independent
_GRAPHEME_RE = regex.compile(r"\X")


class GraphemeSegmenter:
    """
    Splits text into grapheme clusters.

    With grapheme_aware=False the segmenter iterates code points instead.
    That mode may split compound emoji and exists for hosts that cannot
    ship a UAX #29 implementation.
    """

    def __init__(self, grapheme_aware: bool = True):
        self.grapheme_aware = grapheme_aware

    def segment(self, text: str) -> list[str]:
        """Return the clusters of text; joining them gives back text."""
        if not text:
            return []
        if self.grapheme_aware:
            return _GRAPHEME_RE.findall(text)
        return list(text)

    @staticmethod
    def join(segments: Sequence[str], start: int, end: int | None = None) -> str:
        """Concatenate segments[start:end], with both bounds clamped."""
        count = len(segments)
        s = max(0, min(start, count))
        e = count if end is None else max(s, min(end, count))
        return "".join(segments[s:e])

    @staticmethod
    def length(segments: Sequence[str]) -> int:
        return len(segments)


_default_segmenter = GraphemeSegmenter()


def segment_graphemes(text: str) -> list[str]:
    """Segment text with the default grapheme-aware segmenter."""
    return _default_segmenter.segment(text)


def join_slice(segments: Sequence[str], start: int, end: int | None = None) -> str:
    return GraphemeSegmenter.join(segments, start, end)


def grapheme_length(segments: Sequence[str]) -> int:
    return GraphemeSegmenter.length(segments)
