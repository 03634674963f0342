"""
Wrapped line counting without a browser.

WrappingLineCounter lays text out the way a box with
``white-space: normal; word-break: break-word`` does: whitespace runs
collapse to single spaces, words move to the next line when they do not
fit, and a word wider than the box is broken between grapheme clusters.
"""

import math

from .backends.base import FontDescriptor, LineCountOracle
from .graphemes import GraphemeSegmenter
from .measure import TextMeasurer
from .truncate import search_longest_fit


class WrappingLineCounter(LineCountOracle):
    """Greedy line breaker measuring through a TextMeasurer."""

    def __init__(
        self, measurer: TextMeasurer, segmenter: GraphemeSegmenter | None = None
    ):
        self.measurer = measurer
        self.segmenter = segmenter or GraphemeSegmenter()

    def line_count(
        self,
        text: str,
        container_width_px: float,
        font: FontDescriptor,
        line_height_px: float | None = None,
    ) -> int:
        # Every line box has the same height here, so line_height_px does not
        # change the count.
        width = max(0, math.floor(container_width_px))
        words = text.split()
        if not words:
            return 1

        measure = self.measurer.measure
        space = measure(" ", font)
        lines = 1
        current: float | None = None  # width used on the current line

        for word in words:
            word_width = measure(word, font)

            if current is not None:
                if current + space + word_width <= width:
                    current += space + word_width
                    continue
                lines += 1
                current = None

            if word_width <= width:
                current = word_width
                continue

            # Word wider than the box: break it across lines
            segments = self.segmenter.segment(word)
            start = 0
            while True:
                count = self._longest_chunk(segments, start, width, font)
                if start + count >= len(segments):
                    current = measure(self.segmenter.join(segments, start), font)
                    break
                lines += 1
                start += count

        return lines

    def _longest_chunk(
        self, segments: list[str], start: int, width: int, font: FontDescriptor
    ) -> int:
        """Clusters from start that fit on one line; at least one."""
        join = self.segmenter.join
        count = search_longest_fit(
            1,
            len(segments) - start,
            lambda k: self.measurer.measure(join(segments, start, start + k), font)
            <= width,
        )
        return count or 1
