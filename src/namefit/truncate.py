"""
Middle-ellipsis truncation of file names.

Both truncators share one binary search for the longest candidate that
satisfies a fit oracle. SingleLineTruncator asks "is it narrower than
the cell", TwoLineTruncator asks "does it wrap to at most N lines".
Candidates are always built from whole grapheme clusters and carry a
single ellipsis; the extension is kept whenever there is room for it.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .backends.base import FontDescriptor, LineCountOracle
from .cache import BoundedCache
from .config.constants import (
    DEFAULT_LINE_HEIGHT_FACTOR,
    DEFAULT_MAX_LINES,
    ELLIPSIS,
    MIN_LAYOUT_WIDTH_PX,
)
from .graphemes import GraphemeSegmenter
from .measure import TextMeasurer
from .utils.filenames import split_extension


@dataclass(frozen=True)
class TruncationResult:
    """Outcome of a truncation call."""

    text: str
    is_truncated: bool
    full_text: str

    @property
    def needs_tooltip(self) -> bool:
        """Whether the cell should offer the full name on hover."""
        return self.is_truncated

    @classmethod
    def unchanged(cls, text: str) -> "TruncationResult":
        return cls(text=text, is_truncated=False, full_text=text)


def search_longest_fit(low: int, high: int, fits: Callable[[int], bool]) -> int | None:
    """
    Binary search the largest n in [low, high] with fits(n).

    Assumes fits is monotonic (true up to some n, false after it).

    Returns:
        The largest fitting n, or None if no tried n fits
    """
    best = None
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


class SingleLineTruncator:
    """Fits a name into a maximum pixel width."""

    def __init__(
        self,
        measurer: TextMeasurer,
        segmenter: GraphemeSegmenter | None = None,
        cache: BoundedCache | None = None,
    ):
        self.measurer = measurer
        self.segmenter = segmenter or GraphemeSegmenter()
        self.cache = cache

    def truncate_to_width(
        self,
        text: str,
        max_width: float,
        font: FontDescriptor,
        preserve_extension: bool = True,
    ) -> TruncationResult:
        """
        Middle-truncate text so it renders within max_width pixels.

        Args:
            text: Name to fit
            max_width: Available width in pixels (negative counts as zero)
            font: Font the cell renders with
            preserve_extension: Keep the trailing '.ext' intact

        Returns:
            TruncationResult; the ellipsis alone when nothing else fits
        """
        return self._truncate(text, max_width, (font,), preserve_extension)

    def truncate_to_width_stable(
        self,
        text: str,
        max_width: float,
        fonts: Sequence[FontDescriptor],
        preserve_extension: bool = True,
    ) -> TruncationResult:
        """
        Truncate so the result fits under every font in fonts.

        Lets a cell that switches weight on selection render the same
        string in both states.
        """
        fonts = tuple(fonts)
        if not fonts:
            raise ValueError("At least one font is required")
        return self._truncate(text, max_width, fonts, preserve_extension)

    def _truncate(
        self,
        text: str,
        max_width: float,
        fonts: tuple[FontDescriptor, ...],
        preserve_extension: bool,
    ) -> TruncationResult:
        if not text:
            return TruncationResult.unchanged(text)

        max_width = max(0.0, float(max_width))
        key = ("width", text, max_width, fonts, preserve_extension)
        if self.cache is not None:
            hit = self.cache.get(key)
            if hit is not None:
                return hit

        failures = self.measurer.failed_measurements
        result = self._compute(text, max_width, fonts, preserve_extension)

        # Estimated widths must not outlive the backend hiccup
        if self.cache is not None and self.measurer.failed_measurements == failures:
            self.cache.put(key, result)
        return result

    def _compute(
        self,
        text: str,
        max_width: float,
        fonts: tuple[FontDescriptor, ...],
        preserve_extension: bool,
    ) -> TruncationResult:
        def width(s: str) -> float:
            return self.measurer.measure_widest(s, fonts)

        if width(text) <= max_width:
            return TruncationResult.unchanged(text)

        def truncated(s: str) -> TruncationResult:
            return TruncationResult(text=s, is_truncated=True, full_text=text)

        ellipsis_width = width(ELLIPSIS)
        base, extension = split_extension(text) if preserve_extension else (text, "")

        if extension:
            available = max_width - width(extension) - ellipsis_width
            if available <= 0:
                # No room for any of the base name: keep the tail of the extension
                allow_for_ext = max(0.0, max_width - ellipsis_width)
                if allow_for_ext > 0:
                    ext_segments = self.segmenter.segment(extension)
                    return truncated(
                        ELLIPSIS + self._fit_suffix(ext_segments, allow_for_ext, width)
                    )
                return truncated(ELLIPSIS)
        else:
            available = max_width - ellipsis_width
            if available <= 0:
                return truncated(ELLIPSIS)

        segments = self.segmenter.segment(base)
        start_budget = min(math.ceil(available / 2), available)
        start, kept = self._fit_prefix(segments, start_budget, width)

        # The suffix gets the floor half, and never more than the prefix left over
        end_budget = min(math.floor(available / 2), available - width(start))
        end = self._fit_suffix(
            segments, end_budget, width, max_keep=len(segments) - kept
        )

        return truncated(f"{start}{ELLIPSIS}{end}{extension}")

    def _fit_prefix(
        self,
        segments: list[str],
        budget: float,
        width: Callable[[str], float],
    ) -> tuple[str, int]:
        """Longest leading run of clusters no wider than budget."""
        join = self.segmenter.join
        kept = search_longest_fit(
            0, len(segments), lambda k: width(join(segments, 0, k)) <= budget
        )
        kept = kept or 0
        return join(segments, 0, kept), kept

    def _fit_suffix(
        self,
        segments: list[str],
        budget: float,
        width: Callable[[str], float],
        max_keep: int | None = None,
    ) -> str:
        """Longest trailing run of clusters no wider than budget."""
        join = self.segmenter.join
        count = len(segments)
        high = count if max_keep is None else max(0, min(count, max_keep))
        kept = search_longest_fit(
            0, high, lambda k: width(join(segments, count - k)) <= budget
        )
        return join(segments, count - (kept or 0))


class TwoLineTruncator:
    """Fits a name into a maximum number of wrapped lines."""

    def __init__(
        self,
        oracle: LineCountOracle,
        segmenter: GraphemeSegmenter | None = None,
        cache: BoundedCache | None = None,
        measurer: TextMeasurer | None = None,
    ):
        """
        Initialize the truncator.

        Args:
            oracle: Counts the lines a candidate wraps to
            segmenter: Cluster splitter for candidates
            cache: Shared result cache, or None to disable caching
            measurer: The measurer behind the oracle, if any; results computed
                while it was estimating widths are not cached
        """
        self.oracle = oracle
        self.segmenter = segmenter or GraphemeSegmenter()
        self.cache = cache
        self.measurer = measurer

    def truncate_to_lines(
        self,
        text: str,
        container_width_px: float,
        font: FontDescriptor,
        preserve_extension: bool = True,
        max_lines: int = DEFAULT_MAX_LINES,
        line_height_px: float | None = None,
    ) -> TruncationResult:
        """
        Middle-truncate text so it wraps to at most max_lines lines.

        Args:
            text: Name to fit
            container_width_px: Width of the wrapping cell
            font: Font the cell renders with
            preserve_extension: Keep the trailing '.ext' intact
            max_lines: Line budget (at least 1)
            line_height_px: Line box height; defaults to 1.25x the font size

        Returns:
            TruncationResult; unchanged while the cell has no width yet
        """
        if not text or container_width_px <= MIN_LAYOUT_WIDTH_PX:
            return TruncationResult.unchanged(text)

        width = math.floor(container_width_px)
        max_lines = max(1, int(max_lines))
        if line_height_px is None:
            line_height_px = round(font.size_px * DEFAULT_LINE_HEIGHT_FACTOR)

        key = ("lines", text, width, font, line_height_px, preserve_extension, max_lines)
        if self.cache is not None:
            hit = self.cache.get(key)
            if hit is not None:
                return hit

        failures = self._failed_measurements()

        def fits(candidate: str) -> bool:
            lines = self.oracle.line_count(
                candidate, width, font, line_height_px=line_height_px
            )
            return lines <= max_lines

        if fits(text):
            result = TruncationResult.unchanged(text)
        else:
            best = self._best_fit(text, preserve_extension, fits)
            result = TruncationResult(
                text=best, is_truncated=best != text, full_text=text
            )

        if self.cache is not None and self._failed_measurements() == failures:
            self.cache.put(key, result)
        return result

    def _failed_measurements(self) -> int:
        return 0 if self.measurer is None else self.measurer.failed_measurements

    def _best_fit(
        self,
        text: str,
        preserve_extension: bool,
        fits: Callable[[str], bool],
    ) -> str:
        join = self.segmenter.join
        base, extension = split_extension(text) if preserve_extension else (text, "")
        segments = self.segmenter.segment(base)
        count = len(segments)

        def build(keep: int) -> str:
            start = join(segments, 0, math.ceil(keep / 2))
            end = join(segments, count - keep // 2)
            return f"{start}{ELLIPSIS}{end}{extension}"

        keep = search_longest_fit(0, count, lambda k: fits(build(k)))
        if keep:
            return build(keep)

        if extension:
            # Ultra-narrow cell: show as much of the extension tail as fits
            ext_segments = self.segmenter.segment(extension)
            for i in range(len(ext_segments), 0, -1):
                candidate = ELLIPSIS + join(ext_segments, len(ext_segments) - i)
                if fits(candidate):
                    return candidate

        return ELLIPSIS
