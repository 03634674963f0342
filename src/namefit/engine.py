"""
Engine composition and the public API used by list and grid cells.

TruncationEngine owns the caches, the measurer, the line counter and
both truncators. Module-level functions delegate to a default engine
that is built lazily from the persisted settings and can be replaced
with set_default_engine() (tests, font or zoom changes).
"""

from collections.abc import Sequence

from .backends.base import FontDescriptor, LineCountOracle, create_backend
from .cache import BoundedCache
from .config.constants import (
    DEFAULT_EVICTION_POLICY,
    DEFAULT_MAX_LINES,
    TRUNCATION_CACHE_CAPACITY,
)
from .config.settings import EngineSettings, SettingsManager
from .graphemes import GraphemeSegmenter
from .layout import WrappingLineCounter
from .measure import TextMeasurer
from .truncate import SingleLineTruncator, TruncationResult, TwoLineTruncator
from .utils.logging_wrapper import LogCallback, LoggingMetricsWrapper


class TruncationEngine:
    """
    Measures and truncates file names for UI cells.

    Usage:
        engine = TruncationEngine.from_settings()
        font = FontDescriptor(13, "Inter")
        result = engine.truncate_text_to_width("Quarterly report.pdf", 120, font)
        label.text = result.text
        label.tooltip = result.full_text if result.needs_tooltip else None
    """

    def __init__(
        self,
        measurer: TextMeasurer | None = None,
        line_counter: LineCountOracle | None = None,
        segmenter: GraphemeSegmenter | None = None,
        truncation_cache: BoundedCache | None = None,
        default_font: FontDescriptor | None = None,
        log_callback: LogCallback | None = None,
    ):
        """
        Wire the engine.

        Args:
            measurer: Cached width measurement (default: configured backend)
            line_counter: Oracle for the two-line variant (default: greedy wrapper)
            segmenter: Grapheme segmenter shared by all components
            truncation_cache: Result cache shared by both truncators
            default_font: Font used when a call passes none
            log_callback: Callback function(message, level) for logging
        """
        self.segmenter = segmenter or GraphemeSegmenter()
        self.measurer = measurer or TextMeasurer(log_callback=log_callback)
        self.line_counter = line_counter or WrappingLineCounter(
            self.measurer, self.segmenter
        )
        if truncation_cache is None:
            truncation_cache = BoundedCache(
                TRUNCATION_CACHE_CAPACITY, DEFAULT_EVICTION_POLICY
            )
        self.truncation_cache = truncation_cache
        self.default_font = default_font or FontDescriptor()

        self.single_line = SingleLineTruncator(
            self.measurer, self.segmenter, self.truncation_cache
        )
        self.two_line = TwoLineTruncator(
            self.line_counter, self.segmenter, self.truncation_cache, self.measurer
        )

    @classmethod
    def from_settings(
        cls,
        settings: EngineSettings | None = None,
        log_callback: LogCallback | None = None,
    ) -> "TruncationEngine":
        """
        Build an engine from settings (loaded from disk if None).

        Args:
            settings: Engine settings
            log_callback: Callback function(message, level) for logging

        Returns:
            Wired engine; its metrics backend is constructed on first use
        """
        if settings is None:
            settings = SettingsManager().load()

        def backend_factory():
            backend = create_backend(
                settings.metrics_backend, font_paths=dict(settings.font_paths)
            )
            if settings.log_oracle_calls:
                return LoggingMetricsWrapper(backend, log_callback)
            return backend

        measurer = TextMeasurer(
            provider_factory=backend_factory,
            capacity=settings.measure_cache_capacity,
            policy=settings.eviction_policy,
            log_callback=log_callback,
        )
        font = FontDescriptor(
            size_px=settings.default_font_size_px,
            family=settings.default_font_family,
            weight=settings.default_font_weight,
            style=settings.default_font_style,
        )
        segmenter = GraphemeSegmenter(grapheme_aware=settings.grapheme_aware)
        line_counter = WrappingLineCounter(measurer, segmenter)
        if settings.log_oracle_calls:
            line_counter = LoggingMetricsWrapper(line_counter, log_callback)

        return cls(
            measurer=measurer,
            line_counter=line_counter,
            segmenter=segmenter,
            truncation_cache=BoundedCache(
                settings.truncation_cache_capacity, settings.eviction_policy
            ),
            default_font=font,
            log_callback=log_callback,
        )

    def measure_text(self, text: str, font: FontDescriptor | None = None) -> float:
        """Rendered width of text in pixels."""
        return self.measurer.measure(text, font or self.default_font)

    def truncate_text_to_width(
        self,
        text: str,
        max_width: float,
        font: FontDescriptor | None = None,
        preserve_extension: bool = True,
    ) -> TruncationResult:
        """Middle-truncate text to fit max_width pixels on one line."""
        return self.single_line.truncate_to_width(
            text, max_width, font or self.default_font, preserve_extension
        )

    def truncate_text_to_width_stable(
        self,
        text: str,
        max_width: float,
        fonts: Sequence[FontDescriptor],
        preserve_extension: bool = True,
    ) -> TruncationResult:
        """Middle-truncate text so it fits under each of several fonts."""
        return self.single_line.truncate_to_width_stable(
            text, max_width, fonts, preserve_extension
        )

    def truncate_to_two_lines(
        self,
        text: str,
        container_width_px: float,
        font: FontDescriptor | None = None,
        preserve_extension: bool = True,
        max_lines: int = DEFAULT_MAX_LINES,
        line_height_px: float | None = None,
    ) -> TruncationResult:
        """Middle-truncate text to wrap within max_lines lines."""
        return self.two_line.truncate_to_lines(
            text,
            container_width_px,
            font or self.default_font,
            preserve_extension,
            max_lines,
            line_height_px,
        )

    def clear_measure_cache(self) -> None:
        self.measurer.clear_cache()

    def clear_truncation_cache(self) -> None:
        self.truncation_cache.clear()


_default_engine: TruncationEngine | None = None


def get_default_engine() -> TruncationEngine:
    """Return the process-wide engine, building it from settings on first use."""
    global _default_engine

    if _default_engine is None:
        _default_engine = TruncationEngine.from_settings()
    return _default_engine


def set_default_engine(engine: TruncationEngine | None) -> None:
    """Replace the process-wide engine (None rebuilds it on next use)."""
    global _default_engine
    _default_engine = engine


def measure_text(text: str, font: FontDescriptor | None = None) -> float:
    return get_default_engine().measure_text(text, font)


def truncate_text_to_width(
    text: str,
    max_width: float,
    font: FontDescriptor | None = None,
    preserve_extension: bool = True,
) -> TruncationResult:
    return get_default_engine().truncate_text_to_width(
        text, max_width, font, preserve_extension
    )


def truncate_to_two_lines(
    text: str,
    container_width_px: float,
    font: FontDescriptor | None = None,
    preserve_extension: bool = True,
    max_lines: int = DEFAULT_MAX_LINES,
    line_height_px: float | None = None,
) -> TruncationResult:
    return get_default_engine().truncate_to_two_lines(
        text, container_width_px, font, preserve_extension, max_lines, line_height_px
    )


def clear_measure_cache() -> None:
    get_default_engine().clear_measure_cache()


def clear_truncation_cache() -> None:
    get_default_engine().clear_truncation_cache()
