"""
Cached text measurement.

TextMeasurer sits between the truncators and the host metrics backend:
it memoizes (text, font) -> width pairs and degrades to a heuristic
estimate when no backend can be constructed.
"""

from collections.abc import Callable, Sequence

from .backends.base import (
    FontDescriptor,
    MetricsUnavailable,
    TextMetricsProvider,
    create_backend,
)
from .cache import BoundedCache, EvictionPolicy
from .config.constants import (
    DEFAULT_EVICTION_POLICY,
    DEFAULT_METRICS_BACKEND,
    HEURISTIC_CHAR_WIDTH_FACTOR,
    MEASURE_CACHE_CAPACITY,
)
from .utils.logging_wrapper import LogCallback, abbreviate, forward_to_logging


def estimate_width(text: str, font: FontDescriptor) -> float:
    """Rough width for proportional fonts; only used when measuring is impossible."""
    return max(0.0, len(text) * float(font.size_px) * HEURISTIC_CHAR_WIDTH_FACTOR)


def _default_backend_factory() -> TextMetricsProvider:
    return create_backend(DEFAULT_METRICS_BACKEND)


class TextMeasurer:
    """
    Memoizing adapter around a TextMetricsProvider.

    Usage:
        measurer = TextMeasurer(provider=PillowMetricsProvider())
        width = measurer.measure("report.pdf", FontDescriptor(13, "Inter"))
    """

    def __init__(
        self,
        provider: TextMetricsProvider | None = None,
        provider_factory: Callable[[], TextMetricsProvider] | None = None,
        capacity: int = MEASURE_CACHE_CAPACITY,
        policy: EvictionPolicy | str = DEFAULT_EVICTION_POLICY,
        log_callback: LogCallback | None = None,
    ):
        """
        Initialize the measurer.

        Args:
            provider: Ready backend instance
            provider_factory: Builds the backend lazily on first measurement
                (used when provider is None; defaults to the configured backend)
            capacity: Maximum cached widths
            policy: Cache eviction policy
            log_callback: Callback function(message, level) for logging
        """
        self._provider = provider
        self._factory = provider_factory or _default_backend_factory
        self._backend_failed = False
        # Measure-time failures; widths estimated then are transient
        self.failed_measurements = 0
        self._log = log_callback or forward_to_logging
        self.cache = BoundedCache(capacity, policy)

    @property
    def provider(self) -> TextMetricsProvider | None:
        """The metrics backend, constructing it on first access."""
        if self._provider is None and not self._backend_failed:
            try:
                self._provider = self._factory()
            except (MetricsUnavailable, ValueError) as e:
                self._backend_failed = True
                self._log(
                    f"Text metrics backend unavailable, estimating widths: {e}",
                    "warning",
                )
        return self._provider

    @property
    def backend_available(self) -> bool:
        return self.provider is not None

    def measure(self, text: str, font: FontDescriptor) -> float:
        """
        Measure the rendered width of text.

        Args:
            text: String to measure
            font: Font to render with

        Returns:
            Width in pixels; a heuristic estimate when no backend works
        """
        if not text:
            return 0.0

        key = (text, font.as_css())
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        provider = self.provider
        if provider is None:
            self._log(f"Estimated width of '{abbreviate(text)}'", "debug")
            return estimate_width(text, font)

        try:
            width = provider.measure(text, font)
        except MetricsUnavailable as e:
            self.failed_measurements += 1
            self._log(f"Measurement failed, estimating width: {e}", "warning")
            return estimate_width(text, font)

        width = max(0.0, float(width))
        self.cache.put(key, width)
        return width

    def measure_widest(self, text: str, fonts: Sequence[FontDescriptor]) -> float:
        """Width of text under the widest of several fonts."""
        return max((self.measure(text, font) for font in fonts), default=0.0)

    def clear_cache(self) -> None:
        """Forget all measured widths."""
        self.cache.clear()
