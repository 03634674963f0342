"""
Mock metrics backends for testing without font files.

MockMetricsProvider gives every grapheme cluster a fixed advance (7px by
default), so expected truncations can be worked out by hand: a string of
n clusters is 7n pixels wide and the ellipsis is 21px.
"""

import math

import regex

from namefit.backends.base import (
    FontDescriptor,
    LineCountOracle,
    MetricsUnavailable,
    TextMetricsProvider,
)


class MockMetricsProvider(TextMetricsProvider):
    """Fixed-advance metrics backend that records every call."""

    # No backend_name: mocks are never registered by discovery

    def __init__(
        self,
        advance: float = 7.0,
        widths: dict[str, float] | None = None,
        bold_factor: float = 1.0,
    ):
        """
        Initialize mock backend.

        Args:
            advance: Width of any cluster not listed in widths
            widths: Per-cluster widths, for proportional-font tests
            bold_factor: Multiplier applied to bold fonts
        """
        self.advance = advance
        self.widths = widths or {}
        self.bold_factor = bold_factor
        self.calls = 0
        self.measured: list[str] = []

    def measure(self, text: str, font: FontDescriptor) -> float:
        self.calls += 1
        self.measured.append(text)
        clusters = regex.findall(r"\X", text)
        total = sum(self.widths.get(c, self.advance) for c in clusters)
        if font.weight in ("bold", "700"):
            total *= self.bold_factor
        return total


class BrokenMetricsProvider(TextMetricsProvider):
    """Backend whose every measurement fails."""

    def __init__(self):
        self.calls = 0

    def measure(self, text: str, font: FontDescriptor) -> float:
        self.calls += 1
        raise MetricsUnavailable("font file vanished")


class FlakyMetricsProvider(MockMetricsProvider):
    """Fixed-advance backend that fails while ``failing`` is set."""

    def __init__(self, failing: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.failing = failing

    def measure(self, text: str, font: FontDescriptor) -> float:
        if self.failing:
            raise MetricsUnavailable("font file locked")
        return super().measure(text, font)


def failing_backend_factory() -> TextMetricsProvider:
    """Backend factory for a host without any usable font."""
    raise MetricsUnavailable("no fonts installed")


class MockLineCounter(LineCountOracle):
    """
    Character-grid line counter.

    Every cluster is ``advance`` wide and lines break anywhere, so a string
    of n clusters takes ceil(n / floor(width / advance)) lines.
    """

    def __init__(self, advance: float = 7.0):
        self.advance = advance
        self.calls: list[tuple[str, float, float | None]] = []

    def line_count(
        self,
        text: str,
        container_width_px: float,
        font: FontDescriptor,
        line_height_px: float | None = None,
    ) -> int:
        self.calls.append((text, container_width_px, line_height_px))
        per_line = max(1, math.floor(container_width_px / self.advance))
        clusters = len(regex.findall(r"\X", text))
        return max(1, math.ceil(clusters / per_line))
