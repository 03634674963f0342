"""Tests for cached text measurement and the heuristic fallback."""

import pytest

from namefit.backends.base import FontDescriptor
from namefit.measure import TextMeasurer, estimate_width
from tests.fixtures.mock_metrics import (
    BrokenMetricsProvider,
    MockMetricsProvider,
    failing_backend_factory,
)
from tests.fixtures.sample_names import ASTRONAUT_FILE


@pytest.mark.unit
class TestEstimateWidth:
    """Test the average-character-width estimate."""

    def test_estimate(self):
        assert estimate_width("abc", FontDescriptor(10)) == pytest.approx(18.0)

    def test_empty(self):
        assert estimate_width("", FontDescriptor(10)) == 0.0

    def test_never_negative(self):
        assert estimate_width("abc", FontDescriptor(-10)) == 0.0


@pytest.mark.unit
class TestTextMeasurer:
    """Test measurement through a working backend."""

    def test_measure(self, measurer, font):
        assert measurer.measure("abc", font) == 21.0

    def test_measure_counts_clusters(self, measurer, font):
        assert measurer.measure(ASTRONAUT_FILE, font) == 63.0

    def test_empty_text_skips_backend(self, measurer, mock_provider, font):
        assert measurer.measure("", font) == 0.0
        assert mock_provider.calls == 0

    def test_repeat_measure_is_cached(self, measurer, mock_provider, font):
        first = measurer.measure("report.pdf", font)
        second = measurer.measure("report.pdf", font)

        assert first == second
        assert mock_provider.calls == 1

    def test_cache_key_includes_font(self, measurer, mock_provider, font, bold_font):
        measurer.measure("report.pdf", font)
        measurer.measure("report.pdf", bold_font)
        assert mock_provider.calls == 2

    def test_clear_cache_keeps_values(self, measurer, mock_provider, font):
        before = measurer.measure("report.pdf", font)
        measurer.clear_cache()
        after = measurer.measure("report.pdf", font)

        assert before == after
        assert mock_provider.calls == 2

    def test_fifo_eviction(self, font):
        provider = MockMetricsProvider()
        measurer = TextMeasurer(provider=provider, capacity=2, policy="fifo")
        for text in ("a", "b", "c"):
            measurer.measure(text, font)
        measurer.measure("a", font)
        assert provider.calls == 4

    def test_lru_eviction(self, font):
        provider = MockMetricsProvider()
        measurer = TextMeasurer(provider=provider, capacity=2, policy="lru")
        measurer.measure("a", font)
        measurer.measure("b", font)
        measurer.measure("a", font)
        measurer.measure("c", font)  # evicts "b"
        measurer.measure("a", font)
        assert provider.calls == 3

    def test_negative_width_clamped(self, font):
        measurer = TextMeasurer(provider=MockMetricsProvider(advance=-3.0))
        assert measurer.measure("abc", font) == 0.0

    def test_measure_widest(self, font, bold_font):
        measurer = TextMeasurer(provider=MockMetricsProvider(bold_factor=1.5))
        assert measurer.measure_widest("ab", [font, bold_font]) == 21.0
        assert measurer.measure_widest("ab", []) == 0.0

    def test_backend_built_lazily(self, font):
        built = []

        def factory():
            built.append(True)
            return MockMetricsProvider()

        measurer = TextMeasurer(provider_factory=factory)
        assert built == []
        measurer.measure("a", font)
        measurer.measure("b", font)
        assert built == [True]
        assert measurer.backend_available


@pytest.mark.unit
class TestHeuristicFallback:
    """Test degraded measurement when no backend works."""

    def test_factory_failure_falls_back(self, log_callback):
        measurer = TextMeasurer(
            provider_factory=failing_backend_factory, log_callback=log_callback
        )
        assert measurer.measure("abc", FontDescriptor(10)) == pytest.approx(18.0)
        assert not measurer.backend_available

    def test_factory_failure_warns_once(self, log_callback, log_messages):
        measurer = TextMeasurer(
            provider_factory=failing_backend_factory, log_callback=log_callback
        )
        font = FontDescriptor(10)
        measurer.measure("abc", font)
        measurer.measure("defg", font)

        warnings = [m for m, level in log_messages if level == "warning"]
        assert len(warnings) == 1
        assert "no fonts installed" in warnings[0]

    def test_unknown_backend_falls_back(self, log_callback, log_messages):
        def factory():
            raise ValueError("Unknown metrics backend 'nope'")

        measurer = TextMeasurer(provider_factory=factory, log_callback=log_callback)
        assert measurer.measure("ab", FontDescriptor(10)) == pytest.approx(12.0)
        assert log_messages[0][1] == "warning"

    def test_estimates_are_not_cached(self, log_callback):
        measurer = TextMeasurer(
            provider_factory=failing_backend_factory, log_callback=log_callback
        )
        measurer.measure("abc", FontDescriptor(10))
        assert len(measurer.cache) == 0

    def test_measure_failure_falls_back(self, log_callback, log_messages):
        provider = BrokenMetricsProvider()
        measurer = TextMeasurer(provider=provider, log_callback=log_callback)

        assert measurer.measure("abc", FontDescriptor(10)) == pytest.approx(18.0)
        assert provider.calls == 1
        assert len(measurer.cache) == 0
        assert log_messages[-1][1] == "warning"

    def test_measure_failures_counted(self, log_callback):
        """Only measure-time failures count; a missing backend does not."""
        broken = TextMeasurer(
            provider=BrokenMetricsProvider(), log_callback=log_callback
        )
        broken.measure("abc", FontDescriptor(10))
        broken.measure("abd", FontDescriptor(10))
        assert broken.failed_measurements == 2

        missing = TextMeasurer(
            provider_factory=failing_backend_factory, log_callback=log_callback
        )
        missing.measure("abc", FontDescriptor(10))
        assert missing.failed_measurements == 0
