"""
Pytest configuration and shared fixtures.

Provides mock metrics backends and wired engines for testing without
font files.
"""

import pytest

from namefit import engine as engine_module
from namefit.backends.base import FontDescriptor
from namefit.cache import BoundedCache
from namefit.engine import TruncationEngine
from namefit.graphemes import GraphemeSegmenter
from namefit.layout import WrappingLineCounter
from namefit.measure import TextMeasurer
from namefit.truncate import SingleLineTruncator, TwoLineTruncator

# Import fixtures from our fixtures module
from tests.fixtures.mock_metrics import MockLineCounter, MockMetricsProvider

# ===== Font Fixtures =====


@pytest.fixture
def font():
    """13px sans-serif, the default cell font."""
    return FontDescriptor(13, "sans-serif")


@pytest.fixture
def bold_font(font):
    """Bold variant of the default cell font."""
    return font.with_weight("bold")


# ===== Metrics Fixtures =====


@pytest.fixture
def mock_provider():
    """7px-per-cluster metrics backend."""
    return MockMetricsProvider()


@pytest.fixture
def measurer(mock_provider):
    """Caching measurer over the mock backend."""
    return TextMeasurer(provider=mock_provider)


@pytest.fixture
def log_messages():
    """Collects (message, level) pairs from a log callback."""
    return []


@pytest.fixture
def log_callback(log_messages):
    def callback(message, level):
        log_messages.append((message, level))

    return callback


# ===== Truncator Fixtures =====


@pytest.fixture
def segmenter():
    return GraphemeSegmenter()


@pytest.fixture
def truncation_cache():
    return BoundedCache(1000)


@pytest.fixture
def single_line(measurer, segmenter, truncation_cache):
    """Single-line truncator over the mock backend."""
    return SingleLineTruncator(measurer, segmenter, truncation_cache)


@pytest.fixture
def line_counter():
    """Character-grid line counter, 7px per cluster."""
    return MockLineCounter()


@pytest.fixture
def two_line(line_counter, segmenter, truncation_cache):
    """Two-line truncator over the character-grid line counter."""
    return TwoLineTruncator(line_counter, segmenter, truncation_cache)


@pytest.fixture
def wrapping_counter(measurer, segmenter):
    """Word-wrapping line counter over the mock backend."""
    return WrappingLineCounter(measurer, segmenter)


# ===== Engine Fixtures =====


@pytest.fixture
def engine(measurer, font):
    """Engine over the mock backend with the word-wrapping line counter."""
    return TruncationEngine(measurer=measurer, default_font=font)


@pytest.fixture
def default_engine(engine):
    """
    Install the mock engine as the process-wide default.

    The previous default is restored afterwards so tests never build the
    real backend by accident.
    """
    previous = engine_module._default_engine
    engine_module.set_default_engine(engine)
    yield engine
    engine_module.set_default_engine(previous)
