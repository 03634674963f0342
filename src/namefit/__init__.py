"""namefit - fit file names into list rows and grid tiles"""

__version__ = "0.0.1"

from .backends import (
    FontDescriptor,
    LineCountOracle,
    MetricsUnavailable,
    TextMetricsProvider,
)
from .cache import BoundedCache, EvictionPolicy
from .config.settings import EngineSettings, SettingsManager
from .engine import (
    TruncationEngine,
    clear_measure_cache,
    clear_truncation_cache,
    get_default_engine,
    measure_text,
    set_default_engine,
    truncate_text_to_width,
    truncate_to_two_lines,
)
from .graphemes import GraphemeSegmenter
from .layout import WrappingLineCounter
from .measure import TextMeasurer
from .truncate import SingleLineTruncator, TruncationResult, TwoLineTruncator

__all__ = [
    "FontDescriptor",
    "LineCountOracle",
    "MetricsUnavailable",
    "TextMetricsProvider",
    "BoundedCache",
    "EvictionPolicy",
    "EngineSettings",
    "SettingsManager",
    "TruncationEngine",
    "clear_measure_cache",
    "clear_truncation_cache",
    "get_default_engine",
    "measure_text",
    "set_default_engine",
    "truncate_text_to_width",
    "truncate_to_two_lines",
    "GraphemeSegmenter",
    "WrappingLineCounter",
    "TextMeasurer",
    "SingleLineTruncator",
    "TruncationResult",
    "TwoLineTruncator",
]
