"""
Configuration constants for the truncation engine.

This module centralizes all hardcoded values to make the engine
easier to maintain and configure.
"""

# Ellipsis marker inserted by every truncation
ELLIPSIS = "..."

# Zero-width space appended for hosts that add their own ellipsis
ZERO_WIDTH_SPACE = "\u200b"

# Cache capacities (entries)
MEASURE_CACHE_CAPACITY = 1000
TRUNCATION_CACHE_CAPACITY = 1000

# Eviction policies understood by BoundedCache
EVICTION_POLICIES = ("fifo", "lru")
DEFAULT_EVICTION_POLICY = "fifo"

# Heuristic width when no metrics backend is available (per character, x font size)
HEURISTIC_CHAR_WIDTH_FACTOR = 0.6

# Font defaults
DEFAULT_FONT_SIZE_PX = 13.0
DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_FONT_STYLE = "normal"

# Two-line layout
DEFAULT_MAX_LINES = 2
DEFAULT_LINE_HEIGHT_FACTOR = 1.25  # 1.25rem line box in grid cells
MIN_LAYOUT_WIDTH_PX = 1  # Containers at or below this width are not laid out yet

# Metrics backend used when none is configured
DEFAULT_METRICS_BACKEND = "pillow"

# Log message abbreviation
LOG_TEXT_TRUNCATE_LENGTH = 80

# Character-count estimate used by estimate_middle_truncate
DEFAULT_ESTIMATE_FONT_SIZE = 14

# Bundle suffix hidden for macOS application directories
MACOS_APP_SUFFIX = ".app"

# CSS font weight keywords mapped to numeric weights
FONT_WEIGHT_NUMBERS = {
    "normal": 400,
    "bold": 700,
    "lighter": 300,
    "bolder": 800,
}
