"""
Test fixtures and mocks for namefit tests.

This module provides:
- Fixed-advance metrics backends for testing without font files
- A character-grid line counter
- Sample file names
"""

from .mock_metrics import (
    BrokenMetricsProvider,
    MockLineCounter,
    MockMetricsProvider,
    failing_backend_factory,
)

__all__ = [
    "MockMetricsProvider",
    "BrokenMetricsProvider",
    "MockLineCounter",
    "failing_backend_factory",
]
