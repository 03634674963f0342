"""
Metrics backends package with automatic backend discovery.

New backends are automatically discovered - just create a new file
in this directory that defines a TextMetricsProvider subclass with a
backend_name.
"""

from .base import (
    FontDescriptor,
    LineCountOracle,
    MetricsUnavailable,
    TextMetricsProvider,
    create_backend,
    discover_backends,
    list_available_backends,
)

__all__ = [
    "FontDescriptor",
    "LineCountOracle",
    "MetricsUnavailable",
    "TextMetricsProvider",
    "create_backend",
    "discover_backends",
    "list_available_backends",
]
