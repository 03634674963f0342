"""
Abstract measurement interfaces with dynamic backend discovery.

This module provides a plugin-style architecture where new metrics
backends can be added by simply creating a new file in the backends/
directory. Each backend registers itself by implementing
TextMetricsProvider and providing a backend_name.
"""

import importlib
import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from ..config.constants import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PX,
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
)


class MetricsUnavailable(RuntimeError):
    """Raised when a metrics backend cannot be constructed."""


@dataclass(frozen=True)
class FontDescriptor:
    """Font used to render a string. Compared field by field, no normalization."""

    size_px: float = DEFAULT_FONT_SIZE_PX
    family: str = DEFAULT_FONT_FAMILY
    weight: str = DEFAULT_FONT_WEIGHT
    style: str = DEFAULT_FONT_STYLE

    def as_css(self) -> str:
        """Return the CSS font shorthand, used verbatim in cache keys."""
        return f"{self.style} {self.weight} {self.size_px}px {self.family}"

    def with_weight(self, weight: str) -> "FontDescriptor":
        """Return a copy of this descriptor with another weight."""
        return FontDescriptor(self.size_px, self.family, weight, self.style)


class TextMetricsProvider(ABC):
    """Abstract base class for text width measurement backends."""

    # Class attribute for backend registration
    backend_name: str | None = None

    @abstractmethod
    def measure(self, text: str, font: FontDescriptor) -> float:
        """
        Measure the rendered width of a string.

        Args:
            text: String to measure
            font: Font to render with

        Returns:
            Width in device pixels (non-negative, finite)
        """
        pass


class LineCountOracle(ABC):
    """Abstract base class for wrapped line counting."""

    @abstractmethod
    def line_count(
        self,
        text: str,
        container_width_px: float,
        font: FontDescriptor,
        line_height_px: float | None = None,
    ) -> int:
        """
        Count the visual lines a string occupies when wrapped.

        Args:
            text: String to lay out
            container_width_px: Width of the wrapping box
            font: Font to render with
            line_height_px: Line box height (layout engines that read a
                rendered height need it, others may ignore it)

        Returns:
            Number of lines, at least 1
        """
        pass


# Backend registry - populated automatically by scanning backends/ directory
_BACKEND_REGISTRY: dict[str, type[TextMetricsProvider]] = {}


def discover_backends() -> dict[str, type[TextMetricsProvider]]:
    """
    Automatically discover and load all metrics backends from the backends/ directory.

    Scans all Python files in backends/, imports them, and finds all
    TextMetricsProvider subclasses that define a backend_name.

    Returns:
        Dictionary mapping backend names to backend classes
    """
    global _BACKEND_REGISTRY

    if _BACKEND_REGISTRY:
        # Already discovered
        return _BACKEND_REGISTRY

    backends_dir = Path(__file__).parent

    backend_files = [
        f for f in backends_dir.glob("*.py") if f.stem not in ("base", "__init__")
    ]

    for backend_file in backend_files:
        module_name = f".{backend_file.stem}"
        try:
            module = importlib.import_module(module_name, package="namefit.backends")
        except ImportError:
            # Backend whose rendering library is not installed
            continue

        for name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, TextMetricsProvider)
                and obj is not TextMetricsProvider
                and obj.backend_name
            ):
                _BACKEND_REGISTRY[obj.backend_name] = obj

    return _BACKEND_REGISTRY


def create_backend(name: str, **kwargs) -> TextMetricsProvider:
    """
    Instantiate a metrics backend by name.

    Args:
        name: Registered backend_name
        **kwargs: Passed to the backend constructor

    Returns:
        Backend instance

    Raises:
        ValueError: If no backend with that name is registered
        MetricsUnavailable: If the backend cannot be constructed
    """
    backends = discover_backends()
    backend_class = backends.get(name)
    if backend_class is None:
        available = ", ".join(sorted(backends)) or "none"
        raise ValueError(f"Unknown metrics backend '{name}' (available: {available})")
    return backend_class(**kwargs)


def list_available_backends() -> list[str]:
    """
    Get a list of all available metrics backends.

    Returns:
        List of backend names
    """
    backends = discover_backends()
    return list(backends.keys())
