"""
Pillow text metrics backend.

Implements TextMetricsProvider by measuring glyph advances of FreeType
fonts loaded through Pillow.
"""

from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from ..utils.fonts import resolve_font_file
from .base import FontDescriptor, MetricsUnavailable, TextMetricsProvider


@lru_cache(maxsize=64)
def _load_font(path: str, size_px: float) -> ImageFont.FreeTypeFont:
    """Load a font file at a pixel size, with caching."""
    return ImageFont.truetype(path, size=size_px)


class PillowMetricsProvider(TextMetricsProvider):
    """Measures text with FreeType fonts resolved by matplotlib."""

    # Backend registration - this is how backend discovery finds us
    backend_name = "pillow"

    def __init__(self, font_paths: dict[str, str] | None = None):
        """
        Initialize the Pillow backend.

        Args:
            font_paths: family -> font file overrides

        Raises:
            MetricsUnavailable: If no usable font file can be loaded
        """
        self._font_paths = dict(font_paths or {})
        self._resolved: dict[tuple[str, str, str], str] = {}

        # Load the default font once so a broken install fails here
        # instead of on the first measurement.
        self._load(FontDescriptor())

    def _font_file(self, font: FontDescriptor) -> str:
        """Return the font file for a descriptor, resolving it once."""
        key = (font.family, font.weight, font.style)
        path = self._resolved.get(key)
        if path is None:
            found = resolve_font_file(
                font.family, font.weight, font.style, overrides=self._font_paths
            )
            if found is None:
                raise MetricsUnavailable(f"No font file found for '{font.family}'")
            path = str(found)
            self._resolved[key] = path
        return path

    def _load(self, font: FontDescriptor) -> ImageFont.FreeTypeFont:
        """Load the FreeType font for a descriptor."""
        try:
            return _load_font(self._font_file(font), float(font.size_px))
        except (OSError, ValueError) as e:
            raise MetricsUnavailable(f"Cannot load font for '{font.family}': {e}")

    def measure(self, text: str, font: FontDescriptor) -> float:
        """
        Measure the advance width of a string.

        Args:
            text: String to measure
            font: Font to render with

        Returns:
            Width in pixels
        """
        if not text:
            return 0.0
        return float(self._load(font).getlength(text))

    @property
    def font_files(self) -> list[Path]:
        """Font files resolved so far."""
        return [Path(p) for p in self._resolved.values()]
