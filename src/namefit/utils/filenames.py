"""
Character-count file name helpers.

Cheap alternatives to pixel truncation for callers that only know a
character budget (fixed-width columns, tooltips, logs). Budgets count
grapheme clusters, not code points.
"""

import math
import sys

from ..config.constants import (
    DEFAULT_ESTIMATE_FONT_SIZE,
    ELLIPSIS,
    HEURISTIC_CHAR_WIDTH_FACTOR,
    MACOS_APP_SUFFIX,
    ZERO_WIDTH_SPACE,
)
from ..graphemes import join_slice, segment_graphemes


def split_extension(text: str) -> tuple[str, str]:
    """
    Split a name into (base, extension).

    The extension starts at the last dot, unless that dot is the first or
    the last character: '.gitignore' and 'notes.' have no extension,
    '.env.local' has '.local'.
    """
    last_dot = text.rfind(".")
    if 0 < last_dot < len(text) - 1:
        return text[:last_dot], text[last_dot:]
    return text, ""


def truncate_middle(filename: str, max_length: int) -> str:
    """
    Truncate a file name in the middle, keeping its start and extension.

    Strategy:
    1. If the name fits, return it as-is
    2. With an extension: keep the extension, split what is left of the
       budget between the start and the end of the base name
    3. If the extension alone does not leave room, keep the start and
       end with a trailing ellipsis
    4. Without an extension: cut the middle

    Args:
        filename: Name to shorten
        max_length: Maximum clusters in the result, ellipsis included

    Returns:
        Shortened name
    """
    segments = segment_graphemes(filename)
    if len(segments) <= max_length:
        return filename
    if max_length <= 0:
        return ""

    base, extension = split_extension(filename)
    if extension:
        available = max_length - len(segment_graphemes(extension)) - len(ELLIPSIS)
        if available <= 0:
            return join_slice(segments, 0, max(0, max_length - len(ELLIPSIS))) + ELLIPSIS

        base_segments = segment_graphemes(base)
        start = join_slice(base_segments, 0, math.ceil(available / 2))
        end = join_slice(base_segments, len(base_segments) - available // 2)
        return f"{start}{ELLIPSIS}{end}{extension}"

    available = max_length - len(ELLIPSIS)
    if available <= 0:
        return ELLIPSIS[:max_length]

    start = join_slice(segments, 0, math.ceil(available / 2))
    end = join_slice(segments, len(segments) - available // 2)
    return f"{start}{ELLIPSIS}{end}"


def truncate_middle_for_css(filename: str, max_length: int) -> str:
    """truncate_middle plus a zero-width space, so a CSS ellipsis never doubles ours."""
    return truncate_middle(filename, max_length) + ZERO_WIDTH_SPACE


def estimate_middle_truncate(
    text: str, max_width: float, font_size: float = DEFAULT_ESTIMATE_FONT_SIZE
) -> str:
    """
    Middle-truncate using an average character width instead of real metrics.

    Args:
        text: Name to shorten
        max_width: Width budget in pixels
        font_size: Font size in pixels

    Returns:
        Shortened name
    """
    char_width = font_size * HEURISTIC_CHAR_WIDTH_FACTOR
    if char_width <= 0:
        return text
    return truncate_middle(text, math.floor(max_width / char_width))


def display_name(name: str, is_directory: bool, platform: str = sys.platform) -> str:
    """
    Name shown in a cell.

    macOS application bundles are directories named 'Foo.app' that the
    platform shows as 'Foo'.
    """
    if (
        platform == "darwin"
        and is_directory
        and name.lower().endswith(MACOS_APP_SUFFIX)
    ):
        return name[: -len(MACOS_APP_SUFFIX)]
    return name
