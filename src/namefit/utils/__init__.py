"""Utility modules for font lookup, file names and logging."""

from .filenames import (
    display_name,
    estimate_middle_truncate,
    split_extension,
    truncate_middle,
    truncate_middle_for_css,
)
from .fonts import resolve_font_file
from .logging_wrapper import LoggingMetricsWrapper, forward_to_logging

__all__ = [
    "display_name",
    "estimate_middle_truncate",
    "split_extension",
    "truncate_middle",
    "truncate_middle_for_css",
    "resolve_font_file",
    "LoggingMetricsWrapper",
    "forward_to_logging",
]
