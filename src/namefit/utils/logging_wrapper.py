"""
Logging wrapper for metrics backends.

Logs every call made into a TextMetricsProvider or LineCountOracle,
for debugging truncation decisions and counting oracle traffic.
"""

import logging
from typing import Callable

from ..config.constants import LOG_TEXT_TRUNCATE_LENGTH

LogCallback = Callable[[str, str], None]

logger = logging.getLogger("namefit")

_LEVELS = {
    "measure": logging.DEBUG,
    "lines": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def forward_to_logging(message: str, level: str = "info") -> None:
    """Default log callback: forward to the 'namefit' stdlib logger."""
    logger.log(_LEVELS.get(level, logging.INFO), message)


def abbreviate(text: str) -> str:
    """Shorten long texts for log lines."""
    if len(text) > LOG_TEXT_TRUNCATE_LENGTH:
        return f"{text[:LOG_TEXT_TRUNCATE_LENGTH]}... [{len(text)} chars]"
    return text


class LoggingMetricsWrapper:
    """Wrapper that intercepts backend methods to log oracle calls."""

    def __init__(self, backend, log_callback: LogCallback | None = None):
        """
        Initialize logging wrapper.

        Args:
            backend: TextMetricsProvider and/or LineCountOracle instance to wrap
            log_callback: Callback function(message, level) for logging
        """
        self._backend = backend
        self._log = log_callback or forward_to_logging
        self.call_count = 0

        self._wrap_oracle_methods()

    def _wrap_oracle_methods(self):
        """Wrap the backend's oracle methods with logging."""
        original_measure = getattr(self._backend, "measure", None)
        original_line_count = getattr(self._backend, "line_count", None)

        if original_measure is not None:

            def logged_measure(text, font):
                self.call_count += 1
                width = original_measure(text, font)
                self._log(
                    f"'{abbreviate(text)}' [{font.as_css()}] -> {width:.2f}px",
                    "measure",
                )
                return width

            self.measure = logged_measure

        if original_line_count is not None:

            def logged_line_count(
                text, container_width_px, font, line_height_px=None
            ):
                self.call_count += 1
                lines = original_line_count(
                    text, container_width_px, font, line_height_px=line_height_px
                )
                self._log(
                    f"'{abbreviate(text)}' @ {container_width_px}px "
                    f"[{font.as_css()}] -> {lines} line(s)",
                    "lines",
                )
                return lines

            self.line_count = logged_line_count

    def __getattr__(self, name):
        """Pass through all other attributes to wrapped backend."""
        return getattr(self._backend, name)
