"""
Configuration management with XDG-compliant persistent settings.

Provides cross-platform configuration storage following OS conventions:
- Linux/Unix: XDG_CONFIG_HOME (~/.config/namefit/)
- macOS: ~/Library/Application Support/namefit/
- Windows: %APPDATA%/namefit/
"""

import json
import math
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .constants import (
    DEFAULT_EVICTION_POLICY,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PX,
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_METRICS_BACKEND,
    EVICTION_POLICIES,
    MEASURE_CACHE_CAPACITY,
    TRUNCATION_CACHE_CAPACITY,
)


@dataclass
class EngineSettings:
    """Engine settings that persist across sessions."""

    # Measurement backend
    metrics_backend: str = DEFAULT_METRICS_BACKEND
    font_paths: dict[str, str] = None  # family -> font file override

    # Caches
    measure_cache_capacity: int = MEASURE_CACHE_CAPACITY
    truncation_cache_capacity: int = TRUNCATION_CACHE_CAPACITY
    eviction_policy: str = DEFAULT_EVICTION_POLICY  # "fifo", "lru"

    # Segmentation
    grapheme_aware: bool = True

    # Log every measure and line_count call (debugging truncation decisions)
    log_oracle_calls: bool = False

    # Default font
    default_font_family: str = DEFAULT_FONT_FAMILY
    default_font_size_px: float = DEFAULT_FONT_SIZE_PX
    default_font_weight: str = DEFAULT_FONT_WEIGHT
    default_font_style: str = DEFAULT_FONT_STYLE

    def __post_init__(self):
        """Initialize mutable defaults."""
        if self.font_paths is None:
            self.font_paths = {}


class SettingsManager:
    """Manages engine settings with automatic persistence."""

    APP_NAME = "namefit"
    CONFIG_FILE = "settings.json"

    def __init__(self):
        """Initialize settings manager."""
        self.config_dir = Path(user_config_dir(self.APP_NAME))
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.settings = EngineSettings()

    def load(self) -> EngineSettings:
        """
        Load settings from disk.

        Returns:
            Loaded settings (or defaults if file doesn't exist)
        """
        if not self.config_file.exists():
            self.settings = EngineSettings()
            return self.settings

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)

            # Convert dict to dataclass
            self.settings = EngineSettings(**data)
            self._sanitize()

            return self.settings

        except (json.JSONDecodeError, TypeError, ValueError):
            # If config is corrupted, start fresh with defaults
            self.settings = EngineSettings()
            return self.settings

    def save(self, settings: EngineSettings | None = None) -> None:
        """
        Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self.settings = settings

        # Ensure config directory exists
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._sanitize()

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(self.settings), f, indent=2)

    def _sanitize(self) -> None:
        """Coerce field types, clamp capacities and reset unusable values."""
        s = self.settings
        s.measure_cache_capacity = max(1, int(s.measure_cache_capacity))
        s.truncation_cache_capacity = max(1, int(s.truncation_cache_capacity))

        if s.eviction_policy not in EVICTION_POLICIES:
            s.eviction_policy = DEFAULT_EVICTION_POLICY

        if not isinstance(s.font_paths, dict):
            s.font_paths = {}

        try:
            size = float(s.default_font_size_px)
        except (TypeError, ValueError):
            size = DEFAULT_FONT_SIZE_PX
        if not math.isfinite(size) or size <= 0:
            size = DEFAULT_FONT_SIZE_PX
        s.default_font_size_px = size

        # JSON strings such as "false" are truthy, so only real booleans are kept
        defaults = EngineSettings()
        for name in ("grapheme_aware", "log_oracle_calls"):
            if not isinstance(getattr(s, name), bool):
                setattr(s, name, getattr(defaults, name))
        for name in (
            "metrics_backend",
            "default_font_family",
            "default_font_weight",
            "default_font_style",
        ):
            if not isinstance(getattr(s, name), str):
                setattr(s, name, getattr(defaults, name))

    def set_font_path(self, family: str, path: str) -> None:
        """
        Register a font file override for a family.

        Args:
            family: Font family name as used in FontDescriptor
            path: Path to a TrueType/OpenType file
        """
        if not family or not family.strip():
            return

        self.settings.font_paths[family.strip()] = str(path)

    def remove_font_path(self, family: str) -> None:
        """
        Drop a font file override.

        Args:
            family: Font family name
        """
        self.settings.font_paths.pop(family.strip(), None)
