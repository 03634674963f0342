"""Configuration package."""

from .constants import *  # noqa: F401, F403
from .settings import EngineSettings, SettingsManager

__all__ = ["EngineSettings", "SettingsManager"]
