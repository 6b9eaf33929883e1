"""Core utilities for the FPP environment export."""

from .config import ConfigError, load_json_document
from .runtime import ExportPaths, SettingsSnapshot, load_settings

__all__ = [
    "ConfigError",
    "load_json_document",
    "ExportPaths",
    "SettingsSnapshot",
    "load_settings",
]
