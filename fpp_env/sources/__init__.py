"""Readers for the host settings store and locale data."""

from .base import LocaleProvider, SettingsSource
from .json_settings import JsonSettingsFile
from .locale import FppLocaleProvider, LocaleError
from .registry import create_settings_source
from .settings_store import FppSettingsStore, SettingsNotLoadedError

__all__ = [
    "SettingsSource",
    "LocaleProvider",
    "FppSettingsStore",
    "SettingsNotLoadedError",
    "JsonSettingsFile",
    "FppLocaleProvider",
    "LocaleError",
    "create_settings_source",
]
