from __future__ import annotations

from typing import Dict, Mapping


class SettingsSource:
    """
    Base class for host settings readers.

    load_settings() consumes read(), which initialises the source and returns
    every value at once so that an absent key can be told apart from a blank
    one. get_setting() is the per-key view of the same values and must agree
    with read() once the source is loaded.
    """

    def read(self) -> Dict[str, str]:
        """Return every recognised setting, raising ConfigError when unavailable."""
        raise NotImplementedError

    def get_setting(self, key: str) -> str:
        """Return the value stored under ``key`` or an empty string."""
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__


class LocaleProvider:
    """Base class for locale/holiday document providers."""

    def get_locale(self, region: str) -> Mapping[str, object]:
        raise NotImplementedError
