"""Exporter for the scheduler's FPP environment snapshot."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

from ..core.config import (
    DEFAULT_REGION,
    LATITUDE_KEY,
    LOCALE_KEY,
    LONGITUDE_KEY,
    TIMEZONE_KEYS,
    ConfigError,
)
from ..core.runtime import SettingsSnapshot, load_settings
from ..sources.base import LocaleProvider, SettingsSource
from .base import BaseExporter
from .snapshot import EnvironmentSnapshot


logger = logging.getLogger(__name__)

MISSING_REGION = "Locale region not present in FPP settings."
MISSING_COORDINATES = "Latitude/Longitude not present (or zero) in FPP settings."
MISSING_TIMEZONE = "Timezone not present in FPP settings."


def parse_coordinate(raw: str) -> float:
    """Convert a settings string to a coordinate, using 0.0 when it is not a finite number."""
    try:
        value = float(raw.strip())
    except (AttributeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


class EnvSnapshotExporter(BaseExporter):
    """
    Build the environment snapshot from a settings source and locale provider.

    The locale is written in the structured shape
    ``{"region": ..., "holidays": ...}``.
    """

    def __init__(
        self,
        settings_source: SettingsSource,
        output_path: Path,
        locale_provider: Optional[LocaleProvider] = None,
    ):
        super().__init__(output_path)
        self.settings_source = settings_source
        self.locale_provider = locale_provider

    def acquire(self) -> EnvironmentSnapshot:
        snapshot = EnvironmentSnapshot()
        settings = load_settings(self.settings_source)
        if not settings.loaded:
            self.warn(snapshot, f"Unable to load FPP settings: {settings.error}")

        snapshot.timezone = settings.first(TIMEZONE_KEYS).strip()
        snapshot.latitude = parse_coordinate(settings.get(LATITUDE_KEY))
        snapshot.longitude = parse_coordinate(settings.get(LONGITUDE_KEY))
        snapshot.region = self.resolve_region(settings)
        snapshot.holidays = self.fetch_holidays(snapshot.region)
        return snapshot

    def resolve_region(self, settings: SettingsSnapshot) -> str:
        # FPP falls back to Global when no locale has been chosen.
        if settings.loaded and LOCALE_KEY not in settings.values:
            return DEFAULT_REGION
        return settings.get(LOCALE_KEY).strip()

    def fetch_holidays(self, region: str):
        if self.locale_provider is None or not region:
            return []
        try:
            locale = self.locale_provider.get_locale(region)
        except ConfigError as exc:
            logger.info("No holidays exported: %s", exc)
            return []
        return locale.get("holidays", [])

    def validate(self, snapshot: EnvironmentSnapshot) -> None:
        # Every check runs; the last failing one owns snapshot.error.
        if not snapshot.region:
            self.warn(snapshot, MISSING_REGION)
        if snapshot.latitude == 0.0 or snapshot.longitude == 0.0:
            self.warn(snapshot, MISSING_COORDINATES)
        if not snapshot.timezone:
            self.warn(snapshot, MISSING_TIMEZONE)
