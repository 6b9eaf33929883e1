from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from .config import (
    DEFAULT_MEDIA_ROOT,
    OUTPUT_RELATIVE_PATH,
    SETTINGS_FILENAME,
    SYSTEM_LOCALE_DIR,
    USER_HOLIDAYS_RELATIVE_PATH,
    USER_LOCALE_RELATIVE_DIR,
    ConfigError,
)

if TYPE_CHECKING:
    from ..sources.base import SettingsSource


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportPaths:
    """Every filesystem location the exporter touches, derived from one media root."""

    media_root: Path
    settings_path: Path
    output_path: Path
    locale_dirs: Tuple[Path, ...]
    user_holidays_path: Path

    @classmethod
    def from_media_root(cls, media_root: Path = DEFAULT_MEDIA_ROOT) -> "ExportPaths":
        root = Path(media_root)
        return cls(
            media_root=root,
            settings_path=root / SETTINGS_FILENAME,
            output_path=root / OUTPUT_RELATIVE_PATH,
            locale_dirs=(SYSTEM_LOCALE_DIR, root / USER_LOCALE_RELATIVE_DIR),
            user_holidays_path=root / USER_HOLIDAYS_RELATIVE_PATH,
        )


@dataclass(frozen=True)
class SettingsSnapshot:
    """Read-only view of the settings values captured by load_settings()."""

    values: Mapping[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def loaded(self) -> bool:
        return self.error is None

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    def first(self, keys, default: str = "") -> str:
        """Return the first non-blank value among ``keys``, stripped."""
        for key in keys:
            value = self.values.get(key, "").strip()
            if value:
                return value
        return default


def load_settings(source: "SettingsSource") -> SettingsSnapshot:
    """
    Read every value from ``source`` into an immutable snapshot.

    A source that cannot be loaded yields an empty snapshot carrying the
    failure message instead of raising.
    """
    try:
        values = source.read()
    except ConfigError as exc:
        logger.debug("Settings source %s unavailable: %s", source.describe(), exc)
        return SettingsSnapshot(values={}, error=str(exc))
    logger.debug("Loaded %d settings from %s", len(values), source.describe())
    return SettingsSnapshot(values=values)
