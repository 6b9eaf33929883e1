"""Reader for the FPP ``settings`` file under the media directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.config import SETTINGS_FILENAME, ConfigError
from .base import SettingsSource


logger = logging.getLogger(__name__)


class SettingsNotLoadedError(ConfigError):
    """Raised when a value is requested before load() succeeded."""


def parse_settings_line(line: str) -> Optional[tuple]:
    """
    Split one ``Key = "Value"`` line into ``(key, value)``.

    Returns None for blank lines and comments, raises ValueError when the
    line has no ``=`` or no key.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(("#", ";")):
        return None
    key, sep, value = stripped.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"malformed settings line: {stripped!r}")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return key, value


class FppSettingsStore(SettingsSource):
    """
    Settings store that must be initialised before use.

    ``load(strict)`` parses ``<base_path>/settings``; afterwards values are
    available through get_setting(). In strict mode a malformed line fails
    the load, otherwise it is skipped.
    """

    def __init__(self, base_path: Union[str, Path], *, strict: bool = False) -> None:
        self.base_path = Path(base_path)
        self.strict = strict
        self.settings_path = self.base_path / SETTINGS_FILENAME
        self._values: Optional[Dict[str, str]] = None

    @property
    def loaded(self) -> bool:
        return self._values is not None

    def load(self, strict: Optional[bool] = None) -> None:
        strict = self.strict if strict is None else strict
        try:
            text = self.settings_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigError(f"Settings file not found: {self.settings_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Settings file {self.settings_path} could not be read: {exc}") from exc

        values: Dict[str, str] = {}
        for lineno, line in enumerate(text.splitlines(), start=1):
            try:
                parsed = parse_settings_line(line)
            except ValueError as exc:
                if strict:
                    raise ConfigError(f"{self.settings_path}:{lineno}: {exc}") from exc
                logger.debug("%s:%d: skipping %s", self.settings_path, lineno, exc)
                continue
            if parsed is not None:
                key, value = parsed
                values[key] = value
        self._values = values

    def get_setting(self, key: str) -> str:
        if self._values is None:
            raise SettingsNotLoadedError(f"Settings from {self.base_path} have not been loaded")
        return self._values.get(key, "")

    def read(self) -> Dict[str, str]:
        if not self.loaded:
            self.load()
        return dict(self._values)

    def describe(self) -> str:
        return str(self.settings_path)
