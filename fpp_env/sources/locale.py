"""Locale and holiday definitions as shipped with FPP."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..core.config import DEFAULT_REGION, KNOWN_REGIONS, ConfigError, load_json_document
from .base import LocaleProvider


logger = logging.getLogger(__name__)


class LocaleError(ConfigError):
    """Raised when no usable locale document can be found."""


class FppLocaleProvider(LocaleProvider):
    """
    Resolve ``<region>.json`` from the FPP locale directories.

    Lookup order:
    - ``<dir>/<region>.json`` for each directory in order
    - ``<dir>/Global.json`` for each directory in order
    User-defined holidays (a JSON array) are appended to ``holidays``.
    """

    def __init__(
        self,
        locale_dirs: Sequence[Union[str, Path]],
        user_holidays_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.locale_dirs = [Path(p) for p in locale_dirs]
        self.user_holidays_path = Path(user_holidays_path) if user_holidays_path else None

    def candidate_paths(self, region: str) -> List[Path]:
        names: List[str] = []
        if region:
            names.append(region)
        if DEFAULT_REGION not in names:
            names.append(DEFAULT_REGION)
        return [directory / f"{name}.json" for name in names for directory in self.locale_dirs]

    def find_locale_file(self, region: str) -> Path:
        for path in self.candidate_paths(region):
            try:
                if path.is_file():
                    return path
            except OSError as exc:
                logger.debug("Skipping locale candidate %s: %s", path, exc)
        searched = ", ".join(str(p) for p in self.locale_dirs)
        raise LocaleError(f"No locale file for region '{region}' in {searched}")

    def get_locale(self, region: str) -> Dict[str, object]:
        if region and region not in KNOWN_REGIONS:
            logger.debug("Locale region %r is not one of %s", region, ", ".join(KNOWN_REGIONS))

        path = self.find_locale_file(region)
        document = load_json_document(path)
        if not isinstance(document, dict):
            raise LocaleError(f"Locale JSON invalid: {path}")

        locale = dict(document)
        holidays = locale.get("holidays")
        if not isinstance(holidays, list):
            holidays = []
        locale["holidays"] = holidays + self._load_user_holidays()
        locale["_source"] = str(path)
        return locale

    def _load_user_holidays(self) -> List[object]:
        if self.user_holidays_path is None:
            return []
        try:
            if not self.user_holidays_path.is_file():
                return []
            entries = load_json_document(self.user_holidays_path)
        except (OSError, ConfigError) as exc:
            logger.info("Ignoring user holidays: %s", exc)
            return []
        if not isinstance(entries, list):
            logger.info("Ignoring user holidays in %s: expected a JSON array", self.user_holidays_path)
            return []
        return list(_holiday_entries(entries))


def _holiday_entries(entries: Iterable[object]) -> Iterable[dict]:
    for entry in entries:
        if isinstance(entry, dict):
            yield entry
