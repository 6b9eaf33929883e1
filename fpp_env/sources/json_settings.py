from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..core.config import ConfigError, load_json_document
from .base import SettingsSource


logger = logging.getLogger(__name__)


class JsonSettingsFile(SettingsSource):
    """Settings read straight from a JSON object; only string values are kept."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._values: Optional[Dict[str, str]] = None

    def read(self) -> Dict[str, str]:
        document = load_json_document(self.path)
        if not isinstance(document, Mapping):
            raise ConfigError(f"Settings document {self.path} must be a JSON object.")

        values: Dict[str, str] = {}
        for key, value in document.items():
            if isinstance(value, str):
                values[str(key)] = value
            else:
                logger.debug("%s: ignoring non-string setting %s", self.path, key)
        self._values = values
        return dict(values)

    def get_setting(self, key: str) -> str:
        if self._values is None:
            self.read()
        return self._values.get(key, "")

    def describe(self) -> str:
        return str(self.path)
