from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.config import SCHEMA_VERSION, SNAPSHOT_SOURCE


@dataclass
class EnvironmentSnapshot:
    """
    The document handed to the scheduler.

    Coordinates use 0.0 for "absent", so a genuine zero latitude or longitude
    reads as missing. ``error`` holds only the most recent failure.
    """

    timezone: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    region: str = ""
    holidays: Any = field(default_factory=list)
    ok: bool = True
    error: Optional[str] = None

    def record_error(self, message: str) -> None:
        self.ok = False
        self.error = message

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "schemaVersion": SCHEMA_VERSION,
            "source": SNAPSHOT_SOURCE,
            "timezone": self.timezone,
            "latitude": float(self.latitude),
            "longitude": float(self.longitude),
            "locale": {
                "region": self.region,
                "holidays": self.holidays,
            },
            "ok": self.ok,
        }
        if not self.ok:
            document["error"] = self.error or ""
        return document

    def to_json(self) -> str:
        return json.dumps(self.to_document(), indent=4, ensure_ascii=False) + "\n"
