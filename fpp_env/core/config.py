from __future__ import annotations

import json
from pathlib import Path
from typing import Tuple

# Fixed FPP locations. Everything under the media root can be re-rooted via
# ExportPaths.from_media_root(); the system locale directory cannot.
DEFAULT_MEDIA_ROOT = Path("/home/fpp/media")
SETTINGS_FILENAME = "settings"
OUTPUT_RELATIVE_PATH = Path("plugins/GoogleCalendarScheduler/runtime/fpp-env.json")
USER_HOLIDAYS_RELATIVE_PATH = Path("config/user-holidays.json")
USER_LOCALE_RELATIVE_DIR = Path("config/locale")
SYSTEM_LOCALE_DIR = Path("/opt/fpp/etc/locale")

SCHEMA_VERSION = 1
SNAPSHOT_SOURCE = "gcs-export"

DEFAULT_REGION = "Global"
KNOWN_REGIONS: Tuple[str, ...] = ("Global", "USA", "Canada")

# Checked in order; the first key holding a non-empty value wins.
TIMEZONE_KEYS: Tuple[str, ...] = ("TimeZone", "TimeZoneName", "timezone")
LATITUDE_KEY = "Latitude"
LONGITUDE_KEY = "Longitude"
LOCALE_KEY = "Locale"


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be loaded or parsed."""


def load_json_document(path: Path) -> object:
    """Return the parsed JSON content of ``path``."""
    doc_path = Path(path)
    try:
        if not doc_path.is_file():
            raise ConfigError(f"Config file not found: {doc_path}")
        return json.loads(doc_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Config file {doc_path} could not be read: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Config file {doc_path} contains invalid JSON.") from exc
