import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


CHICAGO_SETTINGS = {
    "TimeZone": "America/Chicago",
    "Latitude": "41.8",
    "Longitude": "-87.6",
}

USA_HOLIDAYS = [
    {"name": "Independence Day", "shortName": "IndependenceDay", "month": 7, "day": 4},
    {"name": "Thanksgiving", "shortName": "Thanksgiving", "month": 11, "type": "nthday"},
]


def write_settings(media_root: Path, values: dict) -> Path:
    media_root.mkdir(parents=True, exist_ok=True)
    path = media_root / "settings"
    lines = [f'{key} = "{value}"' for key, value in values.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def media_root(tmp_path):
    root = tmp_path / "media"
    root.mkdir()
    return root


@pytest.fixture
def locale_dir(tmp_path):
    directory = tmp_path / "locale"
    directory.mkdir()
    (directory / "Global.json").write_text(
        json.dumps({"name": "Global", "holidays": [{"name": "New Year's Day", "shortName": "NewYearsDay"}]}),
        encoding="utf-8",
    )
    (directory / "USA.json").write_text(
        json.dumps({"name": "USA", "Latitude": 38.9, "holidays": USA_HOLIDAYS}),
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "plugins" / "GoogleCalendarScheduler" / "runtime" / "fpp-env.json"
