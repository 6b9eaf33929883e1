"""End-to-end tests for the fpp_env_export entry script."""

import json
import logging

import pytest

import fpp_env_export

from conftest import CHICAGO_SETTINGS, USA_HOLIDAYS, write_settings


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler).__module__.startswith("_pytest"):
            continue
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)


def run(media_root, output_path, locale_dir, *extra):
    argv = [
        "--media-root",
        str(media_root),
        "--output",
        str(output_path),
        "--locale-dir",
        str(locale_dir),
        *extra,
    ]
    return fpp_env_export.main(argv)


def test_scenario_complete_settings(media_root, output_path, locale_dir, capsys):
    write_settings(media_root, {**CHICAGO_SETTINGS, "Locale": "USA"})

    exit_code = run(media_root, output_path, locale_dir)

    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0
    assert document == {
        "schemaVersion": 1,
        "source": "gcs-export",
        "timezone": "America/Chicago",
        "latitude": 41.8,
        "longitude": -87.6,
        "locale": {"region": "USA", "holidays": USA_HOLIDAYS},
        "ok": True,
    }
    assert capsys.readouterr().err == ""


def test_scenario_settings_missing(media_root, output_path, locale_dir, capsys):
    exit_code = run(media_root, output_path, locale_dir)

    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 1
    assert document["ok"] is False
    assert document["error"] == "Timezone not present in FPP settings."
    assert document["latitude"] == 0.0

    err_lines = capsys.readouterr().err.splitlines()
    assert err_lines
    assert all(line.startswith("WARN: ") for line in err_lines)
    assert "WARN: Latitude/Longitude not present (or zero) in FPP settings." in err_lines


def test_scenario_zero_latitude(media_root, output_path, locale_dir, capsys):
    write_settings(media_root, {**CHICAGO_SETTINGS, "Latitude": "0"})

    exit_code = run(media_root, output_path, locale_dir)

    assert exit_code == 1
    assert capsys.readouterr().err == "WARN: Latitude/Longitude not present (or zero) in FPP settings.\n"


def test_scenario_unwritable_output(media_root, tmp_path, locale_dir, capsys):
    write_settings(media_root, CHICAGO_SETTINGS)
    output_path = tmp_path / "fpp-env.json"
    output_path.mkdir()

    exit_code = run(media_root, output_path, locale_dir)

    assert exit_code == 2
    err = capsys.readouterr().err
    assert err.startswith(f"ERROR: Unable to write {output_path}")


def test_settings_json_option(tmp_path, output_path, locale_dir):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps(CHICAGO_SETTINGS), encoding="utf-8")

    exit_code = run(tmp_path / "unused", output_path, locale_dir, "--settings-json", str(settings_path))

    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0
    assert document["locale"]["region"] == "Global"
    assert document["locale"]["holidays"][0]["shortName"] == "NewYearsDay"


def test_strict_option_reports_malformed_settings(media_root, output_path, locale_dir, capsys):
    (media_root / "settings").write_text('TimeZone = "UTC"\nbroken line\n', encoding="utf-8")

    exit_code = run(media_root, output_path, locale_dir, "--strict")

    assert exit_code == 1
    assert "WARN: Unable to load FPP settings" in capsys.readouterr().err


def test_log_file_option(media_root, output_path, locale_dir, tmp_path):
    log_file = tmp_path / "logs" / "export.log"

    run(media_root, output_path, locale_dir, "--log-file", str(log_file))

    contents = log_file.read_text(encoding="utf-8")
    assert "[WARN] Timezone not present in FPP settings." in contents


def test_default_media_root():
    args = fpp_env_export.parse_args([])

    exporter = fpp_env_export.build_exporter(args)

    assert str(exporter.output_path) == "/home/fpp/media/plugins/GoogleCalendarScheduler/runtime/fpp-env.json"
    assert str(exporter.settings_source.settings_path) == "/home/fpp/media/settings"


@pytest.mark.parametrize("extra", [["unexpected"], ["--no-such-flag"]])
def test_invalid_arguments_use_usage_status(media_root, output_path, locale_dir, capsys, extra):
    with pytest.raises(SystemExit) as excinfo:
        run(media_root, output_path, locale_dir, *extra)

    assert excinfo.value.code == fpp_env_export.EXIT_USAGE
    assert excinfo.value.code not in (0, 1, 2)
    assert "ERROR: " in capsys.readouterr().err
    assert not output_path.exists()
