#!/usr/bin/env python3
"""
FPP environment exporter.

Reads timezone, coordinates and locale from the FPP settings store, validates
them and writes the snapshot consumed by the calendar scheduler. Diagnostics
go to stderr; the exit status is 0 (ok), 1 (written, not ok), 2 (not written)
or 64 (invalid arguments).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from fpp_env.core import ExportPaths
from fpp_env.core.config import DEFAULT_MEDIA_ROOT
from fpp_env.exporters import EnvSnapshotExporter
from fpp_env.sources import FppLocaleProvider, create_settings_source


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
MEDIA_ROOT = DEFAULT_MEDIA_ROOT
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Exit status 2 means "snapshot not written"; bad arguments get EX_USAGE instead.
EXIT_USAGE = 64


class ExportArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"ERROR: {self.prog}: {message}\n")


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    # Diagnostics read "WARN: ..." rather than "WARNING: ...".
    logging.addLevelName(logging.WARNING, "WARN")

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=handlers,
        force=True,
    )


def build_exporter(args: argparse.Namespace) -> EnvSnapshotExporter:
    paths = ExportPaths.from_media_root(args.media_root)

    if args.settings_json is not None:
        source = create_settings_source("json", args.settings_json)
    else:
        source = create_settings_source("store", paths.media_root, strict=args.strict)

    locale_dirs = args.locale_dir or list(paths.locale_dirs)
    provider = FppLocaleProvider(locale_dirs, paths.user_holidays_path)
    output_path = args.output or paths.output_path
    return EnvSnapshotExporter(source, output_path, locale_provider=provider)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = ExportArgumentParser(description="Export the FPP environment snapshot")
    parser.add_argument(
        "--media-root", type=Path, default=MEDIA_ROOT, help="FPP media directory"
    )
    parser.add_argument("--output", type=Path, default=None, help="Snapshot output path")
    parser.add_argument(
        "--settings-json", type=Path, default=None, help="Read settings from a JSON document"
    )
    parser.add_argument(
        "--locale-dir",
        type=Path,
        action="append",
        default=None,
        help="Locale directory to search (repeatable)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on malformed settings lines"
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    parser.add_argument("--verbose", action="store_true", help="Log debug details")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    exporter = build_exporter(args)
    exit_code = exporter.export()
    logging.debug("FPP environment export finished with status %d.", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
