"""Base exporter class for one-shot snapshot exports."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .snapshot import EnvironmentSnapshot


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_OK = 1
EXIT_WRITE_FAILED = 2


class BaseExporter(ABC):
    """
    Abstract base class for snapshot exporters.

    Runs the fixed pipeline:
    - acquire values into a fresh snapshot
    - validate the snapshot in place
    - serialize it
    - write it to the output path, replacing previous content
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)

    def export(self) -> int:
        """
        Run one export.

        Returns:
            0 when the snapshot is ok, 1 when it was written but is not ok,
            2 when it could not be written.
        """
        snapshot = self.acquire()
        self.validate(snapshot)
        payload = snapshot.to_json()

        if not self.write_document(payload):
            return EXIT_WRITE_FAILED
        return EXIT_OK if snapshot.ok else EXIT_NOT_OK

    @abstractmethod
    def acquire(self) -> EnvironmentSnapshot:
        """Collect upstream values. Must not raise for unavailable sources."""

    @abstractmethod
    def validate(self, snapshot: EnvironmentSnapshot) -> None:
        """Apply mandatory-field checks to ``snapshot``."""

    def warn(self, snapshot: EnvironmentSnapshot, message: str) -> None:
        """Mark ``snapshot`` not ok and report ``message``."""
        snapshot.record_error(message)
        logger.warning(message)

    def write_document(self, payload: str) -> bool:
        """
        Truncate and write ``payload`` to the output path.

        Returns:
            True if written, False if the destination could not be opened
        """
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "w", encoding="utf-8") as handle:
                handle.write(payload)
        except OSError as exc:
            logger.error("Unable to write %s (%s)", self.output_path, exc.strerror or exc)
            return False
        logger.info("Wrote %s", self.output_path)
        return True
