"""Snapshot exporters."""

from .base import EXIT_NOT_OK, EXIT_OK, EXIT_WRITE_FAILED, BaseExporter
from .env_exporter import EnvSnapshotExporter
from .snapshot import EnvironmentSnapshot

__all__ = [
    "BaseExporter",
    "EnvSnapshotExporter",
    "EnvironmentSnapshot",
    "EXIT_OK",
    "EXIT_NOT_OK",
    "EXIT_WRITE_FAILED",
]
