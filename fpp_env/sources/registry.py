"""Settings source registry."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .base import SettingsSource
from .json_settings import JsonSettingsFile
from .settings_store import FppSettingsStore


def create_settings_source(kind: str, path: Union[str, Path], *, strict: bool = False) -> SettingsSource:
    """
    Factory for the two settings strategies.

    Args:
        kind: ``"store"`` for the FPP settings file under a media root,
            ``"json"`` for a JSON settings document.
        path: Media root for ``"store"``, document path for ``"json"``.
        strict: Reject malformed lines in the settings store.
    """
    if kind == "store":
        return FppSettingsStore(path, strict=strict)
    elif kind == "json":
        return JsonSettingsFile(path)
    else:
        raise ValueError(f"Unknown settings source: {kind}")
