"""
Settings repository factory (composition root helper)

The store depends on SettingsRepository (interfaces.py). This module resolves
the backing resource location and lazily instantiates the chosen backend.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from gpu_update_checker.config import Config
from .interfaces import SettingsRepository

_FILENAMES = {
    "ini": "app.config",
    "sqlite": "app.db",
}


def user_data_dir() -> Path:
    """Per-user application data root: %LOCALAPPDATA%, $XDG_DATA_HOME, ~/.local/share."""
    base = os.getenv("LOCALAPPDATA") or os.getenv("XDG_DATA_HOME")
    if base:
        return Path(base)
    return Path.home() / ".local" / "share"


def config_directory() -> Path:
    """Blueprint: <per-user-app-data>/<vendor>/<app-name>"""
    return user_data_dir() / Config.VENDOR / Config.APP_NAME


def default_config_path(backend: str = "ini") -> Path:
    Config.validate(backend)
    return config_directory() / _FILENAMES[backend.lower()]


def build_settings_repository(path: Optional[str | Path] = None, backend: Optional[str] = None) -> SettingsRepository:
    name = (backend or Config.SETTINGS_BACKEND).lower()
    Config.validate(name)
    target = Path(path) if path else default_config_path(name)

    # Lazy imports keep the unused backend out of the import graph
    if name == "sqlite":
        from .sqlite_repository import SqliteSettingsRepository
        return SqliteSettingsRepository(target)
    from .ini_repository import IniSettingsRepository
    return IniSettingsRepository(target)


__all__ = ["user_data_dir", "config_directory", "default_config_path", "build_settings_repository"]
