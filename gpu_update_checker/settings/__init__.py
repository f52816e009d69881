"""
Settings package

Callers depend on SettingsStore and the SettingsRepository contract
(interfaces.py); the factory picks the INI (default) or sqlite backend.
"""

from __future__ import annotations

from .errors import ConfigWipedError, SettingsError, SettingsStructureError
from .factory import build_settings_repository, default_config_path
from .interfaces import SettingsRepository  # re-exported contract
from .store import SettingsStore

__all__ = [
    "SettingsStore",
    "SettingsRepository",
    "build_settings_repository",
    "default_config_path",
    "SettingsError",
    "SettingsStructureError",
    "ConfigWipedError",
]
