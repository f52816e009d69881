"""
Settings repository abstractions (Clean Architecture)

- The settings store depends only on these interfaces, not on a file format.
- Infrastructure backends (INI file, sqlite) implement these contracts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Optional, Dict


class SettingsRepository(Protocol):
    """
    Repository contract for the backing resource holding user preferences.

    Structural failures (unparseable or unwritable format) are raised as
    SettingsStructureError by get/set/all.
    """

    path: Path

    def exists(self) -> bool:
        ...

    # Preferences (simple string key/value pairs)
    def get_pref(self, key: str) -> Optional[str]:
        ...

    def set_pref(self, key: str, value: str) -> None:
        """
        Insert or overwrite `key`, persist, and reload the in-memory view.
        """
        ...

    def all_prefs(self) -> Dict[str, str]:
        ...

    def reload(self) -> None:
        ...

    def wipe(self) -> bool:
        """
        Delete the backing resource. Returns True when it no longer exists.
        Deletion errors are logged, not raised.
        """
        ...
