"""
SQLite Settings Repository (Infrastructure)

- Implements SettingsRepository to persist user preferences in a single
  `prefs(key, value)` table.
- A file that is not a SQLite database surfaces as SettingsStructureError.
- No dependencies on presentation; pure infrastructure
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Dict

from .errors import SettingsStructureError
from .interfaces import SettingsRepository

logger = logging.getLogger(__name__)


class SqliteSettingsRepository(SettingsRepository):
    """
    SQLite-backed implementation for settings persistence.

    Schema:
      - prefs(key TEXT PRIMARY KEY, value TEXT NOT NULL)

    The connection is opened lazily so that probing a missing file does not
    create it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._conn: Optional[sqlite3.Connection] = None

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.path))
            try:
                self._ensure_schema()
            except sqlite3.DatabaseError as e:
                self.close()
                raise SettingsStructureError(self.path, str(e)) from e
        return self._conn

    def _ensure_schema(self) -> None:
        cur = self._conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS prefs (
              key   TEXT PRIMARY KEY,
              value TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def close(self) -> None:
        if self._conn is not None:
            try:
                self._conn.close()
            finally:
                self._conn = None

    # ------------- SettingsRepository -------------

    def exists(self) -> bool:
        return self.path.is_file()

    def get_pref(self, key: str) -> Optional[str]:
        if not self.exists():
            return None
        try:
            cur = self._connect().cursor()
            cur.execute("SELECT value FROM prefs WHERE key = ?", (key,))
            row = cur.fetchone()
        except sqlite3.DatabaseError as e:
            raise SettingsStructureError(self.path, str(e)) from e
        return row[0] if row else None

    def set_pref(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError(f"Invalid settings key {key!r}")
        if not isinstance(value, str):
            raise ValueError(f"Settings value for {key!r} must be a string, got {type(value).__name__}")
        try:
            conn = self._connect()
            conn.execute(
                "INSERT INTO prefs(key, value) VALUES(?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
        except sqlite3.DatabaseError as e:
            raise SettingsStructureError(self.path, str(e)) from e

    def all_prefs(self) -> Dict[str, str]:
        if not self.exists():
            return {}
        try:
            cur = self._connect().cursor()
            cur.execute("SELECT key, value FROM prefs")
            return {row[0]: row[1] for row in cur.fetchall()}
        except sqlite3.DatabaseError as e:
            raise SettingsStructureError(self.path, str(e)) from e

    def reload(self) -> None:
        # Reads always go to the database; nothing is cached.
        pass

    def wipe(self) -> bool:
        self.close()
        if not self.path.exists():
            return True
        try:
            self.path.unlink()
        except OSError as e:
            logger.error(f"Could not delete config file '{self.path}': {e}")
            return False
        logger.info("Wiped config!")
        return True
