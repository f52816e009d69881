"""
INI Settings Repository (Infrastructure)

- Implements SettingsRepository on a textual `app.config` file:

    [appSettings]
    Check for Updates = true
    Download location = C:\\Drivers

- Keys are case-sensitive and interpolation is off, so paths with `%` survive.
- Writes re-parse the file first; a parse failure is a structural error.
- Writes are atomic (temp file + os.replace).
- Values with surrounding whitespace or quotes are written inside one pair of
  double quotes, which reads strip again.
- There is no [DEFAULT] section; a section of that name is just ignored.
"""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Optional, Dict

from .errors import SettingsStructureError
from .interfaces import SettingsRepository

logger = logging.getLogger(__name__)

SECTION = "appSettings"
_FORBIDDEN_KEY_CHARS = ("=", ":", "[", "]", "\n", "\r")
# Header lines never contain a newline, so no file section can become the default.
_NO_DEFAULT_SECTION = "\n"


def _quote(value: str) -> str:
    if value != value.strip() or (len(value) >= 2 and value[0] == value[-1] == '"'):
        return f'"{value}"'
    return value


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def validate_entry(key: str, value: str) -> None:
    """Reject keys/values the INI format cannot round-trip."""
    if not isinstance(key, str) or not key.strip() or key != key.strip():
        raise ValueError(f"Invalid settings key {key!r}")
    if any(ch in key for ch in _FORBIDDEN_KEY_CHARS) or key.lstrip()[:1] in ("#", ";"):
        raise ValueError(f"Settings key {key!r} contains characters the config file cannot store")
    if not isinstance(value, str):
        raise ValueError(f"Settings value for {key!r} must be a string, got {type(value).__name__}")
    if "\n" in value or "\r" in value:
        raise ValueError(f"Settings value for {key!r} must be a single line")


class IniSettingsRepository(SettingsRepository):
    """
    configparser-backed implementation for settings persistence.

    Reads are served from an in-memory view loaded on first access and
    refreshed after every write.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._view: Optional[Dict[str, str]] = None

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None, strict=True, default_section=_NO_DEFAULT_SECTION)
        parser.optionxform = str  # keep "Check for Updates" as written
        return parser

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SettingsStructureError(self.path, f"not valid UTF-8 ({e})") from e
        parser = self._parser()
        try:
            parser.read_string(text, source=str(self.path))
        except configparser.Error as e:
            raise SettingsStructureError(self.path, str(e)) from e
        if not parser.has_section(SECTION):
            return {}
        return {key: _unquote(value) for key, value in parser.items(SECTION, raw=True)}

    def _write(self, data: Dict[str, str]) -> None:
        parser = self._parser()
        parser.add_section(SECTION)
        for key, value in data.items():
            parser.set(SECTION, key, _quote(value))

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                parser.write(fh)
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    # ------------- SettingsRepository -------------

    def exists(self) -> bool:
        return self.path.is_file()

    def get_pref(self, key: str) -> Optional[str]:
        if self._view is None:
            self._view = self._load()
        return self._view.get(key)

    def set_pref(self, key: str, value: str) -> None:
        validate_entry(key, value)
        data = self._load()
        data[key] = value
        self._write(data)
        self.reload()

    def all_prefs(self) -> Dict[str, str]:
        if self._view is None:
            self._view = self._load()
        return dict(self._view)

    def reload(self) -> None:
        self._view = None
        self._view = self._load()

    def wipe(self) -> bool:
        self._view = None
        if not self.path.exists():
            return True
        try:
            self.path.unlink()
        except OSError as e:
            logger.error(f"Could not delete config file '{self.path}': {e}")
            return False
        logger.info("Wiped config!")
        return True
