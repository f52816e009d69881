"""
Settings error taxonomy.

- SettingsStructureError: the backing resource could not be parsed or written
  in its format. Reads log it and return None; writes escalate it.
- ConfigWipedError: raised after a write-time structural error wiped the
  backing resource. The outermost entry point turns it into exit status 1.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base class for settings failures."""


class SettingsStructureError(SettingsError):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigWipedError(SettingsError):
    exit_code = 1

    def __init__(self, path: Path, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            f"The config file '{path}' has been wiped due to a possible syntax error"
            + (f": {cause}" if cause else "")
        )
        self.path = path
        self.cause = cause


__all__ = ["SettingsError", "SettingsStructureError", "ConfigWipedError"]
