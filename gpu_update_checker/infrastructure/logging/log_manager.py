"""
Logging setup for the settings layer.

- Registers a SETTING level (between DEBUG and INFO) used for every read, set
  and setup of a settings key.
- Console output goes through rich's RichHandler on stderr; an optional plain
  text file handler mirrors everything at the configured level.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

SETTING = 15
logging.addLevelName(SETTING, "SETTING")

_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_MARK = "_gpu_update_checker_handler"


def log_setting(logger: logging.Logger, operation: str, key: str, val: Optional[str]) -> None:
    """Emit a structured SETTING record for a read/set/setup of `key`."""
    logger.log(
        SETTING,
        f"operation='{operation}',key='{key}',val='{val}'",
        extra={"operation": operation, "key": key, "val": val},
    )


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    if name == "SETTING":
        return SETTING
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(
    level: str | int = logging.WARNING,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Install handlers on the package logger. Safe to call repeatedly; handlers
    installed by a previous call are replaced.
    """
    root = logging.getLogger("gpu_update_checker")
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    numeric = resolve_level(level)
    root.setLevel(min(numeric, SETTING) if log_file else numeric)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setLevel(numeric)
    setattr(rich_handler, _HANDLER_MARK, True)
    root.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        file_handler.setLevel(SETTING)
        setattr(file_handler, _HANDLER_MARK, True)
        root.addHandler(file_handler)

    return root


__all__ = ["SETTING", "log_setting", "resolve_level", "configure_logging"]
