"""
Console utilities for CLI.
"""

from typing import IO, Optional
from rich.console import Console
from rich.theme import Theme
import os
import sys

# Styles rendered by the handlers, the resolver and the error panels.
THEMES = {
    "dark": {
        "accent": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "muted": "grey70",
    },
    "light": {
        "accent": "dark_green",
        "warning": "dark_orange",
        "error": "red",
        "success": "green",
        "muted": "grey42",
    },
}


def _color_policy(enable: Optional[bool]):
    """
    Return (color enabled, force_terminal, color_system).

    NO_COLOR wins unless GPU_UPDATE_CHECKER_FORCE_COLOR is set; None means
    "colored when stdout is a terminal".
    """
    forced = (os.getenv("GPU_UPDATE_CHECKER_FORCE_COLOR") or "").lower() in ("1", "true", "yes", "on")
    no_color = os.getenv("NO_COLOR") is not None
    tty = bool(getattr(sys.stdout, "isatty", lambda: False)())

    enabled = (tty if enable is None else bool(enable)) and (forced or not no_color)
    if enable is False:
        return False, False, None
    return enabled, forced or (enabled and tty), "auto" if enabled else None


def make_console(theme_name: str = "dark", use_color: Optional[bool] = None, file: Optional[IO[str]] = None, width: Optional[int] = None) -> Console:
    """Rich console with the settings CLI theme; unknown theme names fall back to dark."""
    enabled, force_terminal, color_system = _color_policy(use_color)
    return Console(
        theme=Theme(THEMES.get(theme_name, THEMES["dark"])),
        no_color=not enabled,
        color_system=color_system,
        force_terminal=force_terminal,
        highlight=False,
        file=file,
        width=width,
    )


def clear(console: Console) -> None:
    console.clear()


__all__ = ["THEMES", "make_console", "clear"]
