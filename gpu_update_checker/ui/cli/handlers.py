"""
Command handlers for CLI.
"""
from __future__ import annotations

import sys
from typing import List, Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gpu_update_checker.domain.entities.gpu import SetupPayload
from gpu_update_checker.settings import ConfigWipedError, SettingsStore
from .console import clear

WIPED_MESSAGE = (
    "The config file has been wiped due to a possible syntax error, "
    "please run the application again and setup your values."
)


def show_help(console: Console) -> None:
    """Print help panel."""
    console.print(
        Panel(
            "Commands\n"
            "/help                 Show help\n"
            "/show                 Show all settings\n"
            "/get <key> \\[bool]     Read a setting (prompts if missing)\n"
            "/set <key> <value>    Write a setting\n"
            "/setup <key>          Ask again for a setting\n"
            "/verify               Check all mandatory settings\n"
            "/path                 Show the config file location\n"
            "/clear                Clear the screen\n"
            "/exit                 Exit\n\n"
            "Quote keys that contain spaces, e.g. /set \"Driver type\" sd",
            title="Help",
            box=ROUNDED,
        )
    )


def show_settings(console: Console, store: SettingsStore) -> None:
    """Render a table of persisted settings."""
    table = Table(title="Settings", box=ROUNDED)
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")

    for key, value in store.snapshot().items():
        table.add_row(escape(key), escape(value) if value is not None else "[muted]-[/muted]")

    console.print(table)


def show_path(console: Console, store: SettingsStore) -> None:
    console.print(escape(str(store.path)), soft_wrap=True)


def handle_get(console: Console, store: SettingsStore, key: str, as_bool: bool = False, setup: bool = True) -> Optional[str]:
    """Print a single setting; returns the printed value."""
    if as_bool:
        value = "true" if store.read_setting_bool(key) else "false"
    else:
        value = store.read_setting(key, setup_if_not_found=setup)
    console.print(escape(value) if value is not None else "[muted](not set)[/muted]", soft_wrap=True)
    return value


def handle_set(console: Console, store: SettingsStore, key: str, value: str) -> None:
    store.set_setting(key, value)
    console.print(f"[success]{escape(key)}[/success] set to '{escape(value)}'")


def handle_setup(console: Console, store: SettingsStore, key: str, payload: Optional[SetupPayload] = None) -> str:
    value = store.setup_setting(key, payload)
    console.print(f"[success]{escape(key)}[/success] set to '{escape(value)}'")
    return value


def handle_verify(console: Console, store: SettingsStore) -> None:
    store.verify_config()
    console.print("[success]Configuration verified.[/success]")


def handle_shell_command(console: Console, store: SettingsStore, parts: List[str]) -> bool:
    """
    Dispatch one shell command (already split). Returns False when the
    command is not recognized.
    """
    cmd, args = parts[0], parts[1:]
    if cmd == "/help":
        show_help(console)
    elif cmd == "/show":
        show_settings(console, store)
    elif cmd == "/path":
        show_path(console, store)
    elif cmd == "/verify":
        handle_verify(console, store)
    elif cmd == "/get":
        if not args:
            console.print("Usage: /get <key> \\[bool]")
        else:
            handle_get(console, store, args[0], as_bool=len(args) > 1 and args[1].lower() == "bool")
    elif cmd == "/set":
        if len(args) != 2:
            console.print("Usage: /set <key> <value>")
        else:
            handle_set(console, store, args[0], args[1])
    elif cmd == "/setup":
        if len(args) != 1:
            console.print("Usage: /setup <key>")
        else:
            handle_setup(console, store, args[0])
    elif cmd == "/clear":
        clear(console)
    elif cmd == "/exit":
        handle_exit(console)
    else:
        return False
    return True


def handle_config_wiped(console: Console, exc: ConfigWipedError, wait: bool = False) -> None:
    """Tell the operator the config file is gone; optionally wait for Enter."""
    console.print(
        Panel(
            f"{escape(str(exc))}\n\n{WIPED_MESSAGE}",
            title="Configuration",
            box=ROUNDED,
            border_style="error",
        )
    )
    if wait:
        try:
            console.input("Press Enter to exit...")
        except (KeyboardInterrupt, EOFError):
            pass


def handle_exit(console) -> None:
    """Handle /exit command."""
    console.print("\n[warning]Exiting...[/warning]")
    sys.exit(0)
