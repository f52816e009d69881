"""
Command line front-end for the GPU update checker settings.

Initializes the settings store (creating and filling the config file on first
run), then runs one command.

Commands:
  show                      Show all settings (default)
  get KEY [--bool]          Print a setting, prompting if it is missing
  set KEY VALUE             Write a setting
  setup KEY                 Ask again for a setting
  select-gpu --gpu ID[:NAME] ...
                            Choose the GPU ID among the listed GPUs
  path                      Print the config file location
  shell                     Interactive settings shell

Exit status is 1 when the config file had to be wiped, 0 otherwise.

Run:
  gpu-update-checker [options] [command]
  or
  python -m gpu_update_checker
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gpu_update_checker.api.di.cli_composition import build_resolver, build_settings_store
from gpu_update_checker.config import Config
from gpu_update_checker.domain.entities.gpu import GpuInfo, GpuListPayload
from gpu_update_checker.infrastructure.logging.log_manager import configure_logging
from gpu_update_checker.interfaces.services.resolver import InteractiveResolver
from gpu_update_checker.settings import ConfigWipedError, SettingsStore
from gpu_update_checker.settings import keys
from .console import make_console
from .handlers import (
    handle_config_wiped, handle_get, handle_set, handle_setup, handle_shell_command,
    show_help, show_path, show_settings,
)

logger = logging.getLogger(__name__)

SHELL_COMMANDS = ["/help", "/show", "/get", "/set", "/setup", "/verify", "/path", "/clear", "/exit"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpu-update-checker",
        description="Manage the GPU update checker settings.",
    )
    parser.add_argument("--config-override", metavar="PATH", default=None,
                        help="Use this config file instead of the per-user default")
    parser.add_argument("--confirm-dl", "--confirm", dest="confirm", action="store_true",
                        default=Config.CONFIRM,
                        help="Non-interactive mode: yes/no questions take their defaults")
    parser.add_argument("--debug", action="store_true", default=Config.DEBUG,
                        help="Verbose logging, print config path and values")
    parser.add_argument("--noprompt", dest="show_ui", action="store_false", default=Config.SHOW_UI,
                        help="Do not wait for Enter before exiting on errors")
    parser.add_argument("--backend", choices=Config.SUPPORTED_BACKENDS, default=None,
                        help="Settings storage backend (default: ini)")
    parser.add_argument("--log-file", metavar="PATH", default=Config.LOG_FILE or None,
                        help="Also write log records to this file")
    parser.add_argument("--theme", choices=("dark", "light"), default=Config.CLI_THEME if Config.CLI_THEME in ("dark", "light") else "dark")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("show", help="Show all settings")

    p_get = sub.add_parser("get", help="Print a setting")
    p_get.add_argument("key", choices=keys.KNOWN_KEYS)
    p_get.add_argument("--bool", dest="as_bool", action="store_true", help="Interpret as true/false")
    p_get.add_argument("--no-setup", dest="setup", action="store_false",
                       help="Do not prompt when the setting is missing")

    p_set = sub.add_parser("set", help="Write a setting")
    p_set.add_argument("key", choices=keys.KNOWN_KEYS)
    p_set.add_argument("value")

    p_setup = sub.add_parser("setup", help="Ask again for a setting")
    p_setup.add_argument("key", choices=keys.KNOWN_KEYS)

    p_gpu = sub.add_parser("select-gpu", help="Choose the GPU ID")
    p_gpu.add_argument("--gpu", dest="gpus", action="append", required=True, metavar="ID[:NAME]",
                       help="A GPU to offer; repeat for several")

    sub.add_parser("path", help="Print the config file location")
    sub.add_parser("shell", help="Interactive settings shell")
    return parser


def run_shell(console: Console, store: SettingsStore, session=None) -> None:
    """Interactive settings loop."""
    session = session or PromptSession(history=InMemoryHistory())
    show_help(console)
    completer = WordCompleter(SHELL_COMMANDS + [f'"{k}"' for k in keys.KNOWN_KEYS], ignore_case=True, match_middle=True)

    while True:
        try:
            with patch_stdout():
                user_input = session.prompt("> ", completer=completer)
        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting...", style="yellow")
            break

        cmd = user_input.strip()
        if not cmd:
            continue
        try:
            parts = shlex.split(cmd)
        except ValueError as e:
            console.print(f"[warning]Could not parse command: {escape(str(e))}[/warning]")
            continue

        try:
            if not handle_shell_command(console, store, parts):
                console.print("[warning]Unknown command. Type /help for a list.[/warning]")
        except ValueError as e:
            console.print(Panel(escape(str(e)), title="Error", box=ROUNDED, border_style="error"))


def _dispatch(args: argparse.Namespace, console: Console, store: SettingsStore) -> int:
    command = args.command or "show"
    if command == "show":
        show_settings(console, store)
    elif command == "get":
        handle_get(console, store, args.key, as_bool=args.as_bool, setup=args.setup)
    elif command == "set":
        handle_set(console, store, args.key, args.value)
    elif command == "setup":
        handle_setup(console, store, args.key)
    elif command == "select-gpu":
        payload = GpuListPayload(gpus=[GpuInfo.parse(spec) for spec in args.gpus])
        handle_setup(console, store, keys.GPU_ID, payload)
    elif command == "path":
        show_path(console, store)
    elif command == "shell":
        run_shell(console, store)
    return 0


def run(
    argv: Optional[List[str]] = None,
    resolver: Optional[InteractiveResolver] = None,
    console: Optional[Console] = None,
) -> int:
    """Parse arguments, initialize settings, run the command. Returns the exit status."""
    args = build_parser().parse_args(argv)

    if console is None:
        use_color = False if args.no_color else Config.color_enabled()
        console = make_console(args.theme, use_color=use_color)
    configure_logging("DEBUG" if args.debug else Config.LOG_LEVEL, log_file=args.log_file)

    resolver = resolver or build_resolver(console, confirm=args.confirm)

    try:
        store = build_settings_store(resolver, backend=args.backend, debug=args.debug)
        store.initialize(args.config_override)
        return _dispatch(args, console, store)
    except ConfigWipedError as exc:
        logger.error(str(exc))
        handle_config_wiped(console, exc, wait=args.show_ui and not args.confirm)
        return exc.exit_code
    except ValueError as exc:
        console.print(Panel(escape(str(exc)), title="Error", box=ROUNDED, border_style="error"))
        return 2
    except (KeyboardInterrupt, EOFError):
        console.print("\nExiting...", style="yellow")
        return 0


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
