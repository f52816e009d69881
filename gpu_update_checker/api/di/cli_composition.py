"""
Composition root for the CLI: wires the settings repository, the terminal
resolver and the settings store.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console

from gpu_update_checker.config import Config
from gpu_update_checker.interfaces.services.resolver import InteractiveResolver
from gpu_update_checker.settings import SettingsRepository, SettingsStore, build_settings_repository


def build_resolver(console: Console, session=None, confirm: Optional[bool] = None) -> InteractiveResolver:
    from gpu_update_checker.ui.cli.resolver import ConsoleResolver
    return ConsoleResolver(console, session=session, confirm=Config.CONFIRM if confirm is None else confirm)


def build_repository(path: Optional[str | Path] = None, backend: Optional[str] = None) -> SettingsRepository:
    return build_settings_repository(path or Config.CONFIG_PATH or None, backend)


def build_settings_store(
    resolver: InteractiveResolver,
    backend: Optional[str] = None,
    debug: Optional[bool] = None,
) -> SettingsStore:
    """
    Build a store for `backend`. The backing resource is chosen later by
    SettingsStore.initialize (override path, GPU_UPDATE_CHECKER_CONFIG, or the
    per-user default).
    """
    name = (backend or Config.SETTINGS_BACKEND).lower()
    Config.validate(name)
    repository = build_repository(None, name) if Config.CONFIG_PATH else None
    return SettingsStore(
        resolver,
        repository,
        backend=name,
        debug=Config.DEBUG if debug is None else debug,
    )


__all__ = ["build_resolver", "build_repository", "build_settings_store"]
