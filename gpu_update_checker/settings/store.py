"""
Settings store: typed access to the operator's preferences with on-demand
interactive provisioning.

Lifecycle
- initialize(): pick the backing resource, bootstrap the mandatory keys on
  first run, then verify them.
- read_setting(): missing keys are provisioned through the resolver.
- set_setting(): a structural error while persisting wipes the backing
  resource and raises ConfigWipedError; the entry point decides how to exit.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from gpu_update_checker.domain.entities.gpu import SetupPayload
from gpu_update_checker.infrastructure.logging.log_manager import log_setting
from gpu_update_checker.interfaces.services.resolver import InteractiveResolver
from . import keys
from .errors import ConfigWipedError, SettingsStructureError
from .factory import build_settings_repository
from .interfaces import SettingsRepository
from .prompts import prompt_for

logger = logging.getLogger(__name__)


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Exactly "true"/"false"; anything else is None."""
    if value == keys.TRUE_VALUE:
        return True
    if value == keys.FALSE_VALUE:
        return False
    return None


class SettingsStore:
    """
    Key/value preferences backed by a SettingsRepository.

    The repository may be injected (tests, embedding) or is opened by
    initialize() from an override path or the per-user default location.
    """

    def __init__(
        self,
        resolver: InteractiveResolver,
        repository: Optional[SettingsRepository] = None,
        *,
        backend: str = "ini",
        debug: bool = False,
    ) -> None:
        self._resolver = resolver
        self._repository = repository
        self.backend = backend
        self.debug = debug

    @property
    def repository(self) -> SettingsRepository:
        if self._repository is None:
            self._repository = build_settings_repository(None, self.backend)
        return self._repository

    @property
    def path(self) -> Path:
        return self.repository.path

    # ------------------------------------------------------------------ #
    #  Bootstrap / verification
    # ------------------------------------------------------------------ #
    def initialize(self, override_path: Optional[str | Path] = None) -> None:
        if override_path is not None:
            self._repository = build_settings_repository(override_path, self.backend)

        repo = self.repository
        if self.debug:
            logger.info(f"configFile: {repo.path}")

        if not repo.exists():
            logger.info("Generating configuration file.")
            for key in keys.MANDATORY_KEYS:
                self.setup_setting(key)

        self.verify_config()

    def verify_config(self) -> None:
        """Read every mandatory key so missing ones get repaired up front."""
        values = {key: self.read_setting(key) for key in keys.MANDATORY_KEYS}
        if self.debug:
            for key, value in values.items():
                logger.info(f"{key}: {value}")

    # ------------------------------------------------------------------ #
    #  Reads
    # ------------------------------------------------------------------ #
    def read_setting(
        self,
        key: str,
        payload: Optional[SetupPayload] = None,
        setup_if_not_found: bool = True,
    ) -> Optional[str]:
        """
        Return the value of `key`. A missing key is provisioned through the
        resolver when `setup_if_not_found` is set, otherwise None is returned.
        Structural errors are logged and yield None.
        """
        try:
            value = self.repository.get_pref(key)
            log_setting(logger, "read", key, value)
            if value is not None:
                return value
            if not setup_if_not_found:
                return None

            logger.warning(f"Error reading configuration file, attempting to repair key '{key}' . . .")
            self.setup_setting(key, payload)
            value = self.repository.get_pref(key)
            log_setting(logger, "read", key, value)
            return value
        except SettingsStructureError as e:
            logger.error(f"Could not read key '{key}': {e}")
            return None

    def read_setting_bool(self, key: str) -> bool:
        parsed = parse_bool(self.read_setting(key, setup_if_not_found=False))
        if parsed is not None:
            return parsed

        # setup and read
        self.setup_setting(key)
        parsed = parse_bool(self.read_setting(key, setup_if_not_found=False))
        if parsed is not None:
            return parsed

        logger.error(f"Could not retrieve the key '{key}' as a boolean, defaulting to false")
        return False

    def snapshot(self) -> Dict[str, Optional[str]]:
        """
        Known keys (in bootstrap order) plus any other persisted keys, without
        provisioning anything. Unreadable resources yield an empty mapping.
        """
        try:
            stored = self.repository.all_prefs()
        except SettingsStructureError as e:
            logger.error(f"Could not read settings: {e}")
            return {}
        out: Dict[str, Optional[str]] = {key: stored.get(key) for key in keys.KNOWN_KEYS}
        for key, value in stored.items():
            out.setdefault(key, value)
        return out

    # ------------------------------------------------------------------ #
    #  Writes
    # ------------------------------------------------------------------ #
    def set_setting(self, key: str, value: str) -> None:
        """
        Upsert `key`, persist, and reload the in-memory view.

        Raises:
            ConfigWipedError: persisting hit a structural error; the backing
                resource has been deleted.
            ValueError: the key or value cannot be stored in this format.
        """
        log_setting(logger, "set", key, value)
        try:
            self.repository.set_pref(key, value)
        except SettingsStructureError as e:
            logger.error(f"Failed to persist key '{key}': {e}")
            self.repository.wipe()
            raise ConfigWipedError(self.repository.path, e) from e

    def setup_setting(self, key: str, payload: Optional[SetupPayload] = None) -> str:
        """Ask the operator for a value of `key` and persist it."""
        prompt = prompt_for(key, payload)
        if prompt is None:
            self._resolver.notify_error(f"Unknown key '{key}'")
            value = keys.UNKNOWN_VALUE
        else:
            value = self._resolver.resolve(prompt)

        self.set_setting(key, value)
        log_setting(logger, "setup", key, value)
        return value


__all__ = ["SettingsStore", "parse_bool"]
