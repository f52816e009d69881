"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading overrides from a .env file
2. Setting default configurations (vendor/app folder names, backend, modes)
3. Validating the selected settings backend
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return (os.getenv(name, default) or "").lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration manager for the settings store and its CLI."""

    # Backing resource location
    CONFIG_PATH: str = os.getenv('GPU_UPDATE_CHECKER_CONFIG', '')
    SETTINGS_BACKEND: str = os.getenv('GPU_UPDATE_CHECKER_BACKEND', 'ini').lower()
    VENDOR: str = os.getenv('GPU_UPDATE_CHECKER_VENDOR', 'Hawaii_Beach')
    APP_NAME: str = os.getenv('GPU_UPDATE_CHECKER_APP_NAME', 'TinyNvidiaUpdateChecker')

    # Operator interaction
    CONFIRM: bool = _env_flag('GPU_UPDATE_CHECKER_CONFIRM')
    SHOW_UI: bool = _env_flag('GPU_UPDATE_CHECKER_SHOW_UI', 'true')
    DEBUG: bool = _env_flag('GPU_UPDATE_CHECKER_DEBUG')

    # Logging
    LOG_LEVEL: str = os.getenv('GPU_UPDATE_CHECKER_LOG_LEVEL', 'WARNING').upper()
    LOG_FILE: str = os.getenv('GPU_UPDATE_CHECKER_LOG_FILE', '')

    # Console look
    CLI_THEME: str = os.getenv('CLI_THEME', 'dark').lower()
    CLI_COLOR: Optional[str] = os.getenv('CLI_COLOR')

    SUPPORTED_BACKENDS = ("ini", "sqlite")

    @classmethod
    def validate(cls, backend: Optional[str] = None) -> None:
        """
        Validate the settings backend name.

        Raises:
            ValueError: If the backend is not one of SUPPORTED_BACKENDS
        """
        name = (backend or cls.SETTINGS_BACKEND or "").lower()
        if name not in cls.SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported settings backend '{name}'. "
                f"Choose one of: {', '.join(cls.SUPPORTED_BACKENDS)}."
            )

    @classmethod
    def color_enabled(cls) -> Optional[bool]:
        """CLI_COLOR as a tri-state: True/False when set, None to auto-detect."""
        if cls.CLI_COLOR is None:
            return None
        return cls.CLI_COLOR.lower() in ("1", "true", "yes", "on")
