"""
Shared test fixtures and fakes for the settings store.

No test touches the real per-user config location or the terminal: stores are
built on tmp_path files, the resolver is a scripted fake, and prompt_toolkit
sessions are replaced by ScriptedSession.
"""

import io
import os
import sys
from typing import Dict, List, Optional

import pytest
from dotenv import load_dotenv

# Ensure project root is on sys.path so package imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

# Load environment variables
load_dotenv()

from gpu_update_checker.settings import keys  # noqa: E402
from gpu_update_checker.settings.ini_repository import IniSettingsRepository  # noqa: E402
from gpu_update_checker.settings.store import SettingsStore  # noqa: E402
from gpu_update_checker.ui.cli.console import make_console  # noqa: E402


DEFAULT_RESPONSES = {
    keys.CHECK_FOR_UPDATES: "true",
    keys.MINIMAL_INSTALL: "false",
    keys.DOWNLOAD_LOCATION: "/tmp/drv",
    keys.DRIVER_TYPE: "grd",
}


class FakeResolver:
    """Deterministic resolver: answers from a key -> value map and records calls."""

    def __init__(self, responses: Optional[Dict[str, str]] = None) -> None:
        self.responses = dict(DEFAULT_RESPONSES if responses is None else responses)
        self.prompts: List[object] = []
        self.errors: List[str] = []

    @property
    def keys_asked(self) -> List[str]:
        return [p.key for p in self.prompts]

    def resolve(self, prompt) -> str:
        self.prompts.append(prompt)
        return self.responses[prompt.key]

    def notify_error(self, message: str) -> None:
        self.errors.append(message)


class ScriptedSession:
    """Stands in for prompt_toolkit.PromptSession; returns queued answers."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.messages: List[str] = []

    def prompt(self, message: str, **kwargs) -> str:
        self.messages.append(message)
        if not self.answers:
            raise EOFError("no scripted answers left")
        return self.answers.pop(0)


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "Hawaii_Beach" / "TinyNvidiaUpdateChecker" / "app.config"


@pytest.fixture
def store(resolver, config_path):
    return SettingsStore(resolver, IniSettingsRepository(config_path))


@pytest.fixture
def console():
    """A rich console writing to memory; read it back with console.file.getvalue()."""
    return make_console("dark", use_color=False, file=io.StringIO(), width=120)


def write_config(path, entries: Dict[str, str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{k} = {v}\n" for k, v in entries.items())
    path.write_text("[appSettings]\n" + body, encoding="utf-8")
