"""
Terminal implementation of the InteractiveResolver port.

Prompts render as rich panels; answers are read through a prompt_toolkit
session created on first use, so building a resolver never touches the
terminal.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import PathCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gpu_update_checker.config import Config
from gpu_update_checker.domain.entities.prompts import (
    ChoicePrompt,
    GpuPrompt,
    PathPrompt,
    SetupPrompt,
    YesNoPrompt,
)

_YES = {"y", "yes"}
_NO = {"n", "no"}


class ConsoleResolver:
    """
    Ask the operator through the terminal.

    In confirm mode (non-interactive downloads) yes/no questions take their
    default answer without prompting.
    """

    def __init__(self, console: Console, session=None, confirm: bool = False) -> None:
        self.console = console
        self.confirm = confirm
        self._session = session

    def _get_session(self):
        if self._session is None:
            self._session = PromptSession(history=InMemoryHistory())
        return self._session

    def _ask(self, message: str, **kwargs) -> str:
        return (self._get_session().prompt(message, **kwargs) or "").strip()

    # ------------- InteractiveResolver -------------

    def resolve(self, prompt: SetupPrompt) -> str:
        if isinstance(prompt, YesNoPrompt):
            return self.ask_yes_no(prompt)
        if isinstance(prompt, ChoicePrompt):
            return self.choose(prompt)
        if isinstance(prompt, PathPrompt):
            return self.ask_path(prompt)
        if isinstance(prompt, GpuPrompt):
            return self.choose_gpu(prompt)
        raise TypeError(f"Unsupported prompt type: {type(prompt).__name__}")

    def notify_error(self, message: str) -> None:
        self.console.print(
            Panel(escape(message), title=Config.APP_NAME, box=ROUNDED, border_style="error")
        )

    # ------------- prompt variants -------------

    def ask_yes_no(self, prompt: YesNoPrompt) -> str:
        if self.confirm:
            return prompt.default

        self.console.print(Panel(escape(prompt.text), title=Config.APP_NAME, box=ROUNDED))
        completer = WordCompleter(["yes", "no"], ignore_case=True)
        while True:
            answer = self._ask("Yes/No [y/n]: ", completer=completer).lower()
            if answer in _YES:
                return prompt.choices[0]
            if answer in _NO:
                return prompt.choices[1]
            self.console.print("[warning]Please answer 'y' or 'n'.[/warning]")

    def choose(self, prompt: ChoicePrompt) -> str:
        lines = [escape(prompt.text), ""]
        for idx, option in enumerate(prompt.options, start=1):
            lines.append(f"{idx}) {escape(option.label)}")
        self.console.print(
            Panel("\n".join(lines), title=escape(prompt.title), box=ROUNDED, border_style="accent")
        )

        numbers = [str(i) for i in range(1, len(prompt.options) + 1)]
        tags = list(prompt.tags())
        completer = WordCompleter(numbers + tags, ignore_case=True)
        while True:
            answer = self._ask(f"Choose [1-{len(numbers)}]: ", completer=completer)
            if answer in numbers:
                return prompt.options[int(answer) - 1].tag
            for tag in tags:
                if answer.lower() == tag.lower():
                    return tag
            self.console.print(
                f"[warning]Invalid option. Enter {', '.join(numbers)} or one of: {escape(', '.join(tags))}.[/warning]"
            )

    def ask_path(self, prompt: PathPrompt) -> str:
        self.console.print(
            Panel(
                f"{escape(prompt.text)}\n\nDefault: {escape(prompt.default)}",
                title=escape(prompt.title),
                box=ROUNDED,
            )
        )
        completer = PathCompleter(only_directories=True, expanduser=True)
        while True:
            answer = self._ask("Directory: ", completer=completer) or prompt.default
            target = Path(answer).expanduser()
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.console.print(f"[error]Cannot use '{escape(str(target))}': {escape(str(e))}[/error]")
                continue
            if not target.is_dir():
                self.console.print(f"[error]'{escape(str(target))}' is not a directory.[/error]")
                continue
            return str(target)

    def choose_gpu(self, prompt: GpuPrompt) -> str:
        gpus = list(prompt.payload.gpus) if prompt.payload else []
        if not gpus:
            # Fallback: free text entry
            while True:
                answer = self._ask("GPU ID: ")
                if answer:
                    return answer
                self.console.print("[warning]GPU ID cannot be empty.[/warning]")

        table = Table(title=escape(prompt.title), box=ROUNDED)
        table.add_column("#", no_wrap=True)
        table.add_column("ID", no_wrap=True)
        table.add_column("Name")
        for idx, gpu in enumerate(gpus, start=1):
            table.add_row(str(idx), escape(gpu.id), escape(gpu.name or "-"))
        self.console.print(table)

        ids = [gpu.id for gpu in gpus]
        completer = WordCompleter(ids, ignore_case=True, match_middle=True)
        while True:
            answer = self._ask("GPU (number or ID, tab to complete): ", completer=completer)
            if answer in ids:
                return answer
            if answer.isdigit() and 1 <= int(answer) <= len(gpus):
                return gpus[int(answer) - 1].id
            self.console.print("[warning]Unknown GPU. Pick one from the table.[/warning]")


__all__ = ["ConsoleResolver"]
