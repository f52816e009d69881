"""
Interactive resolver port: turns a setup prompt into a value when a setting
is missing and a human has to decide.
"""
from __future__ import annotations
from typing import Protocol

from gpu_update_checker.domain.entities.prompts import SetupPrompt


class InteractiveResolver(Protocol):
    def resolve(self, prompt: SetupPrompt) -> str:
        ...

    def notify_error(self, message: str) -> None:
        ...

__all__ = ["InteractiveResolver"]
