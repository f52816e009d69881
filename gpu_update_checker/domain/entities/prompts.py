"""
Setup prompt variants handed to an InteractiveResolver.

Each variant is a frozen dataclass with a `kind` discriminator; the resolver
turns it into a string value for `key`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

from .gpu import GpuListPayload


@dataclass(frozen=True)
class YesNoPrompt:
    key: str
    text: str
    choices: Tuple[str, str] = ("true", "false")   # (yes, no)
    default: str = "false"                         # used in confirm mode
    kind: Literal["yes_no"] = "yes_no"


@dataclass(frozen=True)
class Choice:
    tag: str
    label: str


@dataclass(frozen=True)
class ChoicePrompt:
    key: str
    title: str
    text: str
    options: Tuple[Choice, ...]
    kind: Literal["choice"] = "choice"

    def tags(self) -> Tuple[str, ...]:
        return tuple(o.tag for o in self.options)


@dataclass(frozen=True)
class PathPrompt:
    key: str
    title: str
    text: str
    default: str
    kind: Literal["path"] = "path"


@dataclass(frozen=True)
class GpuPrompt:
    key: str
    title: str
    payload: Optional[GpuListPayload] = None
    kind: Literal["gpu"] = "gpu"


SetupPrompt = Union[YesNoPrompt, ChoicePrompt, PathPrompt, GpuPrompt]

__all__ = ["YesNoPrompt", "Choice", "ChoicePrompt", "PathPrompt", "GpuPrompt", "SetupPrompt"]
