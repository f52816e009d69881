"""
Domain entities: plain DTOs shared by the settings store and its resolvers.
"""
from .gpu import GpuInfo, GpuListPayload, SetupPayload
from .prompts import Choice, ChoicePrompt, GpuPrompt, PathPrompt, SetupPrompt, YesNoPrompt

__all__ = [
    "GpuInfo",
    "GpuListPayload",
    "SetupPayload",
    "Choice",
    "ChoicePrompt",
    "GpuPrompt",
    "PathPrompt",
    "SetupPrompt",
    "YesNoPrompt",
]
