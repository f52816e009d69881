"""
POCO DTOs describing GPUs offered to the operator. No framework dependencies.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal


@dataclass(frozen=True)
class GpuInfo:
    id: str
    name: str = ""

    @classmethod
    def parse(cls, spec: str) -> "GpuInfo":
        """Build from "ID" or "ID:NAME" (as given on the command line)."""
        gpu_id, _, name = (spec or "").partition(":")
        gpu_id = gpu_id.strip()
        if not gpu_id:
            raise ValueError(f"Invalid GPU spec '{spec}', expected ID[:NAME]")
        return cls(id=gpu_id, name=name.strip())


@dataclass(frozen=True)
class GpuListPayload:
    """Auxiliary setup payload for the "GPU ID" key."""
    gpus: List[GpuInfo] = field(default_factory=list)
    kind: Literal["gpu_list"] = "gpu_list"


# Discriminated union of auxiliary payloads accepted by setup; one variant today.
SetupPayload = GpuListPayload

__all__ = ["GpuInfo", "GpuListPayload", "SetupPayload"]
