"""
Maps each recognized settings key to the prompt that provisions it.
"""
from __future__ import annotations

import tempfile
from typing import Optional

from gpu_update_checker.domain.entities.gpu import SetupPayload
from gpu_update_checker.domain.entities.prompts import (
    Choice,
    ChoicePrompt,
    GpuPrompt,
    PathPrompt,
    SetupPrompt,
    YesNoPrompt,
)
from . import keys

CHECK_FOR_UPDATES_TEXT = "Do you want to search for client updates?"

MINIMAL_INSTALL_TEXT = (
    "Do you want to perform a minimal install of the drivers? This will make sure you "
    "don't install telemetry and miscellaneous addons, but requires either WinRAR or "
    "7-Zip to be installed."
)

DRIVER_TYPE_TEXT = (
    "If you are a gamer who prioritizes day of launch support for the latest games, "
    "patches, and DLCs, choose Game Ready Drivers.\n\n"
    "If you are a content creator who prioritizes stability and quality for creative "
    "workflows including video editing, animation, photography, graphic design, and "
    "livestreaming, choose Studio Drivers.\n\n"
    "WARNING: not all GPUs support Studio Drivers."
)

DOWNLOAD_LOCATION_TEXT = (
    "Choose the directory driver installers are downloaded to. "
    "Leave empty to use the default."
)

DRIVER_TYPE_OPTIONS = (
    Choice(tag=keys.DRIVER_TYPE_GRD, label="Game Ready Driver (GRD)"),
    Choice(tag=keys.DRIVER_TYPE_SD, label="Studio Driver (SD)"),
)


def prompt_for(key: str, payload: Optional[SetupPayload] = None) -> Optional[SetupPrompt]:
    """Return the prompt for `key`, or None when the key is not recognized."""
    if key == keys.CHECK_FOR_UPDATES:
        return YesNoPrompt(
            key=key,
            text=CHECK_FOR_UPDATES_TEXT,
            choices=(keys.TRUE_VALUE, keys.FALSE_VALUE),
            default=keys.FALSE_VALUE,
        )
    if key == keys.MINIMAL_INSTALL:
        return YesNoPrompt(
            key=key,
            text=MINIMAL_INSTALL_TEXT,
            choices=(keys.TRUE_VALUE, keys.FALSE_VALUE),
            default=keys.FALSE_VALUE,
        )
    if key == keys.DOWNLOAD_LOCATION:
        return PathPrompt(
            key=key,
            title="Choose download location",
            text=DOWNLOAD_LOCATION_TEXT,
            default=tempfile.gettempdir(),
        )
    if key == keys.DRIVER_TYPE:
        return ChoicePrompt(
            key=key,
            title="Choose driver type",
            text=DRIVER_TYPE_TEXT,
            options=DRIVER_TYPE_OPTIONS,
        )
    if key == keys.GPU_ID:
        return GpuPrompt(key=key, title="Choose GPU", payload=payload)
    return None


__all__ = ["prompt_for", "DRIVER_TYPE_OPTIONS"]
