"""
Recognized settings keys and value encodings.
"""
from __future__ import annotations

CHECK_FOR_UPDATES = "Check for Updates"
MINIMAL_INSTALL = "Minimal install"
DOWNLOAD_LOCATION = "Download location"
DRIVER_TYPE = "Driver type"
GPU_ID = "GPU ID"

# Bootstrap and verification order. GPU ID is provisioned on demand only.
MANDATORY_KEYS = (CHECK_FOR_UPDATES, MINIMAL_INSTALL, DOWNLOAD_LOCATION, DRIVER_TYPE)
KNOWN_KEYS = MANDATORY_KEYS + (GPU_ID,)

TRUE_VALUE = "true"
FALSE_VALUE = "false"
UNKNOWN_VALUE = "unknown"

DRIVER_TYPE_GRD = "grd"
DRIVER_TYPE_SD = "sd"

__all__ = [
    "CHECK_FOR_UPDATES",
    "MINIMAL_INSTALL",
    "DOWNLOAD_LOCATION",
    "DRIVER_TYPE",
    "GPU_ID",
    "MANDATORY_KEYS",
    "KNOWN_KEYS",
    "TRUE_VALUE",
    "FALSE_VALUE",
    "UNKNOWN_VALUE",
    "DRIVER_TYPE_GRD",
    "DRIVER_TYPE_SD",
]
