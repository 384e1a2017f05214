"""Client target platform (obsolete).

Kept for build scripts that still pass a client framework path; new generators
do not branch on platform.
"""

from __future__ import annotations

import warnings
from enum import Enum


class TargetPlatform(Enum):
    UNKNOWN = "Unknown"
    SILVERLIGHT = "Silverlight"
    DESKTOP = "Desktop"
    PORTABLE = "Portable"
    WIN8 = "Win8"


# Checked in order; first marker found in the framework path wins.
_FRAMEWORK_MARKERS: tuple[tuple[str, TargetPlatform], ...] = (
    ("silverlight", TargetPlatform.SILVERLIGHT),
    (".netportable", TargetPlatform.PORTABLE),
    (".netframework", TargetPlatform.DESKTOP),
    (".netcore", TargetPlatform.WIN8),
)


def detect_target_platform(client_framework_path: str | None) -> TargetPlatform:
    """Platform from a client framework reference path (e.g. ...\\Silverlight\\v5.0). Empty -> UNKNOWN."""
    warnings.warn(
        "TargetPlatform is obsolete; generated clients no longer depend on it",
        DeprecationWarning,
        stacklevel=2,
    )
    if not client_framework_path:
        return TargetPlatform.UNKNOWN
    lowered = client_framework_path.lower()
    for marker, platform in _FRAMEWORK_MARKERS:
        if marker in lowered:
            return platform
    return TargetPlatform.UNKNOWN
