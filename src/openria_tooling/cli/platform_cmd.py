"""CLI for platform: openria platform <client-framework-path> (obsolete)."""

from __future__ import annotations

import sys
import warnings

from openria_tooling.platform import detect_target_platform


def run_platform_argv() -> None:
    """Print the target platform detected from a client framework path."""
    if len(sys.argv) < 3:
        print("Usage: openria platform <client-framework-path>", file=sys.stderr)
        sys.exit(1)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        platform = detect_target_platform(sys.argv[2])
    print(platform.value)
    sys.exit(0)
