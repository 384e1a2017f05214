"""CLI for naming: openria naming pluralize <word>... [--json]."""

from __future__ import annotations

import json
import sys

from openria_tooling.helpers import pluralize


def run_pluralize_argv() -> None:
    """openria naming pluralize <word>... [--json]."""
    args = sys.argv[3:]
    json_out = "--json" in args
    words = [a for a in args if a != "--json"]
    if not words:
        print("Usage: openria naming pluralize <word>... [--json]", file=sys.stderr)
        sys.exit(1)
    if json_out:
        print(json.dumps({w: pluralize(w) for w in words}, indent=2))
    else:
        for w in words:
            print(pluralize(w))
    sys.exit(0)


def run_naming_argv() -> None:
    """Dispatch openria naming <subcommand>."""
    if len(sys.argv) < 3:
        print("Usage: openria naming <subcommand> [args...]", file=sys.stderr)
        print("Subcommands: pluralize", file=sys.stderr)
        sys.exit(1)
    sub = sys.argv[2].lower()
    if sub == "pluralize":
        run_pluralize_argv()
    else:
        print(f"Error: Unknown naming subcommand: {sub}", file=sys.stderr)
        sys.exit(1)
