"""Shared CLI flag parsing for openria subcommands (--pattern, --config, --language, ...)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

FlagSpec = tuple[str, str, str | None, Callable[[str], Any] | None]


def parse_flags(argv: list[str], *specs: FlagSpec) -> tuple[dict[str, Any], list[str]]:
    """Split "--flag value" pairs out of argv.

    Each spec is (key, flag, default, converter); a None converter keeps the raw string.
    A flag given twice keeps its last value; a trailing flag with no value stays in rest.
    Returns (key -> value, remaining args in order).
    """
    by_flag = {flag: (key, converter) for key, flag, _default, converter in specs}
    values: dict[str, Any] = {key: default for key, _flag, default, _converter in specs}
    rest: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg not in by_flag:
            rest.append(arg)
            continue
        value = next(args, None)
        if value is None:
            rest.append(arg)
            continue
        key, converter = by_flag[arg]
        values[key] = converter(value) if converter else value
    return values, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to an absolute Path (e.g. --config)."""
    return Path(s).resolve()
