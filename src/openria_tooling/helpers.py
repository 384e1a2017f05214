"""Shared helpers for openria_tooling (text, naming, YAML load).

Used by routing, codegen and the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# --- Text ---

_ES_SUFFIXES = ("x", "ch", "ss", "sh")
_VOWELS = frozenset("aeiouy")


def pluralize(name: str) -> str:
    """Plural form of an identifier-like noun (e.g. City -> Cities, Box -> Boxes).

    Fixed suffix rules, first match wins, ASCII case-insensitive:
    x/ch/ss/sh -> +es; consonant + y -> ies; no trailing s -> +s; else unchanged.
    Irregular nouns are not handled (child -> childs). Never raises; "" -> "s".
    """
    lower = name.lower()
    if lower.endswith(_ES_SUFFIXES):
        return f"{name}es"
    if len(name) > 1 and lower.endswith("y") and name[-2].lower() not in _VOWELS:
        return f"{name[:-1]}ies"
    if not lower.endswith("s"):
        return f"{name}s"
    return name


def to_route_segment(full_name: str) -> str:
    """Dotted type name to a URL-safe route segment (e.g. My.App.Service -> My-App-Service)."""
    return full_name.replace(".", "-")


def simple_type_name(full_name: str) -> str:
    """Last component of a type name, nested types included (My.App.Service -> Service, Ns.Outer+Inner -> Inner)."""
    return full_name.replace("+", ".").rsplit(".", 1)[-1]


# --- File ---


def load_yaml(p: Path) -> dict[str, Any]:
    """Load a YAML mapping from path. Empty file -> {}. Raises ValueError if the top level is not a mapping."""
    with p.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Expected a mapping at top level of {p}"
        raise ValueError(msg)
    return data
