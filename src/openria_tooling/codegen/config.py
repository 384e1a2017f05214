"""Generator registry loading.

Registry YAML format:
- default_generator (optional): name of the fallback generator
  (default: OpenRiaServices.Tools.CodeDomClientCodeGenerator)
- generators: list of { name, language, description? }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from openria_tooling.codegen.metadata import DEFAULT_GENERATOR_NAME, GeneratorRegistration
from openria_tooling.helpers import load_yaml


def _registration_from_entry(entry: Any, index: int, path: Path) -> GeneratorRegistration:
    if not isinstance(entry, dict):
        msg = f"{path}: generators[{index}] must be a mapping"
        raise ValueError(msg)
    name = entry.get("name")
    language = entry.get("language")
    if not name or not language:
        msg = f"{path}: generators[{index}] requires both name and language"
        raise ValueError(msg)
    return GeneratorRegistration(
        generator_name=str(name),
        language=str(language),
        description=str(entry.get("description") or ""),
    )


def load_generator_config(path: Path) -> tuple[list[GeneratorRegistration], str]:
    """Load registry YAML. Returns (registrations in file order, default generator name)."""
    data = load_yaml(path)
    entries = data.get("generators") or []
    if not isinstance(entries, list):
        msg = f"{path}: generators must be a list"
        raise ValueError(msg)
    registrations = [_registration_from_entry(e, i, path) for i, e in enumerate(entries)]
    default_name = str(data.get("default_generator") or DEFAULT_GENERATOR_NAME)
    return registrations, default_name


def load_generator_registry(path: Path) -> list[GeneratorRegistration]:
    """Registrations only (see load_generator_config)."""
    registrations, _ = load_generator_config(path)
    return registrations
