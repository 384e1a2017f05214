"""Code generator metadata: what every client code generator publishes about itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

DEFAULT_GENERATOR_NAME = "OpenRiaServices.Tools.CodeDomClientCodeGenerator"


@runtime_checkable
class CodeGeneratorMetadata(Protocol):
    """Name and target language (e.g. "C#", "VB") of a client code generator."""

    @property
    def generator_name(self) -> str: ...

    @property
    def language(self) -> str: ...


@dataclass(frozen=True)
class GeneratorRegistration:
    """One registered generator (from the generator registry YAML)."""

    generator_name: str
    language: str
    description: str = ""
