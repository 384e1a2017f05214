"""Client code generators: metadata contract, registry loading, generator selection."""

from .config import load_generator_config, load_generator_registry
from .metadata import DEFAULT_GENERATOR_NAME, CodeGeneratorMetadata, GeneratorRegistration
from .select import CodeGeneratorSelectionError, select_generator

__all__ = [
    "DEFAULT_GENERATOR_NAME",
    "CodeGeneratorMetadata",
    "CodeGeneratorSelectionError",
    "GeneratorRegistration",
    "load_generator_config",
    "load_generator_registry",
    "select_generator",
]
