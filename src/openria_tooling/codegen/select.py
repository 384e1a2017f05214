"""Pick one client code generator for a language out of all registered generators.

An explicitly named generator must exist exactly once for the language; asking
for a name implies the default is not acceptable. Without a name, a lone
generator for the language wins; otherwise a lone custom (non-default)
generator wins, several custom generators fall back to the default, and
several registrations with no custom one select nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from openria_tooling.codegen.metadata import DEFAULT_GENERATOR_NAME, CodeGeneratorMetadata

log = logging.getLogger(__name__)


class CodeGeneratorSelectionError(ValueError):
    """Requested generator is missing or ambiguous."""


def _same(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def _describe(index: int, registration: CodeGeneratorMetadata) -> str:
    """Registry position plus description, e.g. "#2 (T4 based client generator)"."""
    description = getattr(registration, "description", "")
    return f"#{index} ({description})" if description else f"#{index}"


def select_generator(
    registrations: Iterable[CodeGeneratorMetadata],
    language: str,
    generator_name: str | None = None,
    default_name: str = DEFAULT_GENERATOR_NAME,
) -> CodeGeneratorMetadata | None:
    """Return the generator to use for language, or None if there is none.

    Raises CodeGeneratorSelectionError when generator_name is given and matches
    zero or several registrations for the language.
    """
    indexed = [(i, r) for i, r in enumerate(registrations) if _same(r.language, language)]
    for_language = [r for _, r in indexed]

    if generator_name:
        named = [(i, r) for i, r in indexed if _same(r.generator_name, generator_name)]
        if not named:
            msg = (
                f"Code generator {generator_name!r} not found for language {language!r}. "
                f"Register it in the generator registry or omit the name to use {default_name}."
            )
            raise CodeGeneratorSelectionError(msg)
        if len(named) > 1:
            listing = ", ".join(_describe(i, r) for i, r in named)
            msg = (
                f"Multiple code generators named {generator_name!r} for language "
                f"{language!r}: {listing}. Remove the duplicates."
            )
            raise CodeGeneratorSelectionError(msg)
        return named[0][1]

    if len(for_language) == 1:
        return for_language[0]

    custom = [r for r in for_language if not _same(r.generator_name, default_name)]
    if not custom:
        if for_language:
            log.warning(
                "Default code generator %s is registered %d times for %s; none chosen",
                default_name,
                len(for_language),
                language,
            )
        else:
            log.warning("No code generator registered for language %s", language)
        return None
    if len(custom) == 1:
        log.info("Using custom code generator %s", custom[0].generator_name)
        return custom[0]

    log.warning(
        "Multiple custom code generators for %s, using default %s. Available: %s",
        language,
        default_name,
        ", ".join(sorted(r.generator_name for r in custom)),
    )
    for r in for_language:
        if _same(r.generator_name, default_name):
            return r
    log.warning("No code generator registered for language %s", language)
    return None
