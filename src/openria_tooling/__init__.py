"""OpenRiaServices code-generation tooling: naming, endpoint routes, generator selection."""

from openria_tooling.helpers import pluralize

__all__ = ["pluralize"]
