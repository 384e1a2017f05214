"""Endpoint route patterns: how a domain service's HTTP route is derived from its type name.

Name     -> simple type name                    (Service)
WCF      -> dashed full name + ".svc/binary"    (My-App-Service.svc/binary)
FullName -> dashed full name                    (My-App-Service)

WCF is the default.
"""

from __future__ import annotations

import logging
from enum import Enum

from openria_tooling.helpers import simple_type_name, to_route_segment

log = logging.getLogger(__name__)

WCF_BINARY_SUFFIX = ".svc/binary"


class EndpointRoutePattern(Enum):
    NAME = "Name"
    WCF = "WCF"
    FULL_NAME = "FullName"


DEFAULT_ROUTE_PATTERN = EndpointRoutePattern.WCF


def parse_route_pattern(value: str) -> EndpointRoutePattern:
    """Case-insensitive lookup by value or member name ("wcf", "FullName", "full_name")."""
    key = value.strip().lower()
    for pattern in EndpointRoutePattern:
        if key in (pattern.value.lower(), pattern.name.lower()):
            return pattern
    choices = ", ".join(p.value for p in EndpointRoutePattern)
    msg = f"Unknown endpoint route pattern: {value!r} (expected one of {choices})"
    raise ValueError(msg)


def resolve_route_pattern(*candidates: EndpointRoutePattern | None) -> EndpointRoutePattern:
    """First configured pattern wins (service assembly, then startup assembly); else WCF."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return DEFAULT_ROUTE_PATTERN


def domain_service_route(
    type_full_name: str,
    pattern: EndpointRoutePattern = DEFAULT_ROUTE_PATTERN,
) -> str:
    """Route for a domain service type. Raises ValueError if type_full_name is empty."""
    if not type_full_name:
        msg = "Domain service type name must not be empty"
        raise ValueError(msg)
    if pattern is EndpointRoutePattern.NAME:
        route = simple_type_name(type_full_name)
    elif pattern is EndpointRoutePattern.WCF:
        route = to_route_segment(type_full_name) + WCF_BINARY_SUFFIX
    elif pattern is EndpointRoutePattern.FULL_NAME:
        route = to_route_segment(type_full_name)
    else:
        msg = f"Unsupported endpoint route pattern: {pattern!r}"
        raise ValueError(msg)
    log.debug("Route for %s (%s): %s", type_full_name, pattern.value, route)
    return route
