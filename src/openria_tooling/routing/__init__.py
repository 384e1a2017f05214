"""Routing: endpoint route patterns and domain service route derivation."""

from .patterns import (
    DEFAULT_ROUTE_PATTERN,
    EndpointRoutePattern,
    domain_service_route,
    parse_route_pattern,
    resolve_route_pattern,
)

__all__ = [
    "DEFAULT_ROUTE_PATTERN",
    "EndpointRoutePattern",
    "domain_service_route",
    "parse_route_pattern",
    "resolve_route_pattern",
]
