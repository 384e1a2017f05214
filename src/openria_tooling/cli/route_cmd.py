"""CLI for route: openria route <TypeFullName> [--pattern Name|WCF|FullName]."""

from __future__ import annotations

import sys

from openria_tooling.cli.parse_common import parse_flags
from openria_tooling.routing import domain_service_route, parse_route_pattern, resolve_route_pattern


def run_route_argv() -> None:
    """Print the endpoint route for a domain service type."""
    args = sys.argv[2:]
    parsed, rest = parse_flags(args, ("pattern", "--pattern", None, None))
    if len(rest) != 1:
        print(
            "Usage: openria route <TypeFullName> [--pattern Name|WCF|FullName]",
            file=sys.stderr,
        )
        sys.exit(1)
    try:
        configured = parse_route_pattern(parsed["pattern"]) if parsed["pattern"] else None
        route = domain_service_route(rest[0], resolve_route_pattern(configured))
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    print(route)
    sys.exit(0)
