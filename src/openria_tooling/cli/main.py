"""Main CLI entry point for OpenRiaServices tooling."""

import logging
import sys

from openria_tooling.cli import codegen_cmd, naming_cmd, platform_cmd, route_cmd


def _configure_logging() -> None:
    """--verbose (anywhere in argv) enables DEBUG; it is removed before dispatch."""
    verbose = "--verbose" in sys.argv
    if verbose:
        sys.argv = [a for a in sys.argv if a != "--verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Main CLI entry point."""
    _configure_logging()
    if len(sys.argv) < 2:
        print("Usage: openria <command> [args...] [--verbose]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print("  naming pluralize <word>...  - Plural form of identifier names", file=sys.stderr)
        print(
            "  route <TypeFullName>        - Endpoint route for a domain service (--pattern Name|WCF|FullName)",
            file=sys.stderr,
        )
        print(
            "  platform <framework-path>   - Detect client target platform (obsolete)",
            file=sys.stderr,
        )
        print(
            "  codegen select              - Choose a client code generator from a registry YAML",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "naming":
        naming_cmd.run_naming_argv()
    elif command == "route":
        route_cmd.run_route_argv()
    elif command == "platform":
        platform_cmd.run_platform_argv()
    elif command == "codegen":
        codegen_cmd.run_codegen_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
