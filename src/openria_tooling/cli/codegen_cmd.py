"""CLI for codegen: openria codegen select --config <yaml> --language <lang> [--generator <name>]."""

from __future__ import annotations

import sys

from openria_tooling.cli.parse_common import parse_flags, path_resolver
from openria_tooling.codegen import load_generator_config, select_generator


def run_codegen_select_argv() -> None:
    """Print the name of the code generator chosen for a language."""
    args = sys.argv[3:]
    parsed, rest = parse_flags(
        args,
        ("config", "--config", None, path_resolver),
        ("language", "--language", None, None),
        ("generator", "--generator", None, None),
    )
    if rest or parsed["config"] is None or not parsed["language"]:
        print(
            "Usage: openria codegen select --config <yaml> --language <lang> [--generator <name>]",
            file=sys.stderr,
        )
        sys.exit(1)
    config_path = parsed["config"]
    if not config_path.is_file():
        print(f"❌ Generator registry not found: {config_path}", file=sys.stderr)
        sys.exit(1)
    try:
        registrations, default_name = load_generator_config(config_path)
        chosen = select_generator(
            registrations,
            parsed["language"],
            generator_name=parsed["generator"],
            default_name=default_name,
        )
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    if chosen is None:
        print(f"❌ No code generator available for language {parsed['language']}", file=sys.stderr)
        sys.exit(1)
    print(chosen.generator_name)
    sys.exit(0)


def run_codegen_argv() -> None:
    """Dispatch openria codegen <subcommand>."""
    if len(sys.argv) < 3:
        print("Usage: openria codegen <subcommand> [options]", file=sys.stderr)
        print("Subcommands: select", file=sys.stderr)
        sys.exit(1)
    sub = sys.argv[2].lower()
    if sub == "select":
        run_codegen_select_argv()
    else:
        print(f"Error: Unknown codegen subcommand: {sub}", file=sys.stderr)
        sys.exit(1)
