"""CLI: openria naming | route | platform | codegen."""
