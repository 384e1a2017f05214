"""Pytest fixtures for openria tooling tests."""

from pathlib import Path

import pytest


@pytest.fixture
def registry_yaml(tmp_path: Path) -> Path:
    """Generator registry with the default CodeDom generator and one custom C# generator."""
    path = tmp_path / "generators.yaml"
    path.write_text(
        "generators:\n"
        "  - name: OpenRiaServices.Tools.CodeDomClientCodeGenerator\n"
        "    language: C#\n"
        "  - name: OpenRiaServices.Tools.CodeDomClientCodeGenerator\n"
        "    language: VB\n"
        "  - name: Contoso.T4Generator\n"
        "    language: C#\n"
        "    description: T4 based client generator\n"
    )
    return path
