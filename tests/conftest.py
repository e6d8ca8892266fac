"""Shared test fixtures for all test modules."""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep logs and config lookups out of the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "VAULTINDEX_VAULT_PATH",
        "VAULTINDEX_INDEX_ROOTS",
        "VAULTINDEX_INDEX_SUFFIX",
        "VAULTINDEX_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def vault(tmp_path):
    """Create a small vault with a Resources root folder.

    Layout:
        Resources/General.md
        Resources/Projects/Plan.md
        Resources/Projects/diagram.png
        Resources/.hidden.md
        Areas/ (empty)
        .obsidian/app.json
    """
    vault_path = tmp_path / "vault"
    resources = vault_path / "Resources"
    projects = resources / "Projects"
    projects.mkdir(parents=True)
    (vault_path / "Areas").mkdir()
    (vault_path / ".obsidian").mkdir()

    (resources / "General.md").write_text("# General\n")
    (resources / ".hidden.md").write_text("hidden\n")
    (projects / "Plan.md").write_text("# Plan\n")
    (projects / "diagram.png").write_bytes(b"\x89PNG")
    (vault_path / ".obsidian" / "app.json").write_text("{}")

    return vault_path
