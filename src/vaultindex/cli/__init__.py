"""Command-line interface for Vault Index."""

from vaultindex.cli.main import cli, load_settings

__all__ = ["cli", "load_settings"]
