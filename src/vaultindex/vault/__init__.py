"""Vault document store."""

from vaultindex.vault.store import DocumentStore, FilesystemVault

__all__ = ["DocumentStore", "FilesystemVault"]
