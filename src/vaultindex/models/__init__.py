"""Data models for Vault Index."""

from vaultindex.models.tree import DocumentNode, FolderNode, Node

__all__ = [
    "DocumentNode",
    "FolderNode",
    "Node",
]
