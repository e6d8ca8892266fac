"""Folder-to-outline rendering."""

from vaultindex.outline.renderer import render_outline, sort_key

__all__ = ["render_outline", "sort_key"]
