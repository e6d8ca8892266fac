"""Vault Index - Generate outline index notes for markdown vault folders."""

__version__ = "0.1.0"
