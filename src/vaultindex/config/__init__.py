"""Configuration loading."""

from vaultindex.config.loader import DEFAULT_CONFIG_PATH, load_config

__all__ = ["DEFAULT_CONFIG_PATH", "load_config"]
