"""Configuration loader with YAML and environment variable support.

This module provides a configuration loader that reads from ~/.config/vaultindex/config.yaml
and allows environment variable overrides using VAULTINDEX_* prefix.

Environment variables:
- VAULTINDEX_VAULT_PATH: Override vault path
- VAULTINDEX_INDEX_ROOTS: Override root folders (comma-separated)
- VAULTINDEX_INDEX_SUFFIX: Override index note title suffix
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vaultindex.models.config import Config

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "vaultindex" / "config.yaml"


def load_config(
    config_path: Optional[Path] = None,
    vault_path: Optional[Path] = None,
) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/vaultindex/config.yaml
        vault_path: Vault directory that replaces vault.path from the file and
            environment before validation (e.g. from a --vault option)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist and no overrides are set
        ValueError: If config file is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    data = _apply_env_overrides(data)

    if vault_path is not None:
        data.setdefault("vault", {})["path"] = str(vault_path)

    if not data:
        raise FileNotFoundError(
            f"Configuration file not found at {config_path} and no VAULTINDEX_* environment variables set.\n"
            "Either create a config file or set environment variables."
        )

    return Config(**data)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Environment variables use the format: VAULTINDEX_SECTION_KEY
    For example: VAULTINDEX_VAULT_PATH sets data['vault']['path']

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    if env_path := os.getenv("VAULTINDEX_VAULT_PATH"):
        data.setdefault("vault", {})["path"] = env_path

    if env_roots := os.getenv("VAULTINDEX_INDEX_ROOTS"):
        roots = [root.strip() for root in env_roots.split(",") if root.strip()]
        data.setdefault("index", {})["roots"] = roots

    if env_suffix := os.getenv("VAULTINDEX_INDEX_SUFFIX"):
        data.setdefault("index", {})["suffix"] = env_suffix

    return data
