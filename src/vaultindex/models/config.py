"""Configuration models for Vault Index."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_ROOTS = ["Resources", "General", "Areas", "Archives", "Clippings", "Projects"]
DEFAULT_HEADER = "This is an auto-generated index of files in the {folder} folder."


def validate_root_name(root: str) -> str:
    """Check that a root is a bare folder name at the top of the vault.

    Args:
        root: Root folder name

    Returns:
        The unchanged root name

    Raises:
        ValueError: If root is empty, contains a path separator, or is "." or ".."
    """
    if not root or "/" in root or "\\" in root or root in (".", ".."):
        raise ValueError(f"Root must be a bare folder name: {root!r}")
    return root


class VaultConfig(BaseModel):
    """Configuration for vault location."""

    path: str = Field(
        ...,
        description="Path to the markdown vault directory"
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate vault path exists and is a directory."""
        path = Path(v).expanduser()
        if not path.exists():
            raise ValueError(
                f"Vault path does not exist: {path}\n"
                f"Please create the directory or update config.yaml"
            )
        if not path.is_dir():
            raise ValueError(
                f"Vault path is not a directory: {path}\n"
                f"Please provide a valid directory path"
            )
        return str(path)

    model_config = {"frozen": True}


class IndexConfig(BaseModel):
    """Configuration for which folders get index notes and how they look."""

    roots: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ROOTS),
        min_length=1,
        description="Top-level folder names to index, processed in order"
    )

    suffix: str = Field(
        default=" Index",
        description="Appended to the root name to form the index note title"
    )

    extension: str = Field(
        default="md",
        min_length=1,
        description="Markup extension of documents listed in the index (no dot)"
    )

    header: str = Field(
        default=DEFAULT_HEADER,
        description="Text placed above the outline; {folder} is the root name"
    )

    @field_validator('roots')
    @classmethod
    def validate_roots(cls, v: list[str]) -> list[str]:
        """Validate root names are unique bare folder names."""
        for root in v:
            validate_root_name(root)
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate root folder names: {v}")
        return v

    @field_validator('extension')
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate extension has no leading dot."""
        if v.startswith("."):
            raise ValueError(f"Extension must not start with a dot: {v!r}")
        return v

    @field_validator('header')
    @classmethod
    def validate_header(cls, v: str) -> str:
        """Validate header template references the folder name."""
        if "{folder}" not in v:
            raise ValueError("Header must contain the {folder} placeholder")
        return v

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for Vault Index."""

    vault: VaultConfig = Field(..., description="Vault location settings")
    index: IndexConfig = Field(default_factory=IndexConfig, description="Index note settings")

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Please create the file with the following format:\n\n"
                f"vault:\n"
                f"  path: ~/Documents/vault\n\n"
                f"index:\n"
                f"  roots: [Resources, Projects]\n"
            )

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    model_config = {"frozen": True}
