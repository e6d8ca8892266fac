"""Filesystem-backed document store for a markdown vault.

The store owns every interaction with the vault on disk: resolving
vault-relative paths, taking immutable tree snapshots for the outline
renderer, and creating or overwriting index documents.
"""

from pathlib import Path, PurePosixPath
from typing import Optional, Protocol

from vaultindex.models.tree import DocumentNode, FolderNode, Node
from vaultindex.services.exceptions import DocumentStoreError
from vaultindex.services.file_operations import atomic_write
from vaultindex.utils.logging import get_logger

logger = get_logger(__name__)


class DocumentStore(Protocol):
    """Capabilities the index generator needs from a document store."""

    def resolve(self, path: str) -> Path:
        ...

    def find(self, path: str) -> Optional[Node]:
        ...

    def create(self, path: str, initial_content: str) -> Path:
        ...

    def write(self, handle: Path, content: str) -> None:
        ...


class FilesystemVault:
    """Document store over a vault directory.

    Attributes:
        vault_path: Root path to the vault directory
    """

    def __init__(self, vault_path: Path):
        """Initialize with vault root path.

        Args:
            vault_path: Path to vault directory

        Raises:
            ValueError: If vault_path doesn't exist or isn't a directory
        """
        if not vault_path.exists():
            raise ValueError(f"Vault path does not exist: {vault_path}")
        if not vault_path.is_dir():
            raise ValueError(f"Vault path is not a directory: {vault_path}")

        self.vault_path = vault_path

    def resolve(self, path: str) -> Path:
        """Resolve a vault-relative path to a filesystem path.

        Args:
            path: Vault-relative path using "/" separators (e.g. "Resources/Plan.md")

        Returns:
            Absolute path inside the vault

        Raises:
            ValueError: If path is empty, absolute, or escapes the vault
        """
        relative = PurePosixPath(path)
        if not path or relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"Path must be relative to the vault: {path!r}")
        return self.vault_path.joinpath(*relative.parts)

    def find(self, path: str) -> Optional[Node]:
        """Look up a vault-relative path.

        Args:
            path: Vault-relative path

        Returns:
            FolderNode snapshot of the whole subtree for a directory,
            DocumentNode for a file, or None if nothing exists at path
        """
        target = self.resolve(path)

        if target.is_dir():
            logger.debug("vault_find_folder", path=path)
            return self._snapshot(target)
        if target.is_file():
            logger.debug("vault_find_document", path=path)
            return DocumentNode.from_name(target.name)

        logger.debug("vault_find_missing", path=path)
        return None

    def create(self, path: str, initial_content: str) -> Path:
        """Create a new document.

        Args:
            path: Vault-relative path of the new document
            initial_content: Content to write

        Returns:
            Filesystem path of the created document

        Raises:
            DocumentStoreError: If the document exists or cannot be written
        """
        target = self.resolve(path)
        if target.exists():
            raise DocumentStoreError(str(target), "Document already exists")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(target, initial_content)
        except OSError as e:
            raise DocumentStoreError(str(target), f"Failed to create document ({e})") from e

        logger.info("document_created", path=str(target))
        return target

    def write(self, handle: Path, content: str) -> None:
        """Overwrite a document's content.

        Args:
            handle: Filesystem path returned by create() or resolve()
            content: New document content

        Raises:
            DocumentStoreError: If the document cannot be written
        """
        try:
            atomic_write(handle, content)
        except OSError as e:
            raise DocumentStoreError(str(handle), f"Failed to write document ({e})") from e

        logger.info("document_written", path=str(handle), size=len(content))

    def _snapshot(self, directory: Path) -> FolderNode:
        children: list[Node] = []
        for entry in directory.iterdir():
            # Hidden entries (.obsidian, .trash) are not part of the vault
            if entry.name.startswith("."):
                continue
            if entry.is_symlink() and entry.is_dir():
                continue
            if entry.is_dir():
                children.append(self._snapshot(entry))
            elif entry.is_file():
                children.append(DocumentNode.from_name(entry.name))
        return FolderNode(name=directory.name, children=tuple(children))
