"""Unit tests for the filesystem vault document store."""

import pytest

from vaultindex.models.tree import DocumentNode, FolderNode
from vaultindex.services.exceptions import DocumentStoreError
from vaultindex.vault.store import FilesystemVault


class TestFilesystemVaultInitialization:
    """Tests for FilesystemVault initialization."""

    def test_init_with_valid_path(self, vault):
        """Test initialization with valid vault path."""
        store = FilesystemVault(vault)
        assert store.vault_path == vault

    def test_init_with_nonexistent_path_raises_error(self, tmp_path):
        """Test initialization with nonexistent path raises ValueError."""
        with pytest.raises(ValueError, match="Vault path does not exist"):
            FilesystemVault(tmp_path / "does-not-exist")

    def test_init_with_file_raises_error(self, tmp_path):
        """Test initialization with file path raises ValueError."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("content")
        with pytest.raises(ValueError, match="Vault path is not a directory"):
            FilesystemVault(file_path)


class TestResolve:
    """Tests for vault-relative path resolution."""

    def test_resolve_nested_path(self, vault):
        """Test forward-slash paths map into the vault."""
        store = FilesystemVault(vault)
        assert store.resolve("Resources/Projects/Plan.md") == vault / "Resources" / "Projects" / "Plan.md"

    @pytest.mark.parametrize("path", ["", "/etc/passwd", "../outside.md", "Resources/../../x"])
    def test_resolve_rejects_paths_outside_vault(self, vault, path):
        """Test empty, absolute and parent-escaping paths are rejected."""
        store = FilesystemVault(vault)
        with pytest.raises(ValueError, match="relative to the vault"):
            store.resolve(path)


class TestFind:
    """Tests for find()."""

    def test_find_folder_returns_snapshot(self, vault):
        """Test a directory lookup returns the whole subtree."""
        store = FilesystemVault(vault)
        node = store.find("Resources")

        assert isinstance(node, FolderNode)
        assert node.name == "Resources"
        names = {child.name for child in node.children}
        assert names == {"General.md", "Projects"}

        projects = next(c for c in node.children if c.name == "Projects")
        assert isinstance(projects, FolderNode)
        assert {c.name for c in projects.children} == {"Plan.md", "diagram.png"}

    def test_find_skips_hidden_entries(self, vault):
        """Test dot-prefixed files are not part of the snapshot."""
        store = FilesystemVault(vault)
        node = store.find("Resources")
        assert ".hidden.md" not in {child.name for child in node.children}

    def test_find_document(self, vault):
        """Test a file lookup returns a DocumentNode."""
        store = FilesystemVault(vault)
        node = store.find("Resources/General.md")
        assert node == DocumentNode(name="General.md", extension="md")

    def test_find_missing_returns_none(self, vault):
        """Test a missing path returns None."""
        store = FilesystemVault(vault)
        assert store.find("Nope") is None

    def test_find_empty_folder(self, vault):
        """Test an empty directory gives a folder without children."""
        store = FilesystemVault(vault)
        assert store.find("Areas") == FolderNode("Areas", ())

    def test_find_skips_symlinked_directories(self, vault):
        """Test symlinked directories are not followed."""
        (vault / "Resources" / "loop").symlink_to(vault / "Resources", target_is_directory=True)
        store = FilesystemVault(vault)
        node = store.find("Resources")
        assert "loop" not in {child.name for child in node.children}


class TestCreate:
    """Tests for create()."""

    def test_create_new_document(self, vault):
        """Test creating a document writes initial content."""
        store = FilesystemVault(vault)
        handle = store.create("Resources Index.md", "")

        assert handle == vault / "Resources Index.md"
        assert handle.read_text() == ""

    def test_create_existing_document_raises(self, vault):
        """Test creating over an existing document is refused."""
        store = FilesystemVault(vault)
        with pytest.raises(DocumentStoreError, match="Document already exists"):
            store.create("Resources/General.md", "x")

        assert (vault / "Resources" / "General.md").read_text() == "# General\n"

    def test_create_makes_parent_directories(self, vault):
        """Test nested documents get their folders created."""
        store = FilesystemVault(vault)
        handle = store.create("Indexes/Areas Index.md", "content")
        assert handle.read_text() == "content"


class TestWrite:
    """Tests for write()."""

    def test_write_overwrites_content(self, vault):
        """Test write replaces document content."""
        store = FilesystemVault(vault)
        handle = store.resolve("Resources/General.md")
        store.write(handle, "new content")
        assert handle.read_text() == "new content"

    def test_write_failure_raises_store_error(self, vault):
        """Test an OS error is surfaced as DocumentStoreError."""
        store = FilesystemVault(vault)
        handle = vault / "missing-dir" / "Index.md"
        with pytest.raises(DocumentStoreError, match="Failed to write document"):
            store.write(handle, "content")
