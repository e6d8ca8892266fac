"""Index note generation over the configured vault root folders.

For each root folder, the generator makes sure an index note exists at the
vault root, renders the folder's outline, and overwrites the note with it.
A missing root or a failed write is reported and the run moves on to the
next root.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from vaultindex.models.config import IndexConfig, validate_root_name
from vaultindex.models.tree import FolderNode
from vaultindex.outline.renderer import render_outline
from vaultindex.services.exceptions import DocumentStoreError
from vaultindex.utils.logging import get_logger
from vaultindex.vault.store import DocumentStore

logger = get_logger(__name__)


class NotifyLevel(Enum):
    """Severity of an operator notification."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


Notifier = Callable[[str, NotifyLevel], None]


class IndexStatus(Enum):
    """Outcome of generating one index note.

    - CREATED: Index note did not exist; created and filled
    - UPDATED: Existing index note overwritten
    - NOT_FOUND: Root folder missing (or not a folder); skipped
    - FAILED: Creating or writing the index note failed
    """

    CREATED = "created"
    UPDATED = "updated"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class IndexResult:
    """Result of processing a single root folder.

    Attributes:
        root: Root folder name
        index_path: Vault-relative path of the index note
        status: Outcome of the run for this root
        message: Notification text shown to the operator
    """

    root: str
    index_path: str
    status: IndexStatus
    message: str


def _discard(message: str, level: NotifyLevel) -> None:
    pass


class IndexGenerator:
    """Generate index notes for vault root folders.

    Example:
        >>> vault = FilesystemVault(Path("~/vault").expanduser())
        >>> generator = IndexGenerator(vault, IndexConfig(roots=["Projects"]))
        >>> results = generator.generate()
    """

    def __init__(
        self,
        store: DocumentStore,
        config: IndexConfig,
        notify: Optional[Notifier] = None,
    ):
        """
        Initialize generator.

        Args:
            store: Document store holding the vault
            config: Index settings (roots, title suffix, extension, header)
            notify: Callback for operator notifications (default: discard)
        """
        self.store = store
        self.config = config
        self.notify = notify or _discard

    def index_title(self, root: str) -> str:
        """Title of the index note for a root (e.g. "Resources Index")."""
        return f"{root}{self.config.suffix}"

    def index_path(self, root: str) -> str:
        """Vault-relative path of the index note for a root."""
        return f"{self.index_title(root)}.{self.config.extension}"

    def compose(self, root: str, outline: str) -> str:
        """Build index note content from the header template and outline."""
        header = self.config.header.format(folder=root)
        return f"{header}\n\n{outline}"

    def preview(self, root: str) -> Optional[str]:
        """
        Render a root folder's outline without touching the index note.

        Args:
            root: Root folder name

        Returns:
            Outline text, or None if the root folder doesn't exist

        Raises:
            ValueError: If root is not a bare folder name
        """
        validate_root_name(root)
        folder = self.store.find(root)
        if not isinstance(folder, FolderNode):
            return None
        return render_outline(folder, 0, self.config.extension)

    def generate(self, roots: Optional[list[str]] = None) -> list[IndexResult]:
        """
        Generate or update index notes for each root folder.

        Args:
            roots: Root folder names to process (default: configured roots)

        Returns:
            One IndexResult per root, in processing order

        Raises:
            ValueError: If an override root is not a bare folder name
        """
        if roots is None:
            roots = list(self.config.roots)
        else:
            roots = [validate_root_name(root) for root in roots]
        logger.info("index_generation_started", roots=roots)

        results = [self._generate_one(root) for root in roots]

        self.notify("All index notes have been generated or updated.", NotifyLevel.INFO)
        logger.info(
            "index_generation_completed",
            total=len(results),
            failed=sum(1 for r in results if r.status == IndexStatus.FAILED),
            not_found=sum(1 for r in results if r.status == IndexStatus.NOT_FOUND),
        )
        return results

    def _generate_one(self, root: str) -> IndexResult:
        title = self.index_title(root)
        path = self.index_path(root)
        created = False

        try:
            handle = self.store.resolve(path)
            if self.store.find(path) is None:
                handle = self.store.create(path, "")
                created = True
                self.notify(f'Note "{title}" created!', NotifyLevel.INFO)
                logger.info("index_note_created", root=root, path=path)

            folder = self.store.find(root)
            if not isinstance(folder, FolderNode):
                message = f'Folder "{root}" not found or is empty.'
                self.notify(message, NotifyLevel.WARNING)
                logger.warning("root_folder_not_found", root=root)
                return IndexResult(root, path, IndexStatus.NOT_FOUND, message)

            outline = render_outline(folder, 0, self.config.extension)
            self.store.write(handle, self.compose(root, outline))

        except DocumentStoreError as e:
            message = f'Failed to update note "{title}": {e.message}'
            self.notify(message, NotifyLevel.ERROR)
            logger.error("index_write_failed", root=root, path=e.path, error=e.message)
            return IndexResult(root, path, IndexStatus.FAILED, message)

        message = f'Note "{title}" updated with file list from "{root}".'
        self.notify(message, NotifyLevel.INFO)
        logger.info("index_written", root=root, path=path, created=created)
        status = IndexStatus.CREATED if created else IndexStatus.UPDATED
        return IndexResult(root, path, status, message)
