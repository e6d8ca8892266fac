"""Folder tree snapshot models.

A vault subtree is a closed tagged variant: every node is either a
FolderNode or a DocumentNode. Nodes are immutable snapshots supplied by
the document store and borrowed by the outline renderer.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DocumentNode:
    """A file-like leaf in the vault tree.

    Attributes:
        name: File name including extension (e.g. "Plan.md")
        extension: Text after the last dot of the name, without the dot
    """

    name: str
    extension: str

    @classmethod
    def from_name(cls, name: str) -> "DocumentNode":
        """Create a document node, deriving the extension from its name.

        A name without a dot, or with only a leading dot (".gitignore"),
        has an empty extension.

        Args:
            name: File name including extension

        Returns:
            DocumentNode for the file
        """
        stem, dot, extension = name.rpartition(".")
        if not dot or not stem:
            return cls(name=name, extension="")
        return cls(name=name, extension=extension)

    @property
    def basename(self) -> str:
        """Name with the trailing extension removed."""
        if not self.extension:
            return self.name
        return self.name[: -(len(self.extension) + 1)]


@dataclass(frozen=True)
class FolderNode:
    """A directory in the vault tree.

    Attributes:
        name: Bare folder name (no path segments)
        children: Child nodes, in no particular order
    """

    name: str
    children: tuple["Node", ...] = ()


Node = Union[FolderNode, DocumentNode]
