"""Render a folder tree snapshot as a nested markdown outline.

Example:
    >>> from vaultindex.models.tree import DocumentNode, FolderNode
    >>> tree = FolderNode("Resources", (DocumentNode.from_name("General.md"),))
    >>> print(render_outline(tree), end="")
    - Resources
        + [[General]]
"""

import unicodedata

from vaultindex.models.tree import DocumentNode, FolderNode, Node

INDENT = "    "
DEFAULT_EXTENSION = "md"


def sort_key(node: Node) -> tuple[str, str, str]:
    """Case- and locale-aware ordering key for sibling nodes.

    Compares accent-stripped case-folded names first, then case-folded
    names (accents), then case with lowercase before uppercase.
    """
    folded = node.name.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base, folded, node.name.swapcase())


def render_outline(
    folder: FolderNode,
    depth: int = 0,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Render a folder and all of its descendants as an outline.

    The folder's own line comes first at indentation ``depth``. Children
    are sorted by name, subfolders are rendered recursively one level
    deeper, and documents whose extension matches ``extension`` become
    ``+ [[name]]`` links one level deeper. Other documents are skipped.

    Args:
        folder: Root of the subtree to render
        depth: Nesting level of ``folder`` (0 at the top call)
        extension: Markup extension of documents to include, without dot

    Returns:
        Newline-terminated outline text

    Raises:
        ValueError: If folder is None or depth is negative
        TypeError: If a child is neither a folder nor a document
    """
    if folder is None:
        raise ValueError("folder must not be None")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    indent = INDENT * depth
    outline = f"{indent}- {folder.name}\n"

    for child in sorted(folder.children, key=sort_key):
        match child:
            case FolderNode():
                outline += render_outline(child, depth + 1, extension)
            case DocumentNode(extension=child_extension):
                if child_extension == extension:
                    outline += f"{indent}{INDENT}+ [[{child.basename}]]\n"
            case _:
                raise TypeError(f"Unsupported node type: {type(child).__name__}")

    return outline
