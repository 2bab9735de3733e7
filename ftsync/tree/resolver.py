"""Resolve the directories that enclose a path in a directory tree."""

import logging
from collections.abc import Iterator

from .node import Node

logger = logging.getLogger(__name__)


def ancestors_of(root: Node, target_path: str) -> list[str]:
    """Return the directories strictly between the root and ``target_path``.

    The list is ordered innermost first and never includes the root or the
    matched node itself. A target that is the root, a direct child of the
    root, or absent from the tree yields an empty list. When several nodes
    share the path, the first one in pre-order wins.

    Args:
        root: Tree root
        target_path: Exact node path to look for

    Returns:
        Ancestor directory paths, innermost first

    Examples:
        >>> tree = Node(True, "docs", [
        ...     Node(True, "docs/a", [Node(False, "docs/a/f.txt")]),
        ... ])
        >>> ancestors_of(tree, "docs/a/f.txt")
        ['docs/a']
        >>> ancestors_of(tree, "docs/a")
        []
        >>> ancestors_of(tree, "docs/missing")
        []
    """
    if root.path == target_path:
        return []

    for node, chain in iter_ancestor_chains(root):
        if node.path == target_path:
            return list(reversed(chain))

    logger.debug(f"Path not found in tree {root.path}: {target_path}")
    return []


def iter_ancestor_chains(root: Node) -> Iterator[tuple[Node, tuple[str, ...]]]:
    """Yield ``(node, chain)`` for every descendant of ``root`` in pre-order.

    ``chain`` holds the directories strictly between the root and the node,
    outermost first. Sibling nodes share the same tuple, so walking the whole
    tree costs one tuple per directory.
    """
    stack: list[tuple[Node, tuple[str, ...]]] = [
        (child, ()) for child in reversed(root.children)
    ]
    while stack:
        node, chain = stack.pop()
        yield node, chain
        if node.is_dir:
            below = chain + (node.path,)
            stack.extend((child, below) for child in reversed(node.children))
