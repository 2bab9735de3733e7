"""In-memory directory tree model."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Node:
    """One filesystem entry in a directory tree.

    A tree is built once and then only read. Each node is owned by exactly
    one parent, and files never have children.
    """

    is_dir: bool
    """True for directories, False for files and symlinks"""

    path: str
    """Forward-slash path rooted at the traversal root"""

    children: list["Node"] = field(default_factory=list)
    """Entries in directory-listing order (empty for files)"""


def iter_preorder(root: Node) -> Iterator[tuple[int, Node]]:
    """Yield ``(depth, node)`` for every descendant of ``root`` in pre-order.

    The root itself is not yielded; its direct children have depth 0.
    Files are never descended into.
    """
    stack = [(0, child) for child in reversed(root.children)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        if node.is_dir:
            stack.extend((depth + 1, child) for child in reversed(node.children))


def find_node(root: Node, path: str) -> Optional[Node]:
    """Find the first node (root included) whose path equals ``path``."""
    if root.path == path:
        return root
    for _, node in iter_preorder(root):
        if node.path == path:
            return node
    return None


def count_nodes(root: Node) -> tuple[int, int]:
    """Count descendant directories and files, excluding the root.

    Returns:
        Tuple of (directory_count, file_count)
    """
    dirs = files = 0
    for _, node in iter_preorder(root):
        if node.is_dir:
            dirs += 1
        else:
            files += 1
    return dirs, files
