"""Build an in-memory directory tree from the local filesystem."""

import logging
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from ..exceptions import TreeBuildError
from ..utils import normalize_path
from .node import Node

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Walks a directory and materializes it as a tree of Nodes.

    The walk uses an explicit stack, so deeply nested directories cannot
    exhaust the interpreter's recursion limit. Any error while listing a
    directory aborts the build.

    Examples:
        >>> builder = TreeBuilder()
        >>> root = builder.build("docs")
        >>> [child.path for child in root.children]
        ['docs/a']

        >>> # Skip editor leftovers and hidden entries
        >>> builder = TreeBuilder(ignore_patterns=["*.swp"], exclude_dot_files=True)
    """

    def __init__(
        self,
        ignore_patterns: Optional[list[str]] = None,
        exclude_dot_files: bool = False,
        sort_entries: bool = False,
    ):
        """Initialize tree builder.

        Args:
            ignore_patterns: Glob patterns matched against entry names and
                root-relative paths (e.g., ["*.log", "build/*"])
            exclude_dot_files: Whether to skip files/folders starting with dot
            sort_entries: Sort each directory listing by name instead of
                keeping the order the filesystem returns
        """
        self.ignore_patterns = ignore_patterns or []
        self.exclude_dot_files = exclude_dot_files
        self.sort_entries = sort_entries

    def should_ignore(self, name: str, relative_path: str) -> bool:
        """Check if an entry should be left out of the tree.

        Args:
            name: Entry name
            relative_path: Entry path relative to the root, forward slashes

        Returns:
            True if the entry should be skipped
        """
        if self.exclude_dot_files and name.startswith("."):
            return True
        for pattern in self.ignore_patterns:
            if fnmatch(name, pattern) or fnmatch(relative_path, pattern):
                logger.debug(f"Ignoring (pattern {pattern!r}): {relative_path}")
                return True
        return False

    def build(self, root_directory: Union[str, Path]) -> Node:
        """Build the tree rooted at ``root_directory``.

        Args:
            root_directory: Existing directory to walk

        Returns:
            Root Node whose children hold every descendant entry

        Raises:
            TreeBuildError: If the root is missing or not a directory, or
                if any directory cannot be listed
        """
        root_dir = Path(root_directory)
        if not root_dir.exists():
            raise TreeBuildError(
                f"Root directory does not exist: {root_dir}", path=str(root_dir)
            ) from FileNotFoundError(str(root_dir))
        if not root_dir.is_dir():
            raise TreeBuildError(
                f"Root path is not a directory: {root_dir}", path=str(root_dir)
            ) from NotADirectoryError(str(root_dir))

        root = Node(is_dir=True, path=normalize_path(root_dir))
        stack: list[tuple[Node, Path]] = [(root, root_dir)]
        listed = 0

        while stack:
            node, directory = stack.pop()
            for item in self._list_directory(directory):
                relative_path = item.relative_to(root_dir).as_posix()
                if self.should_ignore(item.name, relative_path):
                    continue

                # Symlinks stay leaves so the tree can never contain a cycle
                is_dir = item.is_dir() and not item.is_symlink()
                child = Node(
                    is_dir=is_dir,
                    path=(PurePosixPath(node.path) / item.name).as_posix(),
                )
                node.children.append(child)
                if is_dir:
                    stack.append((child, item))
            listed += 1

        logger.debug(f"Built tree for {root.path} from {listed} directories")
        return root

    def _list_directory(self, directory: Path) -> list[Path]:
        """List one directory, turning I/O failures into TreeBuildError."""
        logger.debug(f"Listing directory: {directory}")
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            raise TreeBuildError(
                f"Failed to list directory {directory}: {e}", path=str(directory)
            ) from e
        if self.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries


def build_tree(root_directory: Union[str, Path]) -> Node:
    """Build a tree with default options (no filtering, listing order kept)."""
    return TreeBuilder().build(root_directory)
