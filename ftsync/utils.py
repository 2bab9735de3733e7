"""Path helpers shared by the renderers and the upload planner."""

from pathlib import Path, PurePosixPath
from typing import Union

# Default config file name, looked up in the current directory
DEFAULT_CONFIG_NAME: str = "ft-sync.json"


def normalize_path(path: Union[str, Path]) -> str:
    """Normalize a filesystem path to forward-slash form.

    Args:
        path: Path as given by the caller

    Returns:
        Path string using forward slashes, without trailing separator

    Examples:
        >>> normalize_path("docs/")
        'docs'
        >>> normalize_path("./docs//a")
        'docs/a'
    """
    return PurePosixPath(Path(path).as_posix()).as_posix()


def join_display_path(collection_id: str, path: str) -> str:
    """Join a collection id and a tree path into a display path.

    The path always stays under the collection: a leading slash on
    ``path`` is dropped instead of replacing the prefix, unlike
    ``posixpath.join`` where an absolute second argument discards the
    first. Trees built from an absolute root therefore render as
    ``<collection>/<absolute path without its leading slash>``.

    Args:
        collection_id: Namespace prefix (not validated against the filesystem)
        path: Node path

    Returns:
        Joined path with single separators

    Examples:
        >>> join_display_path("testuser/index", "docs/a")
        'testuser/index/docs/a'
        >>> join_display_path("testuser/index/", "/docs/a")
        'testuser/index/docs/a'
        >>> join_display_path("", "docs/a")
        'docs/a'
    """
    relative = path.lstrip("/")
    if not collection_id:
        return PurePosixPath(relative).as_posix()
    return (PurePosixPath(collection_id) / relative).as_posix()


def final_segment(path: str) -> str:
    """Return the last component of a forward-slash path.

    Examples:
        >>> final_segment("testuser/index/docs/a/f.txt")
        'f.txt'
        >>> final_segment("docs/a/")
        'a'
    """
    return PurePosixPath(path).name
