"""Render a directory tree as a plain-text TOC or a markdown link list.

Both renderers are pure: each call builds and returns a fresh string, so
the same tree can be rendered any number of times (or concurrently) with
byte-identical results.
"""

from ..utils import final_segment, join_display_path
from .node import Node, iter_preorder

INDENT_WIDTH = 2


def render_toc(root: Node, collection_id: str) -> str:
    """Render the tree as an indented outline under ``collection_id``.

    Every node produces two lines: ``- <display path>`` and, indented one
    level further, its name in backticks (directories get a trailing ``/``).

    Args:
        root: Tree root (not rendered itself)
        collection_id: Namespace prefix for display paths

    Returns:
        Newline-terminated outline text

    Examples:
        >>> tree = Node(True, "docs", [Node(False, "docs/f.txt")])
        >>> print(render_toc(tree, "user/index"), end="")
        - user/index/docs/f.txt
          `f.txt`
    """
    lines: list[str] = []
    for depth, node in iter_preorder(root):
        indent = " " * (depth * INDENT_WIDTH)
        display_path = join_display_path(collection_id, node.path)
        label = final_segment(display_path) + ("/" if node.is_dir else "")
        lines.append(f"{indent}- {display_path}\n")
        lines.append(f"{indent}{' ' * INDENT_WIDTH}`{label}`\n")
    return "".join(lines)


def render_markdown(root: Node, collection_id: str) -> str:
    """Render the tree as a nested markdown list of links.

    Examples:
        >>> tree = Node(True, "docs", [Node(False, "docs/f.txt")])
        >>> print(render_markdown(tree, "user/index"), end="")
        - [`f.txt`](user/index/docs/f.txt)
    """
    lines: list[str] = []
    for depth, node in iter_preorder(root):
        indent = " " * (depth * INDENT_WIDTH)
        display_path = join_display_path(collection_id, node.path)
        lines.append(f"{indent}- [`{final_segment(display_path)}`]({display_path})\n")
    return "".join(lines)
