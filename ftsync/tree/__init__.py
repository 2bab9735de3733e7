"""Directory tree model, builder, renderers and ancestor resolver."""

from .builder import TreeBuilder, build_tree
from .node import Node, count_nodes, find_node, iter_preorder
from .render import render_markdown, render_toc
from .resolver import ancestors_of, iter_ancestor_chains

__all__ = [
    "Node",
    "TreeBuilder",
    "build_tree",
    "count_nodes",
    "find_node",
    "iter_preorder",
    "render_markdown",
    "render_toc",
    "ancestors_of",
    "iter_ancestor_chains",
]
