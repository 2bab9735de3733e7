"""Shared fixtures for ft-sync tests."""

import pytest

from ftsync.tree import Node


@pytest.fixture
def chain_tree():
    """Tree rooted at docs holding the single chain docs/a/b/c/d/e/f.txt."""
    leaf = Node(is_dir=False, path="docs/a/b/c/d/e/f.txt")
    node = leaf
    for path in [
        "docs/a/b/c/d/e",
        "docs/a/b/c/d",
        "docs/a/b/c",
        "docs/a/b",
        "docs/a",
    ]:
        node = Node(is_dir=True, path=path, children=[node])
    return Node(is_dir=True, path="docs", children=[node])


@pytest.fixture
def branching_tree():
    """Tree with siblings, an empty directory and files at several depths."""
    return Node(
        is_dir=True,
        path="docs",
        children=[
            Node(is_dir=False, path="docs/index.md"),
            Node(
                is_dir=True,
                path="docs/guide",
                children=[
                    Node(is_dir=False, path="docs/guide/intro.md"),
                    Node(is_dir=True, path="docs/guide/empty"),
                    Node(
                        is_dir=True,
                        path="docs/guide/advanced",
                        children=[
                            Node(is_dir=False, path="docs/guide/advanced/tips.md"),
                        ],
                    ),
                ],
            ),
            Node(is_dir=True, path="docs/assets"),
        ],
    )


@pytest.fixture
def docs_dir(tmp_path, monkeypatch):
    """Create docs/a/b/c/d/e/f.txt under tmp_path and chdir there."""
    nested = tmp_path / "docs" / "a" / "b" / "c" / "d" / "e"
    nested.mkdir(parents=True)
    (nested / "f.txt").write_text("content")
    monkeypatch.chdir(tmp_path)
    return tmp_path / "docs"
