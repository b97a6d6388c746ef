"""Build a node tree from a flat list of file paths."""

from __future__ import annotations

import logging
import re
from typing import Any

from TreeArt.tree import Node, new_tree

logger = logging.getLogger(__name__)


def parse_path_input(raw: str) -> list[str]:
    """Split newline- or comma-separated input into individual paths.

    Whitespace around each path is stripped. Empty entries are ignored.
    """
    if not raw or not raw.strip():
        return []
    return [p.strip() for p in re.split(r"[\n,]", raw) if p.strip()]


def build_tree(paths: list[str], root: Any = ".") -> Node:
    """Build a tree from slash-separated paths.

    Directories become branches labelled ``name/``, files become leaves.
    Paths are sorted first, so siblings appear in alphabetical order.

    Example: ``["src/main.py", "README.md"]`` renders as
        .
        ├── README.md
        └── src/
            └── main.py
    """
    # Build a nested dict representing the directory structure
    nested: dict = {}
    for path in sorted(paths):
        parts = [part for part in path.split("/") if part]
        if not parts:
            logger.debug("Skipping empty path %r", path)
            continue
        node = nested
        for part in parts:
            node = node.setdefault(part, {})

    tree = new_tree(root)
    _add_children(tree, nested)
    return tree


def _add_children(parent: Node, entries: dict) -> None:
    """Recursively append *entries* under *parent*."""
    for name, children in entries.items():
        if children:
            branch = parent.add_branch(f"{name}/")
            _add_children(branch, children)
        else:
            parent.add_node(name)
