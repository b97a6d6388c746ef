"""Box-drawing rendering of a node tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from TreeArt.models import EdgeType

if TYPE_CHECKING:
    from TreeArt.tree import Node

logger = logging.getLogger(__name__)

# Vertical rail followed by two no-break spaces and a space
RAIL = f"{EdgeType.LINK}\u00a0\u00a0 "
PADDING = "    "


def format_label(node: Node) -> str:
    """Return ``[meta]  value`` or just ``value`` when the node has no meta."""
    if node.meta is not None:
        return f"[{node.meta}]  {node.value}"
    return f"{node.value}"


def render(node: Node) -> str:
    """Render *node* and everything below it, one newline-terminated line per node.

    Example output:
        .
        ├── a
        │   └── x
        └── b

    *node* is always drawn as the top line, whatever its position in a
    larger tree.
    """
    lines: list[str] = [format_label(node)]

    # Pending siblings per depth. The counter for a depth is re-armed each
    # time a node at the depth above starts its children, which is safe
    # because a subtree is finished before its next sibling is visited.
    level_size: dict[int, int] = {1: len(node.children)}

    for vertex in node.iter_vertices():
        level = vertex.level
        if level == 0:
            continue

        level_size[level] -= 1
        if vertex.node.children:
            level_size[level + 1] = len(vertex.node.children)

        edge = EdgeType.END if level_size[level] == 0 else EdgeType.MID

        indent = "".join(
            RAIL if level_size[i] > 0 else PADDING for i in range(1, level)
        )
        lines.append(f"{indent}{edge} {format_label(vertex.node)}")

    logger.debug("Rendered %d lines for %r", len(lines), node)
    return "\n".join(lines) + "\n"


def render_bytes(node: Node) -> bytes:
    """Render *node* as UTF-8 encoded bytes."""
    return render(node).encode("utf-8")
