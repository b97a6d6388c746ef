"""Markdown output assembly."""

from __future__ import annotations

from TreeArt.renderer import render
from TreeArt.tree import Node


def render_markdown(title: str, tree: Node) -> str:
    """Render *tree* as a Markdown document with a fenced tree block.

    Args:
        title: heading text, e.g. "my-project"
        tree: root of the tree to draw
    """
    parts: list[str] = []

    parts.append(f"# {title}\n")
    parts.append("```")
    # render() already ends with a newline
    parts.append(render(tree) + "```\n")

    return "\n".join(parts)
