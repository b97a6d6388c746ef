"""Tree structure: nodes, the mutation API, search and traversal."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Iterator

from TreeArt.models import Vertex
from TreeArt.renderer import render, render_bytes


class TreeError(Exception):
    """Base class for tree errors."""


class EmptyBranchError(TreeError):
    """Raised when a child is requested from a node that has none."""


WalkFn = Callable[[Vertex, int], Any]


class Node:
    """A tree node holding a value, an optional meta value and its children.

    Nodes created with :meth:`add_node` keep a weak back-reference to the node
    that owns them, so chained ``add_node`` calls keep appending siblings at
    the same level. Branches (:meth:`add_branch`, :meth:`branch`) have no
    back-reference and act as a tree of their own.
    """

    def __init__(self, value: Any = None, meta: Any = None) -> None:
        self.value = value
        self.meta = meta
        self.children: list[Node] = []
        self._parent: weakref.ref[Node] | None = None

    def __repr__(self) -> str:
        return (
            f"Node(value={self.value!r}, meta={self.meta!r}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return render(self)

    def __bytes__(self) -> bytes:
        return render_bytes(self)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    @property
    def is_branch_root(self) -> bool:
        return self._parent is None

    def _handle(self) -> Node:
        """Return the node chained ``add`` calls should continue from."""
        if self._parent is not None:
            parent = self._parent()
            if parent is not None:
                return parent
        return self

    def add_node(self, value: Any) -> Node:
        """Append a leaf and return the tree handle for chaining."""
        return self.add_meta_node(None, value)

    def add_meta_node(self, meta: Any, value: Any) -> Node:
        """Append a leaf carrying *meta* and return the tree handle for chaining."""
        child = Node(value, meta)
        child._parent = weakref.ref(self)
        self.children.append(child)
        return self._handle()

    def add_branch(self, value: Any) -> Node:
        """Append a new branch one level deeper and return it."""
        return self.add_meta_branch(None, value)

    def add_meta_branch(self, meta: Any, value: Any) -> Node:
        branch = Node(value, meta)
        self.children.append(branch)
        return branch

    def branch(self) -> Node:
        """Turn this node into a branch root. No effect on a branch."""
        self._parent = None
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        self.value = value

    def get_meta_value(self) -> Any:
        return self.meta

    def set_meta_value(self, meta: Any) -> None:
        self.meta = meta

    def find_last_node(self) -> Node:
        if not self.children:
            raise EmptyBranchError(f"Node {self.value!r} has no children.")
        return self.children[-1]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_by_meta(self, meta: Any) -> Node | None:
        """Return the first descendant whose meta equals *meta*, or None."""
        for vertex in self.iter_vertices():
            if vertex.level and vertex.node.meta == meta:
                return vertex.node
        return None

    def find_by_value(self, value: Any) -> Node | None:
        """Return the first descendant whose value equals *value*, or None."""
        for vertex in self.iter_vertices():
            if vertex.level and vertex.node.value == value:
                return vertex.node
        return None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def iter_vertices(self) -> Iterator[Vertex]:
        """Yield every node depth-first, pre-order, starting with this one.

        Uses an explicit stack, so deep trees are not bound by the
        interpreter's recursion limit.
        """
        stack = [Vertex(self, 0)]
        while stack:
            vertex = stack.pop()
            yield vertex
            for child in reversed(vertex.node.children):
                stack.append(Vertex(child, vertex.level + 1))

    def walk(self, walk_fn: WalkFn) -> None:
        """Call ``walk_fn(vertex, level)`` for each node in pre-order.

        An exception raised by *walk_fn* stops the walk and propagates.
        """
        for vertex in self.iter_vertices():
            walk_fn(vertex, vertex.level)


def new_tree(value: Any = ".") -> Node:
    """Create an empty tree whose root displays as *value*."""
    return Node(value)
