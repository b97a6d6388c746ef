"""Data classes for TreeArt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from TreeArt.tree import Node


class EdgeType(Enum):
    LINK = "│"
    MID = "├──"
    END = "└──"

    def __str__(self) -> str:
        return self.value


@dataclass
class Vertex:
    node: Node
    level: int = 0  # depth relative to where the traversal started
