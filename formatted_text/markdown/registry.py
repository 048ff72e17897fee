# formatted_text/markdown/registry.py
"""Append-only side table holding the nodes produced during one rendering pass."""

from typing import List, Optional

from .nodes import Node


class NodeRegistry:
    """
    Stores nodes under dense integer indices starting at 0.

    Each node can be taken exactly once; taking clears its slot so a token
    that shows up twice in the compiler output cannot emit the node twice.
    """

    def __init__(self):
        self._nodes: List[Optional[Node]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def register(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def take(self, index: int) -> Optional[Node]:
        if index < 0 or index >= len(self._nodes):
            return None
        node = self._nodes[index]
        self._nodes[index] = None
        return node

    def remaining(self) -> int:
        """Number of registered nodes that were never taken."""
        return sum(1 for node in self._nodes if node is not None)
