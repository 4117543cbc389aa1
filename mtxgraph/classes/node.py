"""
Node representation for mtxgraph.
"""

from typing import NamedTuple


class Node(NamedTuple):
    """A graph vertex identified by its 0-based index."""

    node_id: int

    def __str__(self) -> str:
        return str(self.node_id)
