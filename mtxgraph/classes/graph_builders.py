"""
Graph builders module for mtxgraph.

This module turns a node count and a sequence of endpoint pairs, as produced
by a loader, into a populated GraphStore.
"""

import logging
from typing import Iterable, Sequence

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Graph construction utilities.

    Each entry of ``edge_pairs`` is ``(node_a, node_b)`` or
    ``(node_a, node_b, weight)`` with 0-based node ids.
    """

    def __init__(self, node_count: int):
        """
        Initialize the builder with an empty store.

        Args:
            node_count: Number of nodes of the graph to build
        """
        self.store = GraphStore.create(node_count)
        self.duplicate_count = 0

    def add_edges(self, edge_pairs: Iterable[Sequence]) -> 'GraphBuilder':
        """
        Insert every pair into the store, counting duplicates.

        Args:
            edge_pairs: Iterable of (a, b) or (a, b, weight) tuples

        Returns:
            The builder, for chaining
        """
        for pair in edge_pairs:
            weight = pair[2] if len(pair) > 2 else None
            if not self.store.add_edge(pair[0], pair[1], weight):
                self.duplicate_count += 1
        return self

    def build(self) -> GraphStore:
        if self.duplicate_count:
            logger.debug(f"Ignored {self.duplicate_count} duplicate edge entries")
        logger.debug(f"Built graph with {self.store.node_count} nodes and {self.store.edge_count} edges")
        return self.store

    @classmethod
    def from_edges(cls, node_count: int, edge_pairs: Iterable[Sequence]) -> GraphStore:
        """Build a store of node_count nodes populated with edge_pairs."""
        return cls(node_count).add_edges(edge_pairs).build()
