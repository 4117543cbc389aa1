"""
Traversal algorithms for sparse matrix graphs.

This module provides breadth-first and depth-first traversal over a
GraphStore. Neighbours are visited in adjacency-list insertion order, so
results are deterministic for a given sequence of add_edge calls.
"""

import logging
from typing import List
from collections import deque

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Read-only traversal algorithms.

    This class provides methods for:
    - Breadth-first traversal
    - Depth-first (pre-order) traversal
    - Connected component enumeration
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the traversal engine.

        Args:
            graph: GraphStore instance to traverse
        """
        self.graph = graph

    def breadth_first(self, start_id: int) -> List[int]:
        """
        Visit every node reachable from start_id using a FIFO frontier.

        Args:
            start_id: Starting node id

        Returns:
            Node ids in visiting order, start_id first

        Raises:
            OutOfRangeError: If start_id is outside [0, node_count)
        """
        self.graph.validate_node_id(start_id)

        visited = [False] * self.graph.node_count
        queue = deque([start_id])
        visited[start_id] = True
        order = []

        while queue:
            current_id = queue.popleft()
            order.append(current_id)

            for neighbor_id in self.graph.neighbors(current_id):
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    queue.append(neighbor_id)

        return order

    def depth_first(self, start_id: int) -> List[int]:
        """
        Visit every node reachable from start_id in depth-first pre-order.

        Uses an explicit stack of neighbour iterators, which yields the same
        order as the recursive formulation without its depth limit.

        Args:
            start_id: Starting node id

        Returns:
            Node ids in visiting order, start_id first

        Raises:
            OutOfRangeError: If start_id is outside [0, node_count)
        """
        self.graph.validate_node_id(start_id)

        visited = [False] * self.graph.node_count
        visited[start_id] = True
        order = [start_id]
        stack = [iter(self.graph.neighbors(start_id))]

        while stack:
            for neighbor_id in stack[-1]:
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    order.append(neighbor_id)
                    stack.append(iter(self.graph.neighbors(neighbor_id)))
                    break
            else:
                stack.pop()

        return order

    def connected_components(self) -> List[List[int]]:
        """
        Group nodes into connected components.

        Returns:
            List of components in order of their smallest node id, each in BFS order
        """
        seen = set()
        components = []

        for node_id in range(self.graph.node_count):
            if node_id in seen:
                continue
            component = self.breadth_first(node_id)
            seen.update(component)
            components.append(component)

        logger.debug(f"Found {len(components)} connected components")
        return components


def breadth_first(graph: GraphStore, start_id: int) -> List[int]:
    """Breadth-first visiting order from start_id."""
    return TraversalEngine(graph).breadth_first(start_id)


def depth_first(graph: GraphStore, start_id: int) -> List[int]:
    """Depth-first pre-order from start_id."""
    return TraversalEngine(graph).depth_first(start_id)
