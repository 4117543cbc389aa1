"""
Core graph data structure for sparse matrix graphs.

This module provides the fundamental graph structure without high-level operations.
"""

import logging
from numbers import Integral
from typing import List, Dict, Tuple, Optional

import numpy as np

from ..classes.node import Node
from ..classes.edge import Edge, WeightedEdge
from ..classes.exceptions import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Core graph data structure with a fixed number of nodes.

    This class manages the fundamental graph representation without
    traversal or analysis. It provides:
    - Node allocation (ids 0..node_count-1, created once)
    - Append-only, idempotent undirected edge insertion
    - Adjacency list maintenance (insertion order)
    - A boolean adjacency matrix kept symmetric on every insertion
    """

    def __init__(self, node_count: int):
        """
        Initialize an edgeless graph.

        Args:
            node_count: Number of nodes to allocate, must be >= 0

        Raises:
            InvalidArgumentError: If node_count is negative or not an integer
        """
        if isinstance(node_count, bool) or not isinstance(node_count, Integral):
            raise InvalidArgumentError(f"Node count must be an integer, got {node_count!r}")
        if node_count < 0:
            raise InvalidArgumentError(f"Node count must be non-negative, got {node_count}")

        self._node_count = int(node_count)

        # Node and edge collections
        self._nodes: Dict[int, Node] = {node_id: Node(node_id) for node_id in range(self._node_count)}
        self._edges: List[Edge] = []

        # Graph structure
        self._adjacency_list: Dict[int, List[int]] = {node_id: [] for node_id in range(self._node_count)}
        self._adjacency_matrix: np.ndarray = np.zeros((self._node_count, self._node_count), dtype=bool)

        logger.debug(f"Initialized GraphStore with {self._node_count} nodes")

    @classmethod
    def create(cls, node_count: int) -> 'GraphStore':
        """Allocate a graph of node_count nodes with no edges."""
        return cls(node_count)

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_edge(self, node_a: int, node_b: int, weight: Optional[float] = None) -> bool:
        """
        Connect two nodes with an undirected edge.

        Inserting a pair that is already connected is a no-op.

        Args:
            node_a: First endpoint id
            node_b: Second endpoint id
            weight: Optional weight; when given the edge is a WeightedEdge

        Returns:
            True if the edge was inserted, False if it already existed

        Raises:
            OutOfRangeError: If either endpoint is outside [0, node_count)
        """
        self.validate_node_id(node_a)
        self.validate_node_id(node_b)

        if node_b in self._adjacency_list[node_a]:
            logger.debug(f"Edge ({node_a}, {node_b}) already present, skipping")
            return False

        self._adjacency_list[node_a].append(node_b)
        if node_a != node_b:
            self._adjacency_list[node_b].append(node_a)
        self._adjacency_matrix[node_a, node_b] = True
        self._adjacency_matrix[node_b, node_a] = True

        if weight is None:
            self._edges.append(Edge(node_a, node_b))
        else:
            self._edges.append(WeightedEdge(node_a, node_b, weight))

        return True

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def node_count(self) -> int:
        """Number of nodes, fixed at construction."""
        return self._node_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def adjacency_list(self) -> Dict[int, List[int]]:
        """Copy of the adjacency list, node id -> neighbour ids in insertion order."""
        return {node_id: list(neighbors) for node_id, neighbors in self._adjacency_list.items()}

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """Copy of the boolean adjacency matrix."""
        return self._adjacency_matrix.copy()

    def get_node(self, node_id: int) -> Node:
        self.validate_node_id(node_id)
        return self._nodes[node_id]

    def neighbors(self, node_id: int) -> Tuple[int, ...]:
        """
        Get the neighbours of a node in insertion order.

        Args:
            node_id: Node to look up

        Returns:
            Tuple of neighbour ids

        Raises:
            OutOfRangeError: If node_id is outside [0, node_count)
        """
        self.validate_node_id(node_id)
        return tuple(self._adjacency_list[node_id])

    def degree(self, node_id: int) -> int:
        self.validate_node_id(node_id)
        return len(self._adjacency_list[node_id])

    def has_edge(self, node_a: int, node_b: int) -> bool:
        """Check the adjacency matrix for a connection from node_a to node_b."""
        self.validate_node_id(node_a)
        self.validate_node_id(node_b)
        return bool(self._adjacency_matrix[node_a, node_b])

    def validate_node_id(self, node_id) -> None:
        """Raise OutOfRangeError unless node_id is an integer in [0, node_count)."""
        if isinstance(node_id, bool) or not isinstance(node_id, Integral):
            raise OutOfRangeError(node_id, self._node_count)
        if not 0 <= node_id < self._node_count:
            raise OutOfRangeError(node_id, self._node_count)

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return f"GraphStore(node_count={self._node_count}, edge_count={len(self._edges)})"
