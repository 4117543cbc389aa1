"""
Structural analysis and cycle detection for sparse matrix graphs.

This module provides algorithms for inferring structural properties of a
GraphStore: connectivity, orientation, weighted-ness and cycles.
"""

import logging
from enum import Enum
from typing import Dict, Any, List

import numpy as np

from ..core.graph import GraphStore
from .traversal import TraversalEngine

logger = logging.getLogger(__name__)


class VisitState(Enum):
    """Node colours for directed cycle detection."""
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class GraphProperties:
    """Results from structural analysis."""

    def __init__(self):
        self.node_count = 0
        self.edge_count = 0
        self.is_connected = False
        self.is_directed = False
        self.is_weighted = False
        self.contains_cycle = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_count': self.node_count,
            'edge_count': self.edge_count,
            'is_connected': self.is_connected,
            'is_directed': self.is_directed,
            'is_weighted': self.is_weighted,
            'contains_cycle': self.contains_cycle,
        }


class StructuralAnalyzer:
    """
    Infers structural properties of a graph.

    This class provides methods for:
    - Checking connectivity (probed from node 0)
    - Detecting orientation from adjacency matrix symmetry
    - Detecting cycles (undirected and directed variants)
    - Detecting weighted edges
    - Producing a human-readable summary
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the structural analyzer.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph
        self._traversal = TraversalEngine(graph)

    def is_connected(self) -> bool:
        """
        Check whether every node is reachable from node 0.

        An empty graph is connected.
        """
        if self.graph.node_count == 0:
            return True
        return len(self._traversal.breadth_first(0)) == self.graph.node_count

    def is_directed(self) -> bool:
        """
        Check whether the adjacency matrix is asymmetric.

        add_edge always writes both cells, so graphs built through it are
        reported as undirected.
        """
        matrix = self.graph.adjacency_matrix
        return not np.array_equal(matrix, matrix.T)

    def has_weighted_edges(self) -> bool:
        return any(edge.is_weighted for edge in self.graph.edges)

    def contains_cycle(self) -> bool:
        """
        Detect whether the graph contains at least one cycle.

        Dispatches to the directed or undirected algorithm depending on
        is_directed(). Every component is scanned.
        """
        if self.is_directed():
            found = self._contains_directed_cycle()
        else:
            found = self._contains_undirected_cycle()

        logger.debug(f"Cycle detection completed, cycle found: {found}")
        return found

    def _contains_undirected_cycle(self) -> bool:
        """DFS tracking each node's parent; any other visited neighbour is a back-edge."""
        visited = [False] * self.graph.node_count

        for root_id in range(self.graph.node_count):
            if visited[root_id]:
                continue

            visited[root_id] = True
            stack = [(root_id, None, iter(self.graph.neighbors(root_id)))]

            while stack:
                node_id, parent_id, neighbors = stack[-1]
                for neighbor_id in neighbors:
                    if not visited[neighbor_id]:
                        visited[neighbor_id] = True
                        stack.append((neighbor_id, node_id, iter(self.graph.neighbors(neighbor_id))))
                        break
                    if neighbor_id != parent_id:
                        logger.debug(f"Back-edge {node_id} -> {neighbor_id} closes a cycle")
                        return True
                else:
                    stack.pop()

        return False

    def _contains_directed_cycle(self) -> bool:
        """Three-colour DFS; an edge into an IN_PROGRESS node is a cycle."""
        state: List[VisitState] = [VisitState.UNVISITED] * self.graph.node_count

        for root_id in range(self.graph.node_count):
            if state[root_id] is not VisitState.UNVISITED:
                continue

            state[root_id] = VisitState.IN_PROGRESS
            stack = [(root_id, iter(self.graph.neighbors(root_id)))]

            while stack:
                node_id, neighbors = stack[-1]
                for neighbor_id in neighbors:
                    if state[neighbor_id] is VisitState.IN_PROGRESS:
                        logger.debug(f"Edge {node_id} -> {neighbor_id} reaches a node in progress")
                        return True
                    if state[neighbor_id] is VisitState.UNVISITED:
                        state[neighbor_id] = VisitState.IN_PROGRESS
                        stack.append((neighbor_id, iter(self.graph.neighbors(neighbor_id))))
                        break
                else:
                    state[node_id] = VisitState.DONE
                    stack.pop()

        return False

    def analyze(self) -> GraphProperties:
        """
        Collect every structural property in one result.

        Returns:
            GraphProperties with counts and boolean properties filled in
        """
        result = GraphProperties()
        result.node_count = self.graph.node_count
        result.edge_count = self.graph.edge_count
        result.is_connected = self.is_connected()
        result.is_directed = self.is_directed()
        result.is_weighted = self.has_weighted_edges()
        result.contains_cycle = self.contains_cycle()
        return result

    def describe(self) -> str:
        """
        Generate a multi-line summary of the graph's properties.

        Returns:
            Formatted report string
        """
        properties = self.analyze()

        report_lines = []
        report_lines.append(f"Order (nodes): {properties.node_count}")
        report_lines.append(f"Size (edges): {properties.edge_count}")
        report_lines.append(f"Connectivity: {'connected' if properties.is_connected else 'not connected'}")
        report_lines.append(f"Orientation: {'directed' if properties.is_directed else 'undirected'}")
        report_lines.append(f"Weights: {'weighted' if properties.is_weighted else 'unweighted'}")
        report_lines.append(f"Cycles: {'contains a cycle' if properties.contains_cycle else 'acyclic'}")

        return "\n".join(report_lines)


def is_connected(graph: GraphStore) -> bool:
    return StructuralAnalyzer(graph).is_connected()


def is_directed(graph: GraphStore) -> bool:
    return StructuralAnalyzer(graph).is_directed()


def contains_cycle(graph: GraphStore) -> bool:
    return StructuralAnalyzer(graph).contains_cycle()


def has_weighted_edges(graph: GraphStore) -> bool:
    return StructuralAnalyzer(graph).has_weighted_edges()


def describe(graph: GraphStore) -> str:
    return StructuralAnalyzer(graph).describe()
