"""
Utility functions for mtxgraph.

This module provides text formatting helpers shared by the facade and the
command line report.
"""

import logging
from typing import Iterable

import numpy as np

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


def format_adjacency_matrix(graph: GraphStore) -> str:
    """
    Render the adjacency matrix as rows of 0/1 separated by spaces.

    Args:
        graph: Graph whose matrix is formatted

    Returns:
        One line per node, empty string for an empty graph
    """
    matrix = graph.adjacency_matrix.astype(np.uint8)
    return "\n".join(" ".join(str(cell) for cell in row) for row in matrix)


def format_adjacency_list(graph: GraphStore) -> str:
    """
    Render the adjacency list, one "Node i : a, b" line per node.
    """
    lines = []
    for node_id, neighbors in graph.adjacency_list.items():
        lines.append(f"Node {node_id} : {', '.join(str(n) for n in neighbors)}")
    return "\n".join(lines)


def format_path(node_ids: Iterable[int], separator: str = " -> ") -> str:
    return separator.join(str(node_id) for node_id in node_ids)
