"""
Main facade class for sparse matrix graph analysis.

This module provides the pymtxgraph class that owns a GraphStore and
delegates to the traversal, analysis and rendering modules.
"""

import os
import logging
from typing import Iterable, List, Optional, Union

import numpy as np

from ..classes.edge import Edge
from ..classes.node import Node
from ..classes import utils
from .graph import GraphStore
from ..analysis.traversal import TraversalEngine
from ..analysis.detection import StructuralAnalyzer, GraphProperties
from ..formats.read_mtx import read_mtx
from ..formats.export_png import export_graph_to_png, RenderSettings

logger = logging.getLogger(__name__)


class pymtxgraph:
    """
    Main facade class for graph analysis.

    Exposes the whole public API on one object while delegating to the
    specialised modules.
    """

    def __init__(self, node_count: int = 0, graph: Optional[GraphStore] = None):
        """
        Initialize the facade around a new or existing graph.

        Args:
            node_count: Number of nodes when creating a new graph
            graph: Existing GraphStore to wrap instead
        """
        self._graph = graph if graph is not None else GraphStore.create(node_count)

        # Initialize analysis components
        self._traversal = TraversalEngine(self._graph)
        self._analyzer = StructuralAnalyzer(self._graph)

    @classmethod
    def from_mtx(cls, source: Union[str, os.PathLike, Iterable[str]]) -> 'pymtxgraph':
        """Load a Matrix Market coordinate file."""
        return cls(graph=read_mtx(source))

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    @property
    def graph(self) -> GraphStore:
        return self._graph

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    @property
    def nodes(self) -> List[Node]:
        return self._graph.nodes

    @property
    def edges(self) -> List[Edge]:
        return self._graph.edges

    @property
    def adjacency_list(self):
        return self._graph.adjacency_list

    @property
    def adjacency_matrix(self) -> np.ndarray:
        return self._graph.adjacency_matrix

    def add_edge(self, node_a: int, node_b: int, weight: Optional[float] = None) -> bool:
        """Connect two nodes; repeated pairs are ignored."""
        return self._graph.add_edge(node_a, node_b, weight)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def breadth_first(self, start_id: int = 0) -> List[int]:
        """Breadth-first visiting order from start_id."""
        return self._traversal.breadth_first(start_id)

    def depth_first(self, start_id: int = 0) -> List[int]:
        """Depth-first pre-order from start_id."""
        return self._traversal.depth_first(start_id)

    def connected_components(self) -> List[List[int]]:
        return self._traversal.connected_components()

    # ========================================================================
    # STRUCTURAL ANALYSIS
    # ========================================================================

    def is_connected(self) -> bool:
        return self._analyzer.is_connected()

    def is_directed(self) -> bool:
        return self._analyzer.is_directed()

    def contains_cycle(self) -> bool:
        return self._analyzer.contains_cycle()

    def has_weighted_edges(self) -> bool:
        return self._analyzer.has_weighted_edges()

    def analyze(self) -> GraphProperties:
        return self._analyzer.analyze()

    def describe(self) -> str:
        """Multi-line summary of counts, connectivity, orientation and weights."""
        return self._analyzer.describe()

    # ========================================================================
    # REPORTING & RENDERING
    # ========================================================================

    def format_adjacency_matrix(self) -> str:
        return utils.format_adjacency_matrix(self._graph)

    def format_adjacency_list(self) -> str:
        return utils.format_adjacency_list(self._graph)

    def export_to_png(self, sFilename_out: Union[str, os.PathLike] = 'graphe.png',
                      settings: Optional[RenderSettings] = None,
                      seed: Optional[int] = None) -> str:
        """Render the graph to a PNG image and return its path."""
        return export_graph_to_png(self._graph, sFilename_out, settings, seed)
