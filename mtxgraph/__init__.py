"""
mtxgraph - Sparse Matrix Graph Analysis Library

A Python library for loading graphs from Matrix Market coordinate files,
traversing them, inferring structural properties and rendering them.

Main Classes:
    pymtxgraph: Main class for graph analysis (facade)
    GraphStore: Fixed-size undirected graph with adjacency list and matrix
    TraversalEngine: Breadth-first and depth-first traversal
    StructuralAnalyzer: Connectivity, orientation, cycle and weight detection

Example:
    >>> from mtxgraph import pymtxgraph
    >>> graph = pymtxgraph.from_mtx("soc-karate.mtx")
    >>> graph.breadth_first(0)
    >>> graph.contains_cycle()
"""

__version__ = "0.1.0"

from mtxgraph.classes.node import Node
from mtxgraph.classes.edge import Edge, WeightedEdge
from mtxgraph.classes.exceptions import MtxGraphError, InvalidArgumentError, OutOfRangeError, FormatError
from mtxgraph.core.graph import GraphStore
from mtxgraph.classes.graph_builders import GraphBuilder
from mtxgraph.analysis.traversal import TraversalEngine
from mtxgraph.analysis.detection import StructuralAnalyzer
from mtxgraph.formats.read_mtx import read_mtx
from mtxgraph.formats.export_png import export_graph_to_png, RenderSettings
from mtxgraph.core.mtxgraph import pymtxgraph

__all__ = [
    'pymtxgraph',
    'GraphStore',
    'GraphBuilder',
    'TraversalEngine',
    'StructuralAnalyzer',
    'Node',
    'Edge',
    'WeightedEdge',
    'MtxGraphError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'FormatError',
    'read_mtx',
    'export_graph_to_png',
    'RenderSettings',
]
