"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the mtxgraph library.
"""

from .node import Node
from .edge import Edge, WeightedEdge
from .exceptions import MtxGraphError, InvalidArgumentError, OutOfRangeError, FormatError

__all__ = [
    'Node',
    'Edge',
    'WeightedEdge',
    'MtxGraphError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'FormatError',
]
