"""
Graph analysis modules for traversal and structural detection.
"""

from .traversal import TraversalEngine
from .detection import StructuralAnalyzer, GraphProperties, VisitState

__all__ = ['TraversalEngine', 'StructuralAnalyzer', 'GraphProperties', 'VisitState']
