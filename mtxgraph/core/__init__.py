"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
that ties it to the analysis modules.
"""

from .graph import GraphStore

__all__ = ['GraphStore']
