"""
Input and output formats: Matrix Market reading and PNG export.
"""

from .read_mtx import read_mtx, parse_mtx
from .export_png import export_graph_to_png, compute_layout, RenderSettings

__all__ = ['read_mtx', 'parse_mtx', 'export_graph_to_png', 'compute_layout', 'RenderSettings']
