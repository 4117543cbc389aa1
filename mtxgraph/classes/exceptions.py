"""
Exceptions raised by mtxgraph.
"""

from typing import Optional


class MtxGraphError(Exception):
    """Base exception class for mtxgraph errors."""
    pass


class InvalidArgumentError(MtxGraphError, ValueError):
    """Raised when a graph is requested with an invalid node count."""
    pass


class OutOfRangeError(MtxGraphError, IndexError):
    """Raised when a node id falls outside [0, node_count)."""

    def __init__(self, node_id, node_count: int):
        super().__init__(f"Node id {node_id} is out of range for a graph of {node_count} nodes")
        self.node_id = node_id
        self.node_count = node_count


class FormatError(MtxGraphError, ValueError):
    """Raised when a Matrix Market source cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
