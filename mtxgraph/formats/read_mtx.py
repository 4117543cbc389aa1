"""
Matrix Market reader for mtxgraph.

Reads the coordinate variant of the Matrix Market exchange format:

    %%MatrixMarket matrix coordinate pattern symmetric
    % comment lines
    rows cols nonzeros
    i j [value]

Row count becomes the node count; each entry is a 1-based pair converted to
0-based node ids. The banner is recognised on the first non-blank line; a
leading byte order mark is ignored. Matrices with a ``real`` or ``integer``
field must give a value on every entry.
"""

import os
import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..classes.exceptions import FormatError
from ..classes.graph_builders import GraphBuilder
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

COMMENT_MARKER = '%'
BYTE_ORDER_MARK = '\ufeff'
BANNER = '%%matrixmarket'
WEIGHTED_FIELDS = {'real', 'integer', 'double'}
SUPPORTED_FIELDS = WEIGHTED_FIELDS | {'pattern'}

EdgeTuple = Union[Tuple[int, int], Tuple[int, int, float]]


def _parse_banner(line: str, line_number: int) -> str:
    """Validate the banner line and return its field type."""
    tokens = line.lower().split()
    if len(tokens) < 4 or tokens[1] != 'matrix':
        raise FormatError(f"Malformed Matrix Market banner: {line.strip()!r}", line_number)
    if tokens[2] != 'coordinate':
        raise FormatError(f"Unsupported Matrix Market format {tokens[2]!r}, expected 'coordinate'", line_number)
    if tokens[3] not in SUPPORTED_FIELDS:
        raise FormatError(f"Unsupported Matrix Market field {tokens[3]!r}", line_number)

    symmetry = tokens[4] if len(tokens) > 4 else 'general'
    logger.debug(f"Matrix Market banner: field={tokens[3]} symmetry={symmetry}")
    return tokens[3]


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise FormatError(f"Expected an integer {what}, got {token!r}", line_number) from None


def parse_mtx(lines: Iterable[str]) -> Tuple[int, List[EdgeTuple]]:
    """
    Parse Matrix Market coordinate text into a node count and edge list.

    Args:
        lines: Iterable of text lines

    Returns:
        Tuple of (node_count, edges) where each edge is (a, b) or (a, b, weight)
        with 0-based ids

    Raises:
        FormatError: If the banner, size line or an entry is malformed, or an
            index is out of range
    """
    field = 'pattern'
    at_start = True
    node_count: Optional[int] = None
    declared_nonzeros = 0
    edges: List[EdgeTuple] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip().lstrip(BYTE_ORDER_MARK)
        if not line:
            continue

        first_line, at_start = at_start, False
        if line.startswith(COMMENT_MARKER):
            if first_line and line.lower().startswith(BANNER):
                field = _parse_banner(line, line_number)
            continue

        tokens = line.split()

        if node_count is None:
            if len(tokens) < 3:
                raise FormatError(f"Size line must hold 'rows cols nonzeros', got {line!r}", line_number)
            node_count = _parse_int(tokens[0], 'row count', line_number)
            _parse_int(tokens[1], 'column count', line_number)
            declared_nonzeros = _parse_int(tokens[2], 'nonzero count', line_number)
            if node_count < 0:
                raise FormatError(f"Row count must be non-negative, got {node_count}", line_number)
            continue

        if len(tokens) < 2:
            raise FormatError(f"Entry must hold two indices, got {line!r}", line_number)

        node_a = _parse_int(tokens[0], 'row index', line_number) - 1
        node_b = _parse_int(tokens[1], 'column index', line_number) - 1
        for node_id in (node_a, node_b):
            if not 0 <= node_id < node_count:
                raise FormatError(f"Index {node_id + 1} is outside 1..{node_count}", line_number)

        if field in WEIGHTED_FIELDS:
            if len(tokens) < 3:
                raise FormatError(f"Entry must hold a value for a {field!r} matrix, got {line!r}", line_number)
            try:
                weight = float(tokens[2])
            except ValueError:
                raise FormatError(f"Expected a numeric value, got {tokens[2]!r}", line_number) from None
            edges.append((node_a, node_b, weight))
        else:
            edges.append((node_a, node_b))

    if node_count is None:
        raise FormatError("Missing size line 'rows cols nonzeros'")

    if len(edges) != declared_nonzeros:
        logger.warning(f"Header declares {declared_nonzeros} entries but {len(edges)} were read")

    return node_count, edges


def read_mtx(source: Union[str, os.PathLike, Iterable[str]]) -> GraphStore:
    """
    Load a graph from a Matrix Market coordinate file.

    Args:
        source: Path to an .mtx file, or an iterable of text lines

    Returns:
        Populated GraphStore

    Raises:
        FormatError: If the content is malformed
        OSError: If the file cannot be read
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, 'r', encoding='utf-8-sig') as handle:
                node_count, edges = parse_mtx(handle)
        except UnicodeDecodeError as e:
            raise FormatError(f"{os.fspath(source)} is not valid UTF-8 text: {e.reason}") from e
        logger.info(f"Read {len(edges)} entries from {os.fspath(source)}")
    else:
        node_count, edges = parse_mtx(source)

    return GraphBuilder.from_edges(node_count, edges)
