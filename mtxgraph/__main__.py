#!/usr/bin/env python3
"""
Command line report for a Matrix Market graph.

Usage:
    python -m mtxgraph soc-karate.mtx
    python -m mtxgraph soc-karate.mtx --output karate.png --seed 7 --show-matrix
"""

import argparse
import logging
import sys
from typing import List, Optional

from .classes.exceptions import MtxGraphError
from .classes.utils import format_path
from .core.mtxgraph import pymtxgraph
from .formats.export_png import DEFAULT_FILENAME

logger = logging.getLogger('mtxgraph')


def setup_logging(level: str = 'WARNING'):
    """Configure logging for the command line run."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # matplotlib is chatty at DEBUG
    logging.getLogger('matplotlib').setLevel(max(log_level, logging.INFO))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mtxgraph',
        description='Load a Matrix Market coordinate file and report on the graph it describes.'
    )
    parser.add_argument('path', help='Matrix Market (.mtx) file to load')
    parser.add_argument('--output', '-o', default=DEFAULT_FILENAME,
                        help=f'PNG file to write (default: {DEFAULT_FILENAME})')
    parser.add_argument('--start', type=int, default=0, help='start node for BFS and DFS (default: 0)')
    parser.add_argument('--seed', type=int, default=None, help='seed for a reproducible layout')
    parser.add_argument('--show-matrix', action='store_true', help='print the adjacency matrix')
    parser.add_argument('--no-render', action='store_true', help='skip writing the image')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='logging level')
    return parser


def run(args: argparse.Namespace) -> int:
    graph = pymtxgraph.from_mtx(args.path)

    print("=== Graph properties ===")
    print(graph.describe())

    if args.show_matrix:
        print("\n=== Adjacency matrix ===")
        print(graph.format_adjacency_matrix())

    print("\n=== Adjacency list ===")
    print(graph.format_adjacency_list())

    if graph.node_count > 0:
        print(f"\n=== Breadth-first traversal from {args.start} ===")
        print(format_path(graph.breadth_first(args.start)))

        print(f"\n=== Depth-first traversal from {args.start} ===")
        print(format_path(graph.depth_first(args.start)))

    print("\n=== Cycle detection ===")
    if graph.contains_cycle():
        print("The graph contains at least one cycle.")
    else:
        print("No cycle detected in the graph.")

    if not args.no_render:
        sFilename_out = graph.export_to_png(args.output, seed=args.seed)
        print(f"\nGraph image saved to '{sFilename_out}'.")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        return run(args)
    except (MtxGraphError, OSError) as e:
        logger.error(f"{args.path}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
