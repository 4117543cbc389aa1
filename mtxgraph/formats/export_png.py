"""
Raster rendering of a graph with a random, approximately non-overlapping layout.

Nodes are placed by rejection sampling inside a margin, edges are drawn as
lines and nodes as labelled circles, and the figure is written as a PNG.
"""

import os
import logging
from typing import Dict, Iterable, Optional, Tuple, Union

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from ..classes.exceptions import InvalidArgumentError
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1500
DEFAULT_HEIGHT = 1500
DEFAULT_MARGIN = 200
DEFAULT_MIN_SEPARATION = 100
DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_NODE_DIAMETER = 40
DEFAULT_FILENAME = 'graphe.png'


class RenderSettings:
    """Canvas geometry and styling used by the renderer."""

    def __init__(self,
                 width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT,
                 margin: int = DEFAULT_MARGIN,
                 min_separation: float = DEFAULT_MIN_SEPARATION,
                 max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                 node_diameter: int = DEFAULT_NODE_DIAMETER,
                 dpi: int = 100,
                 background_color: str = 'white',
                 edge_color: str = 'gray',
                 edge_alpha: float = 150 / 255,
                 edge_width: float = 1.5,
                 node_color: str = 'steelblue',
                 shadow_color: str = 'darkgray',
                 shadow_offset: int = 3,
                 label_color: str = 'white',
                 font_size: float = 12):
        if width - 2 * margin <= 0 or height - 2 * margin <= 0:
            raise InvalidArgumentError(
                f"Margin {margin} leaves no drawable area on a {width}x{height} canvas")
        if max_attempts < 1:
            raise InvalidArgumentError(f"max_attempts must be at least 1, got {max_attempts}")

        self.width = width
        self.height = height
        self.margin = margin
        self.min_separation = min_separation
        self.max_attempts = max_attempts
        self.node_diameter = node_diameter
        self.dpi = dpi
        self.background_color = background_color
        self.edge_color = edge_color
        self.edge_alpha = edge_alpha
        self.edge_width = edge_width
        self.node_color = node_color
        self.shadow_color = shadow_color
        self.shadow_offset = shadow_offset
        self.label_color = label_color
        self.font_size = font_size


def compute_layout(node_ids: Iterable[int],
                   settings: Optional[RenderSettings] = None,
                   rng: Optional[np.random.Generator] = None) -> Dict[int, Tuple[int, int]]:
    """
    Place nodes at random integer positions inside the canvas margin.

    Each node is re-sampled up to ``settings.max_attempts`` times until it
    lies at least ``settings.min_separation`` away from every node already
    placed. When the budget runs out the last sample is kept.

    Args:
        node_ids: Nodes to place
        settings: Canvas settings, defaults to RenderSettings()
        rng: numpy random generator, defaults to an unseeded one

    Returns:
        Dictionary mapping node id -> (x, y) pixel position
    """
    settings = settings or RenderSettings()
    rng = rng if rng is not None else np.random.default_rng()

    positions: Dict[int, Tuple[int, int]] = {}
    placed = np.empty((0, 2), dtype=float)
    crowded = 0

    for node_id in node_ids:
        for _ in range(settings.max_attempts):
            candidate = np.array([
                rng.integers(settings.margin, settings.width - settings.margin),
                rng.integers(settings.margin, settings.height - settings.margin),
            ])
            if len(placed) == 0:
                break
            distances = np.hypot(*(placed - candidate).T)
            if distances.min() >= settings.min_separation:
                break
        else:
            crowded += 1

        positions[node_id] = (int(candidate[0]), int(candidate[1]))
        placed = np.vstack([placed, candidate])

    if crowded:
        logger.warning(f"{crowded} nodes placed closer than {settings.min_separation}px after "
                       f"{settings.max_attempts} attempts")

    return positions


def draw_graph(graph: GraphStore,
               positions: Dict[int, Tuple[int, int]],
               settings: Optional[RenderSettings] = None) -> Figure:
    """
    Draw edges and labelled nodes on a new figure.

    Args:
        graph: Graph to draw
        positions: Pixel position of every node
        settings: Canvas settings

    Returns:
        matplotlib Figure sized to the canvas
    """
    settings = settings or RenderSettings()

    fig = Figure(figsize=(settings.width / settings.dpi, settings.height / settings.dpi),
                 dpi=settings.dpi, facecolor=settings.background_color)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, settings.width)
    ax.set_ylim(settings.height, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    for edge in graph.edges:
        x1, y1 = positions[edge.node_a]
        x2, y2 = positions[edge.node_b]
        ax.plot([x1, x2], [y1, y2], color=settings.edge_color, alpha=settings.edge_alpha,
                linewidth=settings.edge_width, zorder=1)

    radius = settings.node_diameter / 2
    for node in graph.nodes:
        x, y = positions[node.node_id]
        ax.add_patch(Circle((x + settings.shadow_offset, y + settings.shadow_offset), radius,
                            facecolor=settings.shadow_color, edgecolor='none', zorder=2))
        ax.add_patch(Circle((x, y), radius,
                            facecolor=settings.node_color, edgecolor='none', zorder=3))
        ax.text(x, y, str(node.node_id), color=settings.label_color, fontsize=settings.font_size,
                fontweight='bold', fontfamily='sans-serif', ha='center', va='center', zorder=4)

    return fig


def export_graph_to_png(graph: GraphStore,
                        sFilename_out: Union[str, os.PathLike] = DEFAULT_FILENAME,
                        settings: Optional[RenderSettings] = None,
                        seed: Optional[int] = None) -> str:
    """
    Render the graph to a PNG image.

    Args:
        graph: Graph to render
        sFilename_out: Output image path
        settings: Canvas settings, defaults to RenderSettings()
        seed: Optional seed for a reproducible layout

    Returns:
        Path of the written image
    """
    settings = settings or RenderSettings()
    rng = np.random.default_rng(seed)

    positions = compute_layout(range(graph.node_count), settings, rng)
    fig = draw_graph(graph, positions, settings)
    fig.savefig(sFilename_out, format='png', dpi=settings.dpi, facecolor=settings.background_color)

    sFilename_out = os.fspath(sFilename_out)
    logger.info(f"Graph image saved to {sFilename_out}")
    return sFilename_out
