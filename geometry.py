from __future__ import annotations

import logging
import math
from typing import Tuple

from graph import Graph


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def euclidean_distance(p1: Point, p2: Point) -> float:
    """Straight-line distance between two 2-D points."""
    (x1, y1), (x2, y2) = p1, p2
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def compute_all_edge_weights(graph: Graph) -> int:
    """Overwrite every edge weight with the distance between its endpoints.

    Returns the number of edges updated.
    """
    updated = 0
    for edge in graph.edges():
        source = graph.get_vertex(edge.source)
        target = graph.get_vertex(edge.target)
        edge.weight = euclidean_distance((source.x, source.y), (target.x, target.y))
        updated += 1
    logger.debug("Derived %d edge weights from coordinates", updated)
    return updated
