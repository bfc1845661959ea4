from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from errors import NegativeWeightError, UnknownVertexError
from geometry import compute_all_edge_weights
from graph import Graph, VertexName


logger = logging.getLogger(__name__)

INF = math.inf
WEIGHT_MODES = ("geometry", "supplied")


@dataclass
class ShortestPathTree:
    """Result of one single-source run.

    distances[v] is the shortest distance from source to v (``INF`` when v is
    unreachable) and parents[v] is the vertex preceding v on that path, or
    ``None`` for the source and for unreachable vertices.
    """

    source: VertexName
    distances: Dict[VertexName, float]
    parents: Dict[VertexName, Optional[VertexName]]
    order: List[VertexName] = field(default_factory=list)

    def distance_to(self, name: VertexName) -> float:
        try:
            return self.distances[name]
        except KeyError:
            raise UnknownVertexError(name, context="target vertex") from None

    def is_reachable(self, name: VertexName) -> bool:
        return self.distance_to(name) != INF


def prepare_weights(graph: Graph, weights: str = "geometry") -> None:
    """Bring edge weights into the state a run expects for the given mode."""
    if weights not in WEIGHT_MODES:
        raise ValueError(
            f"Unknown weight mode {weights!r}; expected one of {', '.join(WEIGHT_MODES)}."
        )
    if weights == "geometry":
        compute_all_edge_weights(graph)
        return

    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(edge.source, edge.target, edge.weight)


def select_closest(
    distances: Dict[VertexName, float], finalized: Set[VertexName]
) -> Optional[VertexName]:
    """Linear scan for the unfinalized vertex with the smallest finite distance.

    Ties go to the vertex met first in iteration order. Returns None once
    every remaining vertex is unreachable.
    """
    closest: Optional[VertexName] = None
    closest_distance = INF
    for name, distance in distances.items():
        if name in finalized:
            continue
        if distance < closest_distance:
            closest = name
            closest_distance = distance
    return closest


def dijkstra(graph: Graph, source: VertexName, weights: str = "geometry") -> ShortestPathTree:
    """Compute shortest distances and parent pointers from ``source``.

    Every call works on a fresh ShortestPathTree, so runs from different
    sources never share state. In ``"geometry"`` mode the edge weights are
    re-derived from coordinates first.
    """
    if source not in graph:
        raise UnknownVertexError(source, context="source vertex")
    prepare_weights(graph, weights)

    distances: Dict[VertexName, float] = {vertex.name: INF for vertex in graph.vertices()}
    parents: Dict[VertexName, Optional[VertexName]] = {name: None for name in distances}
    finalized: Set[VertexName] = set()
    tree = ShortestPathTree(source=source, distances=distances, parents=parents)
    distances[source] = 0.0

    while len(finalized) < len(distances):
        u = select_closest(distances, finalized)
        if u is None:
            # Everything left is unreachable and keeps an infinite distance.
            break

        finalized.add(u)
        tree.order.append(u)
        distance_u = distances[u]

        for edge in graph.get_vertex(u).edges:
            if edge.target in finalized:
                continue
            candidate = distance_u + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                parents[edge.target] = u

    logger.debug(
        "Dijkstra from %s finalized %d of %d vertices", source, len(finalized), len(distances)
    )
    return tree
