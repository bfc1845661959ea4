from __future__ import annotations

from typing import List, Optional, Sequence

from dijkstra import ShortestPathTree, dijkstra
from errors import UnknownVertexError
from graph import Edge, Graph, VertexName


def connecting_edge(graph: Graph, origin: VertexName, target: VertexName) -> Edge:
    """Return the edge origin->target that relaxation would have used.

    With parallel edges this is the first one of minimum weight in insertion
    order.
    """
    best: Optional[Edge] = None
    for edge in graph.get_vertex(origin).edges:
        if edge.target != target:
            continue
        if best is None or edge.weight < best.weight:
            best = edge
    if best is None:
        raise RuntimeError(f"Edge {origin}-{target} not present in graph.")
    return best


def path_from_tree(graph: Graph, tree: ShortestPathTree, target: VertexName) -> List[Edge]:
    """Walk parent pointers back from target and return the edges source-first."""
    if not tree.is_reachable(target):
        return []

    path: List[Edge] = []
    current = target
    parent = tree.parents[current]
    while parent is not None:
        path.append(connecting_edge(graph, parent, current))
        current, parent = parent, tree.parents[parent]
    path.reverse()
    return path


def reconstruct_path(
    graph: Graph, source: VertexName, target: VertexName, weights: str = "geometry"
) -> List[Edge]:
    """Shortest path from source to target as an ordered list of edges.

    An unreachable target, or target == source, yields an empty list.
    """
    if target not in graph:
        raise UnknownVertexError(target, context="target vertex")
    tree = dijkstra(graph, source, weights=weights)
    return path_from_tree(graph, tree, target)


def path_cost(path: Sequence[Edge]) -> float:
    total = 0.0
    for edge in path:
        total += edge.weight
    return total


def path_vertices(path: Sequence[Edge], source: VertexName) -> List[VertexName]:
    if not path:
        return [source]
    return [path[0].source] + [edge.target for edge in path]
