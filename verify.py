from __future__ import annotations

import math

import networkx as nx

from dijkstra import ShortestPathTree
from graph import Graph


def build_networkx_graph(graph: Graph) -> nx.DiGraph:
    """Mirror the graph as a networkx DiGraph, keeping the cheapest parallel edge."""
    g = nx.DiGraph()
    g.add_nodes_from(vertex.name for vertex in graph.vertices())
    for edge in graph.edges():
        existing = g.get_edge_data(edge.source, edge.target)
        if existing is None or edge.weight < existing["weight"]:
            g.add_edge(edge.source, edge.target, weight=edge.weight)
    return g


def verify_tree(graph: Graph, tree: ShortestPathTree, tol: float = 1e-9) -> int:
    """Explicitly check every distance in tree against networkx's Dijkstra.

    Returns the number of vertices checked.
    """
    expected = nx.single_source_dijkstra_path_length(
        build_networkx_graph(graph), tree.source, weight="weight"
    )

    for name, distance in tree.distances.items():
        if name not in expected:
            if not math.isinf(distance):
                raise RuntimeError(
                    f"Verification failed: {name} is unreachable from {tree.source} "
                    f"but was given distance {distance}."
                )
            continue
        if not math.isclose(distance, expected[name], abs_tol=tol):
            raise RuntimeError(
                "Verification failed: "
                f"distance {tree.source}->{name} is {distance}, expected {expected[name]}."
            )

    return len(tree.distances)
