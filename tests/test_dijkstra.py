import itertools
import math
import random

import pytest

from dijkstra import INF, ShortestPathTree, dijkstra, prepare_weights, select_closest
from errors import NegativeWeightError, UnknownVertexError
from graph import Graph, Vertex


def triangle_graph():
    return Graph.from_records(
        [("A", 0, 0), ("B", 3, 0), ("C", 3, 4), ("D", 10, 10)],
        [("A", "B", 0.0), ("B", "C", 0.0)],
    )


def brute_force_distances(graph, source):
    """Minimum weight over every simple path, by exhaustive search."""
    best = {vertex.name: INF for vertex in graph.vertices()}

    def walk(name, cost, seen):
        best[name] = min(best[name], cost)
        for edge in graph.get_vertex(name).edges:
            if edge.target not in seen:
                walk(edge.target, cost + edge.weight, seen | {edge.target})

    walk(source, 0.0, {source})
    return best


def random_graph(seed, n_vertices=6, n_edges=10):
    rng = random.Random(seed)
    graph = Graph()
    names = [f"v{i}" for i in range(n_vertices)]
    for name in names:
        graph.add_vertex(Vertex(name, rng.randint(0, 50), rng.randint(0, 50)))
    pairs = list(itertools.permutations(names, 2))
    for a, b in rng.sample(pairs, n_edges):
        graph.add_directed_edge(a, b, rng.randint(0, 20))
    return graph


def test_geometric_scenario():
    tree = dijkstra(triangle_graph(), "A")

    assert tree.distances == {"A": 0.0, "B": 3.0, "C": 7.0, "D": INF}
    assert tree.parents == {"A": None, "B": "A", "C": "B", "D": None}
    assert tree.order == ["A", "B", "C"]
    assert tree.is_reachable("C")
    assert not tree.is_reachable("D")


def test_single_vertex_graph():
    graph = Graph.from_records([("A", 1, 1)])
    tree = dijkstra(graph, "A")
    assert tree.distance_to("A") == 0.0
    assert tree.parents["A"] is None


def test_unknown_source():
    with pytest.raises(UnknownVertexError) as info:
        dijkstra(triangle_graph(), "Z")
    assert str(info.value) == "Unknown source vertex 'Z'."


def test_distance_to_unknown_vertex():
    tree = dijkstra(triangle_graph(), "A")
    with pytest.raises(UnknownVertexError):
        tree.distance_to("Z")


@pytest.mark.parametrize("seed", range(8))
def test_matches_brute_force_on_random_graphs(seed):
    graph = random_graph(seed)
    for source in ("v0", "v3"):
        tree = dijkstra(graph, source, weights="supplied")
        expected = brute_force_distances(graph, source)
        for name, distance in expected.items():
            if math.isinf(distance):
                assert math.isinf(tree.distances[name])
            else:
                assert math.isclose(tree.distances[name], distance)


def test_repeated_runs_are_identical():
    graph = random_graph(42)
    first = dijkstra(graph, "v1", weights="geometry")
    second = dijkstra(graph, "v1", weights="geometry")
    assert first == second


def test_runs_do_not_share_state():
    graph = triangle_graph()
    from_a = dijkstra(graph, "A")
    from_c = dijkstra(graph, "C")

    assert from_a.distances["C"] == 7.0
    assert from_a.parents["C"] == "B"
    assert from_c.distances["A"] == 7.0
    assert from_c.parents["A"] == "B"
    assert from_c.parents["C"] is None


def test_supplied_weights_are_kept():
    graph = Graph.from_records(
        [("A", 0, 0), ("B", 3, 0), ("C", 3, 4)],
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 50.0)],
    )

    assert dijkstra(graph, "A", weights="supplied").distances["C"] == 2.0
    # Geometry mode re-derives weights, making the direct edge the shortest.
    assert dijkstra(graph, "A", weights="geometry").distances["C"] == 5.0


def test_negative_supplied_weight_rejected():
    graph = Graph.from_records([("A", 0, 0), ("B", 3, 0)])
    graph.add_directed_edge("A", "B", -1.0)
    with pytest.raises(NegativeWeightError):
        dijkstra(graph, "A", weights="supplied")
    # The same edge is fine once geometry replaces its weight.
    assert dijkstra(graph, "A").distances["B"] == 3.0


def test_unknown_weight_mode():
    with pytest.raises(ValueError):
        prepare_weights(triangle_graph(), "manhattan")


def test_select_closest_breaks_ties_by_iteration_order():
    distances = {"a": 1.0, "b": 1.0, "c": 0.0}
    assert select_closest(distances, {"c"}) == "a"
    assert select_closest(distances, {"a", "c"}) == "b"
    assert select_closest({"a": INF, "b": INF}, set()) is None
    assert select_closest(distances, {"a", "b", "c"}) is None


def test_tree_is_a_plain_value():
    tree = ShortestPathTree(source="A", distances={"A": 0.0}, parents={"A": None})
    assert tree.order == []
    assert tree.is_reachable("A")
