from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from errors import DuplicateVertexError, UnknownVertexError


VertexName = str


@dataclass
class Edge:
    source: VertexName
    target: VertexName
    weight: float

    def __str__(self) -> str:
        return f"{self.source}->{self.target}({self.weight:.2f})"


@dataclass
class Vertex:
    name: VertexName
    x: float
    y: float
    edges: List[Edge] = field(default_factory=list)


class Graph:
    """Directed weighted graph of named locations.

    Vertices are kept in insertion order so runs break ties reproducibly.
    Edges are owned by their source vertex and refer to both endpoints by name.
    """

    def __init__(self) -> None:
        self._vertices: Dict[VertexName, Vertex] = {}

    @classmethod
    def from_records(
        cls,
        vertices: Iterable[Tuple[VertexName, float, float]],
        edges: Iterable[Tuple[VertexName, VertexName, float]] = (),
    ) -> Graph:
        graph = cls()
        for name, x, y in vertices:
            graph.add_vertex(Vertex(name, x, y))
        for origin, target, weight in edges:
            graph.add_undirected_edge(origin, target, float(weight))
        return graph

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def add_vertex(self, vertex: Vertex) -> None:
        if vertex.name in self._vertices:
            raise DuplicateVertexError(vertex.name)
        self._vertices[vertex.name] = vertex

    def get_vertex(self, name: VertexName) -> Vertex:
        try:
            return self._vertices[name]
        except KeyError:
            raise UnknownVertexError(name) from None

    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    def edges(self) -> Iterator[Edge]:
        for vertex in self._vertices.values():
            yield from vertex.edges

    def add_directed_edge(self, source: VertexName, target: VertexName, weight: float) -> Edge:
        for name in (source, target):
            if name not in self._vertices:
                raise UnknownVertexError(name, context="edge endpoint")
        edge = Edge(source, target, float(weight))
        self._vertices[source].edges.append(edge)
        return edge

    def add_undirected_edge(self, a: VertexName, b: VertexName, weight: float) -> None:
        # Not atomic: a failed second insertion leaves the first edge in place.
        self.add_directed_edge(a, b, weight)
        self.add_directed_edge(b, a, weight)

    def adjacency_listing(self) -> str:
        """Render one ``Name -> [ Target(weight) ... ]`` line per vertex."""
        lines: List[str] = []
        for name, vertex in self._vertices.items():
            targets = "".join(f"{edge.target}({edge.weight}) " for edge in vertex.edges)
            lines.append(f"{name} -> [ {targets}]")
        return "\n".join(lines)
