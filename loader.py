from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Tuple, TypeVar

from errors import InputFormatError
from graph import Graph


logger = logging.getLogger(__name__)

T = TypeVar("T")

VertexRecord = Tuple[str, int, int]
EdgeRecord = Tuple[str, str, float]


def _records(path: Path) -> Iterator[Tuple[int, List[str]]]:
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            parts = [part.strip() for part in line.split(",")]
            if len(parts) != 3:
                raise InputFormatError(path, line_number, f"Invalid line {line.rstrip()!r}")
            yield line_number, parts


def _number(path: Path, line_number: int, value: str, convert: Callable[[str], T]) -> T:
    try:
        return convert(value)
    except ValueError:
        raise InputFormatError(path, line_number, f"Invalid number {value!r}") from None


def read_vertices(path: Path) -> List[VertexRecord]:
    """Read ``name,x,y`` records with integer coordinates."""
    path = Path(path)
    return [
        (name, _number(path, line_number, x, int), _number(path, line_number, y, int))
        for line_number, (name, x, y) in _records(path)
    ]


def read_edges(path: Path) -> List[EdgeRecord]:
    """Read ``nameA,nameB,weight`` records describing undirected edges."""
    path = Path(path)
    return [
        (a, b, _number(path, line_number, weight, float))
        for line_number, (a, b, weight) in _records(path)
    ]


def load_graph(vertex_path: Path, edge_path: Path) -> Graph:
    vertices = read_vertices(vertex_path)
    edges = read_edges(edge_path)
    graph = Graph.from_records(vertices, edges)
    logger.info("Loaded %d vertices and %d undirected edges", len(vertices), len(edges))
    return graph
