from __future__ import annotations

from pathlib import Path


class GraphError(ValueError):
    """Raised when a graph is built or queried with inconsistent data."""


class DuplicateVertexError(GraphError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot create new vertex with existing name {name!r}.")
        self.name = name


class UnknownVertexError(GraphError, KeyError):
    def __init__(self, name: str, context: str = "vertex") -> None:
        super().__init__(f"Unknown {context} {name!r}.")
        self.name = name

    # KeyError would otherwise wrap the message in quotes.
    def __str__(self) -> str:
        return self.args[0]


class NegativeWeightError(GraphError):
    def __init__(self, source: str, target: str, weight: float) -> None:
        super().__init__(
            f"Edge {source}->{target} has negative weight {weight}; "
            "shortest paths require non-negative weights."
        )
        self.source = source
        self.target = target
        self.weight = weight


class InputFormatError(ValueError):
    """A record in a vertex or edge file could not be parsed."""

    def __init__(self, path: Path, line_number: int, message: str) -> None:
        super().__init__(f"{path}:{line_number}: {message}")
        self.path = path
        self.line_number = line_number
