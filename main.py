from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from dijkstra import WEIGHT_MODES, dijkstra, prepare_weights
from errors import GraphError, InputFormatError, UnknownVertexError
from graph import Edge
from loader import load_graph
from paths import path_cost, path_from_tree, path_vertices
from verify import verify_tree


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def resolve_settings(args: argparse.Namespace, config: Dict, base_dir: Path) -> Dict:
    """Merge command-line overrides onto the YAML configuration."""
    routing = config.get("routing") or {}
    logging_config = config.get("logging") or {}

    def file_setting(override: Optional[Path], key: str) -> Optional[Path]:
        if override is not None:
            return override
        value = config.get(key)
        if value is None:
            return None
        # Paths in the config are relative to the config file itself.
        return base_dir / value

    return {
        "vertices": file_setting(args.vertices, "vertices"),
        "edges": file_setting(args.edges, "edges"),
        "source": args.source or routing.get("source"),
        "target": args.target or routing.get("target"),
        "weights": args.weights or config.get("weights", "geometry"),
        "log_level": args.log_level or logging_config.get("level", "WARNING"),
    }


def format_path(path: List[Edge]) -> List[str]:
    return [f"  {edge.source} -> {edge.target} ({edge.weight:.2f})" for edge in path]


def print_result(source: str, target: str, path: List[Edge], distance: float) -> None:
    print(f"=== Shortest path {source} -> {target} ===")
    if source == target:
        print(f"{source} is both source and target (distance 0.00).")
        return
    if not path:
        print(f"No path from {source} to {target}.")
        return

    print(f"Route: {' -> '.join(path_vertices(path, source))}")
    for line in format_path(path):
        print(line)
    print(f"Total distance: {distance:.2f} ({len(path)} edges, path sum {path_cost(path):.2f})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute shortest paths between named locations."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file.",
    )
    parser.add_argument("--vertices", type=Path, help="Vertex file with name,x,y lines.")
    parser.add_argument("--edges", type=Path, help="Edge file with nameA,nameB,weight lines.")
    parser.add_argument("--source", help="Name of the start location.")
    parser.add_argument("--target", help="Name of the destination.")
    parser.add_argument(
        "--weights",
        choices=WEIGHT_MODES,
        help="Derive edge weights from coordinates or use the weights in the edge file.",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument(
        "--adjacency",
        action="store_true",
        help="Print the adjacency list of the graph before routing.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check all computed distances against networkx.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config: Dict = {}
    base_dir = Path.cwd()
    if args.config is not None:
        config = load_config(args.config)
        base_dir = args.config.resolve().parent

    settings = resolve_settings(args, config, base_dir)
    missing = [key for key in ("vertices", "edges", "source", "target") if not settings[key]]
    if missing:
        parser.error(f"missing required setting(s): {', '.join(missing)}")
    if settings["weights"] not in WEIGHT_MODES:
        parser.error(f"weights must be one of {', '.join(WEIGHT_MODES)}")

    logging.basicConfig(level=str(settings["log_level"]).upper())

    source, target = settings["source"], settings["target"]
    try:
        graph = load_graph(settings["vertices"], settings["edges"])
        if args.adjacency:
            prepare_weights(graph, settings["weights"])
            print(graph.adjacency_listing())
            print()

        if target not in graph:
            raise UnknownVertexError(target, context="target vertex")
        tree = dijkstra(graph, source, weights=settings["weights"])
        path = path_from_tree(graph, tree, target)
    except (GraphError, InputFormatError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_result(source, target, path, tree.distance_to(target))

    if args.verify:
        checked = verify_tree(graph, tree)
        print(f"Verified {checked} distances against networkx.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
