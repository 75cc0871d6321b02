#!/usr/bin/env python3
"""
Path Finder CLI - run a graph search from the command line.

Usage:
    python scripts/run_search.py --graph simple --start A --end D
    python scripts/run_search.py --graph cities --start A --end D --algorithm astar
    python scripts/run_search.py --graph complex --start A --end H --algorithm all
    python scripts/run_search.py --file data/campus.json --start gate --end library
    python scripts/run_search.py --list

Algorithms:
    dijkstra - Weighted shortest path (default)
    astar    - A* with straight-line distance heuristic
    bfs      - Fewest edges, ignores weights
    dfs      - Depth first, any path
    all      - Run all four and compare
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathviz.algorithms import ALGORITHM_NAMES, available_algorithms, run_algorithm  # noqa: E402
from pathviz.config import DEFAULT_SAMPLE_GRAPH, LOG_DATEFMT, LOG_FORMAT  # noqa: E402
from pathviz.data import GraphFileError, get_sample_graph, list_sample_graphs, load_graph  # noqa: E402
from pathviz.graph.model import Graph, GraphIntegrityError, UnknownNodeError  # noqa: E402
from pathviz.session import describe_result, format_distance  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a shortest-path search on a sample or file graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--graph",
        type=str,
        default=DEFAULT_SAMPLE_GRAPH,
        help=f"Built-in sample graph name (default: {DEFAULT_SAMPLE_GRAPH})",
    )
    source.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Load the graph from a .json or .msgpack file",
    )
    parser.add_argument("--start", type=str, help="Start node id")
    parser.add_argument("--end", type=str, help="End node id")
    parser.add_argument(
        "--algorithm",
        type=str,
        default="dijkstra",
        choices=available_algorithms() + ["all"],
        help="Algorithm to run, or 'all' to compare (default: dijkstra)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List sample graphs and their nodes, then exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_samples() -> None:
    for name in list_sample_graphs():
        graph = get_sample_graph(name)
        nodes = ", ".join(f"{n.id}={n.label}" for n in graph.nodes)
        print(f"  {name:<8} {len(graph.nodes)} nodes, {len(graph.edges)} edges: {nodes}")


def print_result(graph: Graph, algorithm: str, result) -> None:
    print(f"\n{ALGORITHM_NAMES[algorithm]}")
    print("-" * 60)
    print(f"  {describe_result(result)}")
    if result.found:
        print(f"  Path:     {' -> '.join(graph.label_of(n) for n in result.path)}")
        print(f"  Edges:    {result.edge_count}")
        print(f"  Distance: {format_distance(result.distance)}")
    print(f"  Visited:  {' '.join(result.visited_order) or '(none)'}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.list:
        print("Sample graphs:")
        print_samples()
        return 0

    if not args.start or not args.end:
        print("Error: --start and --end are required (use --list to see node ids)", file=sys.stderr)
        return 1

    try:
        graph = load_graph(args.file) if args.file else get_sample_graph(args.graph)
    except (FileNotFoundError, GraphFileError, GraphIntegrityError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    algorithms = available_algorithms() if args.algorithm == "all" else [args.algorithm]

    print("=" * 60)
    print(f"  Graph: {args.file or args.graph} ({len(graph.nodes)} nodes, {len(graph.edges)} edges)")
    print(f"  Start: {graph.label_of(args.start)} ({args.start})")
    print(f"  End:   {graph.label_of(args.end)} ({args.end})")
    print("=" * 60)

    found_any = False
    for algorithm in algorithms:
        try:
            result = run_algorithm(algorithm, graph, args.start, args.end, strict=True)
        except UnknownNodeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print_result(graph, algorithm, result)
        found_any = found_any or result.found

    return 0 if found_any else 1


if __name__ == "__main__":
    sys.exit(main())
