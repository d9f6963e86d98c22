"""Command-line interface for loading graphs and running queries."""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import AdjGraphError, InputError
from .export import AnyGraph, export_graphml, export_json
from .generate import random_graph
from .io import read_graph
from .logger import StdLogger
from .weighted import WeightedGraph

EXIT_OK = 0
EXIT_INPUT = 64
EXIT_INTERNAL = 70

EXAMPLE_CSV = """# u,v,w
A,B,4
A,C,2
B,E,3
C,D,2
C,F,4
D,E,3
D,F,1
E,F,1
"""


def _load(args: argparse.Namespace) -> AnyGraph:
    if args.random:
        return random_graph(args.n, args.m, seed=args.seed, weighted=not args.unweighted)
    p = Path(args.edges)
    if not p.exists():
        raise InputError(f"edges file not found: {args.edges}")
    weighted: Optional[bool] = False if args.unweighted else None
    return read_graph(p, args.format, weighted=weighted)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``adjgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  adjgraph --example > graph.csv\n"
        "  adjgraph --edges graph.csv --path A F\n"
        "  adjgraph --edges graph.csv --bfs A --dfs A --unweighted\n"
        "  adjgraph --random --n 100 --m 300 --path v0 v99\n"
        "  adjgraph --edges graph.csv --export-json force.json\n"
    )
    p = argparse.ArgumentParser(
        prog="adjgraph",
        description="Undirected graph traversal and shortest-path runner",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["csv", "jsonl", "graphml"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument("--unweighted", action="store_true", help="Build an unweighted graph")

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")

    p.add_argument("--bfs", metavar="START", help="Breadth-first search from START")
    p.add_argument("--dfs", metavar="START", help="Recursive depth-first search from START")
    p.add_argument("--dfs-iterative", metavar="START", help="Iterative depth-first search from START")
    p.add_argument("--path", nargs=2, metavar=("START", "FINISH"), help="Shortest path query")

    p.add_argument("--export-json", type=str, default=None, help="Write node/link JSON")
    p.add_argument("--export-graphml", type=str, default=None, help="Write GraphML")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    stream = sys.stdout if args.log_json else sys.stderr
    level = "info" if args.log_json and args.log_level == "warning" else args.log_level
    logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

    try:
        G = _load(args)
        G.logger = logger
        weighted = isinstance(G, WeightedGraph)

        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"graph: vertices={len(G)} edges={G.edge_count()} weighted={weighted}\n"
            )

        out: Dict[str, Any] = {
            "vertices": len(G),
            "edges": G.edge_count(),
            "weighted": weighted,
        }
        if args.bfs is not None:
            out["bfs"] = G.breadth_first_search(args.bfs)
        if args.dfs is not None:
            out["dfs"] = G.depth_first_search_recursive(args.dfs)
        if args.dfs_iterative is not None:
            out["dfs_iterative"] = G.depth_first_search_iterative(args.dfs_iterative)
        if args.path is not None:
            if not isinstance(G, WeightedGraph):
                raise InputError("--path needs a weighted graph")
            res = G.shortest_path(*args.path)
            out["path"] = res.path
            out["distance"] = res.distance if math.isfinite(res.distance) else None

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_json(G))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_graphml(G))

        # With --log-json stdout carries only log lines, so the run event
        # holds the whole summary.
        logger.info("run", **out)
        if not args.log_json:
            print(json.dumps(out))
        return EXIT_OK

    except InputError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_INPUT
    except AdjGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_INPUT


if __name__ == "__main__":
    sys.exit(main())
