"""Micro-benchmark for :meth:`WeightedGraph.shortest_path`.

Run this module as a script to time shortest-path queries on random graphs
and check them against the :mod:`heapq` reference implementation.

Example:
```bash
python -m adjgraph.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import math
import random
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, cast

from .dijkstra import dijkstra_reference
from .generate import random_graph
from .weighted import WeightedGraph


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    n: int
    m: int
    queries: int
    query_ms: float
    reference_ms: float
    max_abs_err: float
    counters: Dict[str, int]


def _err(a: float, b: float) -> float:
    if math.isinf(a) and math.isinf(b):
        return 0.0
    if math.isinf(a) or math.isinf(b):
        return math.inf
    return abs(a - b)


def run_once(n: int, m: int, queries: int = 4, seed: int = 0) -> BenchResult:
    """Time ``queries`` shortest-path calls from ``v0`` on one random graph.

    Args:
        n: Number of vertices.
        m: Number of edges.
        queries: Number of random targets to query.
        seed: Seed for the graph and the choice of targets.

    Returns:
        Timings, summed query counters and the largest absolute difference
        from the reference distances.
    """
    G = cast(WeightedGraph, random_graph(n, m, seed=seed, weighted=True))
    rnd = random.Random(seed)
    source = "v0"
    targets = [f"v{rnd.randrange(n)}" for _ in range(queries)]

    counters: Dict[str, int] = {}
    distances: List[float] = []
    t0 = time.perf_counter()
    for target in targets:
        res = G.shortest_path(source, target)
        distances.append(res.distance)
        for k, v in res.counters.items():
            counters[k] = counters.get(k, 0) + v
    t1 = time.perf_counter()

    ref = dijkstra_reference(G, source)
    t2 = time.perf_counter()

    max_err = 0.0
    for target, d in zip(targets, distances):
        max_err = max(max_err, _err(d, ref.distances[target]))

    return BenchResult(
        n=n,
        m=m,
        queries=queries,
        query_ms=(t1 - t0) * 1000.0,
        reference_ms=(t2 - t1) * 1000.0,
        max_abs_err=max_err,
        counters=counters,
    )


def _p95(values: List[float]) -> float:
    if len(values) > 1:
        return statistics.quantiles(values, n=100, method="inclusive")[94]
    return values[0]


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per size")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,20", "20,40"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--queries", type=int, default=4, help="Targets queried per trial")
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for size in args.sizes:
        try:
            n_str, m_str = size.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size {size!r}")

    rows: List[List[object]] = []
    aggregates: Dict[Tuple[int, int], List[BenchResult]] = {}
    for n, m in sizes:
        for trial in range(args.trials):
            res = run_once(n, m, queries=args.queries, seed=args.seed_base + trial)
            aggregates.setdefault((n, m), []).append(res)
            rows.append(
                [
                    n,
                    m,
                    trial,
                    f"{res.query_ms:.6f}",
                    f"{res.reference_ms:.6f}",
                    res.counters.get("relaxed", 0),
                    res.counters.get("stale", 0),
                    res.max_abs_err,
                ]
            )

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                ["n", "m", "trial", "query_ms", "reference_ms", "relaxed", "stale", "max_abs_err"]
            )
            writer.writerows(rows)

    print(
        f"{'n':>6} {'m':>7} {'relaxed':>10} {'stale':>8}"
        f" {'query_med':>11} {'query_p95':>11} {'ref_med':>11} {'max_err':>9}"
    )
    for (n, m), results in aggregates.items():
        q_times = [r.query_ms for r in results]
        r_times = [r.reference_ms for r in results]
        relaxed = statistics.median(r.counters.get("relaxed", 0) for r in results)
        stale = statistics.median(r.counters.get("stale", 0) for r in results)
        max_err = max(r.max_abs_err for r in results)
        print(
            f"{n:6d} {m:7d} {int(relaxed):10d} {int(stale):8d}"
            f" {statistics.median(q_times):11.2f} {_p95(q_times):11.2f}"
            f" {statistics.median(r_times):11.2f} {max_err:9.2g}"
        )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
