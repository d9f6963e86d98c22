"""Seeded random graph generation for experiments and benchmarks."""

from __future__ import annotations

import random

from .exceptions import InputError
from .export import AnyGraph
from .unweighted import UnweightedGraph
from .weighted import WeightedGraph


def random_graph(
    n: int,
    m: int,
    seed: int = 0,
    weighted: bool = True,
    w_max: float = 10.0,
) -> AnyGraph:
    """Generate a random undirected graph on vertices ``v0`` .. ``v{n-1}``.

    Self loops are never drawn. Unweighted graphs receive ``m`` distinct
    edges, capped at the number of vertex pairs; weighted graphs receive
    exactly ``m`` edges, possibly parallel, with weights uniform in
    ``[0, w_max)``.

    Args:
        n: Number of vertices.
        m: Number of edges.
        seed: Seed for :class:`random.Random`.
        weighted: Build a :class:`WeightedGraph` instead of an
            :class:`UnweightedGraph`.
        w_max: Exclusive upper bound on edge weights.

    Raises:
        InputError: If ``n`` is not positive, ``m`` is negative or
            ``w_max`` is negative.
    """
    if n <= 0:
        raise InputError("n must be a positive integer.")
    if m < 0:
        raise InputError("m must be non-negative.")
    if w_max < 0:
        raise InputError("w_max must be non-negative.")
    rnd = random.Random(seed)
    labels = [f"v{i}" for i in range(n)]
    if n < 2:
        m = 0

    if weighted:
        wg = WeightedGraph()
        for v in labels:
            wg.add_vertex(v)
        for _ in range(m):
            a, b = rnd.sample(labels, 2)
            wg.add_edge(a, b, rnd.random() * w_max)
        return wg

    ug = UnweightedGraph()
    for v in labels:
        ug.add_vertex(v)
    target = min(m, n * (n - 1) // 2)
    added = 0
    while added < target:
        a, b = rnd.sample(labels, 2)
        if not ug.has_edge(a, b):
            ug.add_edge(a, b)
            added += 1
    return ug


__all__ = ["random_graph"]
