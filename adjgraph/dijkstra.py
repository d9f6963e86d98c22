"""Reference Dijkstra implementation used by tests and benchmarks."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .exceptions import UnknownVertexError
from .graph import Float, Vertex
from .weighted import WeightedGraph


@dataclass(frozen=True)
class DijkstraResult:
    """Distances and predecessors for every vertex of a graph."""

    distances: Dict[Vertex, Float]
    predecessors: Dict[Vertex, Optional[Vertex]]


def dijkstra_reference(G: WeightedGraph, source: Vertex) -> DijkstraResult:
    """Run single-source Dijkstra with :mod:`heapq` and lazy deletion.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        Distances (``inf`` for unreachable vertices) and predecessors from
        ``source`` to every vertex.

    Raises:
        UnknownVertexError: If ``source`` is not in the graph.
    """
    if source not in G:
        raise UnknownVertexError(source)
    dist: Dict[Vertex, Float] = {v: math.inf for v in G}
    pred: Dict[Vertex, Optional[Vertex]] = {v: None for v in G}
    dist[source] = 0.0
    pq: List[Tuple[Float, int, Vertex]] = [(0.0, 0, source)]
    # Equal distances pop in push order.
    pushed = 1
    seen: Set[Vertex] = set()
    while pq:
        d, _, u = heapq.heappop(pq)
        if d != dist[u] or u in seen:
            continue
        seen.add(u)
        for v, w in G.incident(u):
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                pred[v] = u
                heapq.heappush(pq, (nd, pushed, v))
                pushed += 1
    return DijkstraResult(distances=dist, predecessors=pred)


__all__ = ["DijkstraResult", "dijkstra_reference"]
