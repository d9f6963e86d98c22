"""Weighted undirected graph with Dijkstra shortest paths."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import AdjacencyGraph, Float, LinkRecord, Vertex
from .path import reconstruct_path
from .priority_queue import PriorityQueue

WeightedEntry = Tuple[Vertex, Float]


@dataclass(frozen=True)
class PathResult:
    """Outcome of a single shortest-path query.

    Attributes:
        path: Vertices from start to finish inclusive, or ``[]`` when the
            finish vertex is unreachable.
        distance: Total weight of ``path`` (``inf`` when unreachable).
        counters: Queue and relaxation counts collected during the query.
    """

    path: List[Vertex]
    distance: Float
    counters: Dict[str, int] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return bool(self.path)


class WeightedGraph(AdjacencyGraph[WeightedEntry]):
    """Undirected graph with non-negative edge weights.

    Unlike :class:`~adjgraph.unweighted.UnweightedGraph`, adding an existing
    vertex is a silent no-op and parallel edges between the same pair are
    kept side by side.
    """

    def _neighbor(self, entry: WeightedEntry) -> Vertex:
        return entry[0]

    def _entry_weight(self, entry: WeightedEntry) -> Optional[Float]:
        return entry[1]

    def _link(self, source: Vertex, entry: WeightedEntry) -> LinkRecord:
        return {"source": source, "target": entry[0], "value": entry[1]}

    # ---- mutation -----------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Add ``vertex`` if it is not already present.

        Raises:
            InputError: If ``vertex`` is not a string.
        """
        self._check_label(vertex)
        if vertex not in self._adj:
            self._adj[vertex] = []
            self.logger.debug("add_vertex", vertex=vertex)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex`` and every edge incident to it.

        Raises:
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        self._require(vertex)
        for neighbor in {n for n, _ in self._adj[vertex]}:
            self._adj[neighbor] = [e for e in self._adj[neighbor] if e[0] != vertex]
        del self._adj[vertex]
        self.logger.debug("remove_vertex", vertex=vertex)

    def add_edge(self, a: Vertex, b: Vertex, weight: Float) -> None:
        """Connect ``a`` and ``b`` with an edge of the given weight.

        No duplicate check is made: calling this twice for the same pair
        leaves two parallel edges.

        Raises:
            UnknownVertexError: If either endpoint is missing.
            GraphFormatError: If ``weight`` is not a number, is NaN or is
                negative.

        Examples:
            ```python
            >>> g = WeightedGraph()
            >>> g.add_vertex("A"); g.add_vertex("B")
            >>> g.add_edge("A", "B", 1.5)
            >>> g.export()["links"]
            [{'source': 'A', 'target': 'B', 'value': 1.5}, {'source': 'B', 'target': 'A', 'value': 1.5}]
            ```
        """
        self._require(a, b)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            self.logger.warning("graph_error", reason="non-numeric weight", a=a, b=b)
            raise GraphFormatError(f"non-numeric weight {weight!r} on edge ({a}, {b})")
        if math.isnan(weight) or weight < 0:
            self.logger.warning("graph_error", reason="invalid weight", a=a, b=b, weight=weight)
            raise GraphFormatError(f"invalid weight {weight} on edge ({a}, {b})")
        w = float(weight)
        self._adj[a].append((b, w))
        self._adj[b].append((a, w))
        self.logger.debug("add_edge", a=a, b=b, weight=w)

    def remove_edge(self, a: Vertex, b: Vertex) -> None:
        """Remove every edge between ``a`` and ``b``. Missing edges are ignored.

        Raises:
            UnknownVertexError: If either endpoint is missing.
        """
        self._require(a, b)
        self._adj[a] = [e for e in self._adj[a] if e[0] != b]
        self._adj[b] = [e for e in self._adj[b] if e[0] != a]
        self.logger.debug("remove_edge", a=a, b=b)

    def incident(self, vertex: Vertex) -> List[WeightedEntry]:
        """Return a copy of ``vertex``'s ``(neighbor, weight)`` entries."""
        self._require(vertex)
        return list(self._adj[vertex])

    def weights(self, a: Vertex, b: Vertex) -> List[Float]:
        """Return the weights of all edges between ``a`` and ``b``."""
        self._require(a, b)
        return [w for n, w in self._adj[a] if n == b]

    # ---- queries ------------------------------------------------------

    def shortest_path(self, start: Vertex, finish: Vertex) -> PathResult:
        """Return the lightest path from ``start`` to ``finish``.

        Dijkstra's algorithm over :class:`~adjgraph.priority_queue.PriorityQueue`.
        Every vertex is enqueued up front with its initial distance. An
        improved distance is enqueued again rather than decreased in place,
        so a vertex can be dequeued more than once; entries whose priority
        exceeds the vertex's current distance are skipped. The search stops
        as soon as ``finish`` is dequeued.

        Args:
            start: Source vertex.
            finish: Target vertex.

        Returns:
            A :class:`PathResult`. When ``finish`` is not connected to
            ``start`` the result has an empty path and infinite distance.

        Raises:
            UnknownVertexError: If either vertex is missing.
        """
        self._require(start, finish)
        counters = {"enqueued": 0, "dequeued": 0, "relaxed": 0, "stale": 0}
        frontier: PriorityQueue[Vertex] = PriorityQueue()
        distances: Dict[Vertex, Float] = {}
        previous: Dict[Vertex, Optional[Vertex]] = {}

        for vertex in self._adj:
            distances[vertex] = 0.0 if vertex == start else math.inf
            previous[vertex] = None
            frontier.enqueue(vertex, distances[vertex])
            counters["enqueued"] += 1

        reached = False
        while frontier:
            entry = frontier.dequeue()
            counters["dequeued"] += 1
            u = entry.value
            du = distances[u]
            if entry.priority > du:
                counters["stale"] += 1
                continue
            if du == math.inf:
                # Everything left in the queue is disconnected from start.
                break
            if u == finish:
                reached = True
                break
            for v, w in self._adj[u]:
                counters["relaxed"] += 1
                candidate = du + w
                if candidate < distances[v]:
                    distances[v] = candidate
                    previous[v] = u
                    frontier.enqueue(v, candidate)
                    counters["enqueued"] += 1

        if reached:
            result = PathResult(
                path=reconstruct_path(previous, start, finish),
                distance=distances[finish],
                counters=counters,
            )
        else:
            result = PathResult(path=[], distance=math.inf, counters=counters)
        self.logger.info(
            "shortest_path",
            start=start,
            finish=finish,
            found=result.found,
            distance=result.distance,
            **counters,
        )
        return result


__all__ = ["PathResult", "WeightedGraph"]
