"""Adjacency-list storage and traversals shared by both graph types."""

from __future__ import annotations

from collections import Counter, deque
from typing import (
    Any,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from .exceptions import InputError, UnknownVertexError
from .logger import Logger, NoopLogger

Vertex = str
Float = float
NodeRecord = Dict[str, Any]
LinkRecord = Dict[str, Any]
GraphData = Dict[str, List[Dict[str, Any]]]

E = TypeVar("E")


class AdjacencyGraph(Generic[E]):
    """Undirected graph stored as ``vertex -> list of adjacency entries``.

    Subclasses decide what an adjacency entry is (a bare neighbor id or a
    ``(neighbor, weight)`` pair) and implement the mutating operations. This
    class provides lookups, traversals and the node half of the export.

    The adjacency relation is kept symmetric by every mutation: ``b`` is in
    ``a``'s list exactly as often as ``a`` is in ``b``'s.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._adj: Dict[Vertex, List[E]] = {}
        self.logger: Logger = logger or NoopLogger()

    # ---- hooks --------------------------------------------------------

    def _neighbor(self, entry: E) -> Vertex:
        """Return the neighbor id stored in an adjacency entry."""
        raise NotImplementedError

    def _entry_weight(self, entry: E) -> Optional[Float]:
        """Return the weight stored in an adjacency entry, if any."""
        return None

    # ---- validation ---------------------------------------------------

    def _check_label(self, vertex: object) -> None:
        if not isinstance(vertex, str):
            self.logger.warning("graph_error", reason="non-string vertex", vertex=repr(vertex))
            raise InputError(f"vertex ids must be strings, got {type(vertex).__name__}")

    def _require(self, *vertices: Vertex) -> None:
        for v in vertices:
            if v not in self._adj:
                self.logger.warning("graph_error", reason="unknown vertex", vertex=v)
                raise UnknownVertexError(v)

    # ---- read API -----------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adj)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._adj)

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Return a copy of ``vertex``'s neighbor ids in adjacency order.

        Raises:
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        self._require(vertex)
        return [self._neighbor(e) for e in self._adj[vertex]]

    def degree(self, vertex: Vertex) -> int:
        self._require(vertex)
        return len(self._adj[vertex])

    def has_edge(self, a: Vertex, b: Vertex) -> bool:
        """Return ``True`` if ``a`` and ``b`` exist and are adjacent."""
        if a not in self._adj or b not in self._adj:
            return False
        return any(self._neighbor(e) == b for e in self._adj[a])

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, Optional[Float]]]:
        """Yield every undirected edge once as ``(a, b, weight)``.

        Edges come out in the order their first endpoint is reached while
        scanning the adjacency lists. ``weight`` is ``None`` for unweighted
        graphs. Parallel weighted edges are yielded once each.
        """
        pending: Counter[Tuple[Vertex, Vertex, Optional[Float]]] = Counter()
        for a, entries in self._adj.items():
            for entry in entries:
                b = self._neighbor(entry)
                w = self._entry_weight(entry)
                mirror = (b, a, w)
                if pending[mirror] > 0:
                    pending[mirror] -= 1
                    continue
                pending[(a, b, w)] += 1
                yield a, b, w

    def edge_count(self) -> int:
        """Return the number of undirected edges."""
        return sum(1 for _ in self.edges())

    # ---- traversals ---------------------------------------------------

    def depth_first_search_recursive(self, start: Vertex) -> List[Vertex]:
        """Return vertices reachable from ``start`` in depth-first pre-order.

        Each neighbor is explored completely before the next one in the
        adjacency list is considered, as in the textbook recursive DFS. The
        recursion is unrolled onto an explicit frame stack so long paths do
        not hit the interpreter's recursion limit.

        Raises:
            UnknownVertexError: If ``start`` is not in the graph.
        """
        self._require(start)
        visited: Set[Vertex] = set()
        result: List[Vertex] = []
        self._dfs_visit(start, visited, result)
        self.logger.debug("dfs_recursive", start=start, visited=len(result))
        return result

    def _dfs_visit(self, vertex: Vertex, visited: Set[Vertex], result: List[Vertex]) -> None:
        visited.add(vertex)
        result.append(vertex)
        frames = [iter(self._adj[vertex])]
        while frames:
            for entry in frames[-1]:
                neighbor = self._neighbor(entry)
                if neighbor not in visited:
                    visited.add(neighbor)
                    result.append(neighbor)
                    frames.append(iter(self._adj[neighbor]))
                    break
            else:
                frames.pop()

    def depth_first_search_iterative(self, start: Vertex) -> List[Vertex]:
        """Return vertices reachable from ``start`` using an explicit stack.

        Vertices are marked visited when pushed, and all unvisited neighbors
        of a popped vertex are pushed in adjacency order, so the neighbor
        pushed last is explored first. For branching graphs this order can
        differ from :meth:`depth_first_search_recursive`.

        Raises:
            UnknownVertexError: If ``start`` is not in the graph.
        """
        self._require(start)
        stack: List[Vertex] = [start]
        visited: Set[Vertex] = {start}
        result: List[Vertex] = []
        while stack:
            current = stack.pop()
            result.append(current)
            for entry in self._adj[current]:
                neighbor = self._neighbor(entry)
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        self.logger.debug("dfs_iterative", start=start, visited=len(result))
        return result

    def breadth_first_search(self, start: Vertex) -> List[Vertex]:
        """Return vertices reachable from ``start`` in breadth-first order.

        Raises:
            UnknownVertexError: If ``start`` is not in the graph.
        """
        self._require(start)
        queue = deque([start])
        visited: Set[Vertex] = {start}
        result: List[Vertex] = []
        while queue:
            current = queue.popleft()
            result.append(current)
            for entry in self._adj[current]:
                neighbor = self._neighbor(entry)
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        self.logger.debug("bfs", start=start, visited=len(result))
        return result

    # ---- export -------------------------------------------------------

    def _link(self, source: Vertex, entry: E) -> LinkRecord:
        return {"source": source, "target": self._neighbor(entry)}

    def export(self) -> GraphData:
        """Return ``{"nodes": [...], "links": [...]}`` for a graph renderer.

        There is one node record ``{"id": v}`` per vertex and one link
        record per adjacency-list occurrence, so every undirected edge
        appears twice, once from each endpoint. Consumers that need each
        edge once should use :meth:`edges` instead.
        """
        nodes: List[NodeRecord] = [{"id": v} for v in self._adj]
        links: List[LinkRecord] = []
        for source, entries in self._adj.items():
            for entry in entries:
                links.append(self._link(source, entry))
        return {"nodes": nodes, "links": links}


__all__ = ["AdjacencyGraph", "Vertex", "Float", "GraphData"]
