"""Unweighted undirected graph."""

from __future__ import annotations

from .exceptions import DuplicateEdgeError, DuplicateVertexError
from .graph import AdjacencyGraph, Vertex


class UnweightedGraph(AdjacencyGraph[Vertex]):
    """Undirected graph without edge weights.

    Each vertex maps to the ordered list of its neighbors. Re-adding a vertex
    and re-adding an edge are both rejected; see
    :class:`~adjgraph.weighted.WeightedGraph` for the permissive variant.

    Examples:
        ```python
        >>> g = UnweightedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge("A", "B")
        >>> g.add_edge("A", "C")
        >>> g.breadth_first_search("B")
        ['B', 'A', 'C']
        ```
    """

    def _neighbor(self, entry: Vertex) -> Vertex:
        return entry

    def add_vertex(self, vertex: Vertex) -> None:
        """Add ``vertex`` with an empty neighbor list.

        Raises:
            InputError: If ``vertex`` is not a string.
            DuplicateVertexError: If ``vertex`` already exists. The graph is
                left unchanged.
        """
        self._check_label(vertex)
        if vertex in self._adj:
            self.logger.warning("graph_error", reason="duplicate vertex", vertex=vertex)
            raise DuplicateVertexError(f"vertex {vertex!r} already exists in the graph")
        self._adj[vertex] = []
        self.logger.debug("add_vertex", vertex=vertex)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex`` after severing every incident edge.

        Raises:
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        self._require(vertex)
        neighbors = self._adj[vertex]
        while neighbors:
            # remove_edge rebinds the list, so always re-read it.
            self.remove_edge(vertex, neighbors.pop())
            neighbors = self._adj[vertex]
        del self._adj[vertex]
        self.logger.debug("remove_vertex", vertex=vertex)

    def add_edge(self, a: Vertex, b: Vertex) -> None:
        """Connect ``a`` and ``b``.

        Raises:
            UnknownVertexError: If either endpoint is missing.
            DuplicateEdgeError: If the edge already exists. The graph is left
                unchanged.
        """
        self._require(a, b)
        if b in self._adj[a]:
            self.logger.warning("graph_error", reason="duplicate edge", a=a, b=b)
            raise DuplicateEdgeError(f"edge {a}-{b} already exists in the graph")
        self._adj[a].append(b)
        self._adj[b].append(a)
        self.logger.debug("add_edge", a=a, b=b)

    def remove_edge(self, a: Vertex, b: Vertex) -> None:
        """Disconnect ``a`` and ``b``. Missing edges are ignored.

        Raises:
            UnknownVertexError: If either endpoint is missing.
        """
        self._require(a, b)
        self._adj[a] = [v for v in self._adj[a] if v != b]
        self._adj[b] = [v for v in self._adj[b] if v != a]
        self.logger.debug("remove_edge", a=a, b=b)


__all__ = ["UnweightedGraph"]
