"""Export helpers for handing graphs to renderers and other libraries."""

from __future__ import annotations

import json
from typing import List, Tuple, Union
from xml.sax.saxutils import quoteattr

import networkx as nx
import numpy as np
import numpy.typing as npt

from .graph import Vertex
from .unweighted import UnweightedGraph
from .weighted import WeightedGraph

AnyGraph = Union[UnweightedGraph, WeightedGraph]


def export_json(G: AnyGraph, indent: int | None = None) -> str:
    """Return :meth:`~adjgraph.graph.AdjacencyGraph.export` as a JSON string."""
    return json.dumps(G.export(), indent=indent)


def export_graphml(G: AnyGraph) -> str:
    """Return a minimal undirected GraphML document.

    Each undirected edge is written once. Weighted graphs declare a
    ``weight`` edge key and carry a ``weight`` attribute on every edge
    element.
    """
    weighted = isinstance(G, WeightedGraph)
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    if weighted:
        lines.append(
            '  <key id="weight" for="edge" attr.name="weight" attr.type="double"/>'
        )
    lines.append('  <graph id="G" edgedefault="undirected">')
    for v in G.vertices():
        lines.append(f"    <node id={quoteattr(v)}/>")
    for a, b, w in G.edges():
        attrs = f"source={quoteattr(a)} target={quoteattr(b)}"
        if weighted:
            attrs += f' weight="{w}"'
        lines.append(f"    <edge {attrs}/>")
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def to_networkx(G: AnyGraph) -> nx.Graph:
    """Convert to a :class:`networkx.Graph`.

    Vertices keep their insertion order. Parallel weighted edges collapse to
    a single edge carrying the smallest weight, which preserves shortest
    path lengths.
    """
    out = nx.Graph()
    out.add_nodes_from(G.vertices())
    for a, b, w in G.edges():
        if w is None:
            out.add_edge(a, b)
        elif not out.has_edge(a, b) or w < out[a][b]["weight"]:
            out.add_edge(a, b, weight=w)
    return out


def adjacency_matrix(G: AnyGraph) -> Tuple[List[Vertex], npt.NDArray[np.float64]]:
    """Return ``(labels, matrix)`` with rows and columns in vertex order.

    Unweighted graphs use ``1.0`` for an edge. Weighted graphs store the
    smallest weight among parallel edges. Absent edges are ``0.0``.
    """
    labels = G.vertices()
    index = {v: i for i, v in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=np.float64)
    filled = np.zeros_like(matrix, dtype=bool)
    for a, b, w in G.edges():
        i, j = index[a], index[b]
        value = 1.0 if w is None else w
        if filled[i, j] and matrix[i, j] <= value:
            continue
        matrix[i, j] = matrix[j, i] = value
        filled[i, j] = filled[j, i] = True
    return labels, matrix


__all__ = ["export_json", "export_graphml", "to_networkx", "adjacency_matrix"]
