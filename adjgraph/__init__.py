"""Public package exports for :mod:`adjgraph`."""

from __future__ import annotations

from .dijkstra import DijkstraResult, dijkstra_reference
from .exceptions import (
    AdjGraphError,
    AlgorithmError,
    DuplicateEdgeError,
    DuplicateVertexError,
    EmptyQueueError,
    GraphFormatError,
    InputError,
    UnknownVertexError,
)
from .export import adjacency_matrix, export_graphml, export_json, to_networkx
from .generate import random_graph
from .graph import AdjacencyGraph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .priority_queue import PriorityQueue, QueueEntry
from .unweighted import UnweightedGraph
from .weighted import PathResult, WeightedGraph

__version__ = "0.1.0"

__all__ = [
    "AdjacencyGraph",
    "UnweightedGraph",
    "WeightedGraph",
    "PathResult",
    "PriorityQueue",
    "QueueEntry",
    "reconstruct_path",
    "dijkstra_reference",
    "DijkstraResult",
    "export_json",
    "export_graphml",
    "to_networkx",
    "adjacency_matrix",
    "read_graph",
    "write_graph",
    "random_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "AdjGraphError",
    "InputError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "GraphFormatError",
    "AlgorithmError",
    "EmptyQueueError",
]
