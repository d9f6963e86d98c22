"""Custom exception types used across :mod:`adjgraph`."""

from __future__ import annotations


class AdjGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(AdjGraphError, ValueError):
    """Raised for invalid user input such as malformed vertices or edges."""


class UnknownVertexError(InputError, KeyError):
    """Raised when an operation references a vertex that is not in the graph."""

    def __init__(self, vertex: object, message: str | None = None) -> None:
        self.vertex = vertex
        super().__init__(message or f"vertex {vertex!r} does not exist in the graph")

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of its argument.
        return str(self.args[0])


class DuplicateVertexError(InputError):
    """Raised when adding a vertex that already exists."""


class DuplicateEdgeError(InputError):
    """Raised when adding an unweighted edge that already exists."""


class GraphFormatError(InputError):
    """Raised for invalid edge weights or when parsing a graph file fails."""


class AlgorithmError(AdjGraphError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class EmptyQueueError(AlgorithmError, IndexError):
    """Raised when reading from an empty :class:`~adjgraph.priority_queue.PriorityQueue`."""


__all__ = [
    "AdjGraphError",
    "InputError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "GraphFormatError",
    "AlgorithmError",
    "EmptyQueueError",
]
