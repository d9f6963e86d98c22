"""
Pytest configuration and shared fixtures.

The six-vertex graphs mirror the worked examples used throughout the
package documentation.
"""

from typing import Dict, List

import pytest

from adjgraph import UnweightedGraph, WeightedGraph


WEIGHTED_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "E", 3),
    ("C", "D", 2),
    ("C", "F", 4),
    ("D", "E", 3),
    ("D", "F", 1),
    ("E", "F", 1),
]

UNWEIGHTED_EDGES = [
    ("A", "B"),
    ("A", "C"),
    ("B", "D"),
    ("C", "E"),
    ("D", "E"),
    ("D", "F"),
    ("E", "F"),
]


@pytest.fixture
def weighted_six() -> WeightedGraph:
    """Return the six-vertex weighted graph A-F."""
    g = WeightedGraph()
    for v in "ABCDEF":
        g.add_vertex(v)
    for a, b, w in WEIGHTED_EDGES:
        g.add_edge(a, b, w)
    return g


@pytest.fixture
def unweighted_six() -> UnweightedGraph:
    """Return the six-vertex unweighted graph A-F."""
    g = UnweightedGraph()
    for v in "ABCDEF":
        g.add_vertex(v)
    for a, b in UNWEIGHTED_EDGES:
        g.add_edge(a, b)
    return g


def assert_symmetric(adj: Dict[str, List]) -> None:
    """Assert that ``b`` appears in ``a``'s list as often as ``a`` in ``b``'s."""
    def ids(entries):
        return [e[0] if isinstance(e, tuple) else e for e in entries]

    for a, entries in adj.items():
        for b in set(ids(entries)):
            assert ids(adj[b]).count(a) == ids(entries).count(b), (a, b)
