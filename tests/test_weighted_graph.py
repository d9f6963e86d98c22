"""
Unit tests for WeightedGraph mutation and Dijkstra shortest paths.
"""

import io
import json
import math

import networkx as nx
import numpy as np
import pytest

from adjgraph import (
    GraphFormatError,
    StdLogger,
    UnknownVertexError,
    WeightedGraph,
    dijkstra_reference,
    random_graph,
    reconstruct_path,
    to_networkx,
)
from conftest import assert_symmetric


def _brute_force_distance(g: WeightedGraph, start: str, finish: str) -> float:
    """Enumerate every simple path and return the lightest total weight."""
    best = math.inf

    def walk(vertex, seen, total):
        nonlocal best
        if vertex == finish:
            best = min(best, total)
            return
        for neighbor, w in g.incident(vertex):
            if neighbor not in seen:
                walk(neighbor, seen | {neighbor}, total + w)

    walk(start, {start}, 0.0)
    return best


def _path_weight(g: WeightedGraph, path):
    return sum(min(g.weights(a, b)) for a, b in zip(path, path[1:]))


def test_shortest_path_six_vertices(weighted_six):
    res = weighted_six.shortest_path("A", "F")

    assert res.path == ["A", "C", "D", "F"]
    assert res.distance == 5.0
    assert res.found
    # Alternatives are strictly longer.
    assert _path_weight(weighted_six, ["A", "C", "F"]) == 6
    assert _path_weight(weighted_six, ["A", "B", "E", "F"]) == 8


def test_shortest_path_matches_brute_force(weighted_six):
    for start in weighted_six:
        for finish in weighted_six:
            res = weighted_six.shortest_path(start, finish)
            assert res.path[0] == start
            assert res.path[-1] == finish
            assert res.distance == pytest.approx(_brute_force_distance(weighted_six, start, finish))
            assert _path_weight(weighted_six, res.path) == pytest.approx(res.distance)


def test_shortest_path_to_self(weighted_six):
    res = weighted_six.shortest_path("C", "C")

    assert res.path == ["C"]
    assert res.distance == 0.0


def test_unreachable_target_is_reported(weighted_six):
    weighted_six.add_vertex("G")
    weighted_six.add_vertex("H")
    weighted_six.add_edge("G", "H", 1)

    res = weighted_six.shortest_path("A", "G")

    assert res.path == []
    assert math.isinf(res.distance)
    assert not res.found


def test_unreachable_from_isolated_start(weighted_six):
    weighted_six.add_vertex("G")

    res = weighted_six.shortest_path("G", "A")

    assert not res.found


def test_shortest_path_unknown_vertex(weighted_six):
    with pytest.raises(UnknownVertexError):
        weighted_six.shortest_path("A", "Z")
    with pytest.raises(UnknownVertexError):
        weighted_six.shortest_path("Z", "A")


def test_counters_for_early_exit(weighted_six):
    res = weighted_six.shortest_path("A", "F")

    # Six initial entries plus six improving relaxations.
    assert res.counters["enqueued"] == 12
    assert res.counters["stale"] == 0
    assert res.counters["dequeued"] == 5


def test_counters_record_stale_entries(weighted_six):
    weighted_six.add_vertex("G")

    res = weighted_six.shortest_path("A", "G")

    # F and E are queued before their final distances are known.
    assert not res.found
    assert res.counters["stale"] >= 2
    assert res.counters["dequeued"] <= res.counters["enqueued"]


def test_zero_weight_edges():
    g = WeightedGraph()
    for v in "ABC":
        g.add_vertex(v)
    g.add_edge("A", "B", 0)
    g.add_edge("B", "C", 0)
    g.add_edge("A", "C", 1)

    res = g.shortest_path("A", "C")

    assert res.path == ["A", "B", "C"]
    assert res.distance == 0.0


@pytest.mark.parametrize("seed", range(6))
def test_shortest_path_agrees_with_reference_and_networkx(seed):
    g = random_graph(25, 40, seed=seed, weighted=True)
    ref = dijkstra_reference(g, "v0")
    nx_dist = nx.single_source_dijkstra_path_length(to_networkx(g), "v0", weight="weight")

    for target in g:
        res = g.shortest_path("v0", target)
        if target in nx_dist:
            assert res.found
            assert res.distance == pytest.approx(nx_dist[target])
            assert res.distance == pytest.approx(ref.distances[target])
            assert _path_weight(g, res.path) == pytest.approx(res.distance)
        else:
            assert not res.found
            assert math.isinf(ref.distances[target])


def test_add_vertex_twice_is_a_silent_noop(weighted_six):
    before = weighted_six.incident("A")

    weighted_six.add_vertex("A")

    assert weighted_six.incident("A") == before


def test_parallel_edges_are_kept():
    g = WeightedGraph()
    g.add_vertex("A")
    g.add_vertex("B")
    g.add_edge("A", "B", 4)
    g.add_edge("A", "B", 1)

    assert g.weights("A", "B") == [4.0, 1.0]
    assert g.weights("B", "A") == [4.0, 1.0]
    assert g.edge_count() == 2
    assert g.shortest_path("A", "B").distance == 1.0


def test_add_edge_with_missing_endpoint():
    g = WeightedGraph()
    g.add_vertex("A")

    with pytest.raises(UnknownVertexError):
        g.add_edge("A", "B", 1)
    assert g.incident("A") == []


@pytest.mark.parametrize("weight", [-1, float("nan"), "3", None, True])
def test_invalid_weights_are_rejected(weight):
    g = WeightedGraph()
    g.add_vertex("A")
    g.add_vertex("B")

    with pytest.raises(GraphFormatError):
        g.add_edge("A", "B", weight)  # type: ignore[arg-type]
    assert g.incident("A") == []


@pytest.mark.parametrize("weight", [np.int64(3), np.float32(2.5), np.float64(0.0)])
def test_numpy_scalar_weights_are_accepted(weight):
    g = WeightedGraph()
    g.add_vertex("A")
    g.add_vertex("B")

    g.add_edge("A", "B", weight)

    assert g.weights("A", "B") == [float(weight)]
    assert type(g.weights("A", "B")[0]) is float


def test_remove_edge_drops_all_parallel_edges(weighted_six):
    weighted_six.add_edge("A", "B", 9)

    weighted_six.remove_edge("A", "B")

    assert not weighted_six.has_edge("A", "B")
    assert weighted_six.incident("A") == [("C", 2.0)]
    assert_symmetric(weighted_six._adj)


def test_remove_vertex(weighted_six):
    weighted_six.remove_vertex("D")

    assert "D" not in weighted_six
    assert all("D" not in weighted_six.neighbors(v) for v in weighted_six)
    assert weighted_six.shortest_path("A", "F").path == ["A", "C", "F"]
    assert_symmetric(weighted_six._adj)


def test_traversals_ignore_weights(weighted_six):
    assert weighted_six.breadth_first_search("A") == ["A", "B", "C", "E", "D", "F"]
    assert weighted_six.depth_first_search_recursive("A") == ["A", "B", "E", "D", "C", "F"]


def test_export_carries_weights(weighted_six):
    data = weighted_six.export()

    assert len(data["nodes"]) == 6
    assert len(data["links"]) == 16
    assert data["links"][0] == {"source": "A", "target": "B", "value": 4.0}
    assert {"source": "F", "target": "E", "value": 1.0} in data["links"]


def test_shortest_path_is_logged(weighted_six):
    buf = io.StringIO()
    weighted_six.logger = StdLogger(level="info", json_fmt=True, stream=buf)

    weighted_six.shortest_path("A", "F")

    event = json.loads(buf.getvalue().splitlines()[-1])
    assert event["event"] == "shortest_path"
    assert event["found"] is True
    assert event["distance"] == 5.0


def test_reconstruct_path():
    preds = {"A": None, "B": "A", "C": "B", "D": None}

    assert reconstruct_path(preds, "A", "C") == ["A", "B", "C"]
    assert reconstruct_path(preds, "A", "A") == ["A"]
    assert reconstruct_path(preds, "A", "D") == []


def test_reconstruct_path_stops_on_cycles():
    preds = {"A": None, "B": "C", "C": "B"}

    assert reconstruct_path(preds, "A", "B") == []
