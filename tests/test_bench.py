"""
Smoke tests for the benchmark and random graph helpers.
"""

import pytest

from adjgraph import InputError, UnweightedGraph, WeightedGraph, random_graph
from adjgraph.bench import main, run_once


def test_run_once_matches_reference():
    res = run_once(30, 60, queries=5, seed=2)

    assert res.max_abs_err < 1e-9
    assert res.counters["dequeued"] > 0
    assert res.query_ms >= 0.0


def test_bench_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"

    main(["--sizes", "10,20", "--trials", "2", "--out-csv", str(out)])

    rows = out.read_text().splitlines()
    assert rows[0].startswith("n,m,trial,query_ms")
    assert len(rows) == 3
    assert "query_med" in capsys.readouterr().out


def test_random_graph_is_seeded():
    a = random_graph(10, 15, seed=5)
    b = random_graph(10, 15, seed=5)

    assert isinstance(a, WeightedGraph)
    assert a.export() == b.export()
    assert a.edge_count() == 15


def test_random_unweighted_graph_caps_edges():
    g = random_graph(4, 100, seed=0, weighted=False)

    assert isinstance(g, UnweightedGraph)
    assert g.edge_count() == 6
    assert all(not g.has_edge(v, v) for v in g)


@pytest.mark.parametrize("kwargs", [{"n": 0, "m": 1}, {"n": 3, "m": -1}])
def test_random_graph_rejects_bad_sizes(kwargs):
    with pytest.raises(InputError):
        random_graph(**kwargs)
