"""Graph input/output helpers."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .exceptions import DuplicateEdgeError, GraphFormatError
from .export import AnyGraph, export_graphml
from .graph import Float, Vertex
from .unweighted import UnweightedGraph
from .weighted import WeightedGraph

EdgeRow = Tuple[Vertex, Vertex, Optional[Float]]
# (vertices, edges, weighted marker found in the file)
Parsed = Tuple[List[Vertex], List[EdgeRow], bool]

DEFAULT_WEIGHT = 1.0
CSV_WEIGHTED_MARKER = "# weighted"


def _build(
    vertices: Iterable[Vertex],
    edges: List[EdgeRow],
    weighted: Optional[bool],
) -> AnyGraph:
    """Assemble a graph from parsed vertices and edges.

    Args:
        vertices: Vertex labels in file order; repeats are ignored.
        edges: ``(u, v, w)`` rows, ``w`` is ``None`` when the file has no
            weight for that edge.
        weighted: Force the graph type. ``None`` picks
            :class:`WeightedGraph` if any edge carries a weight.

    Raises:
        GraphFormatError: If an unweighted file lists the same edge twice.
    """
    if weighted is None:
        weighted = any(w is not None for _, _, w in edges)
    G: AnyGraph = WeightedGraph() if weighted else UnweightedGraph()
    for v in vertices:
        if v not in G:
            G.add_vertex(v)
    for u, v, w in edges:
        for x in (u, v):
            if x not in G:
                G.add_vertex(x)
        if isinstance(G, WeightedGraph):
            G.add_edge(u, v, DEFAULT_WEIGHT if w is None else w)
        else:
            try:
                G.add_edge(u, v)
            except DuplicateEdgeError as exc:
                raise GraphFormatError(f"duplicate edge {u}-{v} in file") from exc
    return G


def _check_label(v: Vertex, forbidden: str) -> None:
    if not v or v != v.strip() or v.startswith("#") or any(ch in v for ch in forbidden):
        raise GraphFormatError(f"vertex label {v!r} cannot be written in this format")


def _read_csv(path: Path) -> Parsed:
    """Read ``u``, ``u,v`` or ``u,v,w`` rows.

    A single column declares an isolated vertex. Lines starting with ``#``
    and blank lines are ignored, except a ``# weighted`` line which marks
    the file as a weighted graph. Columns may be separated by commas or
    tabs.

    Raises:
        GraphFormatError: If a weight is not a number, a row has too many
            columns, or nothing was parsed.
    """
    vertices: List[Vertex] = []
    edges: List[EdgeRow] = []
    marked = False
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if row == CSV_WEIGHTED_MARKER:
                marked = True
                continue
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) == 1:
                vertices.append(parts[0])
            elif len(parts) == 2:
                edges.append((parts[0], parts[1], None))
            elif len(parts) == 3:
                try:
                    w = float(parts[2])
                except ValueError as exc:
                    raise GraphFormatError(f"line {lineno}: bad weight {parts[2]!r}") from exc
                edges.append((parts[0], parts[1], w))
            else:
                raise GraphFormatError(f"line {lineno}: expected 1 to 3 columns")
    if not vertices and not edges:
        raise GraphFormatError("no vertices parsed from file")
    return vertices, edges, marked


def _write_csv(path: Path, G: AnyGraph) -> None:
    """Write one row per vertex followed by one row per undirected edge."""
    with path.open("w", encoding="utf-8") as fh:
        if isinstance(G, WeightedGraph):
            fh.write(CSV_WEIGHTED_MARKER + "\n")
        for v in G.vertices():
            _check_label(v, ",\t\n")
            fh.write(f"{v}\n")
        for u, v, w in G.edges():
            fh.write(f"{u},{v}\n" if w is None else f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> Parsed:
    """Read JSON Lines holding ``{"id": ...}`` or ``{"u", "v"[, "w"]}`` objects.

    A ``{"weighted": true}`` line marks the file as a weighted graph.

    Raises:
        GraphFormatError: If a line is not valid JSON, lacks the expected
            keys, or nothing was parsed.
    """
    vertices: List[Vertex] = []
    edges: List[EdgeRow] = []
    marked = False
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                if "weighted" in obj:
                    marked = obj["weighted"] is True
                elif "id" in obj:
                    vertices.append(str(obj["id"]))
                else:
                    w = obj.get("w")
                    edges.append((str(obj["u"]), str(obj["v"]), None if w is None else float(w)))
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                raise GraphFormatError(f"line {lineno}: {exc}") from exc
    if not vertices and not edges:
        raise GraphFormatError("no vertices parsed from file")
    return vertices, edges, marked


def _write_jsonl(path: Path, G: AnyGraph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        if isinstance(G, WeightedGraph):
            fh.write(json.dumps({"weighted": True}) + "\n")
        for v in G.vertices():
            fh.write(json.dumps({"id": v}) + "\n")
        for u, v, w in G.edges():
            obj = {"u": u, "v": v} if w is None else {"u": u, "v": v, "w": w}
            fh.write(json.dumps(obj) + "\n")


def _read_graphml(path: Path) -> Parsed:
    """Parse the nodes and edges of a GraphML file.

    Edge weights are read from a ``weight`` attribute or from a ``<data>``
    child keyed ``w`` or ``weight``. An edge ``<key>`` named ``weight``
    marks the file as a weighted graph.

    Raises:
        GraphFormatError: If the XML is malformed or has no nodes or edges.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"malformed GraphML: {exc}") from exc
    ns = "{http://graphml.graphdrawing.org/xmlns}"
    marked = any(
        key.attrib.get("for") == "edge"
        and "weight" in (key.attrib.get("id"), key.attrib.get("attr.name"))
        for key in root.iter(f"{ns}key")
    )
    vertices = [node.attrib["id"] for node in root.iter(f"{ns}node") if "id" in node.attrib]
    edges: List[EdgeRow] = []
    for edge in root.iter(f"{ns}edge"):
        u = edge.attrib.get("source")
        v = edge.attrib.get("target")
        if u is None or v is None:
            raise GraphFormatError("edge without source or target")
        w_attr = edge.attrib.get("weight")
        if w_attr is None:
            data = edge.find(f"{ns}data[@key='w']")
            if data is None:
                data = edge.find(f"{ns}data[@key='weight']")
            w_attr = data.text if data is not None else None
        try:
            w = None if w_attr is None else float(w_attr)
        except ValueError as exc:
            raise GraphFormatError(f"bad weight {w_attr!r} on edge {u}-{v}") from exc
        edges.append((u, v, w))
    if not vertices and not edges:
        raise GraphFormatError("no vertices parsed from file")
    return vertices, edges, marked


def _write_graphml(path: Path, G: AnyGraph) -> None:
    path.write_text(export_graphml(G), encoding="utf-8")


_FMT_READERS = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "graphml": _read_graphml,
}

_FMT_WRITERS = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "graphml": _write_graphml,
}


def _detect_format(path: Path) -> Optional[str]:
    """Detect the file format from the file extension."""
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    if ext in {".graphml", ".xml"}:
        return "graphml"
    return None


def read_graph(
    path: Union[str, Path],
    fmt: Optional[str] = None,
    weighted: Optional[bool] = None,
) -> AnyGraph:
    """Read a graph from a file.

    Args:
        path: The path to the graph file.
        fmt: ``"csv"``, ``"jsonl"`` or ``"graphml"``. Auto-detected from the
            extension when ``None``.
        weighted: Force a :class:`WeightedGraph` (``True``) or an
            :class:`UnweightedGraph` (``False``). By default the graph is
            weighted if the file carries the weighted marker written by
            :func:`write_graph` or any edge in it has a weight. Edges
            without a weight get ``1.0`` in a weighted graph.

    Returns:
        The graph constructed from the file.

    Raises:
        GraphFormatError: If the format is unknown or the file is invalid.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown graph format")
    vertices, edges, marked = _FMT_READERS[fmt](p)
    if weighted is None and marked:
        weighted = True
    return _build(vertices, edges, weighted)


def write_graph(G: AnyGraph, path: Union[str, Path], fmt: Optional[str] = None) -> None:
    """Write a graph to a file.

    Every vertex is written, including isolated ones, and every undirected
    edge is written once.

    Raises:
        GraphFormatError: If the format is unknown or a vertex label cannot
            be represented in it.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError("unknown graph format")
    _FMT_WRITERS[fmt](p, G)


__all__ = ["read_graph", "write_graph"]
