"""Utilities for reconstructing paths from predecessor maps."""

from __future__ import annotations

from typing import List, Mapping, Optional, Set

from .graph import Vertex


def reconstruct_path(
    predecessors: Mapping[Vertex, Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a predecessor map.

    Args:
        predecessors: Predecessor of each vertex, or ``None`` for the source
            and for vertices that were never reached.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        the predecessor chain from ``target`` does not lead back to
        ``source``.
    """
    if source == target:
        return [source]

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    seen: Set[Vertex] = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:  # cycle in predecessors
            break
        seen.add(cur)
        cur = predecessors.get(cur)

    return []


__all__ = ["reconstruct_path"]
