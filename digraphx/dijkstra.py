"""Dijkstra single-source shortest paths returning distances and paths."""

from __future__ import annotations

from typing import Dict, Hashable, List, NamedTuple, Optional

from .frontier import PathFrontier
from .graph import Adjacency, Weight

Vertex = Hashable


class PathResult(NamedTuple):
    """Shortest distance to a vertex and the path realising it."""

    distance: Weight
    path: List[Vertex]


DijkstraResult = Dict[Vertex, PathResult]


def dijkstra(
    g: Adjacency,
    v_start: Vertex,
    v_dest: Optional[Vertex] = None,
) -> DijkstraResult:
    """Run Dijkstra from ``v_start``.

    Args:
        g: Graph with non-negative edge weights.
        v_start: Start vertex. A vertex missing from ``g`` is treated as one
            without outgoing edges.
        v_dest: Optional target; the search returns as soon as it is
            finalized. With ``None`` every reachable vertex is finalized.

    Returns:
        Mapping of each finalized vertex to ``PathResult(distance, path)``,
        where ``path`` runs from ``v_start`` to the vertex, both included.
        Unreachable vertices are absent.

    Examples:
        ```python
        >>> dijkstra({1: {2: 10}, 2: {}}, 1, 2)
        {1: PathResult(distance=0, path=[1]), 2: PathResult(distance=10, path=[1, 2])}
        ```
    """
    frontier = PathFrontier()
    frontier.offer(v_start, 0, [v_start])
    result: DijkstraResult = {}

    while frontier and v_dest not in result:
        curr, dist, path = frontier.pop()
        result[curr] = PathResult(dist, path)
        for adj, w in g.get(curr, {}).items():
            if adj in result:
                continue
            frontier.offer(adj, dist + w, path + [adj])

    return result


def shortest_path(g: Adjacency, v_start: Vertex, v_dest: Vertex) -> List[Vertex]:
    """Return the vertices of a shortest path, or ``[]`` if unreachable."""
    found = dijkstra(g, v_start, v_dest).get(v_dest)
    if found is None:
        return []
    return found.path


__all__ = ["DijkstraResult", "PathResult", "dijkstra", "shortest_path"]
