"""Immutable weighted digraph stored as nested adjacency mappings.

A graph maps every vertex to a mapping of its out-neighbours and the weight of
the connecting edge::

    {0: {1: 5, 2: 6},
     1: {2: 4},
     2: {0: 5},
     3: {}}

Vertex 0 has two outgoing edges, to 1 (weight 5) and to 2 (weight 6); vertex
3 has none and is kept with an empty mapping.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Hashable, Iterator, Optional, Sequence, Tuple, Union

from .exceptions import GraphFormatError, InvalidArgumentError

Vertex = Hashable
Weight = Union[int, float]
Edge = Tuple[Vertex, Vertex, Weight]
Adjacency = Mapping[Vertex, Mapping[Vertex, Weight]]


def _check_edge(u: Vertex, v: Vertex, w: Any) -> None:
    if u == v:
        raise GraphFormatError(f"self-loop on vertex {u!r}")
    if isinstance(w, bool) or not isinstance(w, (int, float)):
        raise GraphFormatError(f"non-numeric weight {w!r} on edge ({u!r}, {v!r})")
    if not math.isfinite(w):
        raise GraphFormatError(f"non-finite weight {w} on edge ({u!r}, {v!r})")
    if w < 0:
        raise GraphFormatError(f"negative weight {w} on edge ({u!r}, {v!r})")


class Graph(Mapping):
    """Directed graph with non-negative edge weights.

    The constructor copies ``adjacency``, validates every edge and adds an
    empty adjacency entry for vertices that only appear as edge heads. The
    result cannot be modified, so it is hashable and can key caches.

    Args:
        adjacency: Mapping of vertex to ``{neighbour: weight}``.

    Raises:
        GraphFormatError: On a self-loop or a negative, non-finite or
            non-numeric weight.

    Examples:
        ```python
        >>> g = Graph({0: {1: 10}})
        >>> dict(g[1])
        {}
        >>> g.edge_count()
        1
        ```
    """

    __slots__ = ("_adj", "_hash")

    def __init__(self, adjacency: Optional[Adjacency] = None) -> None:
        adj: dict = {}
        for u, nbrs in (adjacency or {}).items():
            row = dict(nbrs)
            for v, w in row.items():
                _check_edge(u, v, w)
            adj[u] = row
        for row in list(adj.values()):
            for v in row:
                adj.setdefault(v, {})
        self._adj = {u: MappingProxyType(row) for u, row in adj.items()}
        self._hash: Optional[int] = None

    @classmethod
    def coerce(cls, g: Adjacency) -> "Graph":
        """Return ``g`` itself if it is a :class:`Graph`, else a validated copy."""
        if isinstance(g, cls):
            return g
        return cls(g)

    # ---- Mapping protocol -----------------------------------------------

    def __getitem__(self, vertex: Vertex) -> Mapping[Vertex, Weight]:
        return self._adj[vertex]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(
                frozenset((u, frozenset(row.items())) for u, row in self._adj.items())
            )
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(u in other and dict(row) == dict(other[u]) for u, row in self._adj.items())

    def __repr__(self) -> str:
        body = ", ".join(f"{u!r}: {dict(row)!r}" for u, row in self._adj.items())
        return f"Graph({{{body}}})"

    # ---- queries --------------------------------------------------------

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(tail, head, weight)``."""
        for u, row in self._adj.items():
            for v, w in row.items():
                yield u, v, w

    def edge_count(self) -> int:
        return sum(len(row) for row in self._adj.values())

    def path_weight(self, path: Sequence[Vertex]) -> Weight:
        """Return the summed weight of the edges along ``path``.

        Raises:
            InvalidArgumentError: If two consecutive vertices are not joined
                by an edge.
        """
        total: Weight = 0
        for u, v in zip(path[:-1], path[1:]):
            row = self._adj.get(u, {})
            if v not in row:
                raise InvalidArgumentError(f"edge ({u!r}, {v!r}) not present in graph")
            total += row[v]
        return total


__all__ = ["Adjacency", "Edge", "Graph", "Vertex", "Weight"]
