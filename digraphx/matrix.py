"""NumPy views of a graph: dense weight matrix and all-pairs distances."""

from __future__ import annotations

from typing import Hashable, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import InvalidArgumentError
from .graph import Adjacency

Vertex = Hashable


def _vertex_order(g: Adjacency, order: Optional[Sequence[Vertex]]) -> List[Vertex]:
    if order is None:
        vertices = dict.fromkeys(g)
        for row in g.values():
            vertices.update(dict.fromkeys(row))
        return list(vertices)
    order = list(order)
    known = set(order)
    if len(known) != len(order):
        raise InvalidArgumentError("order contains duplicate vertices")
    missing = [u for u in g if u not in known]
    if missing:
        raise InvalidArgumentError(f"order is missing vertices {missing!r}")
    return order


def to_weight_matrix(
    g: Adjacency, order: Optional[Sequence[Vertex]] = None
) -> Tuple[npt.NDArray[np.float64], List[Vertex]]:
    """Return the dense weight matrix of ``g``.

    Entry ``[i, j]`` is the weight of edge ``order[i] -> order[j]``, ``inf``
    when there is no such edge and ``0`` on the diagonal.

    Args:
        g: Graph.
        order: Row/column order of the vertices; defaults to iteration order.

    Returns:
        ``(matrix, order)``.
    """
    vertices = _vertex_order(g, order)
    index = {u: i for i, u in enumerate(vertices)}
    n = len(vertices)
    mat = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(mat, 0.0)
    for u, row in g.items():
        i = index[u]
        for v, w in row.items():
            if v not in index:
                raise InvalidArgumentError(f"edge head {v!r} missing from order")
            mat[i, index[v]] = float(w)
    return mat, vertices


def distance_matrix(
    g: Adjacency, order: Optional[Sequence[Vertex]] = None
) -> Tuple[npt.NDArray[np.float64], List[Vertex]]:
    """All-pairs shortest distances (Floyd–Warshall, vectorised per pivot).

    Unreachable pairs are ``inf``.
    """
    dist, vertices = to_weight_matrix(g, order)
    for k in range(dist.shape[0]):
        np.minimum(dist, dist[:, k, None] + dist[None, k, :], out=dist)
    return dist, vertices


__all__ = ["distance_matrix", "to_weight_matrix"]
