"""
Random weighted digraph generator.

`make_graph(v, e)` returns a graph on the vertices ``0..v-1`` with exactly
``e`` directed edges and integer weights drawn uniformly from
``[0, max_weight)``.

Unless the complete digraph is requested, generation starts from a random
spanning tree built by a random walk: the walk jumps between uniformly drawn
vertices and adds an edge every time it lands on a vertex it has not visited
yet. That gives ``v-1`` edges and every vertex is reached along the direction
walked. The remaining edge budget is filled from a shuffled list of all
ordered pairs, skipping pairs the tree already holds.

All random draws go through one ``random.Random`` instance, so a fixed seed
always reproduces the same graph.
"""

from __future__ import annotations

import itertools
import numbers
import random
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import InvalidArgumentError
from .graph import Graph
from .logger import Logger, NoopLogger

AdjDict = Dict[int, Dict[int, int]]


def _empty_adjacency(v: int) -> AdjDict:
    return {i: {} for i in range(v)}


def _all_pairs(v: int) -> Iterator[Tuple[int, int]]:
    for i in range(v):
        for j in range(v):
            if i != j:
                yield i, j


def _add_weighted_edges(
    adj: AdjDict,
    pairs: Iterator[Tuple[int, int]],
    max_weight: int,
    rng: random.Random,
) -> AdjDict:
    for u, v in pairs:
        adj[u][v] = rng.randrange(max_weight)
    return adj


def spanning_tree(v: int, max_weight: int, rng: random.Random) -> AdjDict:
    """Build the random-walk spanning tree over ``v`` vertices.

    Args:
        v: Number of vertices (``> 0``).
        max_weight: Exclusive upper bound of edge weights.
        rng: Random source.

    Returns:
        Adjacency dict with all ``v`` vertices and exactly ``v-1`` edges.
    """
    adj = _empty_adjacency(v)
    curr = rng.randrange(v)
    visited = {curr}
    while len(visited) < v:
        nxt = rng.randrange(v)
        if nxt not in visited:
            adj[curr][nxt] = rng.randrange(max_weight)
            visited.add(nxt)
        curr = nxt
    return adj


def _as_count(x: object) -> Optional[int]:
    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        return None
    return int(x)


def _shuffled_pairs(v: int, rng: random.Random) -> List[Tuple[int, int]]:
    pairs = list(_all_pairs(v))
    rng.shuffle(pairs)
    return pairs


def make_graph(
    v: int,
    e: int,
    max_weight: int = 100,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    logger: Optional[Logger] = None,
) -> Graph:
    """
    Generate a random weighted digraph.

    Args:
        v: Number of vertices.
        e: Number of directed edges, in ``[v-1, v*(v-1)]``.
        max_weight: Exclusive upper bound of the integer weights.
        rng: Random source. When omitted a ``random.Random(seed)`` is used.
        seed: Seed for the default random source.
        logger: Optional structured logger.

    Returns:
        Graph over the vertices ``0..v-1``.

    Raises:
        InvalidArgumentError: If ``v`` is negative, ``e`` is out of range or
            ``max_weight`` is below 1.
    """
    v, e, max_weight = _as_count(v), _as_count(e), _as_count(max_weight)
    if v is None or v < 0:
        raise InvalidArgumentError("vertex count must be a non-negative integer")
    if e is None or not (max(v - 1, 0) <= e <= v * (v - 1)):
        raise InvalidArgumentError("count of edges must be in range [v-1..v*(v-1)]")
    if max_weight is None or max_weight < 1:
        raise InvalidArgumentError("max_weight must be a positive integer")

    rng = rng or random.Random(seed)
    logger = logger or NoopLogger()

    complete = e == v * (v - 1)
    if complete:
        adj = _add_weighted_edges(_empty_adjacency(v), _all_pairs(v), max_weight, rng)
    else:
        adj = spanning_tree(v, max_weight, rng)
        remaining = e - (v - 1)
        extra = (p for p in _shuffled_pairs(v, rng) if p[1] not in adj[p[0]])
        adj = _add_weighted_edges(adj, itertools.islice(extra, remaining), max_weight, rng)

    graph = Graph(adj)
    logger.info(
        "graph_generated",
        v=v,
        e=graph.edge_count(),
        max_weight=max_weight,
        complete=complete,
    )
    return graph


__all__ = ["make_graph", "spanning_tree"]
