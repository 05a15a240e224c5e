"""Eccentricity, radius and diameter on weighted digraphs.

The eccentricity of a vertex is the largest value a *weight function* assigns
to any of its shortest paths. Two weight functions are provided:
``edge_count_weight`` (number of edges on the path, the default) and
``distance_weight`` (summed edge weights). A vertex that reaches no other
vertex has infinite eccentricity.

Radius and diameter need the eccentricity of every vertex, which is one full
Dijkstra run each. :class:`MetricsEngine` memoizes eccentricities in a bounded
LRU cache keyed by ``(graph, vertex, weight_fn)``, so asking for both the
radius and the diameter of a graph only runs Dijkstra once per vertex.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, Optional

from .cache import DEFAULT_CAPACITY, LRUCache
from .dijkstra import PathResult, dijkstra
from .exceptions import InvalidArgumentError
from .graph import Adjacency, Graph
from .logger import Logger, NoopLogger

Vertex = Hashable
Number = float
WeightFn = Callable[[PathResult], Number]


def edge_count_weight(entry: PathResult) -> Number:
    """Number of edges on the path of ``entry``."""
    return len(entry[1]) - 1


def distance_weight(entry: PathResult) -> Number:
    """Summed edge weight of ``entry``."""
    return entry[0]


def eccentricity(g: Adjacency, v: Vertex, weight_fn: WeightFn = edge_count_weight) -> Number:
    """Return the eccentricity of ``v`` under ``weight_fn``.

    Examples:
        ```python
        >>> eccentricity({1: {2: 1}, 2: {}}, 1)
        1
        >>> eccentricity({1: {2: 7}, 2: {}}, 1, distance_weight)
        7
        ```
    """
    reached = dijkstra(g, v)
    reached.pop(v, None)
    if not reached:
        return math.inf
    return max(weight_fn(entry) for entry in reached.values())


@dataclass(frozen=True)
class MetricsConfig:
    """Configuration for :class:`MetricsEngine`.

    Attributes:
        cache_capacity: Maximum number of memoized eccentricities.
        weight_fn: Weight function used when a call does not pass one.
    """

    cache_capacity: int = DEFAULT_CAPACITY
    weight_fn: WeightFn = edge_count_weight


class MetricsEngine:
    """Graph metrics backed by a memoized eccentricity.

    Args:
        config: Optional configuration.
        cache: Cache to use. When omitted a new :class:`LRUCache` with
            ``config.cache_capacity`` entries is created, so engines never
            share state unless given the same cache.
        logger: Optional structured logger.
    """

    def __init__(
        self,
        config: Optional[MetricsConfig] = None,
        cache: Optional[LRUCache] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.cfg = config or MetricsConfig()
        self.logger = logger or NoopLogger()
        self.cache = cache if cache is not None else LRUCache(self.cfg.cache_capacity, self.logger)
        self.counters: Dict[str, int] = {
            "dijkstra_runs": 0,
            "cache_hits": 0,
            "cache_misses": 0,
        }
        self._counters_lock = threading.Lock()

    def _count(self, name: str) -> None:
        with self._counters_lock:
            self.counters[name] += 1

    def _weight_fn(self, weight_fn: Optional[WeightFn]) -> WeightFn:
        return weight_fn if weight_fn is not None else self.cfg.weight_fn

    def eccentricity(
        self, g: Adjacency, v: Vertex, weight_fn: Optional[WeightFn] = None
    ) -> Number:
        """Uncached eccentricity of ``v``."""
        self._count("dijkstra_runs")
        return eccentricity(g, v, self._weight_fn(weight_fn))

    def eccentricity_memo(
        self, g: Adjacency, v: Vertex, weight_fn: Optional[WeightFn] = None
    ) -> Number:
        """Eccentricity of ``v``, served from the cache when possible.

        Plain mappings are converted to a :class:`Graph` first so they can be
        part of the cache key.
        """
        graph = Graph.coerce(g)
        wf = self._weight_fn(weight_fn)
        key = (graph, v, wf)
        cached = self.cache.get(key)
        if cached is not None:
            self._count("cache_hits")
            self.logger.debug("eccentricity_cache_hit", vertex=v)
            return cached
        self._count("cache_misses")
        self.logger.debug("eccentricity_cache_miss", vertex=v)
        value = self.eccentricity(graph, v, wf)
        self.cache.put(key, value)
        return value

    def eccentricities(
        self, g: Adjacency, weight_fn: Optional[WeightFn] = None
    ) -> Dict[Vertex, Number]:
        """Return the memoized eccentricity of every vertex of ``g``."""
        graph = Graph.coerce(g)
        return {v: self.eccentricity_memo(graph, v, weight_fn) for v in graph}

    def eccentricities_by(
        self,
        g: Adjacency,
        weight_fn: Optional[WeightFn],
        select: Callable[[Iterable[Number]], Number],
    ) -> Number:
        """Reduce all eccentricities of ``g`` with ``select`` (``min``, ``max``...).

        Raises:
            InvalidArgumentError: If ``g`` has no vertices.
        """
        values = self.eccentricities(g, weight_fn)
        if not values:
            raise InvalidArgumentError("graph has no vertices")
        return select(values.values())

    def radius(self, g: Adjacency, weight_fn: Optional[WeightFn] = None) -> Number:
        """Minimum eccentricity over all vertices."""
        return self.eccentricities_by(g, weight_fn, min)

    def diameter(self, g: Adjacency, weight_fn: Optional[WeightFn] = None) -> Number:
        """Maximum eccentricity over all vertices."""
        return self.eccentricities_by(g, weight_fn, max)

    def summary(self) -> Dict[str, int]:
        """Return a copy of the engine counters."""
        with self._counters_lock:
            return dict(self.counters)


def radius(
    g: Adjacency,
    weight_fn: WeightFn = edge_count_weight,
    engine: Optional[MetricsEngine] = None,
) -> Number:
    """Minimum eccentricity of ``g``.

    Without ``engine`` a fresh :class:`MetricsEngine` is used, so nothing is
    memoized across calls. Pass the same engine to ``radius`` and
    ``diameter`` to run Dijkstra only once per vertex.
    """
    return (engine or MetricsEngine()).radius(g, weight_fn)


def diameter(
    g: Adjacency,
    weight_fn: WeightFn = edge_count_weight,
    engine: Optional[MetricsEngine] = None,
) -> Number:
    """Maximum eccentricity of ``g``; see :func:`radius` for ``engine``."""
    return (engine or MetricsEngine()).diameter(g, weight_fn)


__all__ = [
    "MetricsConfig",
    "MetricsEngine",
    "WeightFn",
    "diameter",
    "distance_weight",
    "eccentricity",
    "edge_count_weight",
    "radius",
]
