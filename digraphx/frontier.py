"""Priority frontier used by the shortest-path engine."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, Hashable, List, Optional, Tuple

Vertex = Hashable
Float = float
Path = List[Vertex]


class PathFrontier:
    """Binary-heap frontier that keeps the best ``(distance, path)`` per vertex.

    A decrease-key is emulated by pushing a new heap entry and leaving the old
    one in place; stale entries are skipped when popped. Ties on distance are
    broken by insertion order so vertex labels never need to be comparable.
    """

    def __init__(self) -> None:
        self._best: Dict[Vertex, Tuple[Float, Path]] = {}
        self._heap: List[Tuple[Float, int, Vertex]] = []
        self._seq = itertools.count()

    def offer(self, vertex: Vertex, distance: Float, path: Path) -> bool:
        """Record ``(distance, path)`` for ``vertex`` if it improves the entry.

        Returns:
            ``True`` if the frontier was updated, ``False`` if an entry with a
            smaller or equal distance already exists.
        """
        old = self._best.get(vertex)
        if old is not None and old[0] <= distance:
            return False
        self._best[vertex] = (distance, path)
        heapq.heappush(self._heap, (distance, next(self._seq), vertex))
        return True

    def pop(self) -> Optional[Tuple[Vertex, Float, Path]]:
        """Remove and return the live entry with the smallest distance.

        Returns:
            ``(vertex, distance, path)`` or ``None`` when no live entry is left.
        """
        while self._heap:
            distance, _, vertex = heapq.heappop(self._heap)
            best = self._best.get(vertex)
            if best is None or best[0] != distance:
                continue  # stale
            del self._best[vertex]
            return vertex, distance, best[1]
        return None

    def __bool__(self) -> bool:
        return bool(self._best)


__all__ = ["PathFrontier"]
