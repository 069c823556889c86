"""Data models for graph query results."""

from __future__ import annotations

import math
from typing import NamedTuple

from wgraph.core.exceptions import InvalidVertex


class ShortestPaths(NamedTuple):
    """Result of a shortest-paths query.

    ``dist[v]`` is the total weight from the nearest source to ``v`` (``inf``
    when unreachable). ``parent[v]`` is the previous vertex on that path, or
    ``None`` for sources and unreached vertices.

    Unpacks like a pair: ``dist, parent = graph.shortest_paths([0])``.
    """

    dist: list[float]
    parent: list[int | None]

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self.dist):
            raise InvalidVertex(f"Invalid vertex {v} (graph has {len(self.dist)} vertices)")

    def has_path_to(self, v: int) -> bool:
        self._check(v)
        return not math.isinf(self.dist[v])

    def distance_to(self, v: int) -> float:
        self._check(v)
        return self.dist[v]

    def path_to(self, v: int) -> list[int] | None:
        """Walk parents back from ``v`` to a source. O(path length).

        Returns the vertices from source to ``v``, or None if ``v`` is unreachable.
        """
        if not self.has_path_to(v):
            return None

        path = [v]
        current = self.parent[v]
        while current is not None:
            path.append(current)
            current = self.parent[current]
        path.reverse()
        return path
