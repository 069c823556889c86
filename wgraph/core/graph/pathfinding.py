"""Path finding: multi-source Dijkstra over an indexed priority queue."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from wgraph.core.graph.models import ShortestPaths
from wgraph.core.pq import IndexMinPQ

if TYPE_CHECKING:
    from wgraph.core.graph.base import Graph


def shortest_paths(graph: Graph, sources: Iterable[int]) -> ShortestPaths:
    """Shortest distances from the nearest of ``sources`` to every vertex.

    O((V + E) log V). Edge weights are non-negative by construction.

    Raises:
        InvalidVertex: if any source is outside the graph
    """
    sources = list(sources)
    for s in sources:
        graph.validate_vertex(s)

    n = graph.num_vertices
    dist = [math.inf] * n
    parent: list[int | None] = [None] * n
    for s in sources:
        dist[s] = 0.0

    pq: IndexMinPQ[float] = IndexMinPQ(n)
    for v in range(n):
        pq.insert(v, dist[v])

    while not pq.is_empty():
        current = pq.del_min()
        for edge in graph._adj[current]:
            candidate = dist[current] + edge.weight
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                parent[edge.target] = current
                pq.decrease_key(edge.target, candidate)

    return ShortestPaths(dist=dist, parent=parent)
