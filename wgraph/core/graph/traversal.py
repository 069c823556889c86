"""Reachability using BFS traversal."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wgraph.core.graph.base import Graph


def reachable_from(graph: Graph, source: int) -> list[int]:
    """All vertices reachable from source, in BFS discovery order. O(V + E).

    The result always starts with source itself.
    """
    graph.validate_vertex(source)

    white, gray, black = 0, 1, 2
    color = [white] * graph.num_vertices
    color[source] = gray
    queue: deque[int] = deque([source])
    result = [source]

    while queue:
        current = queue.popleft()
        for edge in graph._adj[current]:
            if color[edge.target] == white:
                color[edge.target] = gray
                queue.append(edge.target)
                result.append(edge.target)
        color[current] = black

    return result
