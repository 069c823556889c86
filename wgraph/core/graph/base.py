"""Core Graph class with adjacency list representation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from wgraph.core.exceptions import InvalidSize, InvalidVertex, NegativeWeight
from wgraph.core.models import Edge

if TYPE_CHECKING:
    from wgraph.core.graph.models import ShortestPaths


class Graph:
    """Directed weighted graph over a fixed set of vertices ``0..V-1``.

    Uses one insertion-ordered edge list per vertex. An undirected graph is
    represented by inserting every edge in both directions.
    """

    __slots__ = ("_v", "_adj", "_num_edges")

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise InvalidSize(f"Number of vertices can't be negative: {num_vertices}")
        self._v = num_vertices
        self._adj: list[list[Edge]] = [[] for _ in range(num_vertices)]
        self._num_edges = 0

    def validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._v:
            raise InvalidVertex(f"Invalid vertex {v} (graph has {self._v} vertices)")

    def add_edge(self, v: int, w: int, weight: float = 1.0) -> Edge:
        """Add an edge from v to w. O(1)."""
        if weight != weight:
            raise NegativeWeight(f"Edge weight can't be NaN: {v}->{w}")
        if weight < 0:
            raise NegativeWeight(f"Negative edge weights are not supported: {v}->{w} ({weight})")
        self.validate_vertex(v)
        self.validate_vertex(w)
        edge = Edge(v, w, weight)
        self._adj[v].append(edge)
        self._num_edges += 1
        return edge

    def add_undirected_edge(self, v: int, w: int, weight: float = 1.0) -> None:
        """Add v->w and w->v with the same weight."""
        self.add_edge(v, w, weight)
        self.add_edge(w, v, weight)

    def has_edge(self, v: int, w: int) -> bool:
        """Is there an edge from v to w? O(out-degree)."""
        self.validate_vertex(v)
        return any(edge.target == w for edge in self._adj[v])

    def adj(self, v: int) -> list[Edge]:
        """Outgoing edges of v in insertion order."""
        self.validate_vertex(v)
        return list(self._adj[v])

    def out_degree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def edges(self) -> Iterator[Edge]:
        """All edges, grouped by source vertex."""
        for edge_list in self._adj:
            yield from edge_list

    @property
    def num_vertices(self) -> int:
        return self._v

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def to_text(self) -> str:
        """One line per vertex: ``[v] : w1, w2, ``."""
        lines = []
        for v, edge_list in enumerate(self._adj):
            targets = "".join(f"{edge.target}, " for edge in edge_list)
            lines.append(f"[{v}] : {targets}")
        return "\n".join(lines)

    # Queries

    def reachable_from(self, source: int) -> list[int]:
        from wgraph.core.graph.traversal import reachable_from

        return reachable_from(self, source)

    def is_undirected(self) -> bool:
        from wgraph.core.graph.analysis import is_undirected

        return is_undirected(self)

    def connected_components(self) -> list[list[int]]:
        from wgraph.core.graph.analysis import connected_components

        return connected_components(self)

    def shortest_paths(self, sources: Iterable[int]) -> ShortestPaths:
        from wgraph.core.graph.pathfinding import shortest_paths

        return shortest_paths(self, sources)

    def __len__(self) -> int:
        return self._v

    def __repr__(self) -> str:
        return f"Graph(vertices={self._v}, edges={self._num_edges})"
