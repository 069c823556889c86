"""Graph analysis: undirectedness check, connected components."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from wgraph.core.exceptions import NotUndirected
from wgraph.core.graph.traversal import reachable_from

if TYPE_CHECKING:
    from wgraph.core.graph.base import Graph


def is_undirected(graph: Graph) -> bool:
    """Check that every edge v->w has a matching w->v of equal weight. O(V + E).

    Parallel edges are compared as multisets of weights per direction, so
    two v->w edges need two w->v edges with the same weights.
    """
    weights: dict[tuple[int, int], Counter[float]] = {}
    for edge in graph.edges():
        weights.setdefault((edge.source, edge.target), Counter())[edge.weight] += 1

    return all(weights.get((w, v)) == counter for (v, w), counter in weights.items())


def connected_components(graph: Graph) -> list[list[int]]:
    """Split an undirected graph into components, in order of lowest vertex.

    Each component lists its vertices in BFS order from its lowest vertex.

    Raises:
        NotUndirected: if the graph is not undirected
    """
    if not is_undirected(graph):
        raise NotUndirected("Connected components require an undirected graph")

    done = [False] * graph.num_vertices
    components: list[list[int]] = []

    for v in range(graph.num_vertices):
        if done[v]:
            continue
        component = reachable_from(graph, v)
        components.append(component)
        for member in component:
            done[member] = True

    return components
