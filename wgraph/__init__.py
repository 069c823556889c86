"""
wgraph: Reachability, components and shortest paths on weighted graphs.

wgraph works on a graph with a fixed number of vertices, enabling you to:
- List everything reachable from a vertex
- Split an undirected graph into connected components
- Compute multi-source shortest paths with an indexed priority queue

Usage:
    from wgraph.core.graph import Graph

    graph = Graph(4)
    graph.add_undirected_edge(0, 1, 4)
    graph.add_undirected_edge(0, 3, 3)
    dist, parent = graph.shortest_paths([0])
"""

__version__ = "0.1.0"
