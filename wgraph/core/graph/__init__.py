"""
Weighted graph data structures and algorithms.

Data Structures:
    - Graph: Fixed vertex set with insertion-ordered adjacency lists
    - ShortestPaths: dist/parent arrays with path reconstruction

Algorithms:
    - traversal: BFS reachability (reachable_from)
    - analysis: Undirectedness check, connected components
    - pathfinding: Multi-source Dijkstra (shortest_paths)

Loading:
    - parse_graph(): Build a graph from edge-list text
    - load_graph(): Read an edge-list file
"""

from wgraph.core.graph.analysis import connected_components, is_undirected
from wgraph.core.graph.base import Graph
from wgraph.core.graph.loader import load_graph, parse_graph
from wgraph.core.graph.models import ShortestPaths
from wgraph.core.graph.pathfinding import shortest_paths
from wgraph.core.graph.traversal import reachable_from

__all__ = [
    "Graph",
    "ShortestPaths",
    "connected_components",
    "is_undirected",
    "load_graph",
    "parse_graph",
    "reachable_from",
    "shortest_paths",
]
