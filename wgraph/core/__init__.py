"""
Core module: data models, exceptions, and the priority queue.

Models (models.py):
    - Edge: A directed, weighted edge between two vertices

Exceptions (exceptions.py):
    - WGraphError: Base exception for all wgraph errors
    - GraphError: Invalid vertex, negative weight, not undirected
    - PriorityQueueError: Invalid/duplicate/missing index, underflow, key direction
    - ParseError: Edge-list file could not be parsed

Priority queue (pq.py):
    - IndexMinPQ: Binary min-heap with decrease-key by external index
"""

from wgraph.core.exceptions import (
    DuplicateIndex,
    GraphError,
    InvalidIndex,
    InvalidKeyDirection,
    InvalidSize,
    InvalidVertex,
    NegativeWeight,
    NotPresent,
    NotUndirected,
    ParseError,
    PriorityQueueError,
    Underflow,
    WGraphError,
)
from wgraph.core.models import Edge
from wgraph.core.pq import IndexMinPQ

__all__ = [
    # Models
    "Edge",
    # Priority queue
    "IndexMinPQ",
    # Exceptions
    "WGraphError",
    "InvalidSize",
    "ParseError",
    "GraphError",
    "InvalidVertex",
    "NegativeWeight",
    "NotUndirected",
    "PriorityQueueError",
    "InvalidIndex",
    "DuplicateIndex",
    "Underflow",
    "NotPresent",
    "InvalidKeyDirection",
]
