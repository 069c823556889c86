"""wgraph custom exceptions."""


class WGraphError(Exception):
    """Base exception for wgraph errors."""


class InvalidSize(WGraphError):
    """Negative graph size or priority queue capacity."""


class ParseError(WGraphError):
    """Error parsing an edge-list file."""


class GraphError(WGraphError):
    """Base exception for graph operations."""


class InvalidVertex(GraphError):
    """Vertex outside [0, V)."""


class NegativeWeight(GraphError):
    """Edge weight below zero."""


class NotUndirected(GraphError):
    """Operation requires an undirected graph."""


class PriorityQueueError(WGraphError):
    """Base exception for indexed priority queue operations."""


class InvalidIndex(PriorityQueueError):
    """Index outside [0, capacity)."""


class DuplicateIndex(PriorityQueueError):
    """Index is already in the priority queue."""


class Underflow(PriorityQueueError):
    """Priority queue is empty."""


class NotPresent(PriorityQueueError):
    """Index is not in the priority queue."""


class InvalidKeyDirection(PriorityQueueError):
    """decrease_key/increase_key called with a key that moves the wrong way."""
