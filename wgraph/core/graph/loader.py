"""Load a Graph from an edge-list file.

Format::

    # comment
    4            <- number of vertices
    0 1 4        <- source target [weight], weight defaults to 1
    2 3 2.5
"""

from __future__ import annotations

from pathlib import Path

from wgraph.core.exceptions import ParseError
from wgraph.core.graph.base import Graph

_COMMENT = "#"


def parse_graph(text: str, undirected: bool = False) -> Graph:
    """Build a graph from edge-list text. O(V + E).

    With ``undirected`` every line inserts both directions.
    """
    graph: Graph | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split(_COMMENT, 1)[0].strip()
        if not line:
            continue
        fields = line.split()

        if graph is None:
            if len(fields) != 1:
                raise ParseError(f"Line {lineno}: expected vertex count, got '{line}'")
            graph = Graph(_parse_int(fields[0], lineno))
            continue

        if len(fields) not in (2, 3):
            raise ParseError(f"Line {lineno}: expected 'source target [weight]', got '{line}'")
        v = _parse_int(fields[0], lineno)
        w = _parse_int(fields[1], lineno)
        weight = _parse_weight(fields[2], lineno) if len(fields) == 3 else 1.0

        if undirected:
            graph.add_undirected_edge(v, w, weight)
        else:
            graph.add_edge(v, w, weight)

    if graph is None:
        raise ParseError("Missing vertex count")
    return graph


def load_graph(path: Path, undirected: bool = False) -> Graph:
    """Read and parse an edge-list file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Cannot read {path}: {e}") from e
    return parse_graph(text, undirected=undirected)


def _parse_int(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Line {lineno}: '{token}' is not an integer") from None


def _parse_weight(token: str, lineno: int) -> float:
    try:
        weight = float(token)
    except ValueError:
        raise ParseError(f"Line {lineno}: '{token}' is not a number") from None
    if weight != weight:
        raise ParseError(f"Line {lineno}: weight can't be NaN")
    return weight
