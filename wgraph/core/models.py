"""Data models for wgraph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge between two vertices."""

    source: int
    target: int
    weight: float = 1.0
