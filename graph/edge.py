"""
edge.py — Graph Edge
====================
Connects two node labels.  Carries an optional weight; the renderer
draws a weight badge only when one is present.

Design decisions:
  - `source` and `target` are label strings, NOT object references.
    Edges stay serialisable and free of circular references.
  - Weight is None for unweighted inputs (coloring, Fleury) so the
    renderer can tell "no weight" apart from "weight 1".
  - `directed` is stored per-edge; Dijkstra follows arcs exactly as
    listed while every other driver works undirected.
  - Ids are sequential ("e0", "e1", …) so runs are reproducible.
"""

from typing import Optional, Union

Number = Union[int, float]


class Edge:
    """
    Attributes:
        id       : Unique identifier within its graph.
        source   : Label of the tail node.
        target   : Label of the head node.
        weight   : Numeric cost, or None when the input had no weights.
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("id", "source", "target", "weight", "directed")

    def __init__(
        self,
        source: str,
        target: str,
        weight: Optional[Number] = None,
        directed: bool = False,
        edge_id: str = "",
    ):
        self.id:       str              = edge_id
        self.source:   str              = source
        self.target:   str              = target
        self.weight:   Optional[Number] = weight
        self.directed: bool             = directed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def pair(self) -> frozenset:
        return frozenset((self.source, self.target))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":       self.id,
            "source":   self.source,
            "target":   self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def format_number(value: Optional[Number]) -> str:
    """3.0 → "3", 2.5 → "2.5", inf → "∞"."""
    if value is None:
        return ""
    if value == float("inf"):
        return "∞"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
