"""
parsers.py — Input Adapters
===========================
Turns panel text into the canonical Graph.  Two input shapes exist and
each has exactly one adapter; drivers never see raw JSON.

    Weighted adjacency (Dijkstra)     {"A": {"B": 1, "C": 4}, …}
    Plain adjacency (coloring/Fleury) {"A": ["B", "D"], …}
    Edge list (Kruskal)               ["A-B-1", "B-C-2", …]

Plain adjacency is undirected.  A pair listed on both sides counts once;
listing a neighbour twice on both sides makes a parallel edge
(multiplicity = the larger of the two listings).  Neighbours that never
appear as keys are still added as nodes, after the declared ones.
"""

import json
import math
from typing import Any, Dict, List

from graph.edge import Number
from graph.errors import ParseError, ValidationError
from graph.graph import Graph


# ---------------------------------------------------------------------------
# Text → JSON
# ---------------------------------------------------------------------------
def parse_json(text: str, alert: str = "invalid data") -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"not valid JSON: {exc}", alert=alert) from exc


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def _as_number(text: str) -> Number:
    value = float(text)
    return int(value) if value.is_integer() else value


# ---------------------------------------------------------------------------
# Adjacency mapping
# ---------------------------------------------------------------------------
def graph_from_weighted_adjacency(data: Any) -> Graph:
    """
    {"A": {"B": 1}} → directed, weighted Graph.  Arcs are kept exactly
    as listed; Dijkstra relaxes only what the user wrote.
    """
    if not isinstance(data, dict) or not data:
        raise ValidationError("expected a non-empty JSON object of node → {neighbour: weight}")

    g = Graph(directed=True, weighted=True)
    for label in data:
        g.add_node(label)

    for label, nbrs in data.items():
        if not isinstance(nbrs, dict):
            raise ValidationError(f"neighbours of '{label}' must be an object of neighbour → weight")
        for nbr, weight in nbrs.items():
            if nbr == label:
                raise ValidationError(f"self-loop on '{label}'")
            if not _is_number(weight):
                raise ValidationError(f"weight {label}→{nbr} is not a finite number")
            if weight < 0:
                raise ValidationError(f"weight {label}→{nbr} is negative")
            g.create_edge(label, nbr, weight=weight)
    return g


def graph_from_adjacency(data: Any) -> Graph:
    """{"A": ["B"], "B": ["A"]} → undirected, unweighted Graph."""
    if not isinstance(data, dict) or not data:
        raise ValidationError("expected a non-empty JSON object of node → [neighbours]")

    listings: Dict[str, List[str]] = {}
    for label, nbrs in data.items():
        if not isinstance(nbrs, list) or not all(isinstance(n, str) for n in nbrs):
            raise ValidationError(f"neighbours of '{label}' must be a list of labels")
        if label in nbrs:
            raise ValidationError(f"self-loop on '{label}'")
        listings[label] = nbrs

    g = Graph(directed=False, weighted=False)
    for label in listings:
        g.add_node(label)
    for nbrs in listings.values():
        for nbr in nbrs:
            g.add_node(nbr)

    done = set()
    for label, nbrs in listings.items():
        for nbr in nbrs:
            pair = frozenset((label, nbr))
            if pair in done:
                continue
            done.add(pair)
            multiplicity = max(nbrs.count(nbr), listings.get(nbr, []).count(label))
            for _ in range(multiplicity):
                g.create_edge(label, nbr)

    for label, nbrs in listings.items():
        g.order_neighbours(label, nbrs)
    return g


# ---------------------------------------------------------------------------
# Flat edge list
# ---------------------------------------------------------------------------
def graph_from_edge_list(data: Any) -> Graph:
    """["A-B-1", …] → undirected, weighted Graph; nodes in first-seen order."""
    if not isinstance(data, list) or not data:
        raise ValidationError("expected a non-empty JSON array of \"u-v-weight\" strings", alert="invalid list")

    g = Graph(directed=False, weighted=True)
    for item in data:
        if not isinstance(item, str):
            raise ValidationError(f"edge {item!r} is not a string", alert="invalid list")
        parts = [p.strip() for p in item.split("-")]
        if len(parts) != 3 or not parts[0] or not parts[1]:
            raise ParseError(f"edge {item!r} is not of the form u-v-weight", alert="invalid list")
        u, v, w = parts
        try:
            weight = _as_number(w)
        except ValueError as exc:
            raise ParseError(f"weight of {item!r} is not a number", alert="invalid list") from exc
        if not math.isfinite(weight):
            raise ValidationError(f"weight of {item!r} is not finite", alert="invalid list")
        if u == v:
            raise ValidationError(f"self-loop on '{u}'", alert="invalid list")
        g.create_edge(u, v, weight=weight)
    return g


# ---------------------------------------------------------------------------
# Source node
# ---------------------------------------------------------------------------
def parse_source(text: str, graph: Graph) -> str:
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise ValidationError(f"source must be a node label, got {text!r}")
    label = text.strip()
    if not graph.has_node(label):
        raise ValidationError(f"source '{label}' is not a node of the graph")
    return label
