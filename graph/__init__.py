"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Edge, DisjointSet
    from graph import ParseError, ValidationError
    from graph import graph_from_adjacency, graph_from_edge_list, …
"""

from graph.edge         import Edge, format_number
from graph.graph        import Graph
from graph.disjoint_set import DisjointSet
from graph.errors       import InputError, ParseError, ValidationError
from graph.parsers      import (
    parse_json,
    parse_source,
    graph_from_adjacency,
    graph_from_weighted_adjacency,
    graph_from_edge_list,
)

__all__ = [
    "Edge",        "format_number",
    "Graph",
    "DisjointSet",
    "InputError",  "ParseError",  "ValidationError",
    "parse_json",  "parse_source",
    "graph_from_adjacency",
    "graph_from_weighted_adjacency",
    "graph_from_edge_list",
]
