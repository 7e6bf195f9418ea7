"""
graph.py — Canonical Graph Container
=====================================
The single internal representation every driver consumes, whichever
input shape the user typed.

Responsibilities:
  1. Ordered node set + edges keyed by id      (add / remove)
  2. Adjacency queries                         (neighbours, degree, …)
  3. Reachability for Fleury's bridge test     (count_reachable)
  4. Working copies                            (copy)
  5. Drawing helpers                           (drawable_edges)

Design decisions:
  - Nodes live in a dict used as an ordered set: insertion order is the
    order labels first appeared in the input, and that order drives
    layout, tie-breaking and start-node choice.
  - A separate adjacency dict `_adj[node] → [(neighbour, edge_id)]` is
    maintained incrementally so neighbour queries are O(degree), not O(E).
    Its per-node order is the order neighbours were listed.
  - Parallel undirected edges are allowed (multigraphs are perfectly
    good Eulerian inputs).
"""

from collections import deque
from typing import Dict, List, Tuple, Optional, Iterable

from graph.edge import Edge, Number


class Graph:
    """
    Attributes:
        edges    : {edge_id: Edge}
        directed : bool – graph-level directedness
        weighted : bool – whether edges carry weights
        _nodes   : {label: None} — ordered set of node labels
        _adj     : {label: [(neighbour, edge_id), …]}
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed
        self.weighted: bool            = weighted
        self._nodes:   Dict[str, None] = {}
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}
        self._next_id: int             = 0

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, label: str) -> str:
        if label not in self._nodes:
            self._nodes[label] = None
            self._adj[label] = []
        return label

    def has_node(self, label: str) -> bool:
        return label in self._nodes

    def node_ids(self) -> List[str]:
        return list(self._nodes)

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.add_node(edge.source)
        self.add_node(edge.target)
        self.edges[edge.id] = edge
        # maintain adjacency
        self._adj[edge.source].append((edge.target, edge.id))
        if not edge.directed:
            self._adj[edge.target].append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, weight: Optional[Number] = None) -> Edge:
        edge_id = f"e{self._next_id}"
        self._next_id += 1
        return self.add_edge(Edge(source, target, weight=weight, directed=self.directed, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        if edge_id not in self.edges:
            return
        e = self.edges.pop(edge_id)
        # drop exactly this edge; parallel edges keep their own ids
        self._adj[e.source] = [(n, eid) for n, eid in self._adj[e.source] if eid != edge_id]
        if not e.directed:
            self._adj[e.target] = [(n, eid) for n, eid in self._adj[e.target] if eid != edge_id]

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] in listed order."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def order_neighbours(self, node_id: str, listing: List[str]) -> None:
        """Re-sort a node's adjacency to follow the order its neighbours were listed in."""
        rank = {}
        for i, label in enumerate(listing):
            rank.setdefault(label, i)
        self._adj[node_id].sort(key=lambda item: rank.get(item[0], len(listing)))

    def degree(self, node_id: str) -> int:
        return len(self._adj.get(node_id, []))

    def odd_degree_nodes(self) -> List[str]:
        return [n for n in self._nodes if self.degree(n) % 2 != 0]

    def count_reachable(self, start: str, skip_edge: Optional[str] = None) -> int:
        """
        Breadth-first count of nodes reachable from `start`, optionally
        pretending `skip_edge` is absent.
        """
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nbr, eid in self._adj.get(node, []):
                if eid == skip_edge or nbr in seen:
                    continue
                seen.add(nbr)
                queue.append(nbr)
        return len(seen)

    # ==================================================================
    # COPIES & DRAWING
    # ==================================================================
    def copy(self) -> "Graph":
        """Working copy with the same ids, so edges can be matched back."""
        g = Graph(directed=self.directed, weighted=self.weighted)
        for label in self._nodes:
            g.add_node(label)
        for e in self.edges.values():
            g.add_edge(Edge(e.source, e.target, weight=e.weight, directed=e.directed, edge_id=e.id))
        g._next_id = self._next_id
        return g

    def drawable_edges(self) -> List[Edge]:
        """
        Edges as lines on the canvas.  Undirected graphs draw every edge;
        for directed input the arcs u→v and v→u collapse into one line
        (first one listed wins, including its weight badge).
        """
        if not self.directed:
            return list(self.edges.values())
        seen = set()
        lines = []
        for e in self.edges.values():
            if e.pair in seen:
                continue
            seen.add(e.pair)
            lines.append(e)
        return lines

    def edge_list(self) -> Iterable[Edge]:
        return self.edges.values()

    # ==================================================================
    # SERIALISATION & UTILITY
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "nodes":    self.node_ids(),
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"
