"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every panel the showcase knows about.

    from algorithms import REGISTRY, get_algorithm, prepare_run

REGISTRY is a dict:
    {
        "dijkstra": AlgoInfo(key, label, fn, pseudocode, input_format, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is: write the generator, add one entry here.
`input_format` names the adapter that turns panel text into a Graph, so
no driver ever parses its own input.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Dict, Optional, Tuple

from graph import (
    Graph,
    parse_json,
    parse_source,
    graph_from_adjacency,
    graph_from_weighted_adjacency,
    graph_from_edge_list,
)

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.dijkstra import dijkstra        as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.kruskal  import kruskal         as _kruskal,  PSEUDOCODE as _kr_pc
from algorithms.coloring import greedy_coloring as _coloring, PSEUDOCODE as _col_pc
from algorithms.fleury   import fleury          as _fleury,   PSEUDOCODE as _fl_pc


# ---------------------------------------------------------------------------
# Input formats → (adapter, alert text)
# ---------------------------------------------------------------------------
INPUT_FORMATS: Dict[str, Tuple[Callable[[Any], Graph], str]] = {
    "weighted-adjacency": (graph_from_weighted_adjacency, "invalid data"),
    "adjacency":          (graph_from_adjacency,          "invalid data"),
    "edge-list":          (graph_from_edge_list,          "invalid list"),
}


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "dijkstra"
    label:            str                    # human label, e.g. "Dijkstra"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    input_format:     str                    # key into INPUT_FORMATS
    needs_source:     bool     = False       # panel shows a start-node field
    default_graph:    str      = ""          # example text for the textarea
    default_source:   str      = ""
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str      = ""
    description:      str      = ""          # one-liner for the panel


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra", fn=_dijkstra, pseudocode=_dij_pc,
        input_format="weighted-adjacency", needs_source=True,
        default_graph='{"A": {"B": 4, "C": 2}, "B": {"A": 4, "C": 1, "D": 5}, '
                      '"C": {"A": 2, "B": 1, "D": 8}, "D": {"B": 5, "C": 8}}',
        default_source="A",
        tags=["weighted", "shortest-path"],
        complexity_time="O(V²)",
        description="Settles the closest unvisited node, then relaxes its edges.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal", fn=_kruskal, pseudocode=_kr_pc,
        input_format="edge-list",
        default_graph='["A-B-4", "A-C-2", "B-C-1", "B-D-5", "C-D-8", "D-E-3"]',
        tags=["weighted", "spanning-tree"],
        complexity_time="O(E log E)",
        description="Takes the cheapest edge that does not close a cycle.",
    ),

    "coloring": AlgoInfo(
        key="coloring", label="Greedy Coloring", fn=_coloring, pseudocode=_col_pc,
        input_format="adjacency",
        default_graph='{"A": ["B", "C"], "B": ["A", "C", "D"], "C": ["A", "B", "D"], "D": ["B", "C"]}',
        tags=["unweighted", "coloring"],
        complexity_time="O(V + E)",
        description="Gives each node the first colour its neighbours have not used.",
    ),

    "fleury": AlgoInfo(
        key="fleury", label="Fleury", fn=_fleury, pseudocode=_fl_pc,
        input_format="adjacency",
        default_graph='{"A": ["B", "D"], "B": ["A", "C"], "C": ["B", "D"], "D": ["A", "C"]}',
        tags=["unweighted", "eulerian"],
        complexity_time="O(E²)",
        description="Walks every edge once, crossing a bridge only when forced.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def prepare_run(info: AlgoInfo, graph_text: str, source_text: str = "") -> Tuple[Graph, Dict[str, Any]]:
    """
    Panel text → (graph, kwargs for info.fn).  Raises ParseError /
    ValidationError before anything is drawn.
    """
    adapter, alert = INPUT_FORMATS[info.input_format]
    graph = adapter(parse_json(graph_text, alert=alert))
    kwargs: Dict[str, Any] = {"graph": graph}
    if info.needs_source:
        kwargs["source"] = parse_source(source_text, graph)
    return graph, kwargs


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "INPUT_FORMATS",
    "get_algorithm",
    "list_algorithms",
    "prepare_run",
]
