"""
coloring.py — Greedy Graph Coloring
====================================
Single pass, no backtracking.  Nodes are coloured in the order they were
listed; each takes the first palette colour none of its already-coloured
neighbours uses.

When the palette runs out the node gets the OVERFLOW colour.  Two
overflow nodes can end up adjacent, so the final step checks every edge
and reports the colouring as improper instead of pretending it is valid.
"""

from typing import Generator, List, Dict, Sequence, Tuple

from graph import Graph
from algorithms.step import Step, StepBuilder, EdgeHighlight


PALETTE:   List[str] = ["red", "blue", "green", "amber", "violet"]
OVERFLOW:  str       = "overflow"
SELECTING: str       = "selecting"

PAUSE_START_MS  = 1000
PAUSE_SELECT_MS = 600
PAUSE_ASSIGN_MS = 800

PSEUDOCODE: List[str] = [
    "def GreedyColoring(graph, palette):",              # 0
    "    for u in V (input order):",                     # 1
    "        used ← {color[v] for v in adj(u) if colored}",  # 2
    "        color[u] ← first c in palette not in used",  # 3
    "        if none left: color[u] ← OVERFLOW",         # 4
    "    return color",                                  # 5
]


def find_conflicts(graph: Graph, colors: Dict[str, str]) -> List[Tuple[str, str]]:
    """Adjacent pairs sharing a colour, one entry per pair."""
    seen, conflicts = set(), []
    for e in graph.edge_list():
        if e.pair in seen:
            continue
        seen.add(e.pair)
        if colors.get(e.source) is not None and colors.get(e.source) == colors.get(e.target):
            conflicts.append((e.source, e.target))
    return conflicts


def greedy_coloring(graph: Graph, palette: Sequence[str] = PALETTE) -> Generator[Step, None, None]:

    colors:   Dict[str, str] = {}
    overflow: List[str]      = []

    sb = StepBuilder()
    sb.log("Starting greedy coloring...")
    yield sb.build(pause_ms=PAUSE_START_MS)

    for u in graph.node_ids():
        sb.current_node = u
        yield sb.build(pause_ms=PAUSE_SELECT_MS, node_colors={**colors, u: SELECTING})

        used   = {colors[v] for v, _ in graph.neighbours(u) if v in colors}
        choice = next((c for c in palette if c not in used), OVERFLOW)
        colors[u] = choice
        sb.color(u, choice)

        if choice == OVERFLOW:
            overflow.append(u)
            sb.log(f"Node {u}: palette exhausted, assigned {OVERFLOW} color")
        else:
            sb.log(f"Node {u}: assigned color {choice}")
        yield sb.build(pause_ms=PAUSE_ASSIGN_MS)

    conflicts = find_conflicts(graph, colors)
    sb.current_node = None
    sb.overlay["colors"]         = dict(colors)
    sb.overlay["overflow_nodes"] = overflow
    sb.overlay["conflicts"]      = conflicts
    sb.overlay["proper"]         = not conflicts

    if conflicts:
        sb.set_highlights([EdgeHighlight(a, b, "rejected") for a, b in conflicts])
        pairs = ", ".join(f"{a}-{b}" for a, b in conflicts)
        sb.log(f"⚠ Coloring is NOT proper: palette too small, conflicting edges {pairs}")
    elif overflow:
        sb.log(f"Palette exhausted at {', '.join(overflow)}, but no adjacent nodes share a color")
    sb.log(f"Done. {len(set(colors.values()))} color(s) used.")
    yield sb.build(is_final=True)
