"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over an explicit unvisited set.  Each round
scans the set for the smallest tentative distance (O(V) selection — the
demo graphs are tiny, no heap needed); ties go to the node listed first.

Yields a Step at:
  1. Start — everything at ∞ except the source
  2. Node selected  →  CURRENT, logged, long pause
  3. Each relaxation that improves a distance  →  edge RELAXED, short pause
  4. Node done  →  SETTLED
  5. Minimum is ∞ or set empty  →  final distance report

Arcs are followed exactly as the user listed them.  Weights are
non-negative (the input adapter rejects anything else).
"""

from typing import Generator, List, Dict

from graph import Graph, format_number
from algorithms.step import Step, StepBuilder, EdgeHighlight


PAUSE_VISIT_MS = 800
PAUSE_RELAX_MS = 500

# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← {v: ∞ for v in V}; dist[source] ← 0",  # 1
    "    unvisited ← V",                            # 2
    "    while unvisited:",                         # 3
    "        u ← argmin dist over unvisited",       # 4
    "        if dist[u] = ∞: break",                # 5
    "        for (v, w) in adj(u), v unvisited:",   # 6
    "            if dist[u] + w < dist[v]:",        # 7
    "                dist[v] ← dist[u] + w",        # 8
    "        unvisited.remove(u)",                  # 9
    "    return dist",                              # 10
]


def format_distances(dist: Dict[str, float]) -> str:
    return ", ".join(f"{n}: {format_number(d)}" for n, d in dist.items())


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, source: str) -> Generator[Step, None, None]:

    INF = float("inf")

    dist:      Dict[str, float] = {nid: INF for nid in graph.node_ids()}
    dist[source] = 0
    unvisited: Dict[str, None]  = dict.fromkeys(graph.node_ids())   # ordered set
    settled:   List[str]        = []

    sb = StepBuilder()
    sb.distances = dict(dist)
    sb.log(f"Starting from {source}...")
    yield sb.build()

    # --- main loop ---
    while unvisited:
        curr = min(unvisited, key=lambda n: dist[n])
        if dist[curr] == INF:
            break

        sb.set_current(curr)
        sb.set_highlights([])
        sb.log(f"-> Visiting {curr} (distance: {format_number(dist[curr])})")
        yield sb.build(pause_ms=PAUSE_VISIT_MS)

        for nbr, edge in graph.neighbours(curr):
            if nbr not in unvisited:
                continue
            new_dist = dist[curr] + edge.weight
            if new_dist < dist[nbr]:
                sb.log(
                    f"   relax {curr}-{nbr}: {format_number(dist[nbr])} -> {format_number(new_dist)}"
                )
                yield sb.build(
                    pause_ms=PAUSE_RELAX_MS,
                    edge_highlights=[EdgeHighlight(curr, nbr, "relaxed")],
                )
                dist[nbr] = new_dist
                sb.distances = dict(dist)

        del unvisited[curr]
        settled.append(curr)
        sb.color(curr, "settled")
        yield sb.build()

    # --- report ---
    unreachable = list(unvisited)
    sb.current_node = None
    sb.overlay["distances"]   = dict(dist)
    sb.overlay["settled"]     = list(settled)
    sb.overlay["unreachable"] = unreachable
    if unreachable:
        sb.log(f"Unreachable from {source}: {', '.join(unreachable)}")
    sb.log(f"Final distances: {format_distances(dist)}")
    yield sb.build(is_final=True)
