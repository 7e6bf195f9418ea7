"""
fleury.py — Fleury's Eulerian Trail
====================================
"Don't burn bridges": from the current node take the first remaining
edge whose removal keeps everything reachable, unless it is the only
edge left.  Runs on a working copy so the full graph stays available
for the background drawing.

Outcomes (overlay["outcome"]):
  • "circuit"       – 0 odd-degree nodes, walk returned to its start
  • "trail"         – 2 odd-degree nodes, walk ends at the other one
  • "not_eulerian"  – odd-degree count is neither 0 nor 2; log-only step,
                      nothing is drawn
  • "stranded"      – degrees were fine but the edges are split into
                      pieces the walk cannot reach; stops instead of
                      looping forever
"""

from typing import Generator, List

from graph import Graph, Edge
from algorithms.step import Step, StepBuilder, EdgeHighlight


PAUSE_START_MS = 1000
PAUSE_CROSS_MS = 800
PAUSE_MOVE_MS  = 800

PSEUDOCODE: List[str] = [
    "def Fleury(graph):",                                   # 0
    "    odd ← nodes with odd degree",                      # 1
    "    if |odd| ∉ {0, 2}: report not Eulerian",           # 2
    "    u ← odd[0] if odd else first node with an edge",   # 3
    "    while edges remain:",                              # 4
    "        pick (u, v) that is not a bridge,",            # 5
    "            unless it is u's only edge",               # 6
    "        remove (u, v); u ← v",                         # 7
]


def is_valid_crossing(work: Graph, u: str, edge: Edge) -> bool:
    """True if crossing `edge` from `u` does not cut off anything still reachable."""
    if work.degree(u) == 1:
        return True
    before = work.count_reachable(u)
    after  = work.count_reachable(u, skip_edge=edge.id)
    return before == after


def fleury(graph: Graph) -> Generator[Step, None, None]:

    sb = StepBuilder()

    # --- precondition ---
    odds = graph.odd_degree_nodes()
    if len(odds) not in (0, 2):
        sb.overlay["outcome"]   = "not_eulerian"
        sb.overlay["odd_nodes"] = odds
        sb.log(
            f"Error: {len(odds)} odd-degree nodes ({', '.join(odds)}). "
            f"The graph is not Eulerian or semi-Eulerian."
        )
        yield sb.build(is_final=True, redraw=False)
        return

    work = graph.copy()
    if odds:
        curr = odds[0]
    else:
        # isolated nodes cannot start a walk
        curr = next((n for n in graph.node_ids() if graph.degree(n) > 0), graph.node_ids()[0])
    walked: List[EdgeHighlight] = []
    sb.path = [curr]

    sb.set_current(curr)
    sb.log(f"Starting at node {curr}")
    yield sb.build(pause_ms=PAUSE_START_MS)

    stranded = False
    while work.edge_count() > 0:
        options = work.neighbours(curr)
        if not options:
            stranded = True
            sb.log(
                f"Stuck at {curr}: {work.edge_count()} edge(s) cannot be reached from here, "
                f"the edges are not connected."
            )
            break

        nbr, edge = next(
            ((n, e) for n, e in options if is_valid_crossing(work, curr, e)),
            options[0],
        )

        sb.log(f"Crossing from {curr} to {nbr}")
        yield sb.build(
            pause_ms=PAUSE_CROSS_MS,
            edge_highlights=walked + [EdgeHighlight(curr, nbr, "crossing")],
        )

        walked.append(EdgeHighlight(curr, nbr, "path"))
        work.remove_edge(edge.id)
        curr = nbr
        sb.path.append(curr)

        sb.node_colors = {}
        sb.set_current(curr)
        sb.set_highlights(walked)
        yield sb.build(pause_ms=PAUSE_MOVE_MS)

    if stranded:
        outcome = "stranded"
    elif sb.path[0] == sb.path[-1]:
        outcome = "circuit"
    else:
        outcome = "trail"

    sb.overlay["outcome"] = outcome
    sb.overlay["path"]    = list(sb.path)
    if outcome == "circuit":
        sb.log("Eulerian circuit completed.")
    elif outcome == "trail":
        sb.log("Eulerian trail completed.")
    sb.log(f"Path: {' → '.join(sb.path)}")
    yield sb.build(is_final=True)
