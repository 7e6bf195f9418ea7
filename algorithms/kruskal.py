"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Sort edges by weight (stable, so equal weights keep input order), then
take each edge unless its endpoints already share a component.

Yields a Step at:
  1. Start — all edges drawn plain
  2. Edge under review  →  TENTATIVE (yellow)
  3. Accepted           →  ACCEPTED (green), joins the forest
  4. Rejected           →  REJECTED (red) flash, then back to the forest
  5. Done               →  total cost
"""

from typing import Generator, List

from graph import Graph, DisjointSet, format_number
from algorithms.step import Step, StepBuilder, EdgeHighlight


PAUSE_START_MS  = 1000
PAUSE_REVIEW_MS = 1000
PAUSE_REJECT_MS = 600
PAUSE_NEXT_MS   = 500

PSEUDOCODE: List[str] = [
    "def Kruskal(edges):",                          # 0
    "    sort edges by weight",                     # 1
    "    make_set(v) for every v",                  # 2
    "    for (u, v, w) in edges:",                  # 3
    "        if find(u) ≠ find(v):",                # 4
    "            union(u, v); mst.add((u, v, w))",  # 5
    "        else: reject — would close a cycle",   # 6
    "    return mst",                               # 7
]


def kruskal(graph: Graph) -> Generator[Step, None, None]:

    edges = sorted(graph.edge_list(), key=lambda e: e.weight)
    sets  = DisjointSet(graph.node_ids())

    accepted: List[EdgeHighlight] = []
    mst:      List[dict]          = []
    rejected: List[dict]          = []
    total = 0

    sb = StepBuilder()
    sb.log("Sorting edges...")
    yield sb.build(pause_ms=PAUSE_START_MS)

    for e in edges:
        name = f"{e.source}-{e.target}"

        sb.set_highlights([EdgeHighlight(e.source, e.target, "tentative")] + accepted)
        sb.log(f"Reviewing {name} ({format_number(e.weight)})...")
        yield sb.build(pause_ms=PAUSE_REVIEW_MS)

        if sets.union(e.source, e.target):
            total += e.weight
            mst.append({"u": e.source, "v": e.target, "w": e.weight})
            accepted.append(EdgeHighlight(e.source, e.target, "accepted"))
            sb.set_highlights(accepted)
            sb.overlay["mst"]   = list(mst)
            sb.overlay["total"] = total
            sb.log("✅ Accepted")
            yield sb.build(pause_ms=PAUSE_NEXT_MS)
        else:
            rejected.append({"u": e.source, "v": e.target, "w": e.weight})
            sb.set_highlights([EdgeHighlight(e.source, e.target, "rejected")] + accepted)
            sb.log("❌ Rejected (cycle)")
            yield sb.build(pause_ms=PAUSE_REJECT_MS)
            sb.set_highlights(accepted)
            yield sb.build(pause_ms=PAUSE_NEXT_MS)

    components = graph.node_count() - len(mst)
    sb.overlay["mst"]        = list(mst)
    sb.overlay["total"]      = total
    sb.overlay["rejected"]   = rejected
    sb.overlay["components"] = components
    if components > 1:
        sb.log(f"Input is disconnected: spanning forest of {components} trees")
    sb.log(f"Total cost: {format_number(total)}")
    yield sb.build(is_final=True)
