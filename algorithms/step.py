"""
step.py — Algorithm Step Snapshot
==================================
Every graph driver is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything one frame needs:

    • The colour token of every node that has one
    • The highlighted edges, in draw-priority order
    • The log lines this step appends to the panel output
    • How long the animation should rest on this frame
    • Algorithm-specific results (distances, path, MST, …)

Design decisions:
  - Step is a plain frozen dataclass.  It is a SNAPSHOT: colours and
    highlights are the complete state for the frame, not a diff, so the
    renderer can redraw from scratch every time.
  - `log_lines` IS a delta — the output log is append-only.
  - `redraw=False` marks a log-only step (e.g. Fleury refusing a graph
    that has no Eulerian trail): the host must not touch the canvas.
  - Restarting a run means calling the generator again; nothing here
    can be rewound in place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, NamedTuple


# ---------------------------------------------------------------------------
# Edge highlight — undirected match, colour override for one frame
# ---------------------------------------------------------------------------
class EdgeHighlight(NamedTuple):
    u:     str
    v:     str
    color: str

    def matches(self, a: str, b: str) -> bool:
        return (self.u == a and self.v == b) or (self.u == b and self.v == a)


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current_node    : Node the algorithm is standing on (or None).
        node_colors     : {node_id: colour token} for the whole frame.
        edge_highlights : [EdgeHighlight] for the whole frame; first match wins.
        log_lines       : Lines appended to the output log by this step.
        pause_ms        : Suggested rest on this frame at normal speed.
        redraw          : False for log-only steps.
        distances       : Current tentative distances (Dijkstra).
        path            : Node sequence walked so far (Fleury).
        overlay         : Free-form dict of algorithm results:
                            • "distances"      – final distance map
                            • "mst" / "total"  – Kruskal forest and cost
                            • "colors"         – coloring assignment
                            • "conflicts"      – same-colour adjacent pairs
                            • "outcome"        – Fleury verdict
        is_final        : True on the very last step.
    """

    step_number:      int                          = 0
    current_node:     Optional[str]                = None
    node_colors:      Dict[str, str]               = field(default_factory=dict)
    edge_highlights:  List[EdgeHighlight]          = field(default_factory=list)
    log_lines:        List[str]                    = field(default_factory=list)
    pause_ms:         int                          = 0
    redraw:           bool                         = True
    distances:        Dict[str, float]             = field(default_factory=dict)
    path:             List[str]                    = field(default_factory=list)
    overlay:          Dict[str, Any]               = field(default_factory=dict)
    is_final:         bool                         = False


# ---------------------------------------------------------------------------
# Convenience builder so drivers don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad a driver keeps for the whole run.  Colours,
    highlights, distances and path persist between builds; log lines
    are cleared after each build.

    Usage inside a driver:
        sb = StepBuilder()
        sb.color("A", "current")
        sb.log("-> Visiting A (distance 0)")
        yield sb.build(pause_ms=800)
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.current_node:     Optional[str]        = None
        self.node_colors:      Dict[str, str]       = {}
        self.edge_highlights:  List[EdgeHighlight]  = []
        self.log_lines:        List[str]            = []
        self.distances:        Dict[str, float]     = {}
        self.path:             List[str]            = []
        self.overlay:          Dict[str, Any]       = {}
        self._step_no:         int                  = 0

    # -- helpers --
    def color(self, node_id: str, token: str):
        self.node_colors[node_id] = token

    def set_current(self, node_id: Optional[str], token: str = "current"):
        self.current_node = node_id
        if node_id is not None:
            self.node_colors[node_id] = token

    def highlight(self, u: str, v: str, color: str):
        self.edge_highlights.append(EdgeHighlight(u, v, color))

    def set_highlights(self, highlights: List[EdgeHighlight]):
        self.edge_highlights = list(highlights)

    def log(self, line: str):
        self.log_lines.append(line)

    def build(
        self,
        pause_ms: int = 0,
        is_final: bool = False,
        redraw: bool = True,
        node_colors: Optional[Dict[str, str]] = None,
        edge_highlights: Optional[List[EdgeHighlight]] = None,
    ) -> Step:
        """Freeze the pad.  `node_colors` / `edge_highlights` override for this frame only."""
        step = Step(
            step_number=self._step_no,
            current_node=self.current_node,
            node_colors=dict(self.node_colors if node_colors is None else node_colors),
            edge_highlights=list(self.edge_highlights if edge_highlights is None else edge_highlights),
            log_lines=list(self.log_lines),
            pause_ms=pause_ms,
            redraw=redraw,
            distances=dict(self.distances),
            path=list(self.path),
            overlay=dict(self.overlay),
            is_final=is_final,
        )
        self._step_no += 1
        self.log_lines = []
        return step
