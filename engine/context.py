"""
context.py — Per-Run Context
============================
Everything one panel invocation owns: its drawing surface, its node
positions, the edges to draw, its output log and its cancel token.  A
fresh RunContext is built for every run and handed to the animator;
nothing lives in module globals, so two panels can run side by side.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from graph import Graph, Edge
from algorithms.step import Step
from ui.canvas import render_graph, CanvasConfig, CONFIG
from ui.layout import circular_layout, DEFAULT_MARGIN
from ui.surface import Surface


# ---------------------------------------------------------------------------
# Output log — append-only, never read back by the drivers
# ---------------------------------------------------------------------------
class OutputLog:

    def __init__(self):
        self._lines: List[str] = []

    def append(self, line: str) -> None:
        self._lines.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))


# ---------------------------------------------------------------------------
# Cancel token
# ---------------------------------------------------------------------------
class CancelToken:

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------
@dataclass
class RunContext:
    surface:   Surface
    positions: Dict[str, Tuple[float, float]]
    edges:     List[Edge]
    log:       OutputLog    = field(default_factory=OutputLog)
    token:     CancelToken  = field(default_factory=CancelToken)
    config:    CanvasConfig = CONFIG

    @classmethod
    def for_graph(cls, graph: Graph, surface: Surface, margin: float = DEFAULT_MARGIN) -> "RunContext":
        """Lay the graph out once for this run."""
        positions = circular_layout(graph.node_ids(), surface.width, surface.height, margin)
        return cls(surface=surface, positions=positions, edges=graph.drawable_edges())

    def apply(self, step: Step) -> None:
        """Push one step to the sinks: redraw (unless log-only), then log."""
        if step.redraw:
            render_graph(
                self.surface,
                self.positions,
                self.edges,
                step.node_colors,
                step.edge_highlights,
                self.config,
            )
        self.log.extend(step.log_lines)
