"""
recorder.py — Run Recorder
==========================
Runs one panel invocation to completion and captures every frame, so the
web page can play the run back with its own timer.

Usage:
    rec = Recorder(width=600, height=400)
    rec.start("kruskal", '["A-B-1", "B-C-2"]')   # may raise ParseError / ValidationError
    metrics = rec.run_to_completion()
    payload = rec.export(speed="fast")             # frames + log + result

Parsing happens in start(): a bad input raises before the layout is
computed or a single frame exists.
"""

import logging
import math
import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any

from graph import Graph
from algorithms import get_algorithm, prepare_run, AlgoInfo
from algorithms.step import Step
from engine.animator import Animator, speed_factor
from engine.context import RunContext
from ui.layout import DEFAULT_MARGIN
from ui.surface import SvgSurface

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Frame — one rendered step
# ---------------------------------------------------------------------------
@dataclass
class Frame:
    svg:      Optional[str]       # None for log-only steps
    log:      List[str]
    pause_ms: int


# ---------------------------------------------------------------------------
# Metrics dataclass — summary of the run
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    node_count:    int   = 0
    edge_count:    int   = 0
    total_steps:   int   = 0          # number of Steps yielded
    redraws:       int   = 0          # steps that touched the canvas
    log_lines:     int   = 0
    wall_time_ms:  float = 0.0        # compute time, not animation time


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames   : One Frame per Step, in order.
        metrics  : Computed RunMetrics (available after run_to_completion).
        context  : The RunContext of this run (surface, log, positions).
    """

    def __init__(self, width: float = 600, height: float = 400, margin: float = DEFAULT_MARGIN):
        self.width   = width
        self.height  = height
        self.margin  = margin

        self.frames:  List[Frame]          = []
        self.metrics: Optional[RunMetrics] = None
        self.context: Optional[RunContext] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._graph:     Optional[Graph]    = None
        self._kwargs:    Dict[str, Any]     = {}
        self._last:      Optional[Step]     = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, graph_text: str, source_text: str = "") -> None:
        """Parse the panel input and lay the graph out."""
        info = get_algorithm(algo_key)
        if info is None:
            raise KeyError(f"Unknown algorithm: {algo_key}")

        graph, kwargs = prepare_run(info, graph_text, source_text)

        self._algo_info = info
        self._graph     = graph
        self._kwargs    = kwargs
        self.frames     = []
        self.metrics    = None
        self._last      = None
        self.context    = RunContext.for_graph(graph, SvgSurface(self.width, self.height), self.margin)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, capture every frame, compute metrics."""
        if self.context is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        animator = Animator(self.context, speed="instant", on_step=self._capture)
        animator.run_sync(self._algo_info.fn(**self._kwargs))
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = RunMetrics(
            algo_key=self._algo_info.key,
            algo_label=self._algo_info.label,
            node_count=self._graph.node_count(),
            edge_count=self._graph.edge_count(),
            total_steps=len(self.frames),
            redraws=sum(1 for f in self.frames if f.svg is not None),
            log_lines=len(self.context.log),
            wall_time_ms=round(wall_ms, 2),
        )
        logger.info(
            "%s: %d nodes, %d edges → %d frames in %.2f ms",
            self.metrics.algo_key, self.metrics.node_count, self.metrics.edge_count,
            self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export (JSON-ready)
    # ------------------------------------------------------------------
    def export(self, speed: str = "normal") -> Dict[str, Any]:
        factor = speed_factor(speed)
        result = dict(self._last.overlay) if self._last else {}
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "frames": [
                {"svg": f.svg, "log": f.log, "pause_ms": int(f.pause_ms * factor)}
                for f in self.frames
            ],
            "graph":   self._graph.to_dict() if self._graph else {},
            "log":     self.context.log.lines if self.context else [],
            "result":  jsonable(result),
            "summary": asdict(self.metrics) if self.metrics else {},
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _capture(self, step: Step) -> None:
        svg = self.context.surface.to_svg() if step.redraw else None
        self.frames.append(Frame(svg=svg, log=list(step.log_lines), pause_ms=step.pause_ms))
        self._last = step


def jsonable(value: Any) -> Any:
    """Infinite distances become null; tuples become lists."""
    if isinstance(value, float) and math.isinf(value):
        return None
    if isinstance(value, dict):
        return {k: jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [jsonable(v) for v in value]
    return value
