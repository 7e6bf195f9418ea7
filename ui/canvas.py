"""
canvas.py — Graph Renderer
===========================
Immediate-mode redraw: positions + edges + colour state → Surface calls.

The renderer consumes:
  • surface          – where to draw (SVG for the page, recording for tests)
  • positions        – {label: (x, y)} from the layout engine
  • edges            – the graph's drawable edges
  • node_colors      – {label: colour token}
  • edge_highlights  – [EdgeHighlight]; first undirected match wins
  • config           – palette and dimensions

Design decisions:
  - NO state.  Every call clears the surface and draws everything again,
    so it is safe to call once per animation frame.
  - Edges first, then nodes, so nodes sit on top of line ends.
  - Colour tokens are looked up in the palette dicts; an unknown token
    is used verbatim as a CSS colour.
  - An edge whose endpoint has no position is skipped silently.
"""

from typing import Dict, Iterable, Optional, Sequence, Tuple

from graph import Edge, format_number
from algorithms.step import EdgeHighlight
from ui.surface import Surface


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # node colors (token → fill)
    node_colors: Dict[str, str] = {
        "default":   "#1f2937",   # slate
        "current":   "#fbbf24",   # amber — node being processed
        "settled":   "#10b981",   # emerald — distance final
        "selecting": "#ffffff",   # white — coloring is choosing
        "overflow":  "#cccccc",   # grey — palette exhausted
        # coloring palette
        "red":       "#ef4444",
        "blue":      "#3b82f6",
        "green":     "#10b981",
        "amber":     "#f59e0b",
        "violet":    "#8b5cf6",
    }

    # label colour overrides for light fills
    label_colors: Dict[str, str] = {
        "selecting": "#111827",
        "overflow":  "#111827",
    }

    # edge colors (token → stroke)
    edge_colors: Dict[str, str] = {
        "default":   "#4b5563",
        "relaxed":   "#ef4444",   # Dijkstra improving relaxation
        "tentative": "#fbbf24",   # Kruskal under review
        "accepted":  "#10b981",   # Kruskal forest
        "rejected":  "#ef4444",   # would close a cycle / colour conflict
        "crossing":  "#fbbf24",   # Fleury edge being crossed
        "path":      "#10b981",   # Fleury edges already walked
    }

    # node
    node_radius:        int = 22
    node_stroke:        str = "#e5e7eb"
    node_stroke_width:  int = 2
    node_label_color:   str = "#ffffff"
    node_label_size:    int = 14

    # edge
    edge_width:             int = 2
    edge_width_highlighted: int = 4
    weight_box:             int = 24
    weight_bg:              str = "#000000"
    weight_color:           str = "#fbbf24"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_graph(
    surface: Surface,
    positions: Dict[str, Tuple[float, float]],
    edges: Iterable[Edge],
    node_colors: Optional[Dict[str, str]] = None,
    edge_highlights: Optional[Sequence[EdgeHighlight]] = None,
    config: CanvasConfig = CONFIG,
) -> None:
    node_colors     = node_colors or {}
    edge_highlights = edge_highlights or []

    surface.clear()

    # -- edges (draw first so nodes sit on top) --
    for edge in edges:
        _render_edge(surface, positions, edge, edge_highlights, config)

    # -- nodes --
    for label, (x, y) in positions.items():
        _render_node(surface, label, x, y, node_colors.get(label), config)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(
    surface: Surface,
    positions: Dict[str, Tuple[float, float]],
    edge: Edge,
    highlights: Sequence[EdgeHighlight],
    config: CanvasConfig,
) -> None:
    start = positions.get(edge.source)
    end   = positions.get(edge.target)
    if start is None or end is None:
        return

    special = next((h for h in highlights if h.matches(edge.source, edge.target)), None)
    if special:
        stroke = config.edge_colors.get(special.color, special.color)
        width  = config.edge_width_highlighted
    else:
        stroke = config.edge_colors["default"]
        width  = config.edge_width

    (x1, y1), (x2, y2) = start, end
    surface.draw_line(x1, y1, x2, y2, stroke, width)

    # weight badge at the midpoint
    if edge.weight is not None:
        mx, my = (x1 + x2) / 2, (y1 + y2) / 2
        half = config.weight_box / 2
        surface.draw_rect(mx - half, my - half, config.weight_box, config.weight_box, config.weight_bg)
        surface.draw_text(mx, my, format_number(edge.weight), config.weight_color, config.node_label_size)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(
    surface: Surface,
    label: str,
    x: float,
    y: float,
    token: Optional[str],
    config: CanvasConfig,
) -> None:
    if token is None:
        fill = config.node_colors["default"]
    else:
        fill = config.node_colors.get(token, token)
    surface.draw_circle(x, y, config.node_radius, fill, config.node_stroke, config.node_stroke_width)
    text_color = config.label_colors.get(token, config.node_label_color)
    surface.draw_text(x, y, label, text_color, config.node_label_size)
