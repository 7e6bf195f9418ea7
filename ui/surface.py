"""
surface.py — Drawing Surfaces
=============================
The render engine only ever talks to a Surface: clear, line, filled
circle, filled rectangle, centred text.

  • SvgSurface       – accumulates SVG elements; `to_svg()` gives the
                       document the page injects into the panel.
  • RecordingSurface – remembers every call; lets tests check draw order
                       and colours without parsing SVG.
"""

import html
from typing import List, Tuple, Any


class Surface:
    """Abstract drawing surface.  Subclasses implement the five primitives."""

    def __init__(self, width: float, height: float):
        self.width  = width
        self.height = height

    def clear(self) -> None:
        raise NotImplementedError

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float) -> None:
        raise NotImplementedError

    def draw_circle(self, cx: float, cy: float, r: float, fill: str, stroke: str, stroke_width: float) -> None:
        raise NotImplementedError

    def draw_rect(self, x: float, y: float, w: float, h: float, fill: str) -> None:
        raise NotImplementedError

    def draw_text(self, x: float, y: float, text: str, color: str, size: int = 14) -> None:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# SVG
# ---------------------------------------------------------------------------
class SvgSurface(Surface):

    def __init__(self, width: float, height: float, background: str = "#111827"):
        super().__init__(width, height)
        self.background = background
        self._parts: List[str] = []

    def clear(self) -> None:
        self._parts = [
            f'<rect width="{self.width}" height="{self.height}" fill="{self.background}"/>'
        ]

    def draw_line(self, x1, y1, x2, y2, color, width):
        self._parts.append(
            f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
            f'stroke="{color}" stroke-width="{width}"/>'
        )

    def draw_circle(self, cx, cy, r, fill, stroke, stroke_width):
        self._parts.append(
            f'<circle cx="{cx:.1f}" cy="{cy:.1f}" r="{r}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )

    def draw_rect(self, x, y, w, h, fill):
        self._parts.append(
            f'<rect x="{x:.1f}" y="{y:.1f}" width="{w}" height="{h}" fill="{fill}"/>'
        )

    def draw_text(self, x, y, text, color, size=14):
        self._parts.append(
            f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="middle" dominant-baseline="central" '
            f'font-size="{size}" font-family="Consolas, monospace" font-weight="bold" '
            f'fill="{color}">{html.escape(str(text))}</text>'
        )

    def to_svg(self) -> str:
        return "\n".join(
            [
                f'<svg width="{self.width}" height="{self.height}" '
                f'viewBox="0 0 {self.width} {self.height}" xmlns="http://www.w3.org/2000/svg">'
            ]
            + self._parts
            + ["</svg>"]
        )


# ---------------------------------------------------------------------------
# Recording (tests)
# ---------------------------------------------------------------------------
class RecordingSurface(Surface):

    def __init__(self, width: float = 600, height: float = 400):
        super().__init__(width, height)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def clear(self):
        self.calls.append(("clear", ()))

    def draw_line(self, x1, y1, x2, y2, color, width):
        self.calls.append(("line", (x1, y1, x2, y2, color, width)))

    def draw_circle(self, cx, cy, r, fill, stroke, stroke_width):
        self.calls.append(("circle", (cx, cy, r, fill, stroke, stroke_width)))

    def draw_rect(self, x, y, w, h, fill):
        self.calls.append(("rect", (x, y, w, h, fill)))

    def draw_text(self, x, y, text, color, size=14):
        self.calls.append(("text", (x, y, text, color, size)))

    def of_kind(self, kind: str) -> List[Tuple[Any, ...]]:
        return [args for k, args in self.calls if k == kind]
