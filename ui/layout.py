"""
layout.py — Circular Layout
===========================
Nodes evenly spaced on a circle centred in the canvas, node i at angle
i·2π/N.  Deterministic for a given input order; an empty node list gives
an empty mapping.
"""

import math
from typing import Dict, Sequence, Tuple

Point = Tuple[float, float]

DEFAULT_MARGIN = 50


def circular_layout(
    nodes: Sequence[str],
    width: float,
    height: float,
    margin: float = DEFAULT_MARGIN,
) -> Dict[str, Point]:
    if not nodes:
        return {}

    cx, cy = width / 2, height / 2
    radius = max(0.0, min(width, height) / 2 - margin)
    angle_step = 2 * math.pi / len(nodes)

    return {
        label: (
            cx + radius * math.cos(i * angle_step),
            cy + radius * math.sin(i * angle_step),
        )
        for i, label in enumerate(nodes)
    }
