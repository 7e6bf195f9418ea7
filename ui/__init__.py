"""
ui/
---
Presentation layer.

    from ui import render_graph, circular_layout, SvgSurface
    from ui import algorithm_panel, numeric_panel, speed_control
"""

from ui.canvas  import render_graph, CanvasConfig, CONFIG
from ui.layout  import circular_layout
from ui.surface import Surface, SvgSurface, RecordingSurface

from ui.controls import (
    algorithm_panel,
    numeric_panel,
    speed_control,
)

__all__ = [
    "render_graph",
    "CanvasConfig",
    "CONFIG",
    "circular_layout",
    "Surface",
    "SvgSurface",
    "RecordingSurface",
    "algorithm_panel",
    "numeric_panel",
    "speed_control",
]
