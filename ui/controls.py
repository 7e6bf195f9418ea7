"""
controls.py — UI Panels
========================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • speed_control      – playback speed preset shared by all panels
  • algorithm_panel    – textarea (+ start node), run button, canvas, log
  • numeric_panel      – integer fields, run button, log (GCD / RSA)

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine).
  - Element ids are prefixed with the panel key so panels never share
    a canvas or log.
  - The main app stitches them together.
"""

from html import escape
from typing import List, Tuple

from algorithms import AlgoInfo


# ---------------------------------------------------------------------------
# Speed Control
# ---------------------------------------------------------------------------
def speed_control(speed: str = "normal", presets: Tuple[str, ...] = ("slow", "normal", "fast", "instant")) -> str:
    options = "".join(
        f'<option value="{p}" {"selected" if p == speed else ""}>{p.capitalize()}</option>'
        for p in presets
    )
    return f"""
    <div class="panel speed-control">
      <label>Animation speed:
        <select id="speed-selector">{options}</select>
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Panel
# ---------------------------------------------------------------------------
def algorithm_panel(info: AlgoInfo, width: int = 600, height: int = 400) -> str:
    key = info.key
    source_block = ""
    if info.needs_source:
        source_block = f"""
        <label>Start node:
          <input type="text" id="{key}-source" value="{escape(info.default_source)}" size="6">
        </label>
        """

    pseudocode = "\n".join(escape(line) for line in info.pseudocode)

    return f"""
    <section class="panel algo-panel" data-algo="{key}">
      <h3>{escape(info.label)} <small>{escape(info.complexity_time)}</small></h3>
      <p class="hint">{escape(info.description)}</p>
      <textarea id="{key}-graph" rows="4">{escape(info.default_graph)}</textarea>
      {source_block}
      <button class="btn-primary btn-run" data-algo="{key}">▶ Run</button>
      <div class="canvas" id="{key}-canvas" style="width:{width}px;height:{height}px;"></div>
      <details><summary>Pseudocode</summary><pre>{pseudocode}</pre></details>
      <pre class="output" id="{key}-output"></pre>
    </section>
    """


# ---------------------------------------------------------------------------
# Numeric Panel
# ---------------------------------------------------------------------------
def numeric_panel(key: str, label: str, fields: List[Tuple[str, str]]) -> str:
    """fields: [(name, default value)]"""
    inputs = "".join(
        f'<label>{escape(name)}: <input type="number" data-field="{escape(name)}" '
        f'id="{key}-{escape(name)}" value="{escape(value)}"></label>'
        for name, value in fields
    )
    return f"""
    <section class="panel numeric-panel" data-numeric="{key}">
      <h3>{escape(label)}</h3>
      {inputs}
      <button class="btn-secondary btn-numeric" data-numeric="{key}">Compute</button>
      <pre class="output" id="{key}-output"></pre>
    </section>
    """
