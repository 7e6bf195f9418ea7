"""
main.py — Algorithms Showcase Flask App
========================================
The web server that powers the showcase.

Routes:
  GET  /                        – page with one panel per algorithm
  GET  /api/algorithms          – registry metadata
  POST /api/run/<algo_key>      – parse input, run, return every frame
  POST /api/numeric/<key>       – GCD / extended GCD / RSA

State management:
  None on the server.  Every request parses its own input, builds its
  own RunContext and throws it away when the response is sent, so any
  number of panels can run at once.  The page plays the returned frames
  back with timed delays.

Errors:
  ParseError / ValidationError become HTTP 400 with a short `error`
  string the page shows as an alert; no frame is returned.
"""

import logging

from flask import Flask, render_template_string, request, jsonify

from config import Config
from graph import InputError
from algorithms import get_algorithm, list_algorithms
from algorithms.numeric import parse_int, euclid_gcd, extended_gcd, rsa_demo
from engine import Recorder, SPEED_PRESETS
from ui import algorithm_panel, numeric_panel, speed_control

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Numeric panels: key → (label, [(field, default)])
# ---------------------------------------------------------------------------
NUMERIC_PANELS = {
    "euclid":   ("Euclid — GCD",          [("a", "48"), ("b", "18")]),
    "extended": ("Extended Euclid",       [("a", "240"), ("b", "46")]),
    "rsa":      ("RSA (toy)",             [("p", "61"), ("q", "53"), ("m", "65")]),
}


def create_app(overrides: dict = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env(Config.ENV_PREFIX)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    register_routes(app)
    return app


def _json_body() -> dict:
    """Request JSON as a dict; anything else reads as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_routes(app: Flask) -> None:

    # -----------------------------------------------------------------------
    # Errors
    # -----------------------------------------------------------------------
    @app.errorhandler(InputError)
    def handle_input_error(exc: InputError):
        logger.warning("rejected input on %s: %s", request.path, exc.detail)
        return jsonify({"error": exc.alert, "detail": exc.detail}), 400

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        width, height = app.config["CANVAS_WIDTH"], app.config["CANVAS_HEIGHT"]
        panels = [algorithm_panel(info, width, height) for info in list_algorithms()]
        numeric = [numeric_panel(key, label, fields) for key, (label, fields) in NUMERIC_PANELS.items()]
        return render_template_string(
            INDEX_TEMPLATE,
            speed=speed_control(app.config["DEFAULT_SPEED"], tuple(SPEED_PRESETS)),
            panels=panels,
            numeric=numeric,
        )

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "key":          info.key,
                "label":        info.label,
                "input_format": info.input_format,
                "needs_source": info.needs_source,
                "pseudocode":   info.pseudocode,
                "tags":         info.tags,
                "description":  info.description,
            }
            for info in list_algorithms()
        ])

    # -----------------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------------
    @app.route("/api/run/<algo_key>", methods=["POST"])
    def api_run(algo_key: str):
        if get_algorithm(algo_key) is None:
            return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404

        data  = _json_body()
        speed = data.get("speed", app.config["DEFAULT_SPEED"])

        rec = Recorder(
            width=app.config["CANVAS_WIDTH"],
            height=app.config["CANVAS_HEIGHT"],
            margin=app.config["LAYOUT_MARGIN"],
        )
        rec.start(algo_key, data.get("graph", ""), data.get("source", ""))
        rec.run_to_completion()
        return jsonify(rec.export(speed=speed))

    # -----------------------------------------------------------------------
    # API: Numeric panels
    # -----------------------------------------------------------------------
    @app.route("/api/numeric/<key>", methods=["POST"])
    def api_numeric(key: str):
        data = _json_body()

        if key == "euclid":
            res = euclid_gcd(parse_int(data.get("a"), "a"), parse_int(data.get("b"), "b"))
            return jsonify({"lines": res.lines, "result": {"gcd": res.gcd}})

        if key == "extended":
            res = extended_gcd(parse_int(data.get("a"), "a"), parse_int(data.get("b"), "b"))
            return jsonify({"lines": res.lines, "result": {"gcd": res.gcd, "s": res.s, "t": res.t}})

        if key == "rsa":
            res = rsa_demo(
                parse_int(data.get("p"), "p"),
                parse_int(data.get("q"), "q"),
                parse_int(data.get("m"), "m"),
            )
            return jsonify({
                "lines":  res.lines,
                "result": {"n": res.n, "e": res.e, "d": res.d, "cipher": res.cipher, "decrypted": res.decrypted},
            })

        return jsonify({"error": f"Unknown panel: {key}"}), 404


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Classic Algorithms Showcase</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    :root {
      --bg-dark: #0d1117;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-dark);
      color: var(--text-primary);
      padding: 24px;
    }
    h1 { margin-bottom: 16px; }
    .grid {
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(640px, 1fr));
      gap: 20px;
    }
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 20px;
    }
    .panel h3 { font-size: 15px; margin-bottom: 8px; }
    .panel h3 small { color: var(--text-secondary); font-weight: 400; }
    .hint { color: var(--text-secondary); font-size: 13px; margin-bottom: 8px; }
    textarea, input, select {
      width: 100%;
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px;
      font-family: Consolas, monospace;
      margin-bottom: 8px;
    }
    input[type="text"], input[type="number"] { width: auto; }
    button {
      border: none;
      border-radius: 6px;
      padding: 8px 14px;
      cursor: pointer;
      font-weight: 600;
      margin-bottom: 8px;
    }
    .btn-primary { background: var(--accent-cyan); color: #fff; }
    .btn-secondary { background: var(--accent-emerald); color: #fff; }
    button:disabled { opacity: 0.5; cursor: wait; }
    .canvas { background: #111827; border-radius: 8px; margin-bottom: 8px; }
    pre.output {
      background: var(--bg-dark);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 8px;
      min-height: 60px;
      max-height: 220px;
      overflow-y: auto;
      font-size: 12px;
      white-space: pre-wrap;
    }
    details { margin-bottom: 8px; color: var(--text-secondary); font-size: 12px; }
  </style>
</head>
<body>
  <h1>Classic Algorithms Showcase</h1>
  {{ speed|safe }}
  <div class="grid">
    {% for panel in panels %}{{ panel|safe }}{% endfor %}
  </div>
  <div class="grid">
    {% for panel in numeric %}{{ panel|safe }}{% endfor %}
  </div>

  <script>
    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return {ok: res.ok, data: await res.json()};
    }

    const sleep = ms => new Promise(resolve => setTimeout(resolve, ms));

    function speed() {
      return document.getElementById('speed-selector').value;
    }

    // Algorithm panels: fetch every frame, then play them back
    document.querySelectorAll('.btn-run').forEach(btn => {
      btn.addEventListener('click', async () => {
        const key = btn.dataset.algo;
        const source = document.getElementById(key + '-source');
        const {ok, data} = await post('/api/run/' + key, {
          graph: document.getElementById(key + '-graph').value,
          source: source ? source.value : '',
          speed: speed(),
        });
        if (!ok) return alert(data.error);

        const canvas = document.getElementById(key + '-canvas');
        const output = document.getElementById(key + '-output');
        output.textContent = '';
        btn.disabled = true;
        for (const frame of data.frames) {
          if (frame.svg) canvas.innerHTML = frame.svg;
          frame.log.forEach(line => output.textContent += line + '\\n');
          output.scrollTop = output.scrollHeight;
          await sleep(frame.pause_ms);
        }
        btn.disabled = false;
      });
    });

    // Numeric panels
    document.querySelectorAll('.btn-numeric').forEach(btn => {
      btn.addEventListener('click', async () => {
        const key = btn.dataset.numeric;
        const payload = {};
        document.querySelectorAll('[data-numeric="' + key + '"] input').forEach(input => {
          payload[input.dataset.field] = input.value;
        });
        const {ok, data} = await post('/api/numeric/' + key, payload);
        if (!ok) return alert(data.error);
        document.getElementById(key + '-output').textContent = data.lines.join('\\n');
      });
    });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Classic Algorithms Showcase on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])
