"""
config.py — App Configuration
=============================
Defaults live on the class; any of them can be overridden from the
environment with a SHOWCASE_ prefix, e.g.

    SHOWCASE_CANVAS_WIDTH=800 SHOWCASE_LOG_LEVEL=DEBUG python main.py

(Flask's from_prefixed_env parses values as JSON when it can, so numbers
arrive as numbers.)
"""


class Config:
    # canvas
    CANVAS_WIDTH  = 600
    CANVAS_HEIGHT = 400
    LAYOUT_MARGIN = 50

    # playback
    DEFAULT_SPEED = "normal"

    # server
    LOG_LEVEL = "INFO"
    HOST      = "127.0.0.1"
    PORT      = 5000
    DEBUG     = False

    ENV_PREFIX = "SHOWCASE"
