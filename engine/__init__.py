"""
engine/
-------
Run context, playback & recording layer.

    from engine import RunContext, Animator, Recorder
"""

from engine.context  import RunContext, OutputLog, CancelToken
from engine.animator import Animator, AnimatorState, RunCancelled, SPEED_PRESETS, suspend
from engine.recorder import Recorder, RunMetrics, Frame

__all__ = [
    "RunContext",
    "OutputLog",
    "CancelToken",
    "Animator",
    "AnimatorState",
    "RunCancelled",
    "SPEED_PRESETS",
    "suspend",
    "Recorder",
    "RunMetrics",
    "Frame",
]
