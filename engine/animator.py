"""
animator.py — Step-by-Step Playback
====================================
Drives a step generator against a RunContext: apply the step (redraw +
log), then rest for the step's pause so a human can follow along.

State machine:
    IDLE  →  play() / run_sync()  →  PLAYING
    PLAYING →  (steps exhausted)  →  FINISHED
    PLAYING →  token.cancel()     →  CANCELLED

Concurrency:
  Cooperative only.  `suspend` awaits asyncio.sleep in short slices, so
  the event loop keeps serving other panels and a CancelToken can stop a
  run between slices.  Nothing here is thread-safe, and nothing needs to
  be: each run owns its own context.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from algorithms.step import Step
from engine.context import RunContext, CancelToken

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Speed presets (multiplier on each step's pause)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":    1.5,    # teaching mode
    "normal":  1.0,
    "fast":    0.4,    # demo mode
    "instant": 0.0,    # tests / jump to result
}

SLICE_SECONDS = 0.05


class RunCancelled(Exception):
    pass


class AnimatorState(Enum):
    IDLE      = "idle"
    PLAYING   = "playing"
    FINISHED  = "finished"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Suspend
# ---------------------------------------------------------------------------
async def suspend(duration_ms: float, token: Optional[CancelToken] = None) -> None:
    """
    Resolve after roughly `duration_ms`.  Always yields to the loop at
    least once; raises RunCancelled as soon as `token` fires.
    """
    remaining = max(0.0, duration_ms / 1000)
    while True:
        if token is not None and token.cancelled:
            raise RunCancelled()
        chunk = min(remaining, SLICE_SECONDS)
        await asyncio.sleep(chunk)
        remaining -= chunk
        if remaining <= 0:
            break
    if token is not None and token.cancelled:
        raise RunCancelled()


def speed_factor(preset: str) -> float:
    if not isinstance(preset, str):
        return SPEED_PRESETS["normal"]
    return SPEED_PRESETS.get(preset, SPEED_PRESETS["normal"])


# ---------------------------------------------------------------------------
# Animator
# ---------------------------------------------------------------------------
class Animator:
    """
    Attributes:
        context : The RunContext steps are applied to.
        state   : Current AnimatorState.
        steps   : Steps applied so far, in order.
        speed   : Multiplier on each step's pause_ms.
        on_step : Optional callback(Step) fired after each step is applied.
    """

    def __init__(
        self,
        context: RunContext,
        speed: str = "normal",
        on_step: Optional[Callable[[Step], None]] = None,
    ):
        self.context: RunContext    = context
        self.state:   AnimatorState = AnimatorState.IDLE
        self.steps:   List[Step]    = []
        self.speed:   float         = speed_factor(speed)
        self.on_step: Optional[Callable[[Step], None]] = on_step

    def cancel(self) -> None:
        self.context.token.cancel()

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    async def play(self, steps: Iterable[Step]) -> AnimatorState:
        """Apply every step with real delays.  Returns the end state."""
        self.state = AnimatorState.PLAYING
        try:
            for step in steps:
                if self.context.token.cancelled:
                    raise RunCancelled()
                self._apply(step)
                await suspend(step.pause_ms * self.speed, self.context.token)
        except RunCancelled:
            self._cancelled()
            return self.state
        self.state = AnimatorState.FINISHED
        return self.state

    def run_sync(self, steps: Iterable[Step]) -> AnimatorState:
        """Apply every step back to back, no delays.  Still honours the token."""
        self.state = AnimatorState.PLAYING
        for step in steps:
            if self.context.token.cancelled:
                self._cancelled()
                return self.state
            self._apply(step)
        self.state = AnimatorState.FINISHED
        return self.state

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _apply(self, step: Step) -> None:
        logger.debug("step %d: %s", step.step_number, step.log_lines)
        self.context.apply(step)
        self.steps.append(step)
        if self.on_step:
            self.on_step(step)

    def _cancelled(self) -> None:
        self.state = AnimatorState.CANCELLED
        self.context.log.append("Run cancelled.")
        logger.info("run cancelled after %d steps", len(self.steps))

    @property
    def is_finished(self) -> bool:
        return self.state == AnimatorState.FINISHED

    @property
    def current_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None
