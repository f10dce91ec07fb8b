from __future__ import annotations

import logging
import math
import time
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_STEP_S = 0.05


class Clock(Protocol):
    """Anything with ``now()`` in monotonic seconds; tests pass a fake."""

    def now(self) -> float:
        ...


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic()


class FixedStepScheduler:
    """Counts how many fixed simulation steps are due on an injected clock.

    The render loop runs at whatever rate pygame gives it; the simulation always
    advances in ``step_s`` increments. After a stall (window drag, debugger) at
    most ``max_catch_up_steps`` are reported and the remaining backlog is dropped.
    """

    def __init__(
        self,
        clock: Clock,
        *,
        step_s: float = DEFAULT_STEP_S,
        max_catch_up_steps: int = 5,
    ) -> None:
        if not math.isfinite(step_s) or step_s <= 0:
            raise ValueError("step_s must be > 0")
        if max_catch_up_steps < 1:
            raise ValueError("max_catch_up_steps must be >= 1")
        self._clock = clock
        self._step_s = float(step_s)
        self._max_catch_up_steps = int(max_catch_up_steps)
        self._last = clock.now()
        self._accumulator = 0.0

    @property
    def step_s(self) -> float:
        return self._step_s

    def due_steps(self) -> int:
        now = self._clock.now()
        # Monotonic clocks should never go backwards; ignore it if one does.
        self._accumulator += max(0.0, now - self._last)
        self._last = now

        # Small epsilon so 0.1 s at a 0.05 s step counts as two steps, not one.
        steps = int(math.floor(self._accumulator / self._step_s + 1e-9))
        if steps > self._max_catch_up_steps:
            dropped = steps - self._max_catch_up_steps
            logger.debug("scheduler dropped %d step(s) after a stall", dropped)
            steps = self._max_catch_up_steps
            self._accumulator = 0.0
            return steps

        self._accumulator = max(0.0, self._accumulator - steps * self._step_s)
        return steps
