"""Key-repeat scroll acceleration.

Step commands arriving faster than the repeat threshold compound the speed
multiplier; a pause resets it so single presses move exactly one row.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable

REPEATED_SCROLL_THRESHOLD_SECONDS = 0.3
SCROLL_SPEED_START = 0.1
SCROLL_SPEED_MAX = 10.0
SCROLL_SPEED_MULTIPLIER = 1.05


class ScrollAccelerator:
    """Turn a stream of step commands into row deltas that grow under key-repeat."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.last_update: float | None = None
        self.speed = SCROLL_SPEED_START

    def update_speed(self) -> float:
        """Advance the speed multiplier for one step command and return it."""
        now = self._clock()
        repeated = (
            self.last_update is not None
            and now - self.last_update < REPEATED_SCROLL_THRESHOLD_SECONDS
        )
        self.last_update = now

        speed = self.speed * SCROLL_SPEED_MULTIPLIER if repeated else SCROLL_SPEED_START
        self.speed = max(SCROLL_SPEED_START, min(speed, SCROLL_SPEED_MAX))
        return self.speed

    def next_step(self) -> int:
        """Return row count (>= 1) for the current step command."""
        return max(1, math.floor(self.update_speed()))
