from __future__ import annotations
from typing import Optional
import math

from settings import MAX_DELTA_TIME


class FrameClock:
    """
    Turns frame timestamps (milliseconds) into simulation steps (seconds).

    Steps are capped so a stall (window dragged, debugger break) can't push a
    car straight through another one in a single integration step.
    """
    def __init__(self, max_delta: float = MAX_DELTA_TIME):
        self.max_delta = float(max_delta)
        self.last_timestamp: Optional[float] = None

    def reset(self) -> None:
        self.last_timestamp = None

    def tick(self, timestamp_ms: float) -> float:
        if self.last_timestamp is None:
            self.last_timestamp = float(timestamp_ms)
            return 0.0

        dt = (float(timestamp_ms) - self.last_timestamp) / 1000.0
        self.last_timestamp = float(timestamp_ms)
        return cap_delta(dt, self.max_delta)


def cap_delta(dt: float, max_delta: float = MAX_DELTA_TIME) -> float:
    if not math.isfinite(dt) or dt < 0.0:
        return 0.0
    return min(dt, max_delta)
