# src/flagtower/timing.py
"""
Clock helpers. Everything time-dependent in the engine reads an absolute
timestamp from a zero-argument clock and compares it to a stored deadline;
nothing accumulates per-frame deltas.
"""

import time
from typing import Callable

Clock = Callable[[], float]

def system_clock() -> float:
    """Monotonic seconds; immune to wall-clock adjustments."""
    return time.monotonic()

def wall_millis() -> int:
    """Epoch milliseconds, used as a fresh seed between levels."""
    return int(time.time() * 1000)

def perturbation_millis() -> int:
    """Non-reproducible offset for the held-item stream."""
    return int(time.perf_counter() * 1000)

class ManualClock:
    """
    Deterministic clock for tests and tools:
      reads return the stored time; advance() moves it forward.
    """
    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now

def resolve_now(clock: Clock, now=None) -> float:
    return clock() if now is None else float(now)
