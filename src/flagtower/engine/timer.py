# src/flagtower/engine/timer.py
# Level clock: None / CountUp / Blitz. Blitz keeps an absolute deadline that
# only penalties move (earlier); remaining time is re-derived on every poll.
# A Blitz clock without a duration expires on its first poll.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..levels import TimerMode
from ..timing import Clock, resolve_now, system_clock


class TimerPhase(Enum):
    STOPPED = "stopped"
    RUNNING_COUNT_UP = "running_count_up"
    RUNNING_BLITZ = "running_blitz"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TimerReading:
    phase: TimerPhase
    seconds: float          # remaining for Blitz, elapsed otherwise
    over_threshold: bool    # renderer switches the clock colour


class TimerController:
    def __init__(
        self,
        mode: TimerMode = TimerMode.NONE,
        blitz_seconds: Optional[float] = None,
        clock: Clock = system_clock,
        warn_seconds: float = 30.0,
    ) -> None:
        self.mode = mode
        self.blitz_seconds = float(blitz_seconds or 0.0)
        self.clock = clock
        self.warn_seconds = warn_seconds
        self.phase = TimerPhase.STOPPED
        self.started_at: Optional[float] = None
        self.deadline: Optional[float] = None
        self.stopped_at: Optional[float] = None

    # ---- Transitions ----
    def start(self, now: Optional[float] = None) -> TimerPhase:
        t = resolve_now(self.clock, now)
        self.stopped_at = None
        if self.mode is TimerMode.NONE:
            self.phase = TimerPhase.STOPPED
            return self.phase
        self.started_at = t
        if self.mode is TimerMode.BLITZ:
            self.deadline = t + self.blitz_seconds
            self.phase = TimerPhase.RUNNING_BLITZ
        else:
            self.deadline = None
            self.phase = TimerPhase.RUNNING_COUNT_UP
        return self.phase

    def stop(self, now: Optional[float] = None) -> None:
        if self.running:
            self.stopped_at = resolve_now(self.clock, now)
            self.phase = TimerPhase.STOPPED

    def poll(self, now: Optional[float] = None) -> TimerPhase:
        if self.phase is TimerPhase.RUNNING_BLITZ:
            if self.remaining(now) <= 0:
                self.phase = TimerPhase.EXPIRED
        return self.phase

    def apply_penalty(self, seconds: float) -> None:
        # Expiry is detected by the next poll, not here.
        if self.phase is TimerPhase.RUNNING_BLITZ and seconds > 0:
            self.deadline -= seconds

    # ---- Reads (no side effects) ----
    @property
    def running(self) -> bool:
        return self.phase in (TimerPhase.RUNNING_COUNT_UP, TimerPhase.RUNNING_BLITZ)

    @property
    def expired(self) -> bool:
        return self.phase is TimerPhase.EXPIRED

    def remaining(self, now: Optional[float] = None) -> float:
        if self.deadline is None:
            return 0.0
        t = self.stopped_at if self.stopped_at is not None else resolve_now(self.clock, now)
        return self.deadline - t

    def elapsed(self, now: Optional[float] = None) -> float:
        if self.started_at is None:
            return 0.0
        t = self.stopped_at if self.stopped_at is not None else resolve_now(self.clock, now)
        return max(0.0, t - self.started_at)

    def reading(self, now: Optional[float] = None) -> TimerReading:
        if self.mode is TimerMode.BLITZ:
            left = max(0.0, self.remaining(now))
            return TimerReading(self.phase, left, left <= self.warn_seconds)
        return TimerReading(self.phase, self.elapsed(now), False)
