# src/flagtower/engine/session.py
# GameSession: owns everything a running game needs (level, board, clock,
# progression) so collaborators receive it explicitly instead of via globals.

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Tuple

from ..config import DEFAULT_CONFIG, EngineConfig
from ..grid import BoardSnapshot, ColumnCompletion, PuzzleGrid, is_level_complete, match_key
from ..layout.generator import Layout, generate_layout
from ..levels import LevelDefinition
from ..progress import Progression
from ..timing import Clock, resolve_now, system_clock, wall_millis
from ..ui.hud import HudView, build_hud
from .timer import TimerController, TimerPhase

logger = logging.getLogger(__name__)

WRAP_NOTICE = "All levels cleared! Starting again from level 1."


class Outcome(Enum):
    PLAYING = "playing"
    CLEARED = "cleared"
    TIME_UP = "time_up"


class GameSession:
    def __init__(
        self,
        progression: Optional[Progression] = None,
        *,
        config: EngineConfig = DEFAULT_CONFIG,
        clock: Clock = system_clock,
        seed_source: Callable[[], int] = wall_millis,
        held_seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.progression = progression if progression is not None else Progression()
        self.clock = clock
        self.seed_source = seed_source
        self.held_seed = held_seed

        self.seed: Optional[int] = None
        self.layout: Optional[Layout] = None
        self.grid: Optional[PuzzleGrid] = None
        self.timer = TimerController()
        self.completion: Tuple[ColumnCompletion, ...] = ()
        self.outcome = Outcome.PLAYING
        self.notice: Optional[str] = None
        self.penalties_applied = 0
        self._first_build = True

    # ---- Level lifecycle ----
    @property
    def level(self) -> LevelDefinition:
        return self.progression.current

    def start_level(self, seed: Optional[int] = None, now: Optional[float] = None) -> Layout:
        if seed is None:
            seed = self.config.seed if self._first_build else self.seed_source()
        self._first_build = False
        level = self.level
        self.seed = seed
        self.layout = generate_layout(level, seed, config=self.config, held_seed=self.held_seed)
        self.grid = PuzzleGrid.from_layout(self.layout, mode=level.mode,
                                           animation_seconds=self.config.animation_seconds)
        self.completion = self.grid.compute_completion()
        self.timer = TimerController(level.timer, level.blitz_seconds, clock=self.clock,
                                     warn_seconds=self.config.warn_seconds)
        self.timer.start(now)
        self.outcome = Outcome.PLAYING
        self.penalties_applied = 0
        logger.info("level %d (%s) seed=%d layout=%s", level.id, level.title, seed,
                    self.layout.outcome.value)
        return self.layout

    def jump_to(self, index: int, now: Optional[float] = None) -> Layout:
        self.timer.stop(now)
        self.progression.jump_to(index)
        return self.start_level(seed=self.seed_source(), now=now)

    def continue_(self, now: Optional[float] = None) -> Optional[Layout]:
        """Acknowledge a finished round: next level after a clear, same level after time-up."""
        if self.outcome is Outcome.CLEARED:
            if self.progression.advance():
                self.notice = WRAP_NOTICE
            return self.start_level(seed=self.seed_source(), now=now)
        if self.outcome is Outcome.TIME_UP:
            return self.start_level(seed=self.seed_source(), now=now)
        return None

    def dismiss_notice(self) -> None:
        self.notice = None

    # ---- Play ----
    @property
    def playing(self) -> bool:
        return self.grid is not None and self.outcome is Outcome.PLAYING

    def cycle(self, index: int, now: Optional[float] = None) -> bool:
        if not self.playing:
            return False
        t = resolve_now(self.clock, now)
        # A drop after the deadline loses, even if no frame polled the clock yet.
        if self.tick(t) is not Outcome.PLAYING:
            return False
        dropped = self.grid.held
        if not self.grid.cycle_column(index, t):
            return False

        self.completion = self.grid.compute_completion()
        level = self.level
        if level.is_blitz and match_key(dropped, level.mode) != self.grid.targets[index]:
            self.timer.apply_penalty(level.wrong_penalty_seconds)
            self.penalties_applied += 1

        if is_level_complete(self.completion, self.config.required_columns):
            self.timer.stop(t)
            self.outcome = Outcome.CLEARED
            logger.info("level %d cleared", level.id)
        return True

    def tick(self, now: Optional[float] = None) -> Outcome:
        if self.outcome is Outcome.PLAYING and self.timer.poll(now) is TimerPhase.EXPIRED:
            self.outcome = Outcome.TIME_UP
            logger.info("level %d: time's up", self.level.id)
        return self.outcome

    # ---- Render-facing views ----
    def snapshot(self) -> Optional[BoardSnapshot]:
        return self.grid.snapshot() if self.grid is not None else None

    def hud(self, now: Optional[float] = None) -> HudView:
        return build_hud(self.level, self.timer.reading(now), notice=self.notice)
