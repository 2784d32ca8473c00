# src/flagtower/levels.py
# Static, ordered level table.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .countries import TIER_1_TOURIST, TIER_2_COMMON, TIER_3_TRICKY, UN193
from .grid import GameMode

class TimerMode(str, Enum):
    NONE = "None"
    COUNT_UP = "CountUp"
    BLITZ = "Blitz"

@dataclass(frozen=True)
class LevelDefinition:
    id: int
    title: str
    subtitle: str
    pool: Tuple[str, ...]
    mode: GameMode = GameMode.STANDARD
    timer: TimerMode = TimerMode.NONE
    blitz_seconds: Optional[float] = None
    wrong_penalty_seconds: float = 0.0
    hint: str = ""

    def __post_init__(self):
        if self.timer is TimerMode.BLITZ and not self.blitz_seconds:
            raise ValueError("level %d: Blitz timer needs blitz_seconds" % self.id)

    @property
    def is_blitz(self) -> bool:
        return self.timer is TimerMode.BLITZ

S, V, C, SH = GameMode.STANDARD, GameMode.VISUAL, GameMode.CAPITAL, GameMode.SHAPE
NONE, UP, BLITZ = TimerMode.NONE, TimerMode.COUNT_UP, TimerMode.BLITZ

LEVELS: Tuple[LevelDefinition, ...] = (
    # Phase 1: the academy
    LevelDefinition(1, "The Academy", "Level 1: Tourist Class", TIER_1_TOURIST, S, NONE,
                    hint="Relaxed pace. Recognizable flags only."),
    LevelDefinition(2, "Visual Training", "Level 2: No Text Hints", TIER_1_TOURIST, V, NONE,
                    hint="Flags only. No country names."),
    LevelDefinition(3, "Expanding Horizons", "Level 3: Common Flags", TIER_2_COMMON, S, UP,
                    hint="More countries added. Timer starts."),
    LevelDefinition(4, "Silent Traveler", "Level 4: Common & Visual", TIER_2_COMMON, V, UP,
                    hint="Standard pool, no text hints."),
    # Phase 2: the speed run
    LevelDefinition(5, "Blitz Beginner", "Level 5: Time Pressure", TIER_2_COMMON, S, BLITZ, 180, 5,
                    hint="3 minutes. -5s for every wrong drop."),
    LevelDefinition(6, "Tricolor Trouble", "Level 6: Confusing Flags", TIER_3_TRICKY, S, BLITZ, 210, 8,
                    hint="Warning: similar flags ahead!"),
    LevelDefinition(7, "Blind Blitz", "Level 7: Tricky & Visual", TIER_3_TRICKY, V, BLITZ, 180, 10,
                    hint="Hard flags. No text. Good luck."),
    LevelDefinition(8, "Speed Demon", "Level 8: Fast Pace", TIER_2_COMMON, V, BLITZ, 150, 12,
                    hint="2:30 minutes. Go fast."),
    # Phase 3: the geographer
    LevelDefinition(9, "Capital City", "Level 9: Tourist Capitals", TIER_1_TOURIST, C, UP,
                    hint="Match the CAPITAL CITY to the continent."),
    LevelDefinition(10, "Capital Blitz", "Level 10: Common Capitals", TIER_2_COMMON, C, BLITZ, 240, 15,
                    hint="4 minutes. Capital cities."),
    LevelDefinition(11, "Hardcore Geography", "Level 11: Tricky Capitals", TIER_3_TRICKY, C, BLITZ, 240, 18,
                    hint="Match capitals of confusing flags."),
    LevelDefinition(12, "Full Roster", "Level 12: UN 193", UN193, S, NONE,
                    hint="Every single country. Take your time."),
    # Phase 4: the grandmaster
    LevelDefinition(13, "Shape Shifter", "Level 13: Shapes (Beta)", TIER_1_TOURIST, SH, UP,
                    hint="Identify countries by SHAPE."),
    LevelDefinition(14, "Shape Blitz", "Level 14: Shapes Fast", TIER_2_COMMON, SH, BLITZ, 300, 20,
                    hint="5 minutes. Shapes."),
    LevelDefinition(15, "Master Visual", "Level 15: All Visual Blitz", UN193, V, BLITZ, 180, 20,
                    hint="193 countries. No text. 3 minutes."),
    LevelDefinition(16, "Ultimate Geography", "Level 16: All Capitals Blitz", UN193, C, BLITZ, 180, 20,
                    hint="The final test."),
)

def clamp_index(index: int, levels: Tuple[LevelDefinition, ...] = LEVELS) -> int:
    return max(0, min(len(levels) - 1, int(index)))

def level_at(index: int, levels: Tuple[LevelDefinition, ...] = LEVELS) -> LevelDefinition:
    return levels[clamp_index(index, levels)]
