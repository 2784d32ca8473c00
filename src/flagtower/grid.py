import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from .countries import CONTINENTS, continent_of

class GameMode(str, Enum):
    STANDARD = "Standard"
    VISUAL = "Visual"     # flags only, no name labels
    CAPITAL = "Capital"
    SHAPE = "Shape"

class ColumnState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"

def match_key(code: str, mode: GameMode = GameMode.STANDARD) -> str:
    # Capital and Shape cubes show the capital / outline of a country, and the
    # columns still sort by that country's continent.
    return continent_of(code)

@dataclass(frozen=True)
class ColumnCompletion:
    target: str
    matched: int
    total: int
    percentage: int

    @property
    def complete(self) -> bool:
        return self.percentage == 100

@dataclass(frozen=True)
class BoardSnapshot:
    columns: Tuple[Tuple[str, ...], ...]   # bottom -> top
    held: str
    targets: Tuple[str, ...]

def percent(matched: int, total: int) -> int:
    # Half-up rounding.
    if total <= 0:
        return 0
    return int(math.floor(matched / total * 100 + 0.5))

def is_level_complete(completion: Sequence[ColumnCompletion], required_columns: int) -> bool:
    return sum(1 for c in completion if c.complete) >= required_columns

@dataclass
class PuzzleGrid:
    columns: List[List[str]]
    held: str
    targets: Tuple[str, ...] = CONTINENTS
    mode: GameMode = GameMode.STANDARD
    animation_seconds: float = 0.35
    _animating_until: List[float] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.columns = [list(col) for col in self.columns]
        if len(self.columns) != len(self.targets):
            raise ValueError("one target per column required")
        self._animating_until = [float("-inf")] * len(self.columns)

    @classmethod
    def from_layout(cls, layout, mode: GameMode = GameMode.STANDARD, animation_seconds: float = 0.35) -> "PuzzleGrid":
        return cls(columns=[list(c) for c in layout.columns], held=layout.held, mode=mode,
                   animation_seconds=animation_seconds)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.columns)

    def column_state(self, index: int, now: float) -> ColumnState:
        if now < self._animating_until[index]:
            return ColumnState.ANIMATING
        return ColumnState.IDLE

    def cycle_column(self, index: int, now: float) -> bool:
        """
        Held cube -> bottom of the column, top cube -> hand. Rejected (False, no
        mutation) when the column is out of range, empty or still animating.
        """
        if not self.in_range(index):
            return False
        column = self.columns[index]
        if not column or self.column_state(index, now) is ColumnState.ANIMATING:
            return False
        top = column.pop()
        column.insert(0, self.held)
        self.held = top
        self._animating_until[index] = now + self.animation_seconds
        return True

    def compute_completion(self) -> Tuple[ColumnCompletion, ...]:
        out = []
        for target, column in zip(self.targets, self.columns):
            matched = sum(1 for code in column if match_key(code, self.mode) == target)
            out.append(ColumnCompletion(target=target, matched=matched, total=len(column),
                                        percentage=percent(matched, len(column))))
        return tuple(out)

    def total_items(self) -> int:
        return sum(len(col) for col in self.columns) + 1

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(columns=tuple(tuple(col) for col in self.columns),
                             held=self.held, targets=tuple(self.targets))
