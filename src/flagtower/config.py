import os
from dataclasses import dataclass, replace

from .countries import CONTINENTS

DEFAULT_PROGRESS_PATH = os.path.join(os.path.expanduser("~"), ".flagtower", "progress.json")

@dataclass(frozen=True)
class EngineConfig:
    # Board shape: one column per continent.
    columns: int = len(CONTINENTS)
    layers_per_column: int = 10

    # Generator: per-column continent cap and bounded retries.
    cap_fraction: float = 0.3
    max_attempts: int = 100

    # Seconds a column stays locked after a cycle (cube slide).
    animation_seconds: float = 0.35

    # Columns at 100% needed to clear a level.
    required_columns: int = len(CONTINENTS)

    # Blitz clock turns red at or below this many seconds.
    warn_seconds: float = 30.0

    seed: int = 98597
    progress_path: str = DEFAULT_PROGRESS_PATH

    def __post_init__(self) -> None:
        if self.columns != len(CONTINENTS):
            raise ValueError(f"columns must be {len(CONTINENTS)} (one per continent)")
        if self.layers_per_column < 1:
            raise ValueError("layers_per_column must be >= 1")
        if not (0.0 < self.cap_fraction <= 1.0):
            raise ValueError("cap_fraction must be in (0, 1]")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.animation_seconds < 0:
            raise ValueError("animation_seconds must be >= 0")
        if not (1 <= self.required_columns <= self.columns):
            raise ValueError("required_columns must be 1..columns")

    @property
    def capacity(self) -> int:
        return self.columns * self.layers_per_column

    def replace(self, **changes) -> "EngineConfig":
        return replace(self, **changes)

# Global defaults (launchers may build their own)
DEFAULT_CONFIG = EngineConfig()
