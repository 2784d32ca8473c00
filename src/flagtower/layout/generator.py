# src/flagtower/layout/generator.py
# Board generator: balanced pool -> capped assignment (bounded retries) -> held cube.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, EngineConfig
from ..countries import UN193
from ..rng import Mulberry32, choice, derive_seed
from ..timing import perturbation_millis
from .assign import assign_unconstrained, cap_for, try_assign, within_cap
from .pool import build_balanced_pool

logger = logging.getLogger(__name__)

ASSIGN_OFFSET = 555

class LayoutOutcome(Enum):
    SATISFIED = "satisfied"
    DEGRADED = "degraded"   # retries exhausted; cap not guaranteed

@dataclass(frozen=True)
class Layout:
    columns: Tuple[Tuple[str, ...], ...]   # bottom -> top
    held: str
    outcome: LayoutOutcome
    attempts: int
    cap: int

    @property
    def degraded(self) -> bool:
        return self.outcome is LayoutOutcome.DEGRADED

    def codes(self) -> List[str]:
        return [c for col in self.columns for c in col]

def pick_held(used: Iterable[str], seed: int, perturbation: int) -> str:
    taken = set(used)
    remaining = [c for c in UN193 if c not in taken]
    rng = Mulberry32(derive_seed(seed, perturbation))
    return choice(remaining or list(UN193), rng)

def generate_columns(
    pool: Iterable[str],
    seed: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Tuple[List[List[str]], LayoutOutcome, int, int]:
    layers = config.layers_per_column
    n_columns = config.columns
    cap = cap_for(layers, config.cap_fraction)
    balanced = build_balanced_pool(pool, seed, layers)
    rng = Mulberry32(derive_seed(seed, ASSIGN_OFFSET))

    for attempt in range(1, config.max_attempts + 1):
        parts = try_assign(balanced, n_columns, layers, cap, rng)
        if parts is not None:
            logger.debug("seed %d: capped assignment on attempt %d", seed, attempt)
            return parts, LayoutOutcome.SATISFIED, attempt, cap

    logger.warning(
        "seed %d: cap %d unsatisfied after %d attempts, using unconstrained layout",
        seed, cap, config.max_attempts,
    )
    parts = assign_unconstrained(balanced, n_columns, layers, rng)
    if within_cap(parts, cap):
        logger.info("seed %d: unconstrained layout happens to respect cap %d", seed, cap)
    return parts, LayoutOutcome.DEGRADED, config.max_attempts, cap

def generate_layout(
    level,
    seed: int,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    held_seed: Optional[int] = None,
) -> Layout:
    """
    Build a full board for `level` (anything with a `pool` of ISO2 codes).
    Columns are a pure function of (pool, seed, config); the held cube uses a
    time-perturbed stream unless `held_seed` pins it.
    """
    parts, outcome, attempts, cap = generate_columns(level.pool, seed, config)
    perturbation = perturbation_millis() if held_seed is None else held_seed
    held = pick_held((c for col in parts for c in col), seed, perturbation)
    return Layout(
        columns=tuple(tuple(col) for col in parts),
        held=held,
        outcome=outcome,
        attempts=attempts,
        cap=cap,
    )
