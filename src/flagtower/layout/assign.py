# src/flagtower/layout/assign.py
# Column assignment under the per-column continent cap.

import math
from typing import Dict, List, Optional

from ..countries import continent_of
from ..rng import Mulberry32, shuffle

Columns = List[List[str]]

def cap_for(layers: int, cap_fraction: float) -> int:
    return max(1, math.ceil(layers * cap_fraction))

def try_assign(
    pool: List[str],
    n_columns: int,
    layers: int,
    cap: int,
    rng: Mulberry32,
) -> Optional[Columns]:
    """
    One attempt: reshuffle, then fill layer by layer, column by column, taking the
    first remaining code whose continent count in that column is still below cap.
    Returns None as soon as some column has no admissible code.
    """
    current = shuffle(list(pool), rng)
    parts: Columns = [[] for _ in range(n_columns)]
    counts: List[Dict[str, int]] = [{} for _ in range(n_columns)]

    for _layer in range(layers):
        for p in range(n_columns):
            pick = -1
            for k, code in enumerate(current):
                if counts[p].get(continent_of(code), 0) < cap:
                    pick = k
                    break
            if pick == -1:
                return None
            code = current.pop(pick)
            parts[p].append(code)
            cont = continent_of(code)
            counts[p][cont] = counts[p].get(cont, 0) + 1
    return parts

def assign_unconstrained(pool: List[str], n_columns: int, layers: int, rng: Mulberry32) -> Columns:
    current = shuffle(list(pool), rng)
    return [current[i * layers:(i + 1) * layers] for i in range(n_columns)]

def column_counts(column: List[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for code in column:
        cont = continent_of(code)
        counts[cont] = counts.get(cont, 0) + 1
    return counts

def within_cap(columns: Columns, cap: int) -> bool:
    return all(n <= cap for col in columns for n in column_counts(col).values())
