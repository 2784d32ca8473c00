# src/flagtower/layout/pool.py
# Balanced candidate pool: `per_continent` codes for each continent, drawn from
# the level's pool first, then the global catalog, then by repetition.

import logging
from typing import Dict, Iterable, List

from ..countries import CONTINENTS, UN193, codes_in, continent_of, is_resolved
from ..rng import Mulberry32, derive_seed, shuffle

logger = logging.getLogger(__name__)

CONTINENT_STRIDE = 1000   # seed + i*1000 per continent
BACKFILL_OFFSET = 500     # global-catalog backfill stream for the same continent
POOL_MIX_OFFSET = 999     # final mix of the combined pool

def bucket_by_continent(pool: Iterable[str]) -> Dict[str, List[str]]:
    """Deduplicate (first occurrence wins) and split by continent; unknowns dropped."""
    buckets: Dict[str, List[str]] = {c: [] for c in CONTINENTS}
    seen = set()
    for raw in pool:
        code = (raw or "").lower()
        if code in seen:
            continue
        seen.add(code)
        if not is_resolved(code):
            continue
        buckets[continent_of(code)].append(code)
    return buckets

def pad_by_repetition(chosen: List[str], want: int, spare: List[str]) -> List[str]:
    # Round-robin over what we already have; `spare` only when nothing was chosen.
    source = chosen or spare
    if not source:
        return chosen
    out = list(chosen)
    i = 0
    while len(out) < want:
        out.append(source[i % len(source)])
        i += 1
    return out

def pick_for_continent(
    index: int,
    continent: str,
    bucket: List[str],
    seed: int,
    per_continent: int,
    used: set,
) -> List[str]:
    arr = shuffle(list(bucket), Mulberry32(derive_seed(seed, index * CONTINENT_STRIDE)))
    chosen = arr[:per_continent]

    if len(chosen) < per_continent:
        extra = [c for c in codes_in(continent, UN193) if c not in used and c not in chosen]
        shuffle(extra, Mulberry32(derive_seed(seed, index * CONTINENT_STRIDE + BACKFILL_OFFSET)))
        short = per_continent - len(chosen)
        logger.debug("%s: level pool short by %d, backfilling from catalog", continent, short)
        chosen.extend(extra[:short])

    if len(chosen) < per_continent:
        logger.debug("%s: catalog exhausted at %d, repeating codes", continent, len(chosen))
        chosen = pad_by_repetition(chosen, per_continent, sorted(used))
    return chosen

def build_balanced_pool(pool: Iterable[str], seed: int, per_continent: int) -> List[str]:
    """
    Return exactly len(CONTINENTS) * per_continent codes (repeats only when the
    whole catalog for a continent is used up), mixed with the seed+999 stream.
    """
    buckets = bucket_by_continent(pool)
    out: List[str] = []
    used: set = set()
    for idx, cont in enumerate(CONTINENTS):
        chosen = pick_for_continent(idx, cont, buckets[cont], seed, per_continent, used)
        used.update(chosen)
        out.extend(chosen)
    return shuffle(out, Mulberry32(derive_seed(seed, POOL_MIX_OFFSET)))
