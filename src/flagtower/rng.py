from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

M32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5  # mulberry32 increment
TWO_32 = 4294967296.0

def imul32(a: int, b: int) -> int:
    # 32-bit wrapping multiply (sign does not matter once masked)
    return (a * b) & M32

def mix32(t: int) -> int:
    """One mulberry32 avalanche over an already-incremented state word."""
    r = imul32(t ^ (t >> 15), 1 | t)
    r ^= (r + imul32(r ^ (r >> 7), 61 | r)) & M32
    return (r ^ (r >> 14)) & M32

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        # Negative or >32-bit seeds (e.g. epoch millis) wrap like `seed >>> 0`.
        self.state &= M32

    def next32(self) -> int:
        self.state = (self.state + GOLDEN) & M32
        return mix32(self.state)

    def next_float(self) -> float:
        return self.next32() / TWO_32

    def below(self, n: int) -> int:
        assert n > 0
        return int(self.next_float() * n)

def shuffle(items: List[T], rng: Mulberry32) -> List[T]:
    """
    In-place Fisher-Yates walking from the end, j = floor(r * (i + 1)).
    Returns the same list for chaining.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.below(i + 1)
        items[i], items[j] = items[j], items[i]
    return items

def choice(items: Sequence[T], rng: Mulberry32) -> T:
    return items[rng.below(len(items))]

def derive_seed(base_seed: int, offset: int) -> int:
    # Per-continent / per-purpose streams: base + constant, reduced to 32 bits.
    return (base_seed + offset) & M32
