"""
Seeded pseudo-random streams for procedural visuals.

A string seed is hashed with xmur3 into a 32-bit state that drives a
mulberry32 generator. Both are pure integer arithmetic masked to 32 bits, so
the same seed yields the same sequence on every platform and interpreter.
Nothing here reads the clock or the ``random`` module.
"""

import math
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def _code_units(seed: str) -> List[int]:
    raw = seed.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def xmur3(seed: str) -> Callable[[], int]:
    """Return a 32-bit hash stream for ``seed`` (one state word per call)."""
    units = _code_units(seed)
    h = (1779033703 ^ len(units)) & _MASK
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & _MASK

    def next_word() -> int:
        nonlocal h
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        return h & _MASK

    return next_word


class SeededRandom:
    """Deterministic uniform stream over [0, 1) seeded from a string."""

    def __init__(self, seed: str = ""):
        self.seed = "" if seed is None else str(seed)
        self._state = xmur3(self.seed)()

    def next(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / _TWO_POW_32

    def rand_int(self, lo: int, hi: int) -> int:
        """Integer in the closed range [lo, hi]. Inverted bounds are swapped."""
        if lo > hi:
            lo, hi = hi, lo
        return int(math.floor(self.next() * (hi - lo + 1))) + lo

    def rand_float(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo

    def chance(self, threshold: float) -> bool:
        return self.next() > threshold

    def rand_choice(self, items: Sequence[T]) -> Optional[T]:
        if not items:
            return None
        return items[int(math.floor(self.next() * len(items)))]

    def rand_shuffle(self, items: Sequence[T]) -> List[T]:
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = int(math.floor(self.next() * (i + 1)))
            out[i], out[j] = out[j], out[i]
        return out


def create_seeded_random(seed: str) -> SeededRandom:
    return SeededRandom(seed)


def compose_seed(variant_key: str, seed: str, purpose: str) -> str:
    return "|".join([variant_key, seed or "", purpose])


class SeedContext:
    """Hands out one independent stream per purpose for a (variant, seed) pair."""

    def __init__(self, variant_key: str, seed: str = ""):
        self.variant_key = variant_key
        self.seed = seed or ""

    def rng(self, purpose: str) -> SeededRandom:
        return SeededRandom(compose_seed(self.variant_key, self.seed, purpose))

    def __repr__(self) -> str:
        return f"SeedContext({self.variant_key!r}, {self.seed!r})"
