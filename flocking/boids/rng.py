"""
Random sources for the flock simulation.

Anything exposing randint(lo, hi) and uniform(lo, hi) with the semantics of
random.Random works, so a seeded random.Random is a valid source too.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def uniform(self, a: float, b: float) -> float: ...


class XorShift32:
    """Deterministic PRNG using xorshift32 algorithm."""

    def __init__(self, seed: int):
        self._state = (seed & 0xFFFFFFFF) or 1

    def next_uint32(self) -> int:
        x = self._state
        x ^= (x << 13) & 0xFFFFFFFF
        x ^= (x >> 17) & 0xFFFFFFFF
        x ^= (x << 5) & 0xFFFFFFFF
        self._state = x
        return x

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        return self.next_uint32() * 2.3283064365386963e-10

    def uniform(self, lo: float, hi: float) -> float:
        """Random float in [lo, hi)."""
        return lo + self.next_float() * (hi - lo)

    def randint(self, lo: int, hi: int) -> int:
        """Random integer in [lo, hi], both ends inclusive."""
        if hi < lo:
            raise ValueError(f"empty range for randint({lo}, {hi})")
        return lo + int(self.next_float() * (hi - lo + 1))


def generate_random_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 0x7FFFFFFF)


def make_rng(seed: Optional[int] = None) -> XorShift32:
    """Build the simulation's random source, picking a fresh seed if None."""
    if seed is None:
        seed = generate_random_seed()
    return XorShift32(seed)
