# src/dungeongen/rng.py
"""
Seeded random source for map generation.

Park–Miller minimal standard generator: small, fully specified and identical on
every interpreter, so a seed reproduces the same dungeon everywhere.
"""

import secrets
from dataclasses import dataclass, field
from typing import Optional

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def state_from_seed(seed: int) -> int:
    """Fold any Python int onto the valid state range 1..M-1."""
    return (seed % (M - 1)) + 1

def entropy_seed() -> int:
    # Signed 32-bit range, same as the seeds a caller would usually pass.
    return secrets.randbelow(1 << 32) - (1 << 31)

@dataclass
class PMRandom:
    state: int
    seed: Optional[int] = field(default=None, compare=False)

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "PMRandom":
        if seed is None:
            seed = entropy_seed()
        return cls(state=state_from_seed(seed), seed=seed)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def next_in_range(self, low: int, high: int) -> int:
        """Return an int in [low, high). Caller guarantees low < high."""
        assert low < high, f"empty range [{low}, {high})"
        return low + (self.next32() - 1) % (high - low)
