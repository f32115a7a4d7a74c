# src/mazecarve/rng.py
# Park–Miller "minimal standard" generator. One instance is threaded through
# masking, carving and tie-breaks so a seed reproduces a maze exactly.

from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SEED_OFFSET = 0x0FCDD36

def pm_next(state: int) -> int:
    return (state * A) % M

def seed_state(seed: int) -> int:
    """
    Fold an arbitrary integer seed into a valid generator state (1..M-1).
    state = (A*seed + SEED_OFFSET) mod M, with 0 bumped to 1.
    """
    s = (A * seed + SEED_OFFSET) % M
    return s or 1

@dataclass
class PMRandom:
    state: int

    def __post_init__(self):
        if not 0 < self.state < M:
            raise ValueError(f"PMRandom state must be in 1..{M - 1}, got {self.state}")

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed_state(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Uniform-ish draw in 0..n-1 (one step of the generator)."""
        if n <= 0:
            raise ValueError(f"below() needs n > 0, got {n}")
        return self.next32() % n

    def coin(self) -> bool:
        return self.below(2) == 1

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("choice() from an empty sequence")
        return seq[self.below(len(seq))]
