"""Uniform random numbers from one generator shared by the whole program."""

from __future__ import annotations

import random

# Every Uniform draws from this one generator, so seeding any of them
# reseeds them all.
_SHARED = random.Random(1)


class Uniform:
    """A source of uniform random numbers in [0, 1]."""

    def __init__(self) -> None:
        self._seed = 0

    @property
    def seed(self) -> int:
        """The seed this instance last set, 0 if it never set one."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reseed the shared generator."""
        self._seed = seed
        _SHARED.seed(seed)

    def random(self) -> float:
        """Return the next uniform random number."""
        return _SHARED.random()

    def __repr__(self) -> str:
        return f"Uniform(seed={self._seed})"