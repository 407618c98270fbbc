"""Metropolis acceptance of proposed moves on a landscape."""

from __future__ import annotations

import math

from camptools.coordinates import Coordinates
from camptools.uniform import Uniform

# Largest exponent math.exp accepts without overflowing.
_MAX_EXPONENT = 709.0


class MonteCarlo:
    """Keeps the last accepted point and judges new ones by the Metropolis criterion."""

    def __init__(self, xy: Coordinates, temperature: float) -> None:
        self._last_accepted = xy.copy()
        self.temperature = temperature
        self._uniform = Uniform()

    @property
    def last_accepted_coordinates(self) -> Coordinates:
        """The last point that was accepted."""
        return self._last_accepted

    @property
    def last_accepted_z(self) -> float:
        """The height of the last accepted point."""
        return self._last_accepted.z

    def _acceptance_probability(self, delta_z: float) -> float:
        if self.temperature == 0:
            return 0.0
        exponent = -delta_z / self.temperature
        if math.isnan(exponent):
            return math.nan
        return math.exp(min(exponent, _MAX_EXPONENT))

    def boltzmann(self, new_xy: Coordinates) -> bool:
        """Accept or reject new_xy.

        A lower z is always accepted. A higher or equal z is accepted with
        probability exp(-dz / temperature). On acceptance the point is stored;
        on rejection new_xy is overwritten with the stored point.
        """
        if new_xy.z < self._last_accepted.z:
            self._last_accepted = new_xy.copy()
            return True

        p = self._acceptance_probability(new_xy.z - self._last_accepted.z)
        if self._uniform.random() < p:
            self._last_accepted = new_xy.copy()
            return True

        new_xy.assign(self._last_accepted)
        return False

    def __repr__(self) -> str:
        return (
            f"MonteCarlo(last_accepted={self._last_accepted!r}, "
            f"temperature={self.temperature!r})"
        )