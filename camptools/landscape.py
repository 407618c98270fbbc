"""Two-dimensional test landscapes for optimisation."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod


class Landscape(ABC):
    """A surface z = f(x, y) to be minimised."""

    @abstractmethod
    def calculate_z(self, x: float, y: float) -> float:
        """Return the height of the surface at (x, y)."""

    def clone(self) -> Landscape:
        """Return an independent copy of this landscape."""
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SumSquares(Landscape):
    """z = x^2 + y^2, with its global minimum z = 0 at (0, 0)."""

    def calculate_z(self, x: float, y: float) -> float:
        return x**2 + y**2


class Rastrigin(Landscape):
    """A Rastrigin surface with its global minimum z = 0 at (4, 5)."""

    def calculate_z(self, x: float, y: float) -> float:
        dx = x - 4
        dy = y - 5
        return (
            20
            + dx**2
            + dy**2
            - 10 * (math.cos(2 * math.pi * dx) + math.cos(2 * math.pi * dy))
        )


class Ackley(Landscape):
    """The Ackley surface with its global minimum z = 0 at (0, 0)."""

    def calculate_z(self, x: float, y: float) -> float:
        return (
            -20 * math.exp(-0.2 * math.sqrt(0.5 * (x**2 + y**2)))
            - math.exp(0.5 * (math.cos(2 * math.pi * x) + math.cos(2 * math.pi * y)))
            + math.e
            + 20
        )


_LANDSCAPES: dict[str, type[Landscape]] = {
    "sum_squares": SumSquares,
    "rastrigin": Rastrigin,
    "ackley": Ackley,
}


def landscape_for(name: str) -> Landscape:
    """Return a new landscape for one of the names sum_squares, rastrigin, ackley."""
    try:
        factory = _LANDSCAPES[name]
    except KeyError:
        raise ValueError(
            f"The function '{name}' hasn't been defined! Valid options are "
            "'sum_squares', 'rastrigin', and 'ackley'"
        ) from None
    return factory()