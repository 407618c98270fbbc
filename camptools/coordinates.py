"""A point (x, y) on a landscape together with its height z."""

from __future__ import annotations

from camptools.landscape import Landscape, landscape_for


class Coordinates:
    """A point on a named landscape; z is kept in step with x and y."""

    __slots__ = ("_landscape", "_name", "_x", "_y", "_z")

    def __init__(self, function_name: str, x: float = 0.0, y: float = 0.0) -> None:
        self._x = x
        self._y = y
        self._z = 0.0
        self._name = ""
        self._landscape: Landscape
        self.set_landscape_function(function_name)

    def set_landscape_function(self, name: str) -> None:
        """Switch to the named landscape and recompute z."""
        landscape = landscape_for(name)
        self._name = name
        self._landscape = landscape
        self._update_z()

    @property
    def landscape_function_name(self) -> str:
        return self._name

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value
        self._update_z()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value
        self._update_z()

    @property
    def z(self) -> float:
        """The landscape's height at (x, y)."""
        return self._z

    def modify_x(self, delta: float) -> None:
        """Add delta to x and recompute z."""
        self.x = self._x + delta

    def modify_y(self, delta: float) -> None:
        """Add delta to y and recompute z."""
        self.y = self._y + delta

    def copy(self) -> Coordinates:
        """Return a new point with the same values, sharing the landscape."""
        clone = Coordinates.__new__(Coordinates)
        clone.assign(self)
        return clone

    def assign(self, other: Coordinates) -> None:
        """Overwrite this point with the values of another."""
        self._landscape = other._landscape
        self._name = other._name
        self._x = other._x
        self._y = other._y
        self._z = other._z

    def _update_z(self) -> None:
        self._z = self._landscape.calculate_z(self._x, self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return (self._name, self._x, self._y) == (other._name, other._x, other._y)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Coordinates({self._name!r}, x={self._x!r}, y={self._y!r}, z={self._z!r})"
        )