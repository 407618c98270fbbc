"""Plane shapes that know their own area, and a small interactive report."""

from __future__ import annotations

import argparse
import math
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar, TextIO

PI_APPROX = 3.1416
INVALID_AREA = -1.0


class Shape(ABC):
    """A shape with a name and an area."""

    name: ClassVar[str] = "shape"

    @abstractmethod
    def calculate_area(self) -> float:
        """Compute the area from the shape's dimensions."""

    @property
    def area(self) -> float:
        return self.calculate_area()


@dataclass
class Rectangle(Shape):
    base: float
    height: float

    name: ClassVar[str] = "rectangle"

    def calculate_area(self) -> float:
        return self.base * self.height


@dataclass
class Circle(Shape):
    radius: float

    name: ClassVar[str] = "circle"

    def calculate_area(self) -> float:
        return self.radius * self.radius * PI_APPROX


@dataclass
class Triangle(Shape):
    """A triangle given by its three side lengths.

    Lengths that violate the triangle inequality give an area of -1.
    """

    a: float
    b: float
    c: float

    name: ClassVar[str] = "triangle"

    def calculate_area(self) -> float:
        a, b, c = self.a, self.b, self.c
        if not (c <= a + b and a <= b + c and b <= a + c):
            return INVALID_AREA
        product = (a + b + c) * (a + b - c) * (b + c - a) * (c + a - b)
        if product < 0:
            return math.nan
        return math.sqrt(product) / 4


def _format_number(value: float) -> str:
    return f"{value:g}"


def report(shapes: Iterable[Shape]) -> Iterator[str]:
    """Yield one line per shape giving its name and area."""
    for shape in shapes:
        yield f"The area of the {shape.name} is: {_format_number(shape.area)}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str], out: TextIO) -> float:
    out.write(prompt)
    out.flush()
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for the dimensions of three shapes and print their areas."""
    parser = argparse.ArgumentParser(
        description="Compute the areas of a rectangle, a circle and a triangle."
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        base = _ask("Please enter a base length: ", tokens, out)
        height = _ask("Please enter a height: ", tokens, out)
        radius = _ask("Please enter a circle radius: ", tokens, out)
        a = _ask("Please enter length 1 for your triangle: ", tokens, out)
        b = _ask("Please enter length 2 for your triangle: ", tokens, out)
        c = _ask("Please enter length 3 for your triangle: ", tokens, out)
    except ValueError as error:
        print(f"\n{error}", file=sys.stderr)
        return 1

    shapes: list[Shape] = [Rectangle(base, height), Circle(radius), Triangle(a, b, c)]
    for line in report(shapes):
        print(line, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())