"""Simulated annealing over a landscape, with a command to drive it."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from collections.abc import Iterator
from typing import TextIO

from camptools.coordinates import Coordinates
from camptools.montecarlo import MonteCarlo
from camptools.uniform import Uniform

FUNCTION_NAMES = ("sum_squares", "ackley", "rastrigin")
SUITE_STARTING_VALUES = (1.0, 10.0, 32.0, 110.0, 1300.0)


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


LARGEST_STEP = _f32(1000.0)
SMALLEST_STEP = _f32(0.01)
HIGH_TEMPERATURE = _f32(0.1)
LOW_TEMPERATURE = _f32(0.00001)


def _g(value: float) -> str:
    return f"{value:g}"


def _schedule(cycle: int) -> tuple[float, float]:
    decay = math.exp(-cycle)
    temperature = _f32(
        _f32(HIGH_TEMPERATURE - LOW_TEMPERATURE) * decay + LOW_TEMPERATURE
    )
    step_size = _f32(_f32(LARGEST_STEP - SMALLEST_STEP) * decay + SMALLEST_STEP)
    return temperature, step_size


def run(
    function_name: str,
    input_x: float,
    input_y: float,
    outer: int,
    inner: int,
    output_every_n_steps: int = 1,
    out: TextIO | None = None,
) -> Coordinates:
    """Anneal from (input_x, input_y) on the named landscape and return the final point.

    Progress is written to out (standard output by default); inner cycles are
    reported every output_every_n_steps steps and on the last step.
    """
    if out is None:
        out = sys.stdout

    xy = Coordinates(function_name, input_x, input_y)

    print(f"The starting point: X = {_g(xy.x)} Y = {_g(xy.y)}", file=out)
    print(f"The starting Z value: {_g(xy.z)}", file=out)

    mc = MonteCarlo(xy, 0)
    uniform = Uniform()

    for i in range(outer):
        temperature, step_size = _schedule(i)
        mc.temperature = temperature

        print(f"================ Outer cycle #: {i + 1} ================", file=out)

        for j in range(inner):
            report = j % output_every_n_steps == 0 or j + 1 == inner
            if report:
                print(f"===== Inner cycle #: {j + 1} =====", file=out)

            delta1 = uniform.random() - 0.5
            delta2 = uniform.random() - 0.5
            if report:
                print(
                    f"Previous X: {_g(xy.x)} Previous Y: {_g(xy.y)} "
                    f"Previous Z: {_g(xy.z)}",
                    file=out,
                )

            xy.modify_x(step_size * delta1)
            xy.modify_y(step_size * delta2)

            accepted = mc.boltzmann(xy)

            if report:
                print(
                    f"X changed: {_g(step_size * delta1)} "
                    f"Y changed: {_g(step_size * delta2)}",
                    file=out,
                )
                print(
                    f"New X: {_g(xy.x)} New Y: {_g(xy.y)} New Z: {_g(xy.z)}",
                    file=out,
                )
                print(f"Accept? {int(accepted)}", file=out)
                print(f"Saved X: {_g(xy.x)} Saved Y: {_g(xy.y)}", file=out)
                print(f"After_boltzmann Z: {_g(xy.z)}", file=out)

        print(
            "==================== The predicted global minimum for "
            f"{xy.landscape_function_name} function ===============",
            file=out,
        )
        print(f"Final X: {_g(xy.x)} Final Y: {_g(xy.y)}", file=out)
        print(f"Final Z: {_g(xy.z)}", file=out)

    return xy


def run_suite(
    outer: int = 10,
    inner: int = 1000,
    output_every_n_steps: int = 300,
    out: TextIO | None = None,
) -> list[Coordinates]:
    """Seed the generator with 0 and anneal from every start on every landscape."""
    Uniform().set_seed(0)
    return [
        run(name, x, y, outer, inner, output_every_n_steps, out)
        for name in FUNCTION_NAMES
        for x in SUITE_STARTING_VALUES
        for y in SUITE_STARTING_VALUES
    ]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str], out: TextIO) -> str:
    out.write(prompt)
    out.flush()
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _number(token: str, kind: type) -> float | int:
    try:
        return kind(token)
    except ValueError:
        raise ValueError(f"not a valid {kind.__name__}: {token!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for a landscape, a start point and cycle counts, then anneal."""
    parser = argparse.ArgumentParser(
        description="Find the minimum of a landscape by simulated annealing."
    )
    parser.add_argument(
        "--suite",
        action="store_true",
        help="anneal from a fixed set of starts on every landscape",
    )
    args = parser.parse_args(argv)

    try:
        if args.suite:
            run_suite()
            return 0

        out = sys.stdout
        tokens = _tokens(sys.stdin)
        function_name = _ask(
            "Please choose a landscape function "
            "(choices: sum_squares, ackley, and rastrigin): ",
            tokens,
            out,
        )
        input_x = _number(_ask("Please enter an x: ", tokens, out), float)
        input_y = _number(_ask("Please enter an y: ", tokens, out), float)
        outer = _number(_ask("Please enter an outer cycle number: ", tokens, out), int)
        inner = _number(_ask("Please enter an inner cycle number: ", tokens, out), int)
        run(function_name, input_x, input_y, outer, inner, out=out)
    except ValueError as error:
        print(f"Caught an exception:\n{error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())