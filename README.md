# camptools

A small collection of numerical tools:

- **Shapes** (`camptools.shapes`): rectangles, circles and triangles that
  compute their own area.
- **Splitter** (`camptools.splitter`): describe digit strings as runs of equal
  characters, or as blocks of `0`s and `1`s.
- **Annealing** (`camptools.landscape`, `camptools.coordinates`,
  `camptools.montecarlo`, `camptools.uniform`, `camptools.annealing`):
  a Metropolis Monte Carlo simulated-annealing search over three test
  landscapes, `sum_squares`, `rastrigin` and `ackley`.

It needs only the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### camptools-shapes

```
camptools-shapes
```

Asks on standard input for a rectangle's base and height, a circle's radius
and a triangle's three side lengths, then prints one line per shape:

```
The area of the rectangle is: 12
The area of the circle is: 3.1416
The area of the triangle is: -1
```

Input that is missing or not a number is reported on standard error and the
command exits with status 1.

### camptools-split

```
camptools-split [TEXT] [--blocks]
```

Without `--blocks`, prints `TEXT` and, on the next line, the lengths of its
runs of equal characters separated by spaces. With `--blocks`, prints a tens
and a ones ruler, the text, and then the inclusive start and stop position of
every block of `0`s or `1`s, one pair per line. When `TEXT` is left out a
built-in sample string is used.

### camptools-anneal

```
camptools-anneal
camptools-anneal --suite
```

Without options, asks for a landscape name (`sum_squares`, `ackley` or
`rastrigin`), a starting x and y, and the number of outer and inner cycles,
then runs simulated annealing, printing a trace of every inner cycle and the
predicted global minimum after each outer cycle. An unknown landscape name or
a malformed number is reported on standard error as
`Caught an exception:` followed by the message, and the command exits with
status 1.

With `--suite`, seeds the random generator with 0 and runs every landscape
from every combination of the starting values 1, 10, 32, 110 and 1300 for x
and y, with 10 outer and 1000 inner cycles, reporting every 300th inner cycle.

## Library use

### Shapes

```python
from camptools.shapes import Rectangle, Circle, Triangle, report

shapes = [Rectangle(3, 4), Circle(1), Triangle(1, 2, 100)]
Rectangle(3, 4).area                 # 12
Triangle(1, 2, 100).calculate_area() # -1.0
for line in report(shapes):          # report yields one line per shape
    print(line)
```

Every shape has a `name` (`"rectangle"`, `"circle"`, `"triangle"`), a
`calculate_area()` method and an `area` property. Circle areas use `3.1416`
for pi; triangle areas use Heron's formula, and side lengths that break the
triangle inequality give `-1`.

### Splitting digit strings

```python
from camptools.splitter import split_zero_and_ones_string, split_zeros_and_ones_blocks

split_zero_and_ones_string("000001111110000111111110000")
# [5, 6, 4, 8, 4]

split_zeros_and_ones_blocks("00001110293411111887888880000222333311111")
# [StartStop(start=0, stop=3), StartStop(start=4, stop=6), StartStop(start=7, stop=7),
#  StartStop(start=12, stop=16), StartStop(start=25, stop=28), StartStop(start=36, stop=40)]
```

`StartStop` is a frozen dataclass with inclusive `start` and `stop`. Runs of
characters other than `0` and `1` are skipped.

### Landscapes

```python
from camptools.landscape import landscape_for

landscape = landscape_for("rastrigin")
landscape.calculate_z(4, 5)   # 0.0, the global minimum
```

`SumSquares` and `Ackley` have their minimum z = 0 at (0, 0), `Rastrigin` at
(4, 5). `landscape_for` raises `ValueError` for any other name than
`sum_squares`, `rastrigin` or `ackley`. `clone()` returns a copy.

### Coordinates

```python
from camptools.coordinates import Coordinates

point = Coordinates("sum_squares", 3.0, 4.0)
point.z            # 25.0
point.modify_x(-3) # x is now 0.0, z is recomputed: 16.0
point.y = 0.0      # z is now 0.0
```

`z` is read-only and always matches `x` and `y` on the current landscape.
`set_landscape_function(name)` switches landscape, `copy()` returns an
independent point sharing the landscape, and `assign(other)` overwrites a
point with another's values.

### Monte Carlo and random numbers

`camptools.montecarlo.MonteCarlo(xy, temperature)` keeps a copy of the last
accepted point. `boltzmann(new_xy)` always accepts a point with lower z, and
accepts one with higher or equal z with probability `exp(-dz / temperature)`
(never, at temperature 0). On acceptance it stores the point and returns
`True`; on rejection it resets `new_xy` to the stored point and returns
`False`. The stored point is available as `last_accepted_coordinates` and its
height as `last_accepted_z`; `temperature` may be changed at any time.

Random numbers come from `camptools.uniform.Uniform`. All instances draw from
one shared generator, so `set_seed(seed)` on any of them reseeds them all and
makes runs reproducible.

### Running an annealing search

```python
import io
from camptools.annealing import run, run_suite

trace = io.StringIO()
final = run("sum_squares", 30.0, 30.0, 10, 1000, output_every_n_steps=100, out=trace)
final.x, final.y, final.z
```

`run` writes its trace to `out` (standard output by default) and returns the
final `Coordinates`. `run_suite(outer=10, inner=1000, output_every_n_steps=300,
out=None)` seeds the generator with 0, runs every landscape from every start
described under `camptools-anneal --suite`, and returns the list of final
points.