"""Shape areas, digit-run splitting and simulated annealing on test landscapes."""

__version__ = "0.1.0"