[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camptools"
version = "0.1.0"
description = "Shape areas, digit-run splitting and simulated annealing on classic optimisation landscapes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "area",
    "run-length",
    "monte-carlo",
    "metropolis",
    "simulated-annealing",
    "optimization",
    "rastrigin",
    "ackley",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
camptools-shapes = "camptools.shapes:main"
camptools-split = "camptools.splitter:main"
camptools-anneal = "camptools.annealing:main"

[tool.hatch.build.targets.wheel]
packages = ["camptools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
