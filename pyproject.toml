[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "altro"
version = "0.3.4"
description = "Building blocks for trajectory optimisation solvers: knot points, trajectories, differentiable functions with finite-difference checks, solver logging, statistics, profiling and a simple thread pool."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "trajectory optimization",
    "optimal control",
    "finite differences",
    "solver logging",
    "profiling",
    "thread pool",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["altro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
