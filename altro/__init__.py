"""Trajectory optimisation building blocks: knot points, trajectories, differentiable functions, logging, statistics, profiling and a thread pool."""

__version__ = "0.3.4"