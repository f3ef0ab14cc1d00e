"""A* search over a one-dimensional continuous state space."""

__version__ = "0.1.0"
