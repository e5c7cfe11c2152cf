"""Solvers for a twelve-day series of holiday programming puzzles, one module per day."""

__version__ = "0.1.0"