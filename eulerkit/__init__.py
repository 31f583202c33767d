"""Solvers for classic number-theory and combinatorics puzzles."""

__version__ = "0.1.0"