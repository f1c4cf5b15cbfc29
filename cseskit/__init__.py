"""Algorithms for classic programming-contest problems: dynamic programming, graphs, trees, number theory and searching."""

__version__ = "0.1.0"