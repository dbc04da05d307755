"""Entropy tests for byte sequences: chi-square, Monte Carlo pi, mean, serial correlation and Shannon entropy."""

__version__ = "0.2.5"

__all__ = ["base", "chisqr", "mc", "mean", "sc", "shannon", "suite", "cli"]