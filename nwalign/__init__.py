"""Needleman-Wunsch global pairwise alignment."""

__version__ = "0.1.0"
