"""Evaluation module for the project."""

from .evaluation import summarize, summarize_many

__all__ = [
    "summarize",
    "summarize_many",
    "metrics",
]
