"""Algorithms for the project."""

from .base import PairwiseAligner
from .needleman_wunsch import NeedlemanWunschAligner, align_symbols, needleman_wunsch
from .table import Direction, DPTables, build_tables
from .traceback import TracebackPath, reconstruct


__all__ = [
    "PairwiseAligner",
    "NeedlemanWunschAligner",
    "align_symbols",
    "needleman_wunsch",
    "Direction",
    "DPTables",
    "build_tables",
    "TracebackPath",
    "reconstruct",
]
