"""Alignment summary data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AlignmentSummary:
    """Column statistics for a single pairwise alignment."""

    alignment_name: Optional[str]
    sequence_ids: Tuple[str, str]
    score: int
    columns: int
    matches: int
    mismatches: int
    gaps: int
    identity: float


__all__ = ["AlignmentSummary"]
