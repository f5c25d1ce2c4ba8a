"""
This module defines the scoring parameters of the linear-gap global alignment
model: a reward for identical symbols, a penalty for differing symbols and a
fixed per-symbol gap penalty. No ordering between the three values is enforced;
a gap penalty more favorable than the match score is accepted and simply
produces gap-heavy alignments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

SCORING_KEYS: Tuple[str, str, str] = ("match", "mismatch", "gap")
INT64_MAX: int = int(np.iinfo(np.int64).max)


def _validate_integer(value: Any, name: str) -> None:
    # bool is an int subclass but never a meaningful score
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


@dataclass(frozen=True)
class ScoringParameters:
    """Match reward, mismatch penalty and linear gap penalty."""

    match: int = 1
    mismatch: int = -1
    gap: int = -2

    def __post_init__(self) -> None:
        for key in SCORING_KEYS:
            value = getattr(self, key)
            _validate_integer(value, key)
            object.__setattr__(self, key, int(value))

    @property
    def max_magnitude(self) -> int:
        """Largest absolute contribution a single alignment column can make."""
        return max(abs(self.match), abs(self.mismatch), abs(self.gap))

    def substitution(self, x_symbol: Any, y_symbol: Any) -> int:
        """Return the score of aligning two symbols in the same column."""
        return self.match if x_symbol == y_symbol else self.mismatch


def max_safe_length(scoring: ScoringParameters) -> int:
    """Return the largest combined length n + m whose scores fit in int64.

    Every cell (i, j) of the score table lies on a path of at most i + j
    columns, so its magnitude is bounded by (i + j) * ``max_magnitude``.
    """
    if scoring.max_magnitude == 0:
        return INT64_MAX
    return INT64_MAX // scoring.max_magnitude


DEFAULT_SCORING = ScoringParameters()


__all__ = [
    "ScoringParameters",
    "DEFAULT_SCORING",
    "SCORING_KEYS",
    "INT64_MAX",
    "max_safe_length",
]
