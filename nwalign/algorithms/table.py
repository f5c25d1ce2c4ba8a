"""Score and decision tables for linear-gap global alignment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from nwalign.types.parameters import INT64_MAX, ScoringParameters, max_safe_length


class Direction(IntEnum):
    """Recurrence branch that produced a cell's optimal value."""

    DIAGONAL = 0
    VERTICAL = 1  # consumes a symbol of x, gap in y
    HORIZONTAL = 2  # consumes a symbol of y, gap in x
    ORIGIN = 3


UNSET = -1
_DIRECTION_BY_CODE = {direction.value: direction for direction in Direction}


@dataclass(frozen=True)
class DPTables:
    """Score table and parallel decision table of one alignment call.

    Attributes:
        scores: (n+1) x (m+1) int64 matrix of optimal prefix scores
        decisions: (n+1) x (m+1) int8 matrix of ``Direction`` codes
    """

    scores: np.ndarray
    decisions: np.ndarray

    @property
    def shape(self) -> Tuple[int, int]:
        """Table dimensions (n+1, m+1)."""
        return self.scores.shape

    @property
    def score(self) -> int:
        """Optimal global alignment score, stored in the final cell."""
        return int(self.scores[-1, -1])

    def decision(self, i: int, j: int) -> Optional[Direction]:
        """Return the decision at (i, j), or None for an unset or unknown code."""
        return _DIRECTION_BY_CODE.get(int(self.decisions[i, j]))


def _check_overflow(n: int, m: int, scoring: ScoringParameters) -> None:
    if n + m > max_safe_length(scoring):
        raise OverflowError(
            f"Sequences of combined length {n + m} with score magnitude "
            f"{scoring.max_magnitude} can exceed the int64 range ({INT64_MAX}); "
            f"the safe combined length is {max_safe_length(scoring)}."
        )


def _initialize_tables(n: int, m: int) -> Tuple[np.ndarray, np.ndarray]:
    """Allocate the score table and an all-unset decision table."""
    scores = np.zeros((n + 1, m + 1), dtype=np.int64)
    decisions = np.full((n + 1, m + 1), UNSET, dtype=np.int8)
    return scores, decisions


def _fill_boundaries(
    scores: np.ndarray, decisions: np.ndarray, gap: int, n: int, m: int
) -> None:
    """Seed the origin and the pure-gap first row and first column."""
    decisions[0, 0] = Direction.ORIGIN
    if m > 0:
        scores[0, 1:] = gap * np.arange(1, m + 1, dtype=np.int64)
        decisions[0, 1:] = Direction.HORIZONTAL
    if n > 0:
        scores[1:, 0] = gap * np.arange(1, n + 1, dtype=np.int64)
        decisions[1:, 0] = Direction.VERTICAL


def _fill_interior(
    scores: np.ndarray,
    decisions: np.ndarray,
    x: Sequence[Any],
    y: Sequence[Any],
    scoring: ScoringParameters,
) -> None:
    """Run the recurrence row by row over cells (1..n, 1..m)."""
    match, mismatch, gap = scoring.match, scoring.mismatch, scoring.gap
    n, m = len(x), len(y)

    prev_row = [int(value) for value in scores[0]]
    for i in range(1, n + 1):
        x_symbol = x[i - 1]
        row = [int(scores[i, 0])] + [0] * m
        codes = [Direction.DIAGONAL] * m
        for j in range(1, m + 1):
            best = prev_row[j - 1] + (match if x_symbol == y[j - 1] else mismatch)
            best_dir = Direction.DIAGONAL

            vertical = prev_row[j] + gap
            if vertical > best:
                best = vertical
                best_dir = Direction.VERTICAL

            horizontal = row[j - 1] + gap
            if horizontal > best:
                best = horizontal
                best_dir = Direction.HORIZONTAL

            row[j] = best
            codes[j - 1] = best_dir

        scores[i, 1:] = row[1:]
        decisions[i, 1:] = codes
        prev_row = row


def build_tables(
    x: Sequence[Any], y: Sequence[Any], scoring: ScoringParameters
) -> DPTables:
    """Fill the Needleman-Wunsch score and decision tables for ``x`` against ``y``.

    Ties between candidates resolve diagonal first, then vertical, then
    horizontal: a later branch only wins when it is strictly greater.

    Raises:
        OverflowError: if scores for these lengths could leave the int64 range.
    """
    n, m = len(x), len(y)
    _check_overflow(n, m, scoring)

    scores, decisions = _initialize_tables(n, m)
    _fill_boundaries(scores, decisions, scoring.gap, n, m)
    _fill_interior(scores, decisions, x, y, scoring)

    return DPTables(scores=scores, decisions=decisions)


__all__ = ["Direction", "DPTables", "UNSET", "build_tables"]
