"""Traceback through a filled decision table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from nwalign.algorithms.table import Direction, DPTables
from nwalign.types.sequence import GAP


@dataclass(frozen=True)
class TracebackPath:
    """One optimal alignment recovered from the decision table.

    Attributes:
        score: Optimal score, taken from the final cell of the score table
        aligned_x: Symbols of x with gap symbols inserted, start to end
        aligned_y: Symbols of y with gap symbols inserted, start to end
        directions: Branch taken for each column, start to end
        fallback_steps: Number of steps that ignored an unusable decision
    """

    score: int
    aligned_x: List[Any]
    aligned_y: List[Any]
    directions: List[Direction]
    fallback_steps: int = 0


def _is_usable(direction: Optional[Direction], i: int, j: int) -> bool:
    """Whether ``direction`` can be followed from cell (i, j)."""
    if direction is Direction.DIAGONAL:
        return i > 0 and j > 0
    if direction is Direction.VERTICAL:
        return i > 0
    if direction is Direction.HORIZONTAL:
        return j > 0
    return False


def _fallback_direction(i: int, j: int) -> Direction:
    if i > 0 and j > 0:
        return Direction.DIAGONAL
    if i > 0:
        return Direction.VERTICAL
    return Direction.HORIZONTAL


def _check_shape(x: Sequence[Any], y: Sequence[Any], tables: DPTables) -> None:
    expected: Tuple[int, int] = (len(x) + 1, len(y) + 1)
    if tuple(tables.shape) != expected or tuple(tables.decisions.shape) != expected:
        raise ValueError(
            f"Tables of shape {tuple(tables.shape)} do not match sequences of "
            f"lengths {len(x)} and {len(y)}."
        )


def reconstruct(
    x: Sequence[Any],
    y: Sequence[Any],
    tables: DPTables,
    gap_symbol: Any = GAP,
) -> TracebackPath:
    """Follow decisions from (n, m) back to the origin and emit the alignment."""
    _check_shape(x, y, tables)

    i, j = len(x), len(y)
    aligned_x: List[Any] = []
    aligned_y: List[Any] = []
    directions: List[Direction] = []
    fallback_steps = 0

    while i > 0 or j > 0:
        direction = tables.decision(i, j)
        if not _is_usable(direction, i, j):
            direction = _fallback_direction(i, j)
            fallback_steps += 1

        if direction is Direction.DIAGONAL:
            aligned_x.append(x[i - 1])
            aligned_y.append(y[j - 1])
            i -= 1
            j -= 1
        elif direction is Direction.VERTICAL:
            aligned_x.append(x[i - 1])
            aligned_y.append(gap_symbol)
            i -= 1
        else:  # direction is Direction.HORIZONTAL
            aligned_x.append(gap_symbol)
            aligned_y.append(y[j - 1])
            j -= 1
        directions.append(direction)

    aligned_x.reverse()
    aligned_y.reverse()
    directions.reverse()

    return TracebackPath(
        score=tables.score,
        aligned_x=aligned_x,
        aligned_y=aligned_y,
        directions=directions,
        fallback_steps=fallback_steps,
    )


__all__ = ["TracebackPath", "reconstruct"]
