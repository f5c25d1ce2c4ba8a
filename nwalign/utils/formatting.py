"""Human-readable rendering of score tables and alignments."""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from nwalign.types import AlignmentResult

EMPTY_PREFIX = "-"
CELL_WIDTH = 3


def _prefix_labels(symbols: Sequence[Any]) -> List[str]:
    return [EMPTY_PREFIX] + [str(symbol) for symbol in symbols]


def _check_table_shape(scores: np.ndarray, x: Sequence[Any], y: Sequence[Any]) -> None:
    if scores.shape != (len(x) + 1, len(y) + 1):
        raise ValueError(
            f"Score table of shape {scores.shape} does not match sequences of "
            f"lengths {len(x)} and {len(y)}."
        )


def score_table_frame(
    scores: np.ndarray, x: Sequence[Any], y: Sequence[Any]
) -> pd.DataFrame:
    """Label a score table with the prefixes of x (rows) and y (columns)."""
    _check_table_shape(scores, x, y)
    return pd.DataFrame(scores, index=_prefix_labels(x), columns=_prefix_labels(y))


def render_score_table(scores: np.ndarray, x: Sequence[Any], y: Sequence[Any]) -> str:
    """Render a score table as a fixed-width text grid.

    The header row lists the column symbols; each following row starts with
    its symbol and lists the scores right-aligned in three characters.
    """
    frame = score_table_frame(scores, x, y)
    lines = ["    " + "".join(f"{label} " for label in frame.columns)]
    for label, row in zip(frame.index, frame.to_numpy()):
        cells = "".join(f"{int(value):>{CELL_WIDTH}} " for value in row)
        lines.append(f"{label} {cells}")
    return "\n".join(lines)


def match_line(aligned_x: Sequence[Any], aligned_y: Sequence[Any]) -> str:
    """Mark columns holding the same symbol with '|' and all others with ' '."""
    return "".join("|" if a == b else " " for a, b in zip(aligned_x, aligned_y))


def format_alignment(result: AlignmentResult, label_width: int = 10) -> str:
    """Return a labelled two-row alignment followed by its match line."""
    seq_x, seq_y = result.alignment.aligned_sequences
    lines = [
        f"{seq_x.identifier:>{label_width}}: {''.join(seq_x.residues)}",
        f"{seq_y.identifier:>{label_width}}: {''.join(seq_y.residues)}",
        f"{'':>{label_width}}  {match_line(seq_x.residues, seq_y.residues)}",
    ]
    return "\n".join(lines)


__all__ = [
    "score_table_frame",
    "render_score_table",
    "match_line",
    "format_alignment",
]
