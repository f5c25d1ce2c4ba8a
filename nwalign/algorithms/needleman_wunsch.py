"""Needleman-Wunsch global alignment with a linear gap penalty."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from nwalign.algorithms.base import PairwiseAligner
from nwalign.algorithms.table import build_tables
from nwalign.algorithms.traceback import TracebackPath, reconstruct
from nwalign.types import (
    GAP,
    Alignment,
    AlignmentResult,
    DEFAULT_SCORING,
    ScoringParameters,
    SequenceType,
)


def align_symbols(
    x: Sequence[Any],
    y: Sequence[Any],
    scoring: ScoringParameters = DEFAULT_SCORING,
    gap_symbol: Any = GAP,
) -> TracebackPath:
    """Globally align two symbol sequences and return the traceback path."""
    tables = build_tables(x, y, scoring)
    return reconstruct(x, y, tables, gap_symbol=gap_symbol)


def needleman_wunsch(
    a: str,
    b: str,
    match: int = 1,
    mismatch: int = -1,
    gap: int = -2,
) -> Tuple[int, str, str]:
    """Align two strings and return ``(score, aligned_a, aligned_b)``.

    >>> needleman_wunsch("GATTACA", "GCATGCU", match=1, mismatch=-1, gap=-1)
    (0, 'G-ATTACA', 'GCA-TGCU')
    """
    scoring = ScoringParameters(match=match, mismatch=mismatch, gap=gap)
    path = align_symbols(a, b, scoring)
    return path.score, "".join(path.aligned_x), "".join(path.aligned_y)


class NeedlemanWunschAligner(PairwiseAligner):
    """Optimal global alignment under match/mismatch/linear-gap scoring."""

    def __init__(self, keep_scores: bool = False) -> None:
        self.keep_scores = keep_scores

    def _to_aligned(self, seq: SequenceType, residues: List[str]) -> SequenceType:
        seq_cls = type(seq)
        return seq_cls(
            identifier=seq.identifier,
            residues=residues,
            description=seq.description,
            aligned=True,
        )

    def align(
        self,
        scoring: ScoringParameters,
        x_seq: SequenceType,
        y_seq: SequenceType,
    ) -> AlignmentResult:
        """Compute the optimal global alignment for the provided sequences."""
        if x_seq.aligned or y_seq.aligned:
            raise ValueError("Cannot align sequences that are already aligned.")

        tables = build_tables(x_seq.residues, y_seq.residues, scoring)
        path = reconstruct(x_seq.residues, y_seq.residues, tables)

        alignment = Alignment(
            name=f"NW_{x_seq.identifier}_vs_{y_seq.identifier}",
            aligned_sequences=[
                self._to_aligned(x_seq, path.aligned_x),
                self._to_aligned(y_seq, path.aligned_y),
            ],
            original_sequences=[x_seq, y_seq],
        )

        scores = tables.scores.copy() if self.keep_scores else None
        return AlignmentResult(alignment=alignment, score=path.score, scores=scores)


__all__ = ["NeedlemanWunschAligner", "align_symbols", "needleman_wunsch"]
