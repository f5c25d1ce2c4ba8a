"""Column statistics for pairwise alignments."""

from __future__ import annotations

from typing import List, Set, Tuple

from nwalign.types import GAP, Alignment, ScoringParameters, SequenceType

PAIRWISE_COUNT = 2


def _ensure_pairwise_alignment(
    alignment: Alignment,
) -> Tuple[SequenceType, SequenceType]:
    """Validate that the alignment contains exactly two sequences."""
    if alignment.num_sequences != PAIRWISE_COUNT:
        raise ValueError(
            f"Expected pairwise alignment with {PAIRWISE_COUNT} sequences, "
            f"received {alignment.num_sequences}."
        )
    seq_x, seq_y = alignment.aligned_sequences
    return seq_x, seq_y


def _safe_divide(numerator: float, denominator: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else 0.0


def extract_columns(alignment: Alignment) -> List[Tuple[str, str]]:
    """Return the alignment columns as pairs of residues (gaps retained)."""
    seq_x, seq_y = _ensure_pairwise_alignment(alignment)
    return list(zip(seq_x.residues, seq_y.residues))


def extract_aligned_pairs(alignment: Alignment) -> Set[Tuple[int, int]]:
    """Return the set of residue index pairs represented by the alignment.

    Indexing is zero-based with respect to the unaligned (gap-free) sequences.
    Gapped positions are ignored.
    """
    idx_x = idx_y = 0
    pairs: Set[Tuple[int, int]] = set()

    for residue_x, residue_y in extract_columns(alignment):
        if residue_x != GAP and residue_y != GAP:
            pairs.add((idx_x, idx_y))
        if residue_x != GAP:
            idx_x += 1
        if residue_y != GAP:
            idx_y += 1

    return pairs


def count_matches(alignment: Alignment) -> int:
    """Number of columns pairing two identical residues."""
    return sum(
        1 for x, y in extract_columns(alignment) if x == y and x != GAP
    )


def count_mismatches(alignment: Alignment) -> int:
    """Number of columns pairing two different residues."""
    return sum(
        1
        for x, y in extract_columns(alignment)
        if x != y and GAP not in (x, y)
    )


def count_gaps(alignment: Alignment) -> int:
    """Number of columns holding a gap in either sequence."""
    return sum(1 for x, y in extract_columns(alignment) if GAP in (x, y))


def identity(alignment: Alignment) -> float:
    """Fraction of columns that are matches; an empty alignment is identical."""
    if alignment.columns == 0:
        return 1.0
    return _safe_divide(count_matches(alignment), alignment.columns)


def score_alignment(alignment: Alignment, scoring: ScoringParameters) -> int:
    """Re-score an alignment column by column under linear-gap scoring."""
    total = 0
    for x, y in extract_columns(alignment):
        if GAP in (x, y):
            total += scoring.gap
        else:
            total += scoring.substitution(x, y)
    return total


__all__ = [
    "extract_columns",
    "extract_aligned_pairs",
    "count_matches",
    "count_mismatches",
    "count_gaps",
    "identity",
    "score_alignment",
]
