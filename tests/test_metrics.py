"""Unit tests for alignment column statistics and summaries."""

from __future__ import annotations

import math

import pytest

from nwalign.algorithms.needleman_wunsch import NeedlemanWunschAligner
from nwalign.evaluation import summarize, summarize_many
from nwalign.evaluation.metrics import (
    count_gaps,
    count_matches,
    count_mismatches,
    extract_aligned_pairs,
    extract_columns,
    identity,
    score_alignment,
)
from nwalign.types import Alignment, ScoringParameters, TextSequence


def _alignment(aligned_x: str, aligned_y: str) -> Alignment:
    """Build a pairwise alignment whose originals are the ungapped rows."""
    return Alignment(
        name="toy",
        aligned_sequences=[
            TextSequence(identifier="x", residues=list(aligned_x), aligned=True),
            TextSequence(identifier="y", residues=list(aligned_y), aligned=True),
        ],
        original_sequences=[
            TextSequence(identifier="x", residues=list(aligned_x.replace("-", ""))),
            TextSequence(identifier="y", residues=list(aligned_y.replace("-", ""))),
        ],
    )


def test_column_counts():
    """Matches, mismatches and gap columns partition the alignment."""
    alignment = _alignment("G-ATTACA", "GCA-TGCU")
    assert extract_columns(alignment)[:2] == [("G", "G"), ("-", "C")]
    assert count_matches(alignment) == 4
    assert count_mismatches(alignment) == 2
    assert count_gaps(alignment) == 2
    assert math.isclose(identity(alignment), 0.5)


def test_aligned_pairs_use_ungapped_indices():
    """Aligned pairs index into the unaligned sequences."""
    alignment = _alignment("G-AT", "GCA-")
    assert extract_aligned_pairs(alignment) == {(0, 0), (1, 2)}


def test_score_alignment_matches_linear_gap_model():
    """Re-scoring sums substitution scores and one gap penalty per gap column."""
    alignment = _alignment("G-ATTACA", "GCA-TGCU")
    assert score_alignment(alignment, ScoringParameters(1, -1, -1)) == 0
    assert score_alignment(alignment, ScoringParameters(2, -1, -3)) == 4 * 2 - 2 - 6


def test_double_gap_columns_cannot_be_built():
    """Alignments with a column of two gaps are rejected before scoring."""
    with pytest.raises(ValueError):
        _alignment("A--", "A-C")


def test_identity_of_empty_alignment():
    """An empty alignment counts as fully identical."""
    assert identity(_alignment("", "")) == 1.0


def test_summarize_aligner_result():
    """Summaries carry the score, identifiers and column statistics."""
    x_seq = TextSequence(identifier="a", residues=list("GATTACA"))
    y_seq = TextSequence(identifier="b", residues=list("GCATGCU"))
    result = NeedlemanWunschAligner().align(ScoringParameters(1, -1, -1), x_seq, y_seq)

    summary = summarize(result)
    assert summary.alignment_name == "NW_a_vs_b"
    assert summary.sequence_ids == ("a", "b")
    assert summary.score == 0
    assert summary.columns == 8
    assert (summary.matches, summary.mismatches, summary.gaps) == (4, 2, 2)
    assert math.isclose(summary.identity, 0.5)

    assert summarize_many([result, result]) == [summary, summary]
