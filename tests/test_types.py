"""Unit tests for sequence, alignment and scoring types."""

from __future__ import annotations

import numpy as np
import pytest

from nwalign.types import (
    GAP,
    Alignment,
    DNASequence,
    RNASequence,
    ScoringParameters,
    TextSequence,
)
from nwalign.types.parameters import DEFAULT_SCORING


def _pair(aligned_x: str, aligned_y: str, original_x: str, original_y: str):
    return Alignment(
        name="pair",
        aligned_sequences=[
            TextSequence(identifier="x", residues=list(aligned_x), aligned=True),
            TextSequence(identifier="y", residues=list(aligned_y), aligned=True),
        ],
        original_sequences=[
            TextSequence(identifier="x", residues=list(original_x)),
            TextSequence(identifier="y", residues=list(original_y)),
        ],
    )


def test_dna_sequence_uppercases_and_validates():
    """DNA residues are uppercased; letters outside ACGTN are rejected."""
    seq = DNASequence(identifier="d", residues=list("acgtn"))
    assert seq.residues == list("ACGTN")
    assert len(seq) == 5

    with pytest.raises(ValueError):
        DNASequence(identifier="d", residues=list("ACGU"))
    with pytest.raises(ValueError):
        DNASequence(identifier="d", residues=list("AC-G"))


def test_rna_sequence_allows_gaps_only_when_aligned():
    """Aligned RNA sequences may contain the gap symbol."""
    seq = RNASequence(identifier="r", residues=list("AC-U"), aligned=True)
    assert seq.ungapped() == list("ACU")
    with pytest.raises(ValueError):
        RNASequence(identifier="r", residues=list("AC-U"))
    with pytest.raises(ValueError):
        RNASequence(identifier="r", residues=list("ACGT"))


def test_text_sequence_accepts_any_single_characters():
    """Text sequences keep case and accept arbitrary characters."""
    seq = TextSequence(identifier="t", residues=list("Hello, world!"))
    assert "".join(seq.residues) == "Hello, world!"
    with pytest.raises(ValueError):
        TextSequence(identifier="t", residues=["ab"])
    with pytest.raises(ValueError):
        TextSequence(identifier="t", residues=list("a-b"))


def test_sequence_str_mentions_identifier():
    """The string form shows the identifier and residues."""
    text = str(TextSequence(identifier="seq1", residues=list("ACG")))
    assert "seq1" in text
    assert "ACG" in text
    assert "unaligned" in text


def test_alignment_accepts_consistent_pair():
    """A projecting, equal-length pair is a valid alignment."""
    alignment = _pair("G-AT", "GCA-", "GAT", "GCA")
    assert alignment.num_sequences == 2
    assert alignment.columns == 4
    assert alignment.gap_only_columns() == []
    assert "pair" in str(alignment)


def test_alignment_rejects_unequal_lengths():
    """Aligned rows must have the same number of columns."""
    with pytest.raises(ValueError):
        _pair("GAT", "GCA-", "GAT", "GCA")


def test_alignment_rejects_broken_projection():
    """Removing gaps must give back the original sequence."""
    with pytest.raises(ValueError):
        _pair("G-AT", "GCA-", "GTA", "GCA")


def test_alignment_rejects_gap_only_columns():
    """A column with gaps in both rows is not a valid alignment column."""
    with pytest.raises(ValueError, match="gap-only columns"):
        _pair("G--A", "G-CA", "GA", "GCA")


def test_alignment_requires_two_sequences():
    """A single sequence is not an alignment."""
    seq = TextSequence(identifier="x", residues=list("A"), aligned=True)
    with pytest.raises(ValueError):
        Alignment(name=None, aligned_sequences=[seq], original_sequences=[seq])


def test_scoring_defaults_and_substitution():
    """Default scoring is +1/-1/-2; substitution picks match or mismatch."""
    assert DEFAULT_SCORING == ScoringParameters(match=1, mismatch=-1, gap=-2)
    assert DEFAULT_SCORING.substitution("A", "A") == 1
    assert DEFAULT_SCORING.substitution("A", "C") == -1
    assert ScoringParameters(match=3, mismatch=-7, gap=5).max_magnitude == 7


def test_scoring_accepts_numpy_integers():
    """numpy integers are converted to plain ints."""
    scoring = ScoringParameters(match=np.int32(2), mismatch=np.int64(-1), gap=-3)
    assert type(scoring.match) is int
    assert type(scoring.mismatch) is int


@pytest.mark.parametrize("bad", [1.0, "1", None, True])
def test_scoring_rejects_non_integers(bad):
    """Floats, strings, None and bools are not valid scores."""
    with pytest.raises(TypeError):
        ScoringParameters(match=bad)


def test_gap_symbol():
    """The gap symbol is a dash."""
    assert GAP == "-"
