"""Unit tests for traceback through the decision table."""

from __future__ import annotations

import numpy as np
import pytest

from nwalign.algorithms.table import UNSET, Direction, DPTables, build_tables
from nwalign.algorithms.traceback import reconstruct
from nwalign.types.parameters import ScoringParameters


def _unit_scoring() -> ScoringParameters:
    return ScoringParameters(match=1, mismatch=-1, gap=-1)


def test_classic_pair_follows_tie_break_path():
    """GATTACA/GCATGCU reconstructs the single path fixed by the tie-break order."""
    x, y = "GATTACA", "GCATGCU"
    tables = build_tables(x, y, _unit_scoring())
    path = reconstruct(x, y, tables)

    assert path.score == 0
    assert "".join(path.aligned_x) == "G-ATTACA"
    assert "".join(path.aligned_y) == "GCA-TGCU"
    assert path.directions == [
        Direction.DIAGONAL,
        Direction.HORIZONTAL,
        Direction.DIAGONAL,
        Direction.VERTICAL,
        Direction.DIAGONAL,
        Direction.DIAGONAL,
        Direction.DIAGONAL,
        Direction.DIAGONAL,
    ]
    assert path.fallback_steps == 0


def test_score_is_read_from_final_cell():
    """The path score equals the final cell of the score table."""
    x, y = "ACCGGTTA", "ACGTA"
    tables = build_tables(x, y, ScoringParameters())
    path = reconstruct(x, y, tables)
    assert path.score == int(tables.scores[len(x), len(y)])


def test_step_count_matches_lengths():
    """A path takes n + m - (diagonal steps) steps."""
    x, y = "TTAGGC", "TAGC"
    tables = build_tables(x, y, ScoringParameters())
    path = reconstruct(x, y, tables)
    diagonal_steps = path.directions.count(Direction.DIAGONAL)
    assert len(path.directions) == len(x) + len(y) - diagonal_steps
    assert len(path.aligned_x) == len(path.aligned_y) == len(path.directions)


def test_empty_first_sequence_is_all_gaps():
    """Aligning "" against k symbols gives k gaps and a score of k * gap."""
    y = "ACGTA"
    tables = build_tables("", y, ScoringParameters(gap=-2))
    path = reconstruct("", y, tables)

    assert path.score == -2 * len(y)
    assert path.aligned_x == ["-"] * len(y)
    assert "".join(path.aligned_y) == y
    assert set(path.directions) == {Direction.HORIZONTAL}


def test_both_empty_gives_empty_path():
    """Two empty sequences align to nothing with a zero score."""
    tables = build_tables("", "", ScoringParameters())
    path = reconstruct("", "", tables)
    assert path.score == 0
    assert path.aligned_x == path.aligned_y == []
    assert path.directions == []


def test_custom_gap_symbol():
    """Gap positions use the requested symbol."""
    x, y = ["a", "b"], ["b"]
    tables = build_tables(x, y, ScoringParameters(match=2, mismatch=-2, gap=-1))
    path = reconstruct(x, y, tables, gap_symbol=None)
    assert path.aligned_x == ["a", "b"]
    assert path.aligned_y == [None, "b"]


def test_fallback_never_used_on_filled_tables():
    """Well-formed tables never trigger the defensive fallback."""
    scorings = [
        ScoringParameters(),
        ScoringParameters(match=0, mismatch=0, gap=0),
        ScoringParameters(match=-1, mismatch=2, gap=3),
    ]
    pairs = [("", "AC"), ("GATTACA", "GCATGCU"), ("AAAA", "A"), ("ACGT", "TGCA")]
    for scoring in scorings:
        for x, y in pairs:
            path = reconstruct(x, y, build_tables(x, y, scoring))
            assert path.fallback_steps == 0


def test_fallback_recovers_from_unset_cells():
    """An unset decision table still yields a complete, terminating path."""
    x, y = "ACG", "AG"
    scores = np.zeros((4, 3), dtype=np.int64)
    decisions = np.full((4, 3), UNSET, dtype=np.int8)
    path = reconstruct(x, y, DPTables(scores=scores, decisions=decisions))

    # diagonal twice, then vertical down column 0
    assert "".join(path.aligned_x) == "ACG"
    assert "".join(path.aligned_y) == "-AG"
    assert path.fallback_steps == 3


def test_fallback_replaces_impossible_direction():
    """A diagonal recorded on row 0 cannot be followed and falls back to horizontal."""
    x, y = "", "AB"
    scores = np.zeros((1, 3), dtype=np.int64)
    decisions = np.full((1, 3), Direction.DIAGONAL, dtype=np.int8)
    path = reconstruct(x, y, DPTables(scores=scores, decisions=decisions))

    assert path.aligned_x == ["-", "-"]
    assert "".join(path.aligned_y) == "AB"
    assert path.fallback_steps == 2


def test_shape_mismatch_is_rejected():
    """Tables built for other sequences are refused."""
    tables = build_tables("ACG", "AC", ScoringParameters())
    with pytest.raises(ValueError):
        reconstruct("AC", "AC", tables)
