"""Summaries of alignment results."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from nwalign.evaluation.metrics import (
    count_gaps,
    count_matches,
    count_mismatches,
    identity,
)
from nwalign.types import Alignment, AlignmentResult
from nwalign.types.evaluation import AlignmentSummary


def _sequence_pair_ids(alignment: Alignment) -> Tuple[str, str]:
    """Return the identifiers of the sequences participating in the alignment."""
    if alignment.num_sequences != 2:
        raise ValueError(
            f"Expected pairwise alignment with 2 sequences, found {alignment.num_sequences}."
        )

    first, second = alignment.original_sequences
    return first.identifier, second.identifier


def summarize(result: AlignmentResult) -> AlignmentSummary:
    """Collect column statistics for a single alignment result."""
    alignment = result.alignment
    return AlignmentSummary(
        alignment_name=alignment.name,
        sequence_ids=_sequence_pair_ids(alignment),
        score=result.score,
        columns=alignment.columns,
        matches=count_matches(alignment),
        mismatches=count_mismatches(alignment),
        gaps=count_gaps(alignment),
        identity=identity(alignment),
    )


def summarize_many(results: Iterable[AlignmentResult]) -> List[AlignmentSummary]:
    """Summarize several alignment results, preserving their order."""
    return [summarize(result) for result in results]


__all__ = ["summarize", "summarize_many"]
