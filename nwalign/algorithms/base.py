"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nwalign.types import AlignmentResult, ScoringParameters, SequenceType


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        scoring: ScoringParameters,
        x_seq: SequenceType,
        y_seq: SequenceType,
    ) -> AlignmentResult:
        """Align two sequences under the provided scoring parameters."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
