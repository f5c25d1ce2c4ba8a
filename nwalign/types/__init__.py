"""Types for the project."""

from .sequence import GAP, SequenceType, TextSequence, DNASequence, RNASequence
from .alignment import Alignment, AlignmentResult
from .evaluation import AlignmentSummary
from .parameters import ScoringParameters, DEFAULT_SCORING


__all__ = [
    "GAP",
    "SequenceType",
    "TextSequence",
    "DNASequence",
    "RNASequence",
    "Alignment",
    "AlignmentResult",
    "AlignmentSummary",
    "ScoringParameters",
    "DEFAULT_SCORING",
    "parameters",
]
