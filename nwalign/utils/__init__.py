"""Utility functions for the project."""

from .fasta import read_fasta
from .serialization import scoring_to_dict, load_scoring, dump_scoring
from .formatting import (
    score_table_frame,
    render_score_table,
    match_line,
    format_alignment,
)
from .stockholm_writer import write_stockholm_pairwise, write_fasta_pairwise

__all__ = [
    "read_fasta",
    "scoring_to_dict",
    "load_scoring",
    "dump_scoring",
    "score_table_frame",
    "render_score_table",
    "match_line",
    "format_alignment",
    "write_stockholm_pairwise",
    "write_fasta_pairwise",
]
