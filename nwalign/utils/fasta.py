"""Functions for working with FASTA files."""

from typing import Dict, List, Optional, Type

import skbio.io
from skbio import Sequence

from nwalign.types import DNASequence, RNASequence, SequenceType, TextSequence

SEQUENCE_KINDS: Dict[str, Type[SequenceType]] = {
    "text": TextSequence,
    "dna": DNASequence,
    "rna": RNASequence,
}


def sequence_from_skbio(
    record: Sequence, kind: str = "text", aligned: bool = False
) -> SequenceType:
    """Convert a scikit-bio record to a typed sequence."""
    if kind not in SEQUENCE_KINDS:
        raise ValueError(
            f"Unknown sequence kind '{kind}'; expected one of {sorted(SEQUENCE_KINDS)}"
        )
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None

    return SEQUENCE_KINDS[kind](
        identifier=identifier,
        residues=list(str(record)),
        description=description,
        aligned=aligned,
    )


def read_fasta(
    file_path: str, ids: Optional[List[str]] = None, kind: str = "text"
) -> List[SequenceType]:
    """Read a FASTA file and return its records as typed sequences.

    When ``ids`` is given, only records whose identifier is listed are kept.
    """
    sequences: List[SequenceType] = []
    for record in skbio.io.read(file_path, format="fasta", constructor=Sequence):
        if ids and record.metadata["id"] not in ids:
            continue
        sequences.append(sequence_from_skbio(record, kind=kind))
    return sequences


__all__ = ["SEQUENCE_KINDS", "sequence_from_skbio", "read_fasta"]
