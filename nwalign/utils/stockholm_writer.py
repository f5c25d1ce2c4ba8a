"""Utilities for writing pairwise alignments in Stockholm and FASTA format."""

from nwalign.types import Alignment


def write_stockholm_pairwise(output_path: str, alignment: Alignment) -> None:
    """Write a pairwise Stockholm alignment file."""
    seq1, seq2 = alignment.aligned_sequences
    with open(output_path, "w", encoding="utf-8") as f:
        # Write Stockholm header
        f.write("# STOCKHOLM 1.0\n")
        if alignment.name:
            f.write(f"#=GF ID {alignment.name}\n")
        f.write("\n")

        # Pad sequence names to align nicely (use max length + 2 spaces)
        max_name_len = max(len(seq1.identifier), len(seq2.identifier))
        f.write(f"{seq1.identifier:<{max_name_len}}  {''.join(seq1.residues)}\n")
        f.write(f"{seq2.identifier:<{max_name_len}}  {''.join(seq2.residues)}\n")

        # Write end marker
        f.write("//\n")


def write_fasta_pairwise(output_path: str, alignment: Alignment) -> None:
    """Write the two aligned (gapped) sequences of an alignment as FASTA."""
    with open(output_path, "w", encoding="utf-8") as f:
        for seq in alignment.aligned_sequences:
            f.write(f">{seq.identifier}\n")
            f.write(f"{''.join(seq.residues)}\n")


__all__ = [
    "write_stockholm_pairwise",
    "write_fasta_pairwise",
]
