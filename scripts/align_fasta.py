#!/usr/bin/env python3
"""Globally align every pair of records in a FASTA file and summarize them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from itertools import combinations
from pathlib import Path
from typing import List

import pandas as pd

from .constants import ALIGNMENTS_FOLDER, SCORING_YAML, SUMMARY_CSV

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nwalign.algorithms import NeedlemanWunschAligner  # pylint: disable=C0413
from nwalign.evaluation import summarize_many  # pylint: disable=C0413
from nwalign.types import AlignmentResult, DEFAULT_SCORING  # pylint: disable=C0413
from nwalign.utils import (  # pylint: disable=C0413
    load_scoring,
    read_fasta,
    write_stockholm_pairwise,
)
from nwalign.utils.fasta import SEQUENCE_KINDS  # pylint: disable=C0413


def summary_frame(results: List[AlignmentResult]) -> pd.DataFrame:
    """Tabulate alignment summaries, one row per pair."""
    rows = []
    for summary in summarize_many(results):
        row = asdict(summary)
        row["x_id"], row["y_id"] = row.pop("sequence_ids")
        rows.append(row)
    return pd.DataFrame(rows)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Align all pairs of sequences in a FASTA file."
    )
    parser.add_argument("fasta", type=str, help="Input FASTA file.")
    parser.add_argument(
        "-c", "--config", type=str, default=None, help="YAML scoring config."
    )
    parser.add_argument(
        "--kind",
        choices=sorted(SEQUENCE_KINDS),
        default="text",
        help="Alphabet used to validate the records.",
    )
    parser.add_argument(
        "--csv", type=str, default=str(SUMMARY_CSV), help="Summary CSV path."
    )
    parser.add_argument(
        "--write-alignments",
        action="store_true",
        help=f"Write one Stockholm file per pair under {ALIGNMENTS_FOLDER}.",
    )
    args = parser.parse_args()

    fasta_path = Path(args.fasta)
    if not fasta_path.exists():
        raise FileNotFoundError(f"FASTA file not found: {fasta_path}")

    config_path = Path(args.config) if args.config else SCORING_YAML
    scoring = load_scoring(config_path) if config_path.exists() else DEFAULT_SCORING

    sequences = read_fasta(str(fasta_path), kind=args.kind)
    if len(sequences) < 2:
        raise ValueError(f"Expected at least 2 sequences, got {len(sequences)}")

    aligner = NeedlemanWunschAligner()
    results = [
        aligner.align(scoring, seq_x, seq_y)
        for seq_x, seq_y in combinations(sequences, 2)
    ]
    print(f"Aligned {len(results)} pairs from {fasta_path}")

    if args.write_alignments:
        ALIGNMENTS_FOLDER.mkdir(parents=True, exist_ok=True)
        for result in results:
            out_path = ALIGNMENTS_FOLDER / f"{result.alignment.name}.sto"
            write_stockholm_pairwise(str(out_path), result.alignment)
        print(f"Wrote {len(results)} alignments to {ALIGNMENTS_FOLDER}")

    summary_df = summary_frame(results)
    print(summary_df.to_string(index=False, float_format=lambda x: f"{x:.4f}"))

    csv_path = Path(args.csv)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    summary_df.to_csv(csv_path, index=False)
    print(f"\nWrote summary to {csv_path}")


if __name__ == "__main__":
    main()
