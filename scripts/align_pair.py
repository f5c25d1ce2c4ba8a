#!/usr/bin/env python3
"""Globally align two sequences and print the score and alignment."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Tuple

from .constants import LABEL_WIDTH, SCORING_YAML

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nwalign.algorithms import NeedlemanWunschAligner  # pylint: disable=C0413
from nwalign.types import (  # pylint: disable=C0413
    DEFAULT_SCORING,
    ScoringParameters,
    TextSequence,
)
from nwalign.utils import (  # pylint: disable=C0413
    format_alignment,
    load_scoring,
    render_score_table,
)


def _read_sequence(prompt: str) -> str:
    """Prompt for a sequence and return the line as typed; EOF propagates."""
    return input(prompt)


def _ask(prompt: str) -> str:
    """Prompt for an answer and return it stripped; EOF counts as no answer."""
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _ask_int(prompt: str, default: int) -> int:
    """Prompt for an integer; an empty answer keeps ``default``."""
    answer = _ask(prompt)
    if not answer:
        return default
    try:
        return int(answer)
    except ValueError as exc:
        raise SystemExit(f"Invalid integer: {answer!r}") from exc


def _is_yes(answer: str) -> bool:
    return answer[:1] in ("y", "Y")


def _is_no(answer: str) -> bool:
    return answer[:1] in ("n", "N")


def prompt_inputs(
    defaults: ScoringParameters,
) -> Tuple[str, str, ScoringParameters, bool]:
    """Interactively collect both sequences, the scoring and the matrix flag.

    Raises:
        EOFError: if input ends before both sequences are read.
    """
    seq_a = _read_sequence("Enter sequence A: ")
    seq_b = _read_sequence("Enter sequence B: ")

    scoring = defaults
    answer = _ask(
        f"Use default scoring? match={defaults.match:+d} "
        f"mismatch={defaults.mismatch:+d} gap={defaults.gap:+d} (y/n): "
    )
    if _is_no(answer):
        scoring = ScoringParameters(
            match=_ask_int("Enter match score (int): ", defaults.match),
            mismatch=_ask_int(
                "Enter mismatch penalty (int, typically negative or 0): ",
                defaults.mismatch,
            ),
            gap=_ask_int("Enter gap penalty (int, typically negative): ", defaults.gap),
        )

    show_matrix = _is_yes(_ask("Show DP matrix? (y/n): "))
    return seq_a, seq_b, scoring, show_matrix


def resolve_scoring(args: argparse.Namespace) -> ScoringParameters:
    """Load the scoring config and apply command-line overrides."""
    config_path: Optional[Path] = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Scoring config not found: {config_path}")
    if config_path is None and SCORING_YAML.exists():
        config_path = SCORING_YAML

    base = load_scoring(config_path) if config_path is not None else DEFAULT_SCORING
    return ScoringParameters(
        match=base.match if args.match is None else args.match,
        mismatch=base.mismatch if args.mismatch is None else args.mismatch,
        gap=base.gap if args.gap is None else args.gap,
    )


def build_sequences(seq_a: str, seq_b: str) -> Tuple[TextSequence, TextSequence]:
    """Wrap the raw input lines as sequences named A and B."""
    try:
        return (
            TextSequence(identifier="A", residues=list(seq_a)),
            TextSequence(identifier="B", residues=list(seq_b)),
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid sequence: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Needleman-Wunsch global alignment (linear gap penalty)."
    )
    parser.add_argument("seq_a", nargs="?", help="First sequence.")
    parser.add_argument("seq_b", nargs="?", help="Second sequence.")
    parser.add_argument(
        "-c", "--config", type=str, default=None, help="YAML scoring config."
    )
    parser.add_argument("--match", type=int, default=None, help="Match score.")
    parser.add_argument("--mismatch", type=int, default=None, help="Mismatch penalty.")
    parser.add_argument("--gap", type=int, default=None, help="Gap penalty.")
    parser.add_argument(
        "--show-matrix", action="store_true", help="Print the DP score table."
    )
    args = parser.parse_args()

    scoring = resolve_scoring(args)
    show_matrix = args.show_matrix

    if args.seq_a is None or args.seq_b is None:
        print("Needleman-Wunsch Global Alignment (linear gap penalty)")
        try:
            seq_a, seq_b, scoring, show_matrix = prompt_inputs(scoring)
        except EOFError:
            return
    else:
        seq_a, seq_b = args.seq_a, args.seq_b

    x_seq, y_seq = build_sequences(seq_a, seq_b)

    aligner = NeedlemanWunschAligner(keep_scores=show_matrix)
    result = aligner.align(scoring, x_seq, y_seq)

    if show_matrix:
        print("DP matrix (scores):")
        print(render_score_table(result.scores, x_seq.residues, y_seq.residues))
        print()

    print(f"\nAlignment score: {result.score}\n")
    print("Aligned sequences:")
    print(format_alignment(result, label_width=LABEL_WIDTH))


if __name__ == "__main__":
    main()
