"""Serialization utilities for scoring parameters (load and save)."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

import yaml

from nwalign.types.parameters import (
    DEFAULT_SCORING,
    SCORING_KEYS,
    ScoringParameters,
)


def scoring_to_dict(scoring: ScoringParameters) -> Dict[str, int]:
    """
    Convert ScoringParameters into a plain dictionary suitable for YAML.
    """
    return asdict(scoring)


def scoring_from_dict(payload: Dict[str, Any]) -> ScoringParameters:
    """Build ScoringParameters from a mapping; missing keys keep their defaults."""
    params_dict = payload.get("scoring", payload) or {}
    unexpected = [key for key in params_dict if key not in SCORING_KEYS]
    if unexpected:
        raise ValueError(f"scoring has unexpected keys: {unexpected}")

    values = scoring_to_dict(DEFAULT_SCORING)
    values.update(params_dict)
    return ScoringParameters(**values)


def load_scoring(yaml_path: Path) -> ScoringParameters:
    """Load scoring parameters from a YAML file."""
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    return scoring_from_dict(payload)


def dump_scoring(scoring: ScoringParameters, yaml_path: Path) -> None:
    """Write scoring parameters to a YAML file under a ``scoring`` key."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring": scoring_to_dict(scoring)}, handle, sort_keys=False)


__all__ = ["scoring_to_dict", "scoring_from_dict", "load_scoring", "dump_scoring"]
