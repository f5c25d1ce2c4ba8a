"""Sequence types."""

from dataclasses import dataclass
from typing import ClassVar, FrozenSet, List, Optional
from abc import ABC, abstractmethod

GAP = "-"


@dataclass(frozen=True)
class SequenceType(ABC):
    """Generic symbol sequence with an identifier and optional description."""

    identifier: str
    residues: List[str]
    description: Optional[str] = None
    aligned: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "residues", list(self.residues))
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        joined_residues = "".join(self.residues)
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier} ({'aligned' if self.aligned else 'unaligned'})\n"
            f"   description: {self.description}\n"
            f"   residues: {joined_residues}\n"
            f")"
        )

    def ungapped(self) -> List[str]:
        """Return the residues with gap symbols removed."""
        return [res for res in self.residues if res != GAP]

    @abstractmethod
    def _validate(self) -> None:
        """Validate the residues for this sequence type. Raise ValueError if invalid."""
        raise NotImplementedError


@dataclass(frozen=True)
class TextSequence(SequenceType):
    """Sequence over an arbitrary alphabet of single characters."""

    def _validate(self) -> None:
        bad = [res for res in self.residues if not isinstance(res, str) or len(res) != 1]
        if bad:
            raise ValueError(f"Residues must be single characters, got {bad[:5]}")
        if not self.aligned and GAP in self.residues:
            raise ValueError(f"Unaligned sequence may not contain gap symbol '{GAP}'")


@dataclass(frozen=True)
class _AlphabetSequence(SequenceType):
    """Sequence restricted to a fixed, case-insensitive alphabet."""

    alphabet: ClassVar[FrozenSet[str]] = frozenset()

    def __post_init__(self) -> None:
        # Uppercase all residues on initialization, then validate
        uppercased: List[str] = [r.upper() for r in self.residues]
        object.__setattr__(self, "residues", uppercased)
        super().__post_init__()

    def _validate(self) -> None:
        allowed = set(self.alphabet)
        if self.aligned is True:
            allowed.add(GAP)

        invalid = {ch for ch in self.residues if ch not in allowed}
        if invalid:
            raise ValueError(
                f"Invalid {self.__class__.__name__} residues: {sorted(invalid)}; "
                f"allowed: {sorted(allowed)}"
            )


@dataclass(frozen=True)
class DNASequence(_AlphabetSequence):
    """DNA sequence; A, C, G, T and the ambiguous N."""

    alphabet = frozenset("ACGTN")


@dataclass(frozen=True)
class RNASequence(_AlphabetSequence):
    """RNA sequence; A, C, G, U and the ambiguous N."""

    alphabet = frozenset("ACGUN")


__all__ = ["GAP", "SequenceType", "TextSequence", "DNASequence", "RNASequence"]
