"""Domain models for coordination patterns."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union

from .ligand_group import Monodentate, Ring


class PatternType(Enum):
    SANDWICH = "sandwich"
    PIANO_STOOL = "piano_stool"
    MACROCYCLE = "macrocycle"
    GENERAL = "general"


@dataclass(frozen=True)
class SandwichPattern:
    """Metal between two parallel rings of equal size; each ring is one site."""

    ring1: Ring
    ring2: Ring
    centroid_distance: float
    confidence: float
    pattern_type: PatternType = field(default=PatternType.SANDWICH, init=False)

    @property
    def ring_size(self) -> int:
        return self.ring1.size

    @property
    def coordination_number(self) -> int:
        return 2


@dataclass(frozen=True)
class PianoStoolPattern:
    """One ring (one site at its centroid) plus monodentate legs."""

    ring: Ring
    monodentates: Tuple[Monodentate, ...]
    confidence: float
    pattern_type: PatternType = field(default=PatternType.PIANO_STOOL, init=False)

    @property
    def coordination_number(self) -> int:
        return 1 + len(self.monodentates)


@dataclass(frozen=True)
class MacrocyclePattern:
    """A planar ring whose atoms coordinate individually, plus axial ligands."""

    ring: Ring
    axial: Tuple[Monodentate, ...]
    confidence: float
    pattern_type: PatternType = field(default=PatternType.MACROCYCLE, init=False)

    @property
    def coordination_number(self) -> int:
        return self.ring.size + len(self.axial)


@dataclass(frozen=True)
class GeneralPattern:
    """Every coordinating atom is its own site."""

    atom_count: int
    confidence: float = 1.0
    pattern_type: PatternType = field(default=PatternType.GENERAL, init=False)

    @property
    def coordination_number(self) -> int:
        return self.atom_count


Pattern = Union[SandwichPattern, PianoStoolPattern, MacrocyclePattern, GeneralPattern]


@dataclass(frozen=True)
class PatternDetection:
    """Selected pattern plus the confidence every candidate pattern scored."""

    pattern: Pattern
    scores: Dict[PatternType, float]

    @property
    def pattern_type(self) -> PatternType:
        return self.pattern.pattern_type

    @property
    def coordination_number(self) -> int:
        return self.pattern.coordination_number
