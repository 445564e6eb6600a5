"""Domain models for continuous shape measure results."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class ShapeResult:
    """Best alignment of an observed point set onto one reference geometry.

    ``aligned_coordinates[j]`` is the rotated observed point matched to
    reference point ``j``.
    """

    geometry_name: str
    measure: float
    rotation: np.ndarray = field(repr=False)
    correspondence: Tuple[Tuple[int, int], ...]
    aligned_coordinates: np.ndarray = field(repr=False)
    geometry_code: str = ""
    cancelled: bool = False
    pattern: Optional[str] = None


@dataclass(frozen=True)
class SkippedGeometry:
    """A reference geometry that could not be evaluated."""

    name: str
    reason: str


@dataclass
class GeometryRanking:
    """Shape results ordered by ascending measure, plus skipped references."""

    results: List[ShapeResult] = field(default_factory=list)
    skipped: List[SkippedGeometry] = field(default_factory=list)
    cancelled: bool = False

    def __post_init__(self):
        self.results.sort(key=lambda result: result.measure)

    @property
    def best(self) -> Optional[ShapeResult]:
        return self.results[0] if self.results else None

    def __len__(self) -> int:
        return len(self.results)


@dataclass(frozen=True)
class OptimizationProgress:
    """Progress snapshot emitted by the rotation optimizer."""

    stage: str
    fraction: float
    best_measure: float
    geometry_name: str = ""
