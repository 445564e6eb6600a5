"""Domain model for the point set and references chosen for a pattern."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .pattern import PatternType
from .reference_geometry import ReferenceGeometry


@dataclass(frozen=True, eq=False)
class GeometryPlan:
    """Metal-relative points to match and the references to match them against."""

    pattern_type: PatternType
    points: np.ndarray = field(repr=False)
    point_labels: List[str]
    references: List[ReferenceGeometry]
    comparison_references: List[ReferenceGeometry] = field(default_factory=list)

    @property
    def coordination_number(self) -> int:
        return len(self.points)
