"""Domain model for idealized reference polyhedra."""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True, eq=False)
class ReferenceGeometry:
    """An ideal coordination polyhedron stored as unit vectors from the center."""

    name: str
    code: str
    point_group: str
    coordinates: np.ndarray = field(repr=False)

    @property
    def coordination_number(self) -> int:
        return len(self.coordinates)

    @property
    def label(self) -> str:
        return f"{self.code} ({self.name})"
