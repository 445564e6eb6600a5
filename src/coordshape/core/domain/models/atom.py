"""Domain model for atoms in a coordination complex."""

from dataclasses import dataclass

import numpy as np


@dataclass
class Atom:
    """An atom with its position in Angstroms."""

    index: int
    element: str
    coordinates: np.ndarray

    def __post_init__(self):
        self.coordinates = np.asarray(self.coordinates, dtype=float)
        self.element = self.element.strip().capitalize()

    def distance_to(self, other: "Atom") -> float:
        return float(np.linalg.norm(self.coordinates - other.coordinates))
