"""Domain models for ligand groups around a metal center."""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class Ring:
    """A planar ring of bonded coordinating atoms (pi-bound ligand)."""

    atom_indices: Tuple[int, ...]
    atom_positions: np.ndarray = field(repr=False)
    centroid: np.ndarray = field(repr=False)
    normal: np.ndarray = field(repr=False)
    hapticity: str
    distance_to_metal: float

    @property
    def size(self) -> int:
        return len(self.atom_indices)


@dataclass(frozen=True, eq=False)
class Monodentate:
    """A single coordinating atom."""

    atom_index: int
    element: str
    position: np.ndarray = field(repr=False)
    distance_to_metal: float
    hapticity: str = "η¹"


@dataclass(frozen=True, eq=False)
class LigandGroups:
    """Partition of the coordinating atoms into rings and monodentate ligands."""

    metal_position: np.ndarray = field(repr=False)
    coordinating_indices: Tuple[int, ...]
    coordinating_positions: np.ndarray = field(repr=False)
    rings: Tuple[Ring, ...] = ()
    monodentates: Tuple[Monodentate, ...] = ()

    @property
    def ring_count(self) -> int:
        return len(self.rings)

    @property
    def monodentate_count(self) -> int:
        return len(self.monodentates)

    @property
    def total_groups(self) -> int:
        return self.ring_count + self.monodentate_count

    @property
    def has_sandwich_structure(self) -> bool:
        """Two or more rings, all of at least five atoms."""
        return self.ring_count >= 2 and all(ring.size >= 5 for ring in self.rings)

    @property
    def detected_hapticities(self) -> List[str]:
        hapticities = sorted({ring.hapticity for ring in self.rings})
        if self.monodentates:
            hapticities.append("η¹")
        return hapticities

    def centroid_points(self) -> List[Tuple[str, np.ndarray]]:
        """Labelled ring centroids and monodentate atoms, one point per group.

        Rings are labelled ``"<hapticity> centroid"`` and monodentate atoms
        by their element.
        """
        points = [(f"{ring.hapticity} centroid", ring.centroid) for ring in self.rings]
        points.extend((mono.element, mono.position) for mono in self.monodentates)
        return points
