"""Selection and validation of the atoms bound to a metal center."""

from typing import List, Sequence

import numpy as np

from ..domain.models.atom import Atom
from ..exceptions import CoordinationSphereError, DegenerateInputError

MIN_VECTOR_LENGTH_SQ = 1e-8


def select_coordination_sphere(
    atoms: Sequence[Atom], metal_index: int, radius: float
) -> List[int]:
    """
    Indices of atoms within ``radius`` Angstroms of the metal, nearest first.

    Args:
        atoms: All atoms of the structure
        metal_index: Position of the metal in ``atoms``
        radius: Cutoff distance in Angstroms

    Returns:
        Coordinating atom indices sorted by distance to the metal
    """
    if not 0 <= metal_index < len(atoms):
        raise CoordinationSphereError(f"Metal index {metal_index} is out of range")
    if radius <= 0:
        raise CoordinationSphereError(f"Radius must be positive, got {radius}")

    metal = atoms[metal_index]
    distances = [
        (atom.distance_to(metal), index)
        for index, atom in enumerate(atoms)
        if index != metal_index
    ]
    return [index for distance, index in sorted(distances) if distance <= radius]


def validate_coordination_sphere(
    atoms: Sequence[Atom], metal_index: int, coordinating_indices: Sequence[int]
) -> None:
    """Raise CoordinationSphereError unless the sphere is usable for analysis."""
    if not 0 <= metal_index < len(atoms):
        raise CoordinationSphereError(f"Metal index {metal_index} is out of range")
    if not coordinating_indices:
        raise CoordinationSphereError("No coordinating atoms given")
    if len(set(coordinating_indices)) != len(coordinating_indices):
        raise CoordinationSphereError("Coordinating atom indices must be unique")

    metal_position = atoms[metal_index].coordinates
    for index in coordinating_indices:
        if index == metal_index:
            raise CoordinationSphereError("The metal cannot coordinate itself")
        if not 0 <= index < len(atoms):
            raise CoordinationSphereError(f"Coordinating index {index} is out of range")
        offset = atoms[index].coordinates - metal_position
        if float(np.dot(offset, offset)) < MIN_VECTOR_LENGTH_SQ:
            raise DegenerateInputError(
                f"Atom {index} ({atoms[index].element}) sits on the metal center"
            )
