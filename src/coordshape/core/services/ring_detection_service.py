"""Detection of pi-bonded rings among the coordinating atoms of a metal."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

import networkx as nx
import numpy as np

from ..domain.models.atom import Atom
from ..domain.models.ligand_group import LigandGroups, Monodentate, Ring
from ..utils.coordination_sphere import validate_coordination_sphere
from ..utils.linalg import plane_normal

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

# Ring sizes with a conventional label when every ring atom is carbon
_CARBOCYCLE_LABELS = {4: "η⁴-C₄", 5: "η⁵-Cp", 6: "η⁶-C₆"}
_SIZE_LABELS = {3: "η³-allyl", 7: "η⁷-C₇"}


@dataclass(frozen=True)
class RingDetectionSettings:
    """Geometric thresholds for ring detection (Angstroms)."""

    bond_threshold: float = 1.8
    planarity_tolerance: float = 0.3
    min_ring_size: int = 3
    max_ring_size: int = 8
    min_normal_magnitude: float = 1e-6


def hapticity_label(size: int, elements: Sequence[str]) -> str:
    """Hapticity label for a ring of ``size`` atoms, e.g. "η⁵-Cp"."""
    if size in _CARBOCYCLE_LABELS and all(element == "C" for element in elements):
        return _CARBOCYCLE_LABELS[size]
    if size in _SIZE_LABELS:
        return _SIZE_LABELS[size]
    return "η" + str(size).translate(_SUPERSCRIPTS)


class RingDetector:
    """
    Find planar rings of bonded coordinating atoms.

    Coordinating atoms closer than the bond threshold are joined in a bond
    graph. Simple cycles of 3-8 atoms are enumerated depth first and kept
    when planar. Fused systems share atoms; the smallest rings are accepted
    first and any ring overlapping an accepted one is dropped, so every
    coordinating atom ends up in exactly one ligand group.
    """

    def __init__(self, settings: Optional[RingDetectionSettings] = None):
        self.settings = settings or RingDetectionSettings()
        self.logger = logging.getLogger(__name__)

    def detect(
        self,
        atoms: Sequence[Atom],
        metal_index: int,
        coordinating_indices: Sequence[int],
    ) -> LigandGroups:
        """
        Partition the coordinating atoms into rings and monodentate ligands.

        Args:
            atoms: All atoms of the structure
            metal_index: Position of the metal in ``atoms``
            coordinating_indices: Positions of the coordinating atoms

        Returns:
            LigandGroups covering every coordinating atom exactly once

        Raises:
            CoordinationSphereError: If the sphere is empty or malformed
        """
        coordinating_indices = list(coordinating_indices)
        validate_coordination_sphere(atoms, metal_index, coordinating_indices)
        metal_position = atoms[metal_index].coordinates

        graph = self.build_bond_graph(atoms, coordinating_indices)
        cycles = self.find_planar_cycles(graph)
        rings = [
            self._make_ring(atoms, cycle, metal_position)
            for cycle in self._disjoint(cycles)
        ]

        in_ring = {index for ring in rings for index in ring.atom_indices}
        monodentates = [
            Monodentate(
                atom_index=index,
                element=atoms[index].element,
                position=atoms[index].coordinates,
                distance_to_metal=float(
                    np.linalg.norm(atoms[index].coordinates - metal_position)
                ),
            )
            for index in coordinating_indices
            if index not in in_ring
        ]

        self.logger.info(
            "Detected %d ring(s) and %d monodentate ligand(s)", len(rings), len(monodentates)
        )
        return LigandGroups(
            metal_position=metal_position,
            coordinating_indices=tuple(coordinating_indices),
            coordinating_positions=np.array(
                [atoms[index].coordinates for index in coordinating_indices]
            ),
            rings=tuple(rings),
            monodentates=tuple(monodentates),
        )

    def build_bond_graph(
        self, atoms: Sequence[Atom], indices: Sequence[int]
    ) -> nx.Graph:
        """Graph over ``indices`` with an edge for every pair closer than the bond threshold."""
        graph = nx.Graph()
        for index in indices:
            graph.add_node(index, element=atoms[index].element, position=atoms[index].coordinates)

        for position, i in enumerate(indices):
            for j in indices[position + 1:]:
                if atoms[i].distance_to(atoms[j]) < self.settings.bond_threshold:
                    graph.add_edge(i, j)
        return graph

    def find_planar_cycles(self, graph: nx.Graph) -> List[Tuple[int, ...]]:
        """Distinct planar simple cycles in discovery order, each in walk order."""
        found: List[Tuple[int, ...]] = []
        seen: Set[frozenset] = set()
        for start in sorted(graph.nodes):
            self._extend(graph, start, [start], found, seen)
        return found

    def _extend(self, graph, start, path, found, seen) -> None:
        for neighbor in sorted(graph.neighbors(path[-1])):
            if neighbor == start:
                if len(path) < self.settings.min_ring_size:
                    continue
                key = frozenset(path)
                if key in seen:
                    continue
                seen.add(key)
                positions = np.array([graph.nodes[node]["position"] for node in path])
                if self.is_planar(positions):
                    found.append(tuple(path))
            elif (
                neighbor > start
                and neighbor not in path
                and len(path) < self.settings.max_ring_size
            ):
                path.append(neighbor)
                self._extend(graph, start, path, found, seen)
                path.pop()

    def is_planar(self, positions: np.ndarray) -> bool:
        """All points lie within the tolerance of the plane through the first three."""
        normal = plane_normal(positions[0], positions[1], positions[2])
        magnitude = np.linalg.norm(normal)
        if magnitude < self.settings.min_normal_magnitude:
            return False
        distances = np.abs((positions - positions[0]) @ (normal / magnitude))
        return bool(np.all(distances <= self.settings.planarity_tolerance))

    @staticmethod
    def _disjoint(cycles: List[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
        ranked = sorted(enumerate(cycles), key=lambda item: (len(item[1]), item[0]))
        used: Set[int] = set()
        accepted = []
        for order, cycle in ranked:
            if used.isdisjoint(cycle):
                used.update(cycle)
                accepted.append((order, cycle))
        return [cycle for _, cycle in sorted(accepted)]

    @staticmethod
    def _make_ring(
        atoms: Sequence[Atom], cycle: Tuple[int, ...], metal_position: np.ndarray
    ) -> Ring:
        positions = np.array([atoms[index].coordinates for index in cycle])
        centroid = positions.mean(axis=0)
        # Best-fit plane normal
        _, _, vt = np.linalg.svd(positions - centroid)
        return Ring(
            atom_indices=tuple(cycle),
            atom_positions=positions,
            centroid=centroid,
            normal=vt[-1],
            hapticity=hapticity_label(len(cycle), [atoms[index].element for index in cycle]),
            distance_to_metal=float(np.linalg.norm(centroid - metal_position)),
        )
