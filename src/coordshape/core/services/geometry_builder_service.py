"""Build the point set and candidate references for a detected pattern."""

import logging
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..domain.models.geometry_plan import GeometryPlan
from ..domain.models.ligand_group import LigandGroups
from ..domain.models.pattern import (
    GeneralPattern,
    MacrocyclePattern,
    PatternDetection,
    PatternType,
    PianoStoolPattern,
    SandwichPattern,
)
from ..domain.models.reference_geometry import ReferenceGeometry

logger = logging.getLogger(__name__)

# Vacant-polyhedron shapes matching a ring centroid plus legs, by CN.
# Coordination numbers missing here, or empty lists, use every reference.
PIANO_STOOL_GEOMETRIES: Dict[int, List[str]] = {
    3: ["vT-3", "TP-3"],
    4: ["vTBPY-4", "SS-4", "T-4"],
    5: ["SPY-5", "TBPY-5", "vOC-5"],
    6: ["vPBP-6", "OC-6"],
    7: ["PBPY-7", "COC-7"],
    8: [],
    9: [],
}

# Planar macrocycle (plus axial ligands) families, by CN
MACROCYCLE_GEOMETRIES: Dict[int, List[str]] = {
    4: ["SP-4"],
    5: ["SPY-5", "vOC-5"],
    6: ["OC-6"],
}


class GeometryBuilder:
    """
    Turn a pattern into metal-relative points and references to rank.

    Args:
        reference_lookup: Callable returning the references for a
            coordination number, e.g.
            ``ReferenceGeometryRepository().for_coordination_number``
        include_comparison: Also evaluate the references a piano stool
            filter left out
    """

    def __init__(
        self,
        reference_lookup: Callable[[int], Sequence[ReferenceGeometry]],
        include_comparison: bool = False,
    ):
        self.reference_lookup = reference_lookup
        self.include_comparison = include_comparison
        self._builders = {
            PatternType.SANDWICH: self._build_sandwich,
            PatternType.PIANO_STOOL: self._build_piano_stool,
            PatternType.MACROCYCLE: self._build_macrocycle,
            PatternType.GENERAL: self._build_general,
        }

    @property
    def supported_patterns(self):
        return set(self._builders)

    def build(self, detection: PatternDetection, groups: LigandGroups) -> GeometryPlan:
        builder = self._builders[detection.pattern_type]
        plan = builder(detection.pattern, groups)
        logger.info(
            "%s plan: CN=%d, %d reference(s), %d comparison reference(s)",
            plan.pattern_type.value,
            plan.coordination_number,
            len(plan.references),
            len(plan.comparison_references),
        )
        return plan

    def _build_sandwich(self, pattern: SandwichPattern, groups: LigandGroups) -> GeometryPlan:
        points = np.array([pattern.ring1.centroid, pattern.ring2.centroid])
        return GeometryPlan(
            pattern_type=PatternType.SANDWICH,
            points=points - groups.metal_position,
            point_labels=[
                f"{pattern.ring1.hapticity} centroid",
                f"{pattern.ring2.hapticity} centroid",
            ],
            references=list(self.reference_lookup(2)),
        )

    def _build_piano_stool(
        self, pattern: PianoStoolPattern, groups: LigandGroups
    ) -> GeometryPlan:
        points = [pattern.ring.centroid] + [mono.position for mono in pattern.monodentates]
        labels = [f"{pattern.ring.hapticity} centroid"] + [
            mono.element for mono in pattern.monodentates
        ]
        every = list(self.reference_lookup(pattern.coordination_number))
        preferred = _filter_codes(every, PIANO_STOOL_GEOMETRIES.get(pattern.coordination_number))
        comparison = []
        if self.include_comparison and len(preferred) < len(every):
            comparison = [geometry for geometry in every if geometry not in preferred]
        return GeometryPlan(
            pattern_type=PatternType.PIANO_STOOL,
            points=np.array(points) - groups.metal_position,
            point_labels=labels,
            references=preferred,
            comparison_references=comparison,
        )

    def _build_macrocycle(
        self, pattern: MacrocyclePattern, groups: LigandGroups
    ) -> GeometryPlan:
        points = list(pattern.ring.atom_positions) + [mono.position for mono in pattern.axial]
        labels = [f"ring {index}" for index in pattern.ring.atom_indices] + [
            f"axial {mono.element}" for mono in pattern.axial
        ]
        every = list(self.reference_lookup(pattern.coordination_number))
        return GeometryPlan(
            pattern_type=PatternType.MACROCYCLE,
            points=np.array(points) - groups.metal_position,
            point_labels=labels,
            references=_filter_codes(every, MACROCYCLE_GEOMETRIES.get(pattern.coordination_number)),
        )

    def _build_general(self, pattern: GeneralPattern, groups: LigandGroups) -> GeometryPlan:
        return GeometryPlan(
            pattern_type=PatternType.GENERAL,
            points=groups.coordinating_positions - groups.metal_position,
            point_labels=[f"atom {index}" for index in groups.coordinating_indices],
            references=list(self.reference_lookup(pattern.coordination_number)),
        )


def _filter_codes(
    references: List[ReferenceGeometry], codes: Optional[List[str]]
) -> List[ReferenceGeometry]:
    """References whose code is listed; all of them when nothing matches."""
    if not codes:
        return references
    selected = [geometry for geometry in references if geometry.code in codes]
    return selected or references
