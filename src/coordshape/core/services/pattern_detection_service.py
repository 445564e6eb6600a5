"""Classification of ligand groups into coordination patterns."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..domain.models.ligand_group import LigandGroups
from ..domain.models.pattern import (
    GeneralPattern,
    MacrocyclePattern,
    Pattern,
    PatternDetection,
    PatternType,
    PianoStoolPattern,
    SandwichPattern,
)
from ..utils.linalg import plane_normal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternDetectionSettings:
    """Thresholds used when scoring candidate patterns."""

    parallelism_tolerance: float = 0.2
    coplanarity_tolerance: float = 0.15
    min_sandwich_distance: float = 2.0
    max_sandwich_distance: float = 5.0
    axial_alignment_threshold: float = 0.7
    min_pattern_confidence: float = 0.7
    min_macrocycle_size: int = 4
    max_hapto_ring_size: int = 7

    sandwich_confidence: float = 0.95
    non_parallel_confidence: float = 0.3
    bad_distance_confidence: float = 0.5
    piano_stool_confidence: float = 0.85
    macrocycle_confidence: float = 0.90


class PatternDetector:
    """Score sandwich, piano-stool and macrocycle patterns and pick one."""

    def __init__(self, settings: Optional[PatternDetectionSettings] = None):
        self.settings = settings or PatternDetectionSettings()

    def detect(self, groups: LigandGroups) -> PatternDetection:
        """
        Select the coordination pattern for a set of ligand groups.

        The best-scoring candidate wins when its confidence exceeds the
        threshold and no other candidate ties it; otherwise every atom is
        treated as its own site (general pattern).

        Args:
            groups: Ring and monodentate partition of the coordinating atoms

        Returns:
            PatternDetection with the selected pattern and all scores
        """
        candidates = {
            PatternType.SANDWICH: self.score_sandwich(groups),
            PatternType.PIANO_STOOL: self.score_piano_stool(groups),
            PatternType.MACROCYCLE: self.score_macrocycle(groups),
        }
        scores = {kind: pattern.confidence for kind, pattern in candidates.items()}

        best_score = max(scores.values())
        leaders = [kind for kind, score in scores.items() if score == best_score]
        general = GeneralPattern(atom_count=len(groups.coordinating_indices))

        if best_score > self.settings.min_pattern_confidence and len(leaders) == 1:
            selected: Pattern = candidates[leaders[0]]
        else:
            selected = general
        scores[PatternType.GENERAL] = general.confidence

        logger.info(
            "Selected %s pattern (CN=%d)",
            selected.pattern_type.value,
            selected.coordination_number,
        )
        return PatternDetection(pattern=selected, scores=scores)

    def score_sandwich(self, groups: LigandGroups) -> Pattern:
        s = self.settings
        if groups.ring_count != 2:
            return _rejected(groups)
        ring1, ring2 = groups.rings
        if ring1.size != ring2.size:
            return _rejected(groups)

        distance = float(np.linalg.norm(ring1.centroid - ring2.centroid))
        if abs(float(np.dot(ring1.normal, ring2.normal))) <= 1.0 - s.parallelism_tolerance:
            confidence = s.non_parallel_confidence
        elif not s.min_sandwich_distance <= distance <= s.max_sandwich_distance:
            confidence = s.bad_distance_confidence
        else:
            confidence = s.sandwich_confidence
        return SandwichPattern(
            ring1=ring1, ring2=ring2, centroid_distance=distance, confidence=confidence
        )

    def score_piano_stool(self, groups: LigandGroups) -> Pattern:
        if groups.ring_count != 1 or groups.monodentate_count == 0:
            return _rejected(groups)
        return PianoStoolPattern(
            ring=groups.rings[0],
            monodentates=groups.monodentates,
            confidence=self.settings.piano_stool_confidence,
        )

    def score_macrocycle(self, groups: LigandGroups) -> Pattern:
        s = self.settings
        if groups.ring_count != 1:
            return _rejected(groups)
        ring = groups.rings[0]
        if ring.size < s.min_macrocycle_size:
            return _rejected(groups)
        # Small pi rings with extra ligands are piano stools
        if ring.size <= s.max_hapto_ring_size and groups.monodentate_count > 0:
            return _rejected(groups)
        if not self._coplanar(ring.atom_positions):
            return _rejected(groups)

        axial = tuple(
            mono
            for mono in groups.monodentates
            if self._is_axial(mono.position - groups.metal_position, ring.normal)
        )
        return MacrocyclePattern(ring=ring, axial=axial, confidence=s.macrocycle_confidence)

    def _coplanar(self, positions: np.ndarray) -> bool:
        normal = plane_normal(positions[0], positions[1], positions[2])
        magnitude = np.linalg.norm(normal)
        if magnitude < 1e-6:
            return False
        offsets = np.abs((positions[3:] - positions[0]) @ (normal / magnitude))
        return bool(np.all(offsets <= self.settings.coplanarity_tolerance))

    def _is_axial(self, vector: np.ndarray, normal: np.ndarray) -> bool:
        length = np.linalg.norm(vector)
        if length == 0.0:
            return False
        alignment = abs(float(np.dot(vector / length, normal)))
        return alignment > self.settings.axial_alignment_threshold


def _rejected(groups: LigandGroups) -> GeneralPattern:
    return GeneralPattern(atom_count=len(groups.coordinating_indices), confidence=0.0)


def pattern_scores_table(detection: PatternDetection) -> Dict[str, float]:
    """Scores keyed by pattern name, for reports."""
    return {kind.value: score for kind, score in detection.scores.items()}
