"""Structural quality indices reported next to the best-fitting geometry."""

from dataclasses import dataclass
from itertools import combinations

import numpy as np


@dataclass(frozen=True)
class BondLengthStats:
    """Metal-ligand distance statistics in Angstroms (population moments)."""

    mean: float
    std: float
    minimum: float
    maximum: float
    variance: float


@dataclass(frozen=True)
class AngleStats:
    """Ligand-metal-ligand angle statistics in degrees."""

    count: int
    mean: float
    std: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class QualityMetrics:
    """
    Quality indices of a coordination sphere against its best reference.

    Attributes:
        bond_lengths: Distance statistics of the coordinating points
        angles: Statistics over every pair of coordinating points
        angular_distortion: Mean absolute deviation, in degrees, between the
            sorted actual and sorted ideal angles
        bond_length_uniformity: 100 for equal distances, lower as they spread
        shape_deviation: sqrt(CShM / 100), a unit-sphere RMS deviation
        quality_score: Combined score clipped to [0, 100], higher is better
    """

    bond_lengths: BondLengthStats
    angles: AngleStats
    angular_distortion: float
    bond_length_uniformity: float
    shape_deviation: float
    quality_score: float


def pair_angles(vectors: np.ndarray) -> np.ndarray:
    """Angles in degrees between every pair of vectors, in pair order."""
    vectors = np.asarray(vectors, dtype=float).reshape(-1, 3)
    units = vectors / np.linalg.norm(vectors, axis=1)[:, None]
    cosines = [np.dot(units[i], units[j]) for i, j in combinations(range(len(units)), 2)]
    return np.degrees(np.arccos(np.clip(cosines, -1.0, 1.0)))


def bond_length_statistics(vectors: np.ndarray) -> BondLengthStats:
    distances = np.linalg.norm(np.asarray(vectors, dtype=float).reshape(-1, 3), axis=1)
    return BondLengthStats(
        mean=float(distances.mean()),
        std=float(distances.std()),
        minimum=float(distances.min()),
        maximum=float(distances.max()),
        variance=float(distances.var()),
    )


def angle_statistics(vectors: np.ndarray) -> AngleStats:
    angles = pair_angles(vectors)
    if len(angles) == 0:
        return AngleStats(count=0, mean=0.0, std=0.0, minimum=0.0, maximum=0.0)
    return AngleStats(
        count=len(angles),
        mean=float(angles.mean()),
        std=float(angles.std()),
        minimum=float(angles.min()),
        maximum=float(angles.max()),
    )


def angular_distortion_index(vectors: np.ndarray, reference: np.ndarray) -> float:
    """
    Mean absolute difference between sorted actual and ideal pair angles.

    Returns 0 when the two sets have a different number of pairs.
    """
    actual = np.sort(pair_angles(vectors))
    ideal = np.sort(pair_angles(reference))
    if len(ideal) == 0 or len(actual) != len(ideal):
        return 0.0
    return float(np.abs(actual - ideal).mean())


def bond_length_uniformity(distances) -> float:
    distances = np.asarray(distances, dtype=float)
    mean = distances.mean()
    return float(100.0 * (1.0 - np.mean(np.abs(distances - mean) / mean)))


def calculate_quality_metrics(
    vectors: np.ndarray, reference: np.ndarray, measure: float
) -> QualityMetrics:
    """
    Quality indices for a coordination sphere and its best reference.

    Args:
        vectors: (N, 3) coordinating points relative to the metal
        reference: (N, 3) vertices of the best reference geometry
        measure: CShM of ``vectors`` against ``reference``

    Returns:
        QualityMetrics with the score penalizing the shape measure, angular
        distortion and bond-length spread
    """
    vectors = np.asarray(vectors, dtype=float).reshape(-1, 3)
    distortion = angular_distortion_index(vectors, reference)
    uniformity = bond_length_uniformity(np.linalg.norm(vectors, axis=1))
    score = 100.0 - 2.0 * measure - 0.5 * distortion - 0.3 * (100.0 - uniformity)

    return QualityMetrics(
        bond_lengths=bond_length_statistics(vectors),
        angles=angle_statistics(vectors),
        angular_distortion=distortion,
        bond_length_uniformity=uniformity,
        shape_deviation=float(np.sqrt(max(measure, 0.0) / 100.0)),
        quality_score=float(np.clip(score, 0.0, 100.0)),
    )
