"""Continuous shape measure for a fixed rotation."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..domain.interfaces.assignment_solver import AssignmentSolver
from ..exceptions import DegenerateInputError, SizeMismatchError

MIN_VECTOR_LENGTH_SQ = 1e-8


@dataclass(frozen=True, eq=False)
class Candidate:
    """A rotation together with its optimal correspondence and measure."""

    measure: float
    rotation: np.ndarray
    correspondence: Tuple[Tuple[int, int], ...]


def normalize_points(points: np.ndarray) -> np.ndarray:
    """
    Scale every metal-relative vector to unit length.

    Args:
        points: (N, 3) coordinates relative to the metal center

    Returns:
        (N, 3) unit vectors

    Raises:
        DegenerateInputError: If a point sits on the metal center
    """
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    lengths_sq = np.einsum("ij,ij->i", points, points)
    degenerate = np.flatnonzero(lengths_sq < MIN_VECTOR_LENGTH_SQ)
    if degenerate.size:
        raise DegenerateInputError(
            f"Point {int(degenerate[0])} coincides with the metal center"
        )
    return points / np.sqrt(lengths_sq)[:, None]


def squared_distance_matrix(rotated: np.ndarray, reference: np.ndarray) -> np.ndarray:
    diff = rotated[:, None, :] - reference[None, :, :]
    return np.einsum("ijk,ijk->ij", diff, diff)


def evaluate_rotation(
    actual: np.ndarray,
    reference: np.ndarray,
    rotation: np.ndarray,
    solver: AssignmentSolver,
) -> Candidate:
    """
    Measure how well ``rotation`` maps ``actual`` onto ``reference``.

    The measure is the mean squared distance over the optimal pairing,
    times 100, so it is 0 for a perfect match.
    """
    if len(actual) != len(reference):
        raise SizeMismatchError(len(actual), len(reference))

    rotated = actual @ rotation.T
    cost = squared_distance_matrix(rotated, reference)
    pairs = tuple(solver.solve(cost))
    total = sum(cost[i, j] for i, j in pairs)
    return Candidate(
        measure=float(total / len(actual) * 100.0),
        rotation=rotation,
        correspondence=pairs,
    )


def aligned_coordinates(
    actual: np.ndarray, rotation: np.ndarray, correspondence
) -> np.ndarray:
    """Rotated actual points reordered to follow the reference points."""
    rotated = actual @ rotation.T
    aligned = np.zeros_like(rotated)
    for i, j in correspondence:
        aligned[j] = rotated[i]
    return aligned
