"""Small dense linear algebra helpers for 3x3 problems."""

import logging
from typing import NamedTuple

import numpy as np
from scipy.spatial.transform import Rotation

logger = logging.getLogger(__name__)

JACOBI_TOLERANCE = 1e-10
JACOBI_MAX_SWEEPS = 100
MIN_SINGULAR_VALUE = 1e-12


class SVDResult(NamedTuple):
    """Factorization ``H = U @ diag(S) @ V.T`` with singular values descending."""

    U: np.ndarray
    S: np.ndarray
    V: np.ndarray
    converged: bool


def jacobi_svd(
    matrix: np.ndarray,
    tolerance: float = JACOBI_TOLERANCE,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
) -> SVDResult:
    """
    Singular value decomposition of a 3x3 matrix by one-sided Jacobi sweeps.

    Column pairs of a working copy are rotated until they are mutually
    orthogonal; the accumulated rotations form ``V`` and the normalized
    columns form ``U``. When the sweep cap is reached the current estimate
    is returned with ``converged=False``.

    Args:
        matrix: 3x3 input matrix
        tolerance: Largest accepted normalized column overlap
        max_sweeps: Maximum number of full sweeps over the column pairs

    Returns:
        SVDResult with orthonormal U and V and descending singular values
    """
    work = np.array(matrix, dtype=float)
    size = work.shape[1]
    V = np.eye(size)
    converged = False

    for _ in range(max_sweeps):
        rotated = False
        for p in range(size - 1):
            for q in range(p + 1, size):
                alpha = float(np.dot(work[:, p], work[:, p]))
                beta = float(np.dot(work[:, q], work[:, q]))
                gamma = float(np.dot(work[:, p], work[:, q]))
                if abs(gamma) <= tolerance * np.sqrt(alpha * beta):
                    continue

                rotated = True
                zeta = (beta - alpha) / (2.0 * gamma)
                sign = 1.0 if zeta >= 0.0 else -1.0
                t = sign / (abs(zeta) + np.sqrt(1.0 + zeta * zeta))
                c = 1.0 / np.sqrt(1.0 + t * t)
                s = c * t

                col_p = work[:, p].copy()
                work[:, p] = c * col_p - s * work[:, q]
                work[:, q] = s * col_p + c * work[:, q]

                v_p = V[:, p].copy()
                V[:, p] = c * v_p - s * V[:, q]
                V[:, q] = s * v_p + c * V[:, q]

        if not rotated:
            converged = True
            break

    if not converged:
        logger.debug("Jacobi SVD hit the %d sweep cap; using current estimate", max_sweeps)

    singular = np.linalg.norm(work, axis=0)
    order = np.argsort(-singular, kind="stable")
    singular = singular[order]
    work = work[:, order]
    V = V[:, order]

    U = _left_vectors(work, singular)
    return SVDResult(U=U, S=singular, V=V, converged=converged)


def _left_vectors(columns: np.ndarray, singular: np.ndarray) -> np.ndarray:
    """Normalize rotated columns and complete them to an orthonormal basis."""
    if singular[0] <= MIN_SINGULAR_VALUE:
        return np.eye(3)

    U = np.zeros((3, 3))
    rank = 0
    for index in range(3):
        if singular[index] > MIN_SINGULAR_VALUE * singular[0]:
            U[:, index] = columns[:, index] / singular[index]
            rank += 1

    if rank == 1:
        U[:, 1] = any_perpendicular(U[:, 0])
    if rank < 3:
        U[:, 2] = np.cross(U[:, 0], U[:, 1])
    return U


def any_perpendicular(vector: np.ndarray) -> np.ndarray:
    """Unit vector perpendicular to ``vector``."""
    axis = np.zeros(3)
    axis[int(np.argmin(np.abs(vector)))] = 1.0
    perpendicular = np.cross(vector, axis)
    return perpendicular / np.linalg.norm(perpendicular)


def euler_xyz_matrix(angles) -> np.ndarray:
    """Rotation matrix for intrinsic X-Y-Z Euler angles in radians."""
    return Rotation.from_euler("XYZ", angles).as_matrix()


def axis_angle_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotation of ``angle`` radians about ``axis`` (normalized here)."""
    axis = np.asarray(axis, dtype=float)
    return Rotation.from_rotvec(axis / np.linalg.norm(axis) * angle).as_matrix()


def random_unit_vector(rng: np.random.Generator) -> np.ndarray:
    """Random direction built from centered uniform components."""
    vector = rng.random(3) - 0.5
    norm = np.linalg.norm(vector)
    if norm < 1e-12:
        return np.array([0.0, 0.0, 1.0])
    return vector / norm


def plane_normal(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Unnormalized normal of the plane through three points."""
    return np.cross(np.asarray(b) - a, np.asarray(c) - a)
