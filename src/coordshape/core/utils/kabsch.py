"""Optimal rigid rotation between paired point sets (Kabsch algorithm)."""

import numpy as np

from ..exceptions import SizeMismatchError
from .linalg import jacobi_svd


def kabsch_rotation(
    mobile: np.ndarray, target: np.ndarray, center: bool = True
) -> np.ndarray:
    """
    Calculate the proper rotation that best maps ``mobile`` onto ``target``.

    Args:
        mobile: (N, 3) points to be rotated
        target: (N, 3) points paired row by row with ``mobile``
        center: Subtract each set's centroid first. Pass False for
            metal-centered sets that must stay anchored at the origin.

    Returns:
        3x3 rotation matrix R with det(R) = +1 so that R @ mobile[i]
        approximates target[i]
    """
    mobile = np.asarray(mobile, dtype=float)
    target = np.asarray(target, dtype=float)
    if mobile.shape != target.shape:
        raise SizeMismatchError(len(mobile), len(target))
    if len(mobile) == 0:
        return np.eye(3)

    if center:
        mobile = mobile - mobile.mean(axis=0)
        target = target - target.mean(axis=0)

    # Covariance matrix
    H = mobile.T @ target
    U, _, V, _ = jacobi_svd(H)

    rotation = V @ U.T

    # Ensure right-handed coordinate system
    if np.linalg.det(rotation) < 0:
        V = V.copy()
        V[:, 2] *= -1
        rotation = V @ U.T

    return rotation
