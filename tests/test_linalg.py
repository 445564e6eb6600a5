import numpy as np
import pytest

from coordshape.core.exceptions import SizeMismatchError
from coordshape.core.utils.kabsch import kabsch_rotation
from coordshape.core.utils.linalg import (
    any_perpendicular,
    axis_angle_matrix,
    euler_xyz_matrix,
    jacobi_svd,
)


def random_rotation(rng):
    q, r = np.linalg.qr(rng.normal(size=(3, 3)))
    q = q @ np.diag(np.sign(np.diag(r)))
    if np.linalg.det(q) < 0:
        q[:, 0] *= -1
    return q


def test_jacobi_svd_reconstructs_matrix():
    rng = np.random.default_rng(0)
    for _ in range(20):
        H = rng.normal(size=(3, 3))
        U, S, V, converged = jacobi_svd(H)

        assert converged
        np.testing.assert_allclose(U @ np.diag(S) @ V.T, H, atol=1e-10)
        np.testing.assert_allclose(U.T @ U, np.eye(3), atol=1e-10)
        np.testing.assert_allclose(V.T @ V, np.eye(3), atol=1e-10)
        np.testing.assert_allclose(S, np.linalg.svd(H, compute_uv=False), atol=1e-10)
        assert list(S) == sorted(S, reverse=True)


def test_jacobi_svd_rank_deficient_matrix():
    H = np.outer([1.0, 2.0, -1.0], [0.5, 0.0, 2.0])
    U, S, V, _ = jacobi_svd(H)

    np.testing.assert_allclose(U @ np.diag(S) @ V.T, H, atol=1e-10)
    np.testing.assert_allclose(U.T @ U, np.eye(3), atol=1e-10)
    assert S[1] == pytest.approx(0.0, abs=1e-12)


def test_jacobi_svd_zero_matrix():
    U, S, V, converged = jacobi_svd(np.zeros((3, 3)))
    np.testing.assert_array_equal(U, np.eye(3))
    np.testing.assert_array_equal(S, np.zeros(3))
    assert converged


def test_jacobi_svd_reports_sweep_cap():
    H = np.array([[1.0, 2.0, 0.0], [3.0, 1.0, 1.0], [0.0, 1.0, 4.0]])
    result = jacobi_svd(H, max_sweeps=1)
    assert not result.converged


def test_euler_xyz_single_axis():
    R = euler_xyz_matrix((np.pi / 2, 0.0, 0.0))
    np.testing.assert_allclose(R @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], atol=1e-12)


def test_axis_angle_matrix():
    R = axis_angle_matrix(np.array([0.0, 0.0, 2.0]), np.pi / 2)
    np.testing.assert_allclose(R @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-12)


def test_any_perpendicular():
    v = np.array([0.3, -0.2, 0.9])
    p = any_perpendicular(v)
    assert np.dot(p, v) == pytest.approx(0.0, abs=1e-12)
    assert np.linalg.norm(p) == pytest.approx(1.0)


def test_kabsch_recovers_rotation():
    rng = np.random.default_rng(1)
    P = rng.normal(size=(7, 3))
    R = random_rotation(rng)
    Q = P @ R.T + np.array([1.0, -2.0, 0.5])

    found = kabsch_rotation(P, Q)

    np.testing.assert_allclose(found, R, atol=1e-9)
    assert np.linalg.det(found) == pytest.approx(1.0)


def test_kabsch_without_centering():
    rng = np.random.default_rng(2)
    P = rng.normal(size=(5, 3))
    R = random_rotation(rng)

    np.testing.assert_allclose(kabsch_rotation(P, P @ R.T, center=False), R, atol=1e-9)


def test_kabsch_returns_proper_rotation_for_mirror_image():
    rng = np.random.default_rng(3)
    P = rng.normal(size=(6, 3))
    mirrored = P * np.array([1.0, 1.0, -1.0])

    R = kabsch_rotation(P, mirrored)

    assert np.linalg.det(R) == pytest.approx(1.0)
    np.testing.assert_allclose(R.T @ R, np.eye(3), atol=1e-10)


def test_kabsch_single_point_and_empty():
    R = kabsch_rotation(np.array([[1.0, 0.0, 0.0]]), np.array([[0.0, 1.0, 0.0]]), center=False)
    np.testing.assert_allclose(R @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-10)
    np.testing.assert_array_equal(kabsch_rotation(np.zeros((0, 3)), np.zeros((0, 3))), np.eye(3))


def test_kabsch_size_mismatch():
    with pytest.raises(SizeMismatchError):
        kabsch_rotation(np.zeros((3, 3)), np.zeros((4, 3)))
