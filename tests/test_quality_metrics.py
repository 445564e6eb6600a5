import numpy as np
import pytest

from coordshape.core.utils.quality_metrics import (
    angle_statistics,
    angular_distortion_index,
    bond_length_statistics,
    bond_length_uniformity,
    calculate_quality_metrics,
)

from conftest import OCTAHEDRON

AXES = np.eye(3)
TRIGONAL_PLANAR = np.array([[1.0, 0.0, 0.0], [-0.5, 0.866025, 0.0], [-0.5, -0.866025, 0.0]])


def test_ideal_octahedron_scores_full_marks():
    metrics = calculate_quality_metrics(2.0 * OCTAHEDRON, OCTAHEDRON, 0.0)

    assert metrics.quality_score == pytest.approx(100.0)
    assert metrics.bond_length_uniformity == pytest.approx(100.0)
    assert metrics.angular_distortion == pytest.approx(0.0, abs=1e-9)
    assert metrics.shape_deviation == 0.0
    assert metrics.bond_lengths.mean == pytest.approx(2.0)
    assert metrics.bond_lengths.std == pytest.approx(0.0)


def test_octahedron_angle_statistics():
    stats = angle_statistics(OCTAHEDRON)

    assert stats.count == 15
    assert stats.mean == pytest.approx(108.0)
    assert stats.minimum == pytest.approx(90.0)
    assert stats.maximum == pytest.approx(180.0)
    assert stats.std == pytest.approx(36.0)


def test_bond_length_statistics_use_population_moments():
    vectors = np.array([[1.0, 0.0, 0.0], [0.0, 3.0, 0.0]])
    stats = bond_length_statistics(vectors)

    assert stats.mean == pytest.approx(2.0)
    assert stats.variance == pytest.approx(1.0)
    assert stats.std == pytest.approx(1.0)
    assert (stats.minimum, stats.maximum) == pytest.approx((1.0, 3.0))


def test_bond_length_uniformity():
    assert bond_length_uniformity([2.0, 2.0, 2.0]) == pytest.approx(100.0)
    assert bond_length_uniformity([1.0, 1.0, 2.0, 2.0]) == pytest.approx(100.0 * 2.0 / 3.0)


def test_angular_distortion_against_another_shape():
    assert angular_distortion_index(AXES, TRIGONAL_PLANAR) == pytest.approx(30.0, abs=1e-4)


def test_angular_distortion_is_zero_for_mismatched_sizes():
    assert angular_distortion_index(AXES, OCTAHEDRON) == 0.0


def test_shape_deviation_follows_measure():
    metrics = calculate_quality_metrics(OCTAHEDRON, OCTAHEDRON, 4.0)
    assert metrics.shape_deviation == pytest.approx(0.2)
    assert metrics.quality_score == pytest.approx(92.0)


def test_quality_score_is_clipped_at_zero():
    metrics = calculate_quality_metrics(AXES, TRIGONAL_PLANAR, 60.0)
    assert metrics.quality_score == 0.0


def test_single_point_has_no_angles():
    stats = angle_statistics(np.array([[0.0, 0.0, 2.0]]))
    assert stats.count == 0
    assert stats.mean == 0.0
