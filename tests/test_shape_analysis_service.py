import threading

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from coordshape.core.domain.models.reference_geometry import ReferenceGeometry
from coordshape.core.exceptions import DegenerateInputError, InvalidReferenceError
from coordshape.core.optimization.settings import OptimizerSettings
from coordshape.core.services.shape_analysis_service import ShapeAnalysisService

from conftest import OCTAHEDRON


@pytest.fixture
def rotated_octahedron():
    rotation = Rotation.from_euler("XYZ", [0.4, -0.3, 0.2]).as_matrix()
    return 2.0 * OCTAHEDRON @ rotation.T


def test_perfect_octahedron_ranks_octahedral_first(
    rotated_octahedron, fast_settings, repository
):
    service = ShapeAnalysisService(fast_settings)

    ranking = service.rank(rotated_octahedron, repository.for_coordination_number(6))

    assert ranking.best.geometry_name == "Octahedral"
    assert ranking.best.geometry_code == "OC-6"
    assert ranking.best.measure < 1e-6
    measures = [result.measure for result in ranking.results]
    assert measures == sorted(measures)
    assert all(measure >= 0.0 for measure in measures)
    assert len(ranking) == len(repository.for_coordination_number(6))


def test_size_mismatch_is_skipped_and_ranking_continues(
    rotated_octahedron, fast_settings, repository
):
    references = [repository.get("TBPY-5")] + repository.for_coordination_number(6)

    ranking = ShapeAnalysisService(fast_settings).rank(rotated_octahedron, references)

    assert [skipped.name for skipped in ranking.skipped] == ["Trigonal Bipyramidal"]
    assert len(ranking.results) == len(references) - 1
    assert ranking.best.geometry_name == "Octahedral"


@pytest.fixture
def broken_octahedron():
    vertices = OCTAHEDRON.copy()
    vertices[5] = 0.0
    return ReferenceGeometry(
        name="Broken Octahedron", code="BRK-6", point_group="C4v", coordinates=vertices
    )


@pytest.mark.parametrize("workers", [1, 2])
def test_reference_with_vertex_at_center_is_skipped(
    rotated_octahedron, fast_settings, repository, broken_octahedron, workers
):
    references = [broken_octahedron, repository.get("OC-6")]

    ranking = ShapeAnalysisService(fast_settings, max_workers=workers).rank(
        rotated_octahedron, references
    )

    assert [skipped.name for skipped in ranking.skipped] == ["Broken Octahedron"]
    assert "vertex at its center" in ranking.skipped[0].reason
    assert ranking.best.geometry_name == "Octahedral"
    assert len(ranking.results) == 1


def test_reference_vertex_at_center_raises_for_single_evaluation(
    rotated_octahedron, fast_settings, broken_octahedron
):
    with pytest.raises(InvalidReferenceError):
        ShapeAnalysisService(fast_settings).evaluate(rotated_octahedron, broken_octahedron)


def test_no_references_gives_empty_ranking(rotated_octahedron, fast_settings):
    ranking = ShapeAnalysisService(fast_settings).rank(rotated_octahedron, [])
    assert ranking.best is None
    assert len(ranking) == 0


def test_point_on_metal_aborts_ranking(fast_settings, repository):
    actual = OCTAHEDRON.copy()
    actual[0] = 0.0
    with pytest.raises(DegenerateInputError):
        ShapeAnalysisService(fast_settings).rank(actual, repository.for_coordination_number(6))


def test_pattern_label_is_attached(rotated_octahedron, fast_settings, repository):
    ranking = ShapeAnalysisService(fast_settings).rank(
        rotated_octahedron, repository.for_coordination_number(6)[:2], pattern="general"
    )
    assert {result.pattern for result in ranking.results} == {"general"}


def test_result_callback_sees_every_reference(rotated_octahedron, fast_settings, repository):
    seen = []
    references = [repository.get("PP-5")] + repository.for_coordination_number(6)

    ShapeAnalysisService(fast_settings).rank(
        rotated_octahedron,
        references,
        result_callback=lambda reference, result: seen.append((reference.code, result is None)),
    )

    assert [code for code, _ in seen] == [geometry.code for geometry in references]
    assert seen[0] == ("PP-5", True)


def test_cancelled_ranking_stops(rotated_octahedron, fast_settings, repository):
    cancel = threading.Event()
    cancel.set()

    ranking = ShapeAnalysisService(fast_settings).rank(
        rotated_octahedron, repository.for_coordination_number(6), cancel_event=cancel
    )

    assert ranking.cancelled
    assert ranking.results == []


def test_evaluation_does_not_depend_on_reference_order(fast_settings, repository):
    actual = np.vstack([[0.5, 0.0, 1.0], OCTAHEDRON[[0, 1, 2, 3, 5]]])
    references = repository.for_coordination_number(6)
    service = ShapeAnalysisService(fast_settings)

    forward = {r.geometry_code: r.measure for r in service.rank(actual, references).results}
    backward = {r.geometry_code: r.measure for r in service.rank(actual, references[::-1]).results}

    assert forward == backward


def test_parallel_ranking_matches_sequential(fast_settings, repository):
    actual = np.array([[0.0, 0.1, 1.9], [0.0, -0.1, -2.0]])
    references = repository.for_coordination_number(2)

    sequential = ShapeAnalysisService(fast_settings).rank(actual, references)
    parallel = ShapeAnalysisService(fast_settings, max_workers=2).rank(actual, references)

    assert [r.geometry_code for r in parallel.results] == [
        r.geometry_code for r in sequential.results
    ]
    assert parallel.results[0].measure == pytest.approx(sequential.results[0].measure)
    assert parallel.best.geometry_name == "Linear"


def test_default_settings():
    assert ShapeAnalysisService().settings == OptimizerSettings.from_mode("default")
