import threading

import pytest

from coordshape.core.domain.models.pattern import PatternType
from coordshape.core.exceptions import CoordinationSphereError
from coordshape.core.optimization.settings import OptimizerSettings
from coordshape.core.services.coordination_analysis_service import (
    CoordinationAnalysisService,
)
from coordshape.core.utils.coordination_sphere import select_coordination_sphere


@pytest.fixture
def service(repository, fast_settings):
    return CoordinationAnalysisService(repository, fast_settings)


def test_ferrocene_matches_linear_centroids(service, ferrocene):
    atoms, coordinating = ferrocene

    analysis = service.analyze(atoms, 0, coordinating)

    assert analysis.detection.pattern_type is PatternType.SANDWICH
    assert analysis.coordination_number == 2
    assert analysis.best.geometry_name == "Linear"
    assert analysis.best.measure < 1.0
    assert analysis.best.pattern == "sandwich"
    assert analysis.metal_element == "Fe"
    assert analysis.mode == "fast"


def test_piano_stool_evaluates_vacant_polyhedra(service, benzene_chromium_tricarbonyl):
    atoms, coordinating = benzene_chromium_tricarbonyl

    analysis = service.analyze(atoms, 0, coordinating)

    assert analysis.coordination_number == 4
    assert len(analysis.ranking.results) == 3
    assert analysis.comparison is None
    assert {result.pattern for result in analysis.ranking.results} == {"piano_stool"}


def test_piano_stool_comparison(repository, fast_settings, benzene_chromium_tricarbonyl):
    atoms, coordinating = benzene_chromium_tricarbonyl
    service = CoordinationAnalysisService(repository, fast_settings, include_comparison=True)

    analysis = service.analyze(atoms, 0, coordinating)

    assert [result.geometry_code for result in analysis.comparison.results] == ["SP-4"]


def test_octahedral_complex_is_general(service, octahedral_complex):
    atoms, coordinating = octahedral_complex
    finished = []

    analysis = service.analyze(
        atoms, 0, coordinating, result_callback=lambda ref, result: finished.append(ref.code)
    )

    assert analysis.detection.pattern_type is PatternType.GENERAL
    assert analysis.best.geometry_name == "Octahedral"
    assert analysis.best.measure < 1e-6
    assert len(finished) == len(analysis.ranking.results)
    assert analysis.elapsed_seconds >= 0.0
    assert analysis.quality.quality_score == pytest.approx(100.0, abs=1e-3)
    assert analysis.quality.bond_lengths.mean == pytest.approx(2.0)


def test_cancelled_analysis_keeps_groups(service, octahedral_complex):
    atoms, coordinating = octahedral_complex
    cancel = threading.Event()
    cancel.set()

    analysis = service.analyze(atoms, 0, coordinating, cancel_event=cancel)

    assert analysis.ranking.cancelled
    assert analysis.ligand_groups.monodentate_count == 6


def test_invalid_sphere_raises(service, octahedral_complex):
    atoms, coordinating = octahedral_complex
    with pytest.raises(CoordinationSphereError):
        service.analyze(atoms, 0, coordinating + coordinating[:1])
    with pytest.raises(CoordinationSphereError):
        service.analyze(atoms, len(atoms), coordinating)


def test_intensive_mode_enables_comparison(repository):
    intensive = CoordinationAnalysisService(repository, OptimizerSettings.from_mode("intensive"))
    default = CoordinationAnalysisService(repository)

    assert intensive.geometry_builder.include_comparison
    assert not default.geometry_builder.include_comparison


def test_select_coordination_sphere(octahedral_complex):
    atoms, coordinating = octahedral_complex

    assert sorted(select_coordination_sphere(atoms, 0, 2.5)) == coordinating
    assert select_coordination_sphere(atoms, 0, 1.5) == []
    with pytest.raises(CoordinationSphereError):
        select_coordination_sphere(atoms, 0, 0.0)


def test_cancelled_analysis_without_results_has_no_quality(service, octahedral_complex):
    atoms, coordinating = octahedral_complex
    cancel = threading.Event()
    cancel.set()

    analysis = service.analyze(atoms, 0, coordinating, cancel_event=cancel)

    assert analysis.best is None
    assert analysis.quality is None
