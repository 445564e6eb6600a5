import itertools

import numpy as np
import pytest

from coordshape.core.interfaces.repository import Repository
from coordshape.infrastructure.catalogs.shape_catalog import (
    TETRAHEDRAL_ANGLE,
    build_reference_catalog,
)
from coordshape.infrastructure.repositories.reference_geometry_repository import (
    ReferenceGeometryRepository,
)


def angle_between(u, v):
    return np.degrees(np.arccos(np.clip(np.dot(u, v), -1.0, 1.0)))


def test_catalog_coordination_numbers(repository):
    assert repository.coordination_numbers() == list(range(2, 13)) + [20, 24, 48, 60]


def test_every_vertex_is_a_unit_vector(repository):
    for geometry in repository.list():
        norms = np.linalg.norm(geometry.coordinates, axis=1)
        np.testing.assert_allclose(norms, 1.0, err_msg=geometry.code)


def test_codes_are_unique_and_carry_coordination_number(repository):
    geometries = repository.list()
    assert len({geometry.code for geometry in geometries}) == len(geometries)
    for geometry in geometries:
        assert int(geometry.code.rsplit("-", 1)[1]) == geometry.coordination_number


def test_vertices_are_distinct(repository):
    for geometry in repository.list():
        for u, v in itertools.combinations(geometry.coordinates, 2):
            assert np.linalg.norm(u - v) > 0.1, geometry.code


def test_lookup_by_code(repository):
    octahedron = repository.get("OC-6")
    assert octahedron.name == "Octahedral"
    assert octahedron.point_group == "Oh"
    assert octahedron.label == "OC-6 (Octahedral)"
    assert repository.get("XX-6") is None


def test_catalog_order_is_preserved(repository):
    codes = [geometry.code for geometry in repository.for_coordination_number(2)]
    assert codes == ["L-2", "vT-2", "vOC-2"]
    assert repository.for_coordination_number(13) == []


def test_reference_coordinates_are_read_only(repository):
    with pytest.raises(ValueError):
        repository.get("T-4").coordinates[0, 0] = 0.0


def test_catalog_is_built_once():
    assert build_reference_catalog() is build_reference_catalog()


def test_v_shape_angle(repository):
    u, v = repository.get("vT-2").coordinates
    assert angle_between(u, v) == pytest.approx(TETRAHEDRAL_ANGLE)


def test_tetrahedron_angles(repository):
    for u, v in itertools.combinations(repository.get("T-4").coordinates, 2):
        assert angle_between(u, v) == pytest.approx(TETRAHEDRAL_ANGLE)


def test_octahedron_angles(repository):
    angles = sorted(
        round(angle_between(u, v))
        for u, v in itertools.combinations(repository.get("OC-6").coordinates, 2)
    )
    assert angles == [90] * 12 + [180] * 3


@pytest.mark.parametrize(
    "code",
    ["BTPR-8", "JSD-8", "TCTPR-9", "CSAPR-9", "MFF-9", "TT-12", "ACOC-12"],
)
def test_tabulated_shapes_are_listed(repository, code):
    geometry = repository.get(code)
    assert geometry is not None
    assert geometry in repository.for_coordination_number(int(code.split("-")[1]))


@pytest.mark.parametrize(
    "code, vertices",
    [("DD-20", 20), ("TCU-24", 24), ("TOC-24", 24), ("TCOC-48", 48), ("TIC-60", 60)],
)
def test_large_polyhedra(repository, code, vertices):
    geometry = repository.get(code)
    assert geometry.coordination_number == vertices
    np.testing.assert_allclose(geometry.coordinates.mean(axis=0), 0.0, atol=1e-12)


def test_johnson_bipyramid_matches_spherical_directions(repository):
    johnson = repository.get("JTBPY-5").coordinates
    spherical = repository.get("TBPY-5").coordinates
    np.testing.assert_allclose(johnson[[3, 4, 0, 1, 2]], spherical, atol=1e-6)


def test_tabulated_shapes_are_measured_from_their_center(repository):
    # The metal sits in the base plane, not at the vertex centroid
    pyramid = repository.get("JPPY-6").coordinates
    np.testing.assert_allclose(pyramid[:5, 2], 0.0, atol=1e-9)
    np.testing.assert_allclose(pyramid[5], [0.0, 0.0, -1.0])


def test_repository_exposes_only_lookups(repository):
    assert isinstance(repository, Repository)
    for name in ("create", "update", "delete"):
        assert not hasattr(repository, name)


def test_custom_catalog():
    tetrahedron = build_reference_catalog()[4][1]
    repository = ReferenceGeometryRepository({4: [tetrahedron]})
    assert repository.list() == [tetrahedron]
    assert repository.get("T-4") is tetrahedron
