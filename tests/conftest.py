import numpy as np
import pytest

from coordshape.core.domain.models.atom import Atom
from coordshape.core.optimization.settings import OptimizerSettings
from coordshape.infrastructure.repositories.reference_geometry_repository import (
    ReferenceGeometryRepository,
)

OCTAHEDRON = np.array(
    [
        [1.0, 0.0, 0.0],
        [-1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, -1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 0.0, -1.0],
    ]
)

# Regular pentagon of radius 1.0 (Cp ring)
CP_RING = np.array(
    [
        [1.0, 0.0],
        [0.31, 0.95],
        [-0.81, 0.59],
        [-0.81, -0.59],
        [0.31, -0.95],
    ]
)

# Regular hexagon of radius 1.4 (benzene)
BENZENE_RING = np.array(
    [
        [1.4, 0.0],
        [0.7, 1.21],
        [-0.7, 1.21],
        [-1.4, 0.0],
        [-0.7, -1.21],
        [0.7, -1.21],
    ]
)


def make_atoms(metal, ligands):
    """Metal at index 0 followed by the ligands; returns (atoms, coordinating indices)."""
    element, position = metal
    atoms = [Atom(index=0, element=element, coordinates=position)]
    for index, (symbol, coordinates) in enumerate(ligands, start=1):
        atoms.append(Atom(index=index, element=symbol, coordinates=coordinates))
    return atoms, list(range(1, len(atoms)))


def flat_ring(ring_2d, z):
    return [("C", (x, y, z)) for x, y in ring_2d]


@pytest.fixture
def fast_settings():
    return OptimizerSettings.from_mode("fast", seed=11)


@pytest.fixture(scope="session")
def repository():
    return ReferenceGeometryRepository()


@pytest.fixture
def ferrocene():
    """Fe between two eclipsed Cp rings 3.2 A apart."""
    return make_atoms(
        ("Fe", (0.0, 0.0, 0.0)),
        flat_ring(CP_RING, 1.6) + flat_ring(CP_RING, -1.6),
    )


@pytest.fixture
def benzene_chromium_tricarbonyl():
    """Cr with an eta6 benzene ring above and three CO carbons below."""
    theta = np.radians(125.0)
    legs = [
        (
            "C",
            (
                1.85 * np.sin(theta) * np.cos(phi),
                1.85 * np.sin(theta) * np.sin(phi),
                1.85 * np.cos(theta),
            ),
        )
        for phi in np.radians([0.0, 120.0, 240.0])
    ]
    return make_atoms(("Cr", (0.0, 0.0, 0.0)), flat_ring(BENZENE_RING, 2.0) + legs)


@pytest.fixture
def octahedral_complex():
    """Six oxygens 2.0 A from the metal along the axes, slightly rotated."""
    from scipy.spatial.transform import Rotation

    rotation = Rotation.from_euler("XYZ", [0.4, -0.3, 0.2]).as_matrix()
    ligands = [("O", tuple(point)) for point in 2.0 * OCTAHEDRON @ rotation.T]
    return make_atoms(("Co", (0.0, 0.0, 0.0)), ligands)


@pytest.fixture
def macrocycle_with_axial():
    """Planar eight-membered ring around the metal with two axial ligands."""
    angles = 2.0 * np.pi * np.arange(8) / 8
    ring = [("N", (2.0 * np.cos(a), 2.0 * np.sin(a), 0.0)) for a in angles]
    axial = [("O", (0.0, 0.0, 2.1)), ("O", (0.0, 0.0, -2.1))]
    return make_atoms(("Fe", (0.0, 0.0, 0.0)), ring + axial)
