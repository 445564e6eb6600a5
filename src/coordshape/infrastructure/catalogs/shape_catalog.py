"""Catalog of ideal coordination polyhedra.

Shapes follow the SHAPE naming scheme (code, name, point group). Regular
and semiregular polyhedra are generated here; the remaining shapes come
from the vertex tables in ``tabulated_shapes``. Every polyhedron is stored
as unit vectors from the position a metal takes inside it, so a Johnson
solid whose vertex directions match a spherical shape gives the same
measure as that shape.
"""

from functools import lru_cache
from itertools import permutations, product
from typing import Dict, List

import numpy as np

from ...core.domain.models.reference_geometry import ReferenceGeometry
from .tabulated_shapes import TABULATED_SHAPES

TETRAHEDRAL_ANGLE = np.degrees(np.arccos(-1.0 / 3.0))
PHI = (1.0 + np.sqrt(5.0)) / 2.0


def _unit(points) -> np.ndarray:
    points = np.asarray(points, dtype=float)
    return points / np.linalg.norm(points, axis=1)[:, None]


def _ring(count: int, radial: float = 1.0, height: float = 0.0, phase: float = 0.0):
    """``count`` points on a horizontal circle, azimuths starting at ``phase`` degrees."""
    azimuths = np.radians(phase) + 2.0 * np.pi * np.arange(count) / count
    return [(radial * np.cos(a), radial * np.sin(a), height) for a in azimuths]


def _cone(count: int, polar_deg: float, phase: float = 0.0):
    """``count`` points at a polar angle from +z."""
    theta = np.radians(polar_deg)
    return _ring(count, np.sin(theta), np.cos(theta), phase)


def _signed(values):
    """Every sign combination of the nonzero entries of ``values``."""
    choices = [(v, -v) if v else (v,) for v in values]
    return sorted(set(product(*choices)))


def _all_permutations(*bases):
    points = set()
    for base in bases:
        for signed in _signed(base):
            points.update(permutations(signed))
    return sorted(points)


def _cyclic_permutations(*bases):
    points = set()
    for base in bases:
        for x, y, z in _signed(base):
            points.update([(x, y, z), (y, z, x), (z, x, y)])
    return sorted(points)


_UP = [(0.0, 0.0, 1.0)]
_DOWN = [(0.0, 0.0, -1.0)]
_POLES = _UP + _DOWN

# Square-faced prisms and equilateral antiprisms inscribed in the unit sphere
_TPR_RADIAL = 2.0 / np.sqrt(7.0)
_TPR_HEIGHT = np.sqrt(3.0 / 7.0)
_PAPR_RADIAL = 2.0 / np.sqrt(5.0)
_PAPR_HEIGHT = 1.0 / np.sqrt(5.0)
_PPR_RADIAL = 1.0 / np.sqrt(1.0 + np.sin(np.radians(36.0)) ** 2)
_PPR_HEIGHT = _PPR_RADIAL * np.sin(np.radians(36.0))
_HPR_RADIAL = 1.0 / np.sqrt(1.25)
_HPR_HEIGHT = _HPR_RADIAL / 2.0
_HAPR_HALF = np.sqrt(2.0 * (np.cos(np.radians(30.0)) - 0.5)) / 2.0
_HAPR_RADIAL = 1.0 / np.sqrt(1.0 + _HAPR_HALF ** 2)
_HAPR_HEIGHT = _HAPR_RADIAL * _HAPR_HALF

_TDD_A, _TDD_B, _TDD_C, _TDD_D = 0.636106, 0.848768, 0.993211, 0.372147

# (code, name, point group, points)
_SHAPES = [
    # CN 2
    ("L-2", "Linear", "D∞h", _POLES),
    ("vT-2", "V-shape", "C2v", _cone(2, TETRAHEDRAL_ANGLE / 2.0)),
    ("vOC-2", "L-shape", "C2v", [(1, 0, 0), (0, 1, 0)]),
    # CN 3
    ("TP-3", "Trigonal Planar", "D3h", _ring(3)),
    ("vT-3", "Pyramid", "C3v", _cone(3, TETRAHEDRAL_ANGLE)),
    ("fac-vOC-3", "fac-Trivacant Octahedron", "C3v", [(1, 0, 0), (0, 1, 0), (0, 0, 1)]),
    ("mer-vOC-3", "T-shaped", "C2v", [(1, 0, 0), (-1, 0, 0), (0, 1, 0)]),
    # CN 4
    ("SP-4", "Square Planar", "D4h", _ring(4)),
    ("T-4", "Tetrahedral", "Td", _UP + _cone(3, TETRAHEDRAL_ANGLE)),
    ("SS-4", "Seesaw", "C2v", _POLES + [(1, 0, 0), (0, 1, 0)]),
    ("vTBPY-4", "Axially Vacant Trigonal Bipyramid", "C3v", _DOWN + _ring(3)),
    # CN 5
    ("PP-5", "Pentagon", "D5h", _ring(5)),
    ("vOC-5", "Vacant Octahedron", "C4v", _UP + _ring(4)),
    ("TBPY-5", "Trigonal Bipyramidal", "D3h", _POLES + _ring(3)),
    ("SPY-5", "Square Pyramidal", "C4v", _UP + _cone(4, np.degrees(np.arccos(-0.25)))),
    # CN 6
    ("HP-6", "Hexagon", "D6h", _ring(6)),
    ("PPY-6", "Pentagonal Pyramid", "C5v", _UP + _ring(5)),
    ("OC-6", "Octahedral", "Oh", _POLES + _ring(4)),
    (
        "TPR-6",
        "Trigonal Prism",
        "D3h",
        _ring(3, _TPR_RADIAL, _TPR_HEIGHT) + _ring(3, _TPR_RADIAL, -_TPR_HEIGHT),
    ),
    # CN 7
    ("HP-7", "Heptagon", "D7h", _ring(7)),
    ("HPY-7", "Hexagonal Pyramid", "C6v", _UP + _ring(6)),
    ("PBPY-7", "Pentagonal Bipyramidal", "D5h", _POLES + _ring(5)),
    (
        "COC-7",
        "Capped Octahedral",
        "C3v",
        _UP
        + _ring(3, 1.046937, 0.225017, -90.0)
        + _ring(3, 0.777073, -0.736796, -30.0),
    ),
    (
        "CTPR-7",
        "Capped Trigonal Prism",
        "C2v",
        _UP + _ring(4, 1.039800, 0.254124, 45.0) + _ring(2, 0.660961, -0.841955),
    ),
    # CN 8
    ("OP-8", "Octagon", "D8h", _ring(8)),
    ("HPY-8", "Heptagonal Pyramid", "C7v", _UP + _ring(7)),
    ("HBPY-8", "Hexagonal Bipyramid", "D6h", _POLES + _ring(6)),
    ("CU-8", "Cube", "Oh", _ring(4, np.sqrt(2.0), 1.0, 45.0) + _ring(4, np.sqrt(2.0), -1.0, 45.0)),
    (
        "SAPR-8",
        "Square Antiprism",
        "D4d",
        _ring(4, 0.911672, 0.542083) + _ring(4, 0.911672, -0.542083, 45.0),
    ),
    (
        "TDD-8",
        "Triangular Dodecahedron",
        "D2d",
        [
            (-_TDD_A, 0, _TDD_B),
            (0, -_TDD_C, _TDD_D),
            (_TDD_A, 0, _TDD_B),
            (0, _TDD_C, _TDD_D),
            (-_TDD_C, 0, -_TDD_D),
            (0, -_TDD_A, -_TDD_B),
            (_TDD_C, 0, -_TDD_D),
            (0, _TDD_A, -_TDD_B),
        ],
    ),
    # CN 9
    ("EP-9", "Enneagon", "D9h", _ring(9)),
    ("OPY-9", "Octagonal Pyramid", "C8v", _UP + _ring(8)),
    ("HBPY-9", "Heptagonal Bipyramid", "D7h", _POLES + _ring(7)),
    # CN 10
    ("DP-10", "Decagon", "D10h", _ring(10)),
    ("EPY-10", "Enneagonal Pyramid", "C9v", _UP + _ring(9)),
    ("OBPY-10", "Octagonal Bipyramid", "D8h", _POLES + _ring(8)),
    (
        "PPR-10",
        "Pentagonal Prism",
        "D5h",
        _ring(5, _PPR_RADIAL, _PPR_HEIGHT) + _ring(5, _PPR_RADIAL, -_PPR_HEIGHT),
    ),
    (
        "PAPR-10",
        "Pentagonal Antiprism",
        "D5d",
        _ring(5, _PAPR_RADIAL, _PAPR_HEIGHT) + _ring(5, _PAPR_RADIAL, -_PAPR_HEIGHT, 36.0),
    ),
    # CN 11
    ("HP-11", "Hendecagon", "D11h", _ring(11)),
    ("DPY-11", "Decagonal Pyramid", "C10v", _UP + _ring(10)),
    ("EBPY-11", "Enneagonal Bipyramid", "D9h", _POLES + _ring(9)),
    # CN 12
    ("DP-12", "Dodecagon", "D12h", _ring(12)),
    ("HPY-12", "Hendecagonal Pyramid", "C11v", _UP + _ring(11)),
    ("DBPY-12", "Decagonal Bipyramid", "D10h", _POLES + _ring(10)),
    (
        "HPR-12",
        "Hexagonal Prism",
        "D6h",
        _ring(6, _HPR_RADIAL, _HPR_HEIGHT) + _ring(6, _HPR_RADIAL, -_HPR_HEIGHT),
    ),
    (
        "HAPR-12",
        "Hexagonal Antiprism",
        "D6d",
        _ring(6, _HAPR_RADIAL, _HAPR_HEIGHT) + _ring(6, _HAPR_RADIAL, -_HAPR_HEIGHT, 30.0),
    ),
    (
        "COC-12",
        "Cuboctahedral",
        "Oh",
        _ring(4, 1.0, 1.0, 0.0) + _ring(4, np.sqrt(2.0), 0.0, 45.0) + _ring(4, 1.0, -1.0, 0.0),
    ),
    (
        "IC-12",
        "Icosahedral",
        "Ih",
        _POLES
        + _ring(5, _PAPR_RADIAL, _PAPR_HEIGHT)
        + _ring(5, _PAPR_RADIAL, -_PAPR_HEIGHT, 36.0),
    ),
    # CN 20 and above
    (
        "DD-20",
        "Dodecahedron",
        "Ih",
        _signed((1.0, 1.0, 1.0)) + _cyclic_permutations((0.0, 1.0 / PHI, PHI)),
    ),
    ("TCU-24", "Truncated Cube", "Oh", _all_permutations((np.sqrt(2.0) - 1.0, 1.0, 1.0))),
    ("TOC-24", "Truncated Octahedron", "Oh", _all_permutations((0.0, 1.0, 2.0))),
    (
        "TCOC-48",
        "Truncated Cuboctahedron",
        "Oh",
        _all_permutations((1.0, 1.0 + np.sqrt(2.0), 1.0 + 2.0 * np.sqrt(2.0))),
    ),
    (
        "TIC-60",
        "Truncated Icosahedron",
        "Ih",
        _cyclic_permutations(
            (0.0, 1.0, 3.0 * PHI), (1.0, 2.0 + PHI, 2.0 * PHI), (PHI, 2.0, PHI ** 3)
        ),
    ),
]


@lru_cache(maxsize=None)
def build_reference_catalog() -> Dict[int, List[ReferenceGeometry]]:
    """
    Build all reference geometries grouped by coordination number.

    Returns:
        Mapping of coordination number to its reference geometries, in
        catalog order
    """
    shapes = list(_SHAPES)
    for code, name, point_group, vertices, center in TABULATED_SHAPES:
        shapes.append(
            (code, name, point_group, np.asarray(vertices) - np.asarray(center))
        )

    catalog: Dict[int, List[ReferenceGeometry]] = {}
    for code, name, point_group, points in shapes:
        coordinates = _unit(points)
        coordinates.setflags(write=False)
        geometry = ReferenceGeometry(
            name=name, code=code, point_group=point_group, coordinates=coordinates
        )
        catalog.setdefault(geometry.coordination_number, []).append(geometry)
    return catalog
