# src/coordshape/infrastructure/repositories/reference_geometry_repository.py
"""Repository over the bundled reference geometry catalog."""

from typing import Dict, List, Optional

from ...core.domain.models.reference_geometry import ReferenceGeometry
from ...core.interfaces.repository import Repository
from ..catalogs.shape_catalog import build_reference_catalog


class ReferenceGeometryRepository(Repository[ReferenceGeometry]):
    """Read-only access to reference polyhedra, keyed by shape code."""

    def __init__(self, catalog: Optional[Dict[int, List[ReferenceGeometry]]] = None):
        """
        Initialize repository.

        Args:
            catalog: Geometries grouped by coordination number; defaults to
                the bundled catalog
        """
        self._catalog = catalog if catalog is not None else build_reference_catalog()
        self._by_code = {
            geometry.code: geometry
            for geometries in self._catalog.values()
            for geometry in geometries
        }

    def get(self, id: str) -> Optional[ReferenceGeometry]:
        """Look up a geometry by its code (e.g. "OC-6")."""
        return self._by_code.get(id)

    def list(self) -> List[ReferenceGeometry]:
        return [
            geometry
            for cn in sorted(self._catalog)
            for geometry in self._catalog[cn]
        ]

    def for_coordination_number(self, coordination_number: int) -> List[ReferenceGeometry]:
        """All geometries with the given number of vertices, in catalog order."""
        return list(self._catalog.get(coordination_number, []))

    def coordination_numbers(self) -> List[int]:
        return sorted(self._catalog)
