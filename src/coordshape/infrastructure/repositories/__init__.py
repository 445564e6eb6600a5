from .reference_geometry_repository import ReferenceGeometryRepository

__all__ = ["ReferenceGeometryRepository"]
