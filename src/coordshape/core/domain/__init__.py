"""Core domain models and interfaces."""

from .interfaces.assignment_solver import AssignmentSolver
from .models.ligand_group import LigandGroups
from .models.pattern import PatternType
from .models.reference_geometry import ReferenceGeometry
from .models.shape_result import ShapeResult

__all__ = [
    "AssignmentSolver",
    "LigandGroups",
    "PatternType",
    "ReferenceGeometry",
    "ShapeResult",
]
