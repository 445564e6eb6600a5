"""Continuous shape measures and coordination pattern analysis."""

from .core import (
    CoordinationAnalysisService,
    CoordinationSphereError,
    DegenerateInputError,
    OptimizerSettings,
    ShapeAnalysisError,
    ShapeAnalysisService,
    SizeMismatchError,
    calculate_shape_measure,
)
from .infrastructure.repositories import ReferenceGeometryRepository

__version__ = "0.1.0"

__all__ = [
    "CoordinationAnalysisService",
    "CoordinationSphereError",
    "DegenerateInputError",
    "OptimizerSettings",
    "ReferenceGeometryRepository",
    "ShapeAnalysisError",
    "ShapeAnalysisService",
    "SizeMismatchError",
    "calculate_shape_measure",
]
