"""Core domain models, optimization and services for shape analysis."""

from .exceptions import (
    CoordinationSphereError,
    DegenerateInputError,
    InvalidReferenceError,
    ShapeAnalysisError,
    SizeMismatchError,
)
from .optimization import OptimizerSettings, RotationOptimizer, calculate_shape_measure
from .services import CoordinationAnalysisService, ShapeAnalysisService

__all__ = [
    "CoordinationAnalysisService",
    "CoordinationSphereError",
    "DegenerateInputError",
    "InvalidReferenceError",
    "OptimizerSettings",
    "RotationOptimizer",
    "ShapeAnalysisError",
    "ShapeAnalysisService",
    "SizeMismatchError",
    "calculate_shape_measure",
]
