"""Rotation search for continuous shape measures."""

from .evaluator import Candidate, evaluate_rotation, normalize_points
from .rotation_optimizer import (
    KEY_ORIENTATIONS,
    RotationOptimizer,
    calculate_shape_measure,
)
from .settings import MODE_PRESETS, OptimizerSettings

__all__ = [
    "Candidate",
    "KEY_ORIENTATIONS",
    "MODE_PRESETS",
    "OptimizerSettings",
    "RotationOptimizer",
    "calculate_shape_measure",
    "evaluate_rotation",
    "normalize_points",
]
