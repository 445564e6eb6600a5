"""Application services for coordination shape analysis."""

from .coordination_analysis_service import CoordinationAnalysisService
from .geometry_builder_service import GeometryBuilder
from .pattern_detection_service import PatternDetectionSettings, PatternDetector
from .ring_detection_service import RingDetectionSettings, RingDetector
from .shape_analysis_service import ShapeAnalysisService

__all__ = [
    "CoordinationAnalysisService",
    "GeometryBuilder",
    "PatternDetectionSettings",
    "PatternDetector",
    "RingDetectionSettings",
    "RingDetector",
    "ShapeAnalysisService",
]
