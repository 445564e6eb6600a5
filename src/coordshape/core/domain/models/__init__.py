from .analysis import CoordinationAnalysis
from .atom import Atom
from .geometry_plan import GeometryPlan
from .ligand_group import LigandGroups, Monodentate, Ring
from .pattern import (
    GeneralPattern,
    MacrocyclePattern,
    Pattern,
    PatternDetection,
    PatternType,
    PianoStoolPattern,
    SandwichPattern,
)
from .reference_geometry import ReferenceGeometry
from .shape_result import (
    GeometryRanking,
    OptimizationProgress,
    ShapeResult,
    SkippedGeometry,
)

__all__ = [
    "Atom",
    "CoordinationAnalysis",
    "GeneralPattern",
    "GeometryPlan",
    "GeometryRanking",
    "LigandGroups",
    "MacrocyclePattern",
    "Monodentate",
    "OptimizationProgress",
    "Pattern",
    "PatternDetection",
    "PatternType",
    "PianoStoolPattern",
    "ReferenceGeometry",
    "Ring",
    "SandwichPattern",
    "ShapeResult",
    "SkippedGeometry",
]
