"""Domain model for a complete coordination analysis run."""

from dataclasses import dataclass
from typing import Optional

from ...utils.quality_metrics import QualityMetrics
from .geometry_plan import GeometryPlan
from .ligand_group import LigandGroups
from .pattern import PatternDetection
from .shape_result import GeometryRanking, ShapeResult


@dataclass
class CoordinationAnalysis:
    """Everything produced while analyzing one metal center."""

    metal_index: int
    metal_element: str
    mode: str
    ligand_groups: LigandGroups
    detection: PatternDetection
    plan: GeometryPlan
    ranking: GeometryRanking
    comparison: Optional[GeometryRanking] = None
    elapsed_seconds: float = 0.0
    quality: Optional[QualityMetrics] = None

    @property
    def coordination_number(self) -> int:
        return self.plan.coordination_number

    @property
    def best(self) -> Optional[ShapeResult]:
        return self.ranking.best
