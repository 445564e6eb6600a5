"""Service running the full analysis of one metal coordination sphere."""

import logging
import threading
from typing import Optional, Sequence

from ..domain.models.analysis import CoordinationAnalysis
from ..domain.models.atom import Atom
from ..domain.models.geometry_plan import GeometryPlan
from ..domain.models.pattern import PatternType
from ..domain.models.shape_result import GeometryRanking
from ..optimization.rotation_optimizer import ProgressCallback
from ..optimization.settings import OptimizerSettings
from ..utils.benchmarking import Timer
from ..utils.coordination_sphere import validate_coordination_sphere
from ..utils.quality_metrics import QualityMetrics, calculate_quality_metrics
from .geometry_builder_service import GeometryBuilder
from .pattern_detection_service import PatternDetector
from .ring_detection_service import RingDetector
from .shape_analysis_service import ResultCallback, ShapeAnalysisService


class CoordinationAnalysisService:
    """
    Orchestrates ring detection, pattern selection and geometry ranking.

    Args:
        repository: Reference geometry source offering
            ``for_coordination_number``
        settings: Optimizer configuration
        ring_detector: Ring detection strategy
        pattern_detector: Pattern classification strategy
        include_comparison: Evaluate references filtered out for piano
            stools too; defaults to on in intensive mode
        max_workers: Worker processes used for ranking
    """

    def __init__(
        self,
        repository,
        settings: Optional[OptimizerSettings] = None,
        ring_detector: Optional[RingDetector] = None,
        pattern_detector: Optional[PatternDetector] = None,
        include_comparison: Optional[bool] = None,
        max_workers: int = 1,
    ):
        self.settings = settings or OptimizerSettings.from_mode("default")
        self.ring_detector = ring_detector or RingDetector()
        self.pattern_detector = pattern_detector or PatternDetector()
        if include_comparison is None:
            include_comparison = self.settings.mode == "intensive"
        self.geometry_builder = GeometryBuilder(
            repository.for_coordination_number, include_comparison=include_comparison
        )
        self.shape_service = ShapeAnalysisService(self.settings, max_workers=max_workers)
        self.logger = logging.getLogger(__name__)

    def analyze(
        self,
        atoms: Sequence[Atom],
        metal_index: int,
        coordinating_indices: Sequence[int],
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        result_callback: Optional[ResultCallback] = None,
    ) -> CoordinationAnalysis:
        """
        Analyze the coordination geometry around one metal.

        Args:
            atoms: All atoms of the structure
            metal_index: Position of the metal in ``atoms``
            coordinating_indices: Positions of the coordinating atoms
            progress_callback: Receives optimizer progress
            cancel_event: Stops the analysis, keeping results gathered so far
            result_callback: Called as each reference geometry finishes

        Returns:
            CoordinationAnalysis with ligand groups, pattern, ranking and the
            quality metrics of the best geometry

        Raises:
            CoordinationSphereError: If the sphere is unusable
        """
        validate_coordination_sphere(atoms, metal_index, coordinating_indices)

        with Timer("coordination analysis") as timer:
            groups = self.ring_detector.detect(atoms, metal_index, coordinating_indices)
            detection = self.pattern_detector.detect(groups)
            plan = self.geometry_builder.build(detection, groups)
            label = detection.pattern_type.value

            ranking = self.shape_service.rank(
                plan.points,
                plan.references,
                progress_callback=progress_callback,
                cancel_event=cancel_event,
                result_callback=result_callback,
                pattern=label,
            )
            comparison = None
            if plan.comparison_references and not ranking.cancelled:
                comparison = self.shape_service.rank(
                    plan.points,
                    plan.comparison_references,
                    progress_callback=progress_callback,
                    cancel_event=cancel_event,
                    result_callback=result_callback,
                    pattern=label,
                )
            quality = self._quality(plan, ranking)

        metal = atoms[metal_index]
        if detection.pattern_type is not PatternType.GENERAL:
            self.logger.info(
                "%s%d: %s pattern reduces %d atoms to %d sites",
                metal.element,
                metal_index,
                label,
                len(coordinating_indices),
                plan.coordination_number,
            )

        return CoordinationAnalysis(
            metal_index=metal_index,
            metal_element=metal.element,
            mode=self.settings.mode,
            ligand_groups=groups,
            detection=detection,
            plan=plan,
            ranking=ranking,
            comparison=comparison,
            elapsed_seconds=timer.elapsed(),
            quality=quality,
        )

    @staticmethod
    def _quality(plan: GeometryPlan, ranking: GeometryRanking) -> Optional[QualityMetrics]:
        best = ranking.best
        if best is None:
            return None
        reference = next(
            geometry for geometry in plan.references if geometry.code == best.geometry_code
        )
        return calculate_quality_metrics(plan.points, reference.coordinates, best.measure)
