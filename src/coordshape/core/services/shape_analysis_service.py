"""Service ranking reference geometries by continuous shape measure."""

import logging
import threading
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import replace
from typing import Callable, Optional, Sequence

import numpy as np

from ..domain.models.reference_geometry import ReferenceGeometry
from ..domain.models.shape_result import GeometryRanking, ShapeResult, SkippedGeometry
from ..exceptions import ShapeAnalysisError
from ..optimization.evaluator import normalize_points
from ..optimization.rotation_optimizer import ProgressCallback, RotationOptimizer
from ..optimization.settings import OptimizerSettings
from ..utils.benchmarking import Timer, TimingStats

ResultCallback = Callable[[ReferenceGeometry, Optional[ShapeResult]], None]


def _evaluate_reference(
    actual: np.ndarray, reference: ReferenceGeometry, settings: OptimizerSettings
) -> ShapeResult:
    """Worker entry point for process pools."""
    optimizer = RotationOptimizer(settings)
    return optimizer.optimize(actual, reference.coordinates, reference.name, reference.code)


class ShapeAnalysisService:
    """Service for measuring a point set against reference geometries."""

    def __init__(self, settings: Optional[OptimizerSettings] = None, max_workers: int = 1):
        """
        Initialize service.

        Args:
            settings: Optimizer configuration; default mode when omitted
            max_workers: Worker processes for ranking. Values above 1 fan
                out over references; progress callbacks and cancellation
                only apply to the in-process path.
        """
        self.settings = settings or OptimizerSettings.from_mode("default")
        self.max_workers = max_workers
        self.logger = logging.getLogger(__name__)

    def evaluate(
        self,
        actual: np.ndarray,
        reference: ReferenceGeometry,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ShapeResult:
        """
        Shape measure of ``actual`` against one reference geometry.

        Every call draws from a fresh generator seeded by the settings, so
        a result does not depend on which other references were evaluated.
        """
        optimizer = RotationOptimizer(self.settings, progress_callback, cancel_event)
        return optimizer.optimize(actual, reference.coordinates, reference.name, reference.code)

    def rank(
        self,
        actual: np.ndarray,
        references: Sequence[ReferenceGeometry],
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        result_callback: Optional[ResultCallback] = None,
        pattern: Optional[str] = None,
    ) -> GeometryRanking:
        """
        Evaluate every reference and order the results by measure.

        A reference that cannot be evaluated (wrong size, vertex at its
        center) is recorded as skipped and the remaining references are
        still evaluated.

        Args:
            actual: (N, 3) metal-relative points
            references: Candidate reference geometries
            progress_callback: Receives optimizer progress per reference
            cancel_event: Stops the current search and any further references
            result_callback: Called with each reference and its result
                (None when skipped) as soon as it is available
            pattern: Pattern label stored on every result

        Returns:
            GeometryRanking sorted by ascending measure

        Raises:
            DegenerateInputError: If a point sits on the metal center
        """
        actual = np.asarray(actual, dtype=float).reshape(-1, 3)
        normalize_points(actual)

        if not references:
            self.logger.warning("No reference geometries for CN=%d", len(actual))
            return GeometryRanking()

        with Timer("ranking") as timer:
            if self.max_workers > 1:
                ranking = self._rank_parallel(actual, references, result_callback)
            else:
                ranking = self._rank_sequential(
                    actual, references, progress_callback, cancel_event, result_callback
                )

        if pattern is not None:
            ranking.results = [replace(result, pattern=pattern) for result in ranking.results]
        if ranking.best is not None:
            self.logger.info(
                "Ranked %d geometries in %.2fs; best %s (%.4f)",
                len(ranking),
                timer.elapsed(),
                ranking.best.geometry_name,
                ranking.best.measure,
            )
        return ranking

    def _rank_sequential(
        self, actual, references, progress_callback, cancel_event, result_callback
    ) -> GeometryRanking:
        results, skipped = [], []
        stats = TimingStats("shape optimization")
        cancelled = False

        for reference in references:
            if cancel_event is not None and cancel_event.is_set():
                cancelled = True
                break
            try:
                with Timer(reference.code) as timer:
                    result = self.evaluate(actual, reference, progress_callback, cancel_event)
            except ShapeAnalysisError as e:
                self.logger.warning("Skipping %s: %s", reference.name, e)
                skipped.append(SkippedGeometry(reference.name, str(e)))
                result = None
            else:
                stats.add_timing(timer.elapsed())
                results.append(result)
                cancelled = cancelled or result.cancelled
            if result_callback is not None:
                result_callback(reference, result)

        self.logger.debug("%s", stats)
        return GeometryRanking(results=results, skipped=skipped, cancelled=cancelled)

    def _rank_parallel(self, actual, references, result_callback) -> GeometryRanking:
        results, skipped = [], []

        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(_evaluate_reference, actual, reference, self.settings): reference
                for reference in references
            }
            for future in as_completed(futures):
                reference = futures[future]
                try:
                    result = future.result()
                except ShapeAnalysisError as e:
                    self.logger.warning("Skipping %s: %s", reference.name, e)
                    skipped.append(SkippedGeometry(reference.name, str(e)))
                    result = None
                else:
                    results.append(result)
                if result_callback is not None:
                    result_callback(reference, result)

        return GeometryRanking(results=results, skipped=skipped)
