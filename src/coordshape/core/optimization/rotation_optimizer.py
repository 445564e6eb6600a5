"""Staged global search over rotations for the continuous shape measure."""

import logging
import threading
from dataclasses import dataclass
from itertools import product
from typing import Callable, Optional

import numpy as np

from ..domain.implementations import create_solver
from ..domain.models.shape_result import OptimizationProgress, ShapeResult
from ..exceptions import DegenerateInputError, InvalidReferenceError, SizeMismatchError
from ..utils.kabsch import kabsch_rotation
from ..utils.linalg import axis_angle_matrix, euler_xyz_matrix, random_unit_vector
from .evaluator import Candidate, aligned_coordinates, evaluate_rotation, normalize_points
from .settings import OptimizerSettings

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[OptimizationProgress], None]

_Q = np.pi / 4
_H = np.pi / 2
_T = np.pi / 3

# Intrinsic XYZ Euler triples tried before the grid search
KEY_ORIENTATIONS = (
    (0.0, 0.0, 0.0),
    (_H, 0.0, 0.0),
    (0.0, _H, 0.0),
    (0.0, 0.0, _H),
    (np.pi, 0.0, 0.0),
    (0.0, np.pi, 0.0),
    (0.0, 0.0, np.pi),
    (_H, _H, 0.0),
    (_H, 0.0, _H),
    (0.0, _H, _H),
    (_Q, 0.0, 0.0),
    (0.0, _Q, 0.0),
    (0.0, 0.0, _Q),
    (_Q, _Q, 0.0),
    (_Q, 0.0, _Q),
    (0.0, _Q, _Q),
    (_Q, _Q, _Q),
    (_T, _T, _T),
)


@dataclass(frozen=True, eq=False)
class _Problem:
    actual: np.ndarray
    reference: np.ndarray
    name: str


def _normalize_reference(reference: np.ndarray, name: str) -> np.ndarray:
    try:
        return normalize_points(reference)
    except DegenerateInputError as e:
        label = name or "Reference geometry"
        raise InvalidReferenceError(f"{label} has a vertex at its center") from e


class RotationOptimizer:
    """
    Find the rotation minimizing the shape measure between two point sets.

    The search runs a Kabsch seed, a fixed set of key orientations, a coarse
    Euler grid, simulated annealing with restarts and a final hill-climbing
    refinement. Any stage may end the search early once the incumbent is
    good enough. A closing Kabsch polish on the best correspondence brings
    a correct pairing to its exact optimal rotation.

    All randomness comes from ``rng`` (by default seeded from the settings),
    so a fixed seed reproduces a run exactly.
    """

    def __init__(
        self,
        settings: Optional[OptimizerSettings] = None,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.settings = settings or OptimizerSettings()
        self.solver = create_solver(self.settings.solver)
        self.progress_callback = progress_callback
        self.cancel_event = cancel_event
        self.rng = rng if rng is not None else self.settings.create_rng()

    def optimize(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        geometry_name: str = "",
        geometry_code: str = "",
    ) -> ShapeResult:
        """
        Run the staged search.

        Args:
            actual: (N, 3) observed points relative to the metal center
            reference: (N, 3) ideal points relative to the polyhedron center
            geometry_name: Reference name used in results and progress
            geometry_code: Reference code stored on the result

        Returns:
            Best ShapeResult found; ``cancelled`` is set when the search was
            interrupted through the cancel event

        Raises:
            SizeMismatchError: If the two sets differ in length
            DegenerateInputError: If an actual point sits on the metal center
            InvalidReferenceError: If a reference vertex sits on its center
        """
        actual = np.asarray(actual, dtype=float).reshape(-1, 3)
        reference = np.asarray(reference, dtype=float).reshape(-1, 3)
        if len(actual) != len(reference):
            raise SizeMismatchError(len(actual), len(reference), geometry_name)

        problem = _Problem(
            actual=normalize_points(actual),
            reference=_normalize_reference(reference, geometry_name),
            name=geometry_name,
        )
        s = self.settings
        stages = (
            (self._kabsch_seed, s.stop_after_key_orientations),
            (self._key_orientations, s.stop_after_key_orientations),
            (self._grid_search, s.stop_after_grid),
            (self._anneal, s.stop_after_annealing),
            (self._refine, None),
        )

        best = None
        for stage, stop_below in stages:
            best = stage(problem, best)
            if self._cancelled():
                break
            if stop_below is not None and best.measure < stop_below:
                logger.debug(
                    "%s: stopping after %s at %.6f",
                    geometry_name,
                    stage.__name__.lstrip("_"),
                    best.measure,
                )
                break

        cancelled = self._cancelled()
        if not cancelled:
            best = self._polish(problem, best)
            self._report("complete", 1.0, best, problem)

        logger.debug("%s: CShM %.6f", geometry_name, best.measure)
        return ShapeResult(
            geometry_name=geometry_name,
            geometry_code=geometry_code,
            measure=best.measure,
            rotation=best.rotation,
            correspondence=best.correspondence,
            aligned_coordinates=aligned_coordinates(
                problem.actual, best.rotation, best.correspondence
            ),
            cancelled=cancelled,
        )

    def _evaluate(self, problem: _Problem, rotation: np.ndarray) -> Candidate:
        return evaluate_rotation(problem.actual, problem.reference, rotation, self.solver)

    def _kabsch_seed(self, problem: _Problem, best: Optional[Candidate]) -> Candidate:
        identity = self._evaluate(problem, np.eye(3))
        rows = [i for i, _ in identity.correspondence]
        cols = [j for _, j in identity.correspondence]
        rotation = kabsch_rotation(problem.actual[rows], problem.reference[cols])
        seeded = self._evaluate(problem, rotation)
        best = seeded if seeded.measure < identity.measure else identity
        self._report("kabsch_seed", 0.02, best, problem)
        return best

    def _key_orientations(self, problem: _Problem, best: Candidate) -> Candidate:
        total = len(KEY_ORIENTATIONS)
        for index, angles in enumerate(KEY_ORIENTATIONS, start=1):
            if self._cancelled():
                break
            candidate = self._evaluate(problem, euler_xyz_matrix(angles))
            if candidate.measure < best.measure:
                best = candidate
            self._report("key_orientations", 0.02 + 0.08 * index / total, best, problem)
        return best

    def _grid_search(self, problem: _Problem, best: Candidate) -> Candidate:
        s = self.settings
        angle_step = 2.0 * np.pi / s.grid_steps
        indices = range(0, s.grid_steps, s.grid_stride)
        total = len(indices) ** 3

        for count, (i, j, k) in enumerate(product(indices, repeat=3), start=1):
            if self._cancelled():
                break
            rotation = euler_xyz_matrix((i * angle_step, j * angle_step, k * angle_step))
            candidate = self._evaluate(problem, rotation)
            if candidate.measure < best.measure:
                best = candidate
            if count % s.grid_report_interval == 0:
                self._report("grid_search", 0.10 + 0.20 * count / total, best, problem)
        return best

    def _anneal(self, problem: _Problem, best: Candidate) -> Candidate:
        s = self.settings
        alpha = (s.min_temperature / s.initial_temperature) ** (1.0 / max(s.steps_per_run, 1))

        for restart in range(s.restarts):
            if self._cancelled():
                break

            if restart == 0:
                current = best
            elif restart < s.restarts / 2:
                angle = (self.rng.random() - 0.5) * np.pi
                kick = axis_angle_matrix(random_unit_vector(self.rng), angle)
                current = self._evaluate(problem, kick @ best.rotation)
            else:
                angles = self.rng.random(3) * 2.0 * np.pi
                current = self._evaluate(problem, euler_xyz_matrix(angles))

            run_best = current
            temperature = s.initial_temperature
            for _ in range(s.steps_per_run):
                if self._cancelled():
                    break
                step_size = (
                    temperature
                    * s.step_size_factor
                    * (1.0 + s.step_size_randomness * self.rng.random())
                )
                angle = (self.rng.random() - 0.5) * 2.0 * step_size
                move = axis_angle_matrix(random_unit_vector(self.rng), angle)
                candidate = self._evaluate(problem, move @ current.rotation)

                delta = candidate.measure - current.measure
                if delta < 0 or self.rng.random() < np.exp(-delta / temperature):
                    current = candidate
                if current.measure < run_best.measure:
                    run_best = current
                if run_best.measure < s.stop_annealing_run:
                    break
                temperature *= alpha

            if run_best.measure < best.measure:
                best = run_best
            self._report("annealing", 0.30 + 0.55 * (restart + 1) / s.restarts, best, problem)
            if best.measure < s.stop_after_annealing:
                break
        return best

    def _refine(self, problem: _Problem, best: Candidate) -> Candidate:
        s = self.settings
        temperature = s.refinement_temperature
        stale_steps = 0

        for step in range(1, s.refinement_steps + 1):
            if self._cancelled():
                break
            angle = (self.rng.random() - 0.5) * 2.0 * temperature * s.refinement_step_factor
            move = axis_angle_matrix(random_unit_vector(self.rng), angle)
            candidate = self._evaluate(problem, move @ best.rotation)

            if candidate.measure < best.measure:
                best = candidate
                stale_steps = 0
            else:
                stale_steps += 1
            temperature *= s.refinement_decay

            if step % s.refinement_report_interval == 0:
                self._report(
                    "refinement", 0.85 + 0.14 * step / s.refinement_steps, best, problem
                )
            if stale_steps > s.no_improvement_limit and best.measure < s.stop_refinement:
                break
        return best

    def _polish(self, problem: _Problem, best: Candidate) -> Candidate:
        for _ in range(self.settings.polish_rounds):
            rows = [i for i, _ in best.correspondence]
            cols = [j for _, j in best.correspondence]
            rotation = kabsch_rotation(
                problem.actual[rows], problem.reference[cols], center=False
            )
            candidate = self._evaluate(problem, rotation)
            if candidate.measure >= best.measure:
                break
            best = candidate
        return best

    def _cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def _report(
        self, stage: str, fraction: float, best: Candidate, problem: _Problem
    ) -> None:
        if self.progress_callback is None:
            return
        if stage != "complete":
            fraction = min(fraction, 0.99)
        self.progress_callback(
            OptimizationProgress(
                stage=stage,
                fraction=fraction,
                best_measure=best.measure,
                geometry_name=problem.name,
            )
        )


def calculate_shape_measure(
    actual: np.ndarray,
    reference: np.ndarray,
    settings: Optional[OptimizerSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
    geometry_name: str = "",
) -> ShapeResult:
    """Shape measure of ``actual`` against ``reference`` with a fresh optimizer."""
    optimizer = RotationOptimizer(settings, progress_callback, cancel_event)
    return optimizer.optimize(actual, reference, geometry_name=geometry_name)
