"""Configuration for the global rotation search."""

from dataclasses import dataclass, replace
from typing import Dict, Optional

import numpy as np

# grid_steps, grid_stride, restarts, steps_per_run, refinement_steps
MODE_PRESETS: Dict[str, Dict[str, int]] = {
    "fast": dict(
        grid_steps=6, grid_stride=2, restarts=1, steps_per_run=100, refinement_steps=50
    ),
    "default": dict(
        grid_steps=18, grid_stride=3, restarts=6, steps_per_run=3000, refinement_steps=2000
    ),
    "intensive": dict(
        grid_steps=30, grid_stride=2, restarts=12, steps_per_run=8000, refinement_steps=6000
    ),
}


@dataclass(frozen=True)
class OptimizerSettings:
    """Iteration budgets, annealing schedule and stopping thresholds.

    Build instances with :meth:`from_mode`; individual fields can be
    overridden by keyword.
    """

    mode: str = "default"
    grid_steps: int = 18
    grid_stride: int = 3
    restarts: int = 6
    steps_per_run: int = 3000
    refinement_steps: int = 2000

    # Simulated annealing
    initial_temperature: float = 20.0
    min_temperature: float = 0.001
    step_size_factor: float = 0.12
    step_size_randomness: float = 0.2

    # Local refinement
    refinement_temperature: float = 3.0
    refinement_step_factor: float = 0.02
    refinement_decay: float = 0.999
    no_improvement_limit: int = 500
    polish_rounds: int = 20

    # Early termination thresholds
    stop_after_key_orientations: float = 0.01
    stop_after_grid: float = 0.05
    stop_annealing_run: float = 0.001
    stop_after_annealing: float = 0.01
    stop_refinement: float = 0.01

    grid_report_interval: int = 50
    refinement_report_interval: int = 500

    solver: str = "hungarian"
    seed: Optional[int] = None

    @classmethod
    def from_mode(cls, mode: str = "default", **overrides) -> "OptimizerSettings":
        try:
            preset = MODE_PRESETS[mode]
        except KeyError:
            raise ValueError(
                f"Unknown analysis mode '{mode}'. Choose from {sorted(MODE_PRESETS)}"
            ) from None
        values = dict(preset)
        values.update(overrides)
        return cls(mode=mode, **values)

    def with_seed(self, seed: Optional[int]) -> "OptimizerSettings":
        return replace(self, seed=seed)

    def create_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
