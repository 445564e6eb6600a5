"""Exact assignment backed by SciPy."""

from typing import List, Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment

from ..interfaces.assignment_solver import AssignmentSolver
from .greedy_solver import _square


class ExactAssignmentSolver(AssignmentSolver):
    """Globally optimal assignment (Jonker-Volgenant via SciPy)."""

    def solve(self, cost: np.ndarray) -> List[Tuple[int, int]]:
        rows, cols = linear_sum_assignment(_square(cost))
        return sorted(zip(rows.tolist(), cols.tolist()))
