"""Greedy nearest-available-pair assignment."""

from typing import List, Tuple

import numpy as np

from ..interfaces.assignment_solver import AssignmentSolver


class GreedyAssignmentSolver(AssignmentSolver):
    """Repeatedly take the cheapest pair whose row and column are both free."""

    def solve(self, cost: np.ndarray) -> List[Tuple[int, int]]:
        cost = _square(cost)
        n = cost.shape[0]
        used_rows = np.zeros(n, dtype=bool)
        used_cols = np.zeros(n, dtype=bool)
        pairs = []

        for flat in np.argsort(cost, axis=None, kind="stable"):
            row, col = divmod(int(flat), n)
            if used_rows[row] or used_cols[col]:
                continue
            used_rows[row] = True
            used_cols[col] = True
            pairs.append((row, col))
            if len(pairs) == n:
                break

        return sorted(pairs)


def _square(cost: np.ndarray) -> np.ndarray:
    cost = np.asarray(cost, dtype=float)
    if cost.ndim != 2 or cost.shape[0] != cost.shape[1]:
        raise ValueError(f"Assignment needs a square cost matrix, got {cost.shape}")
    return cost
