"""Reduced-cost (Hungarian-style) assignment with a greedy fallback."""

import logging
from itertools import permutations
from typing import List, Optional, Set, Tuple

import numpy as np

from ..interfaces.assignment_solver import AssignmentSolver
from .greedy_solver import GreedyAssignmentSolver, _square

logger = logging.getLogger(__name__)

EXHAUSTIVE_LIMIT = 3


class HungarianAssignmentSolver(AssignmentSolver):
    """
    Default correspondence solver used by the shape optimizer.

    Up to three points every permutation is enumerated. Larger problems are
    row and column reduced and then matched over the zero cells of the
    reduced matrix. A perfect zero matching is optimal; when none exists
    the solver does not continue with the full Hungarian cover adjustment
    but falls back to greedy matching over the original costs. That
    approximation is accepted because the optimizer re-evaluates thousands
    of nearby rotations, most of which reduce cleanly.
    """

    def __init__(self, zero_tolerance: float = 1e-12):
        self.zero_tolerance = zero_tolerance
        self._fallback = GreedyAssignmentSolver()

    def solve(self, cost: np.ndarray) -> List[Tuple[int, int]]:
        cost = _square(cost)
        n = cost.shape[0]
        if n == 0:
            return []
        if n <= EXHAUSTIVE_LIMIT:
            return self._exhaustive(cost)

        reduced = cost - cost.min(axis=1, keepdims=True)
        reduced = reduced - reduced.min(axis=0, keepdims=True)
        matching = self._match_zeros(reduced <= self.zero_tolerance)

        if matching is None:
            logger.debug("No perfect zero matching for %dx%d costs; using greedy", n, n)
            return self._fallback.solve(cost)
        return matching

    @staticmethod
    def _exhaustive(cost: np.ndarray) -> List[Tuple[int, int]]:
        n = cost.shape[0]
        rows = np.arange(n)
        best = min(permutations(range(n)), key=lambda perm: cost[rows, list(perm)].sum())
        return list(zip(range(n), best))

    def _match_zeros(self, zeros: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """Maximum matching over zero cells, or None when it is not perfect."""
        n = zeros.shape[0]
        owner = [-1] * n

        for row in sorted(range(n), key=lambda r: int(zeros[r].sum())):
            if not self._augment(row, zeros, owner, set()):
                return None

        return sorted((row, col) for col, row in enumerate(owner))

    def _augment(
        self, row: int, zeros: np.ndarray, owner: List[int], visited: Set[int]
    ) -> bool:
        for col in np.flatnonzero(zeros[row]):
            col = int(col)
            if col in visited:
                continue
            visited.add(col)
            if owner[col] < 0 or self._augment(owner[col], zeros, owner, visited):
                owner[col] = row
                return True
        return False
