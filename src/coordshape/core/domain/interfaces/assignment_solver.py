"""Interface for point correspondence (linear assignment) strategies."""

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np


class AssignmentSolver(ABC):
    """Abstract base class for square linear assignment strategies."""

    @abstractmethod
    def solve(self, cost: np.ndarray) -> List[Tuple[int, int]]:
        """
        Pair every row with a distinct column.

        Args:
            cost: Square (N, N) matrix of non-negative pairing costs

        Returns:
            (row, column) pairs sorted by row, forming a bijection
        """
        pass
