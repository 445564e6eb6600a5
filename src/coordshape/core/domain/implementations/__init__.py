"""Concrete assignment strategies."""

from ..interfaces.assignment_solver import AssignmentSolver
from .exact_solver import ExactAssignmentSolver
from .greedy_solver import GreedyAssignmentSolver
from .hungarian_solver import HungarianAssignmentSolver

SOLVERS = {
    "hungarian": HungarianAssignmentSolver,
    "greedy": GreedyAssignmentSolver,
    "exact": ExactAssignmentSolver,
}


def create_solver(name: str) -> AssignmentSolver:
    """Instantiate an assignment strategy by name."""
    try:
        return SOLVERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown assignment solver '{name}'. Choose from {sorted(SOLVERS)}"
        ) from None


__all__ = [
    "ExactAssignmentSolver",
    "GreedyAssignmentSolver",
    "HungarianAssignmentSolver",
    "SOLVERS",
    "create_solver",
]
