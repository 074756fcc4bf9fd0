from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, SolverContext, build_context, register

from . import random_letter  # noqa: F401
from . import letter_freq  # noqa: F401
from . import coverage  # noqa: F401

# Report order of a full run: baseline first, best last.
DEFAULT_SOLVERS = ("random", "frequency", "optimal")


def create_solver(solver_id: str) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
