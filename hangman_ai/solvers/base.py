from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Dict, Sequence, Type

from hangman_ai.datasets import Dictionary, letter_frequency_order, validate_order

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Read-only data shared by every game of a run ----
@dataclass(frozen=True)
class SolverContext:
    dictionary: Dictionary
    frequency_order: str


def build_context(dictionary: Dictionary, frequency_order: str | None = None) -> SolverContext:
    """
    Build the per-run context once. Without an explicit order, the static
    frequency table is computed from the dictionary itself.
    """
    if frequency_order is None:
        frequency_order = letter_frequency_order(dictionary)
    return SolverContext(dictionary=dictionary, frequency_order=validate_order(frequency_order))


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 0
        self.context: SolverContext | None = None
        self.rng = random.Random()

    def reset(self, *, context: SolverContext, N: int, seed: int | None = None) -> None:
        """Start a new game of length N."""
        self.context = context
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_letter(self, state, context: SolverContext) -> str:
        raise NotImplementedError("Override in subclass")

    def observe(self, letter: str, positions: Sequence[int]) -> None:
        """Feedback after each guess; positions is empty for a miss."""
