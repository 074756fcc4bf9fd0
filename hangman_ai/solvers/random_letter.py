"""
Random Letter solver.

Strategy:
  - Pick uniformly at random among the letters not guessed yet.
  - Ignores the dictionary and every reveal: the baseline every other
    solver should beat.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng,
    reseeded per game by the harness).
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class RandomLetterSolver(BaseSolver):
    id = "random"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state, context) -> str:
        # state.unguessed is alphabetical, so a given seed always maps to the same letter
        return self.rng.choice(state.unguessed)
