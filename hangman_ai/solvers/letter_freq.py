"""
Letter-Frequency solver (static order).

Idea:
  - Guess letters in one fixed order: most frequent letter across the whole
    dictionary first. The order is computed once per run (see
    SolverContext.frequency_order) and never looks at the current game.

Notes:
  - Fully deterministic: same dictionary and target -> same guess sequence.
"""

from __future__ import annotations

from hangman_ai.engine import InvalidGuessError
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "frequency"
    name = "Letter Frequency (static)"
    version = "1.0.0"

    def next_letter(self, state, context) -> str:
        guessed = state.guessed
        for ch in context.frequency_order:
            if ch not in guessed:
                return ch
        raise InvalidGuessError("", "frequency order exhausted")
