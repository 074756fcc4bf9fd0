"""
Coverage solver (the "optimal" greedy strategy).

Idea:
  - Keep the set of dictionary words still consistent with every reveal
    (same length as the target, right letters at exactly the right places,
    no missed letters).
  - Guess the unguessed letter contained in the MOST candidates.

Why it works:
  - Under a uniform prior over candidates this letter is the one most likely
    to be a hit, and whichever way the reveal goes the candidate set shrinks.
  - Once one candidate is left, every remaining pick is one of its letters,
    so no further misses are possible.

Tie-break:
  - Alphabetical (first max in a–z order), so runs are reproducible.

Notes:
  - Candidates are narrowed incrementally in observe(); the set is never
    rebuilt from the full dictionary during a game. With DEBUG logging on,
    each turn re-derives them with engine.filter_candidates and fails loudly
    on any difference.
  - A greedy heuristic, not a game-tree search: no optimality claim.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from hangman_ai.engine import ALPHABET, CandidateSet, filter_candidates
from .base import BaseSolver, SolverContext, register

logger = logging.getLogger(__name__)


@register
class CoverageSolver(BaseSolver):
    id = "optimal"
    name = "Max Candidate Coverage"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.candidates: CandidateSet | None = None

    def reset(self, *, context: SolverContext, N: int, seed: int | None = None) -> None:
        super().reset(context=context, N=N, seed=seed)
        # Length is disclosed at game start: seed with every word of length N
        self.candidates = CandidateSet(context.dictionary.bucket(self.N))

    def observe(self, letter: str, positions: Sequence[int]) -> None:
        self.candidates = self.candidates.narrow(letter, positions)

    def _check_candidates(self, state) -> None:
        """Recompute the candidates with the reference filter (DEBUG only)."""
        expected = filter_candidates(self.candidates.bucket.words, state)
        if expected != self.candidates.words:
            raise RuntimeError(
                f"candidate set for {state.pattern!r} drifted: "
                f"{len(self.candidates)} kept vs {len(expected)} consistent")
        logger.debug("%s: %d candidate(s) verified", state.pattern, len(expected))

    def next_letter(self, state, context) -> str:
        if logger.isEnabledFor(logging.DEBUG):
            self._check_candidates(state)

        counts = self.candidates.coverage().astype(np.int64)

        # Guessed letters can never win the argmax
        for ch in state.guessed:
            counts[ord(ch) - ord("a")] = -1

        # argmax returns the first maximum -> alphabetical tie-break.
        # An empty candidate set (target not in the dictionary) leaves all
        # unguessed letters at 0, so this degrades to alphabetical order.
        return ALPHABET[int(np.argmax(counts))]
