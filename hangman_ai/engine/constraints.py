"""
Candidate filtering given the reveals of the current game.

Given:
  - a pool of words (usually the whole dictionary)
  - the current GameState (correct letters with positions, wrong letters)

Return:
  - the words that are consistent with ALL reveals seen so far.

Two forms that must always agree:
  - filter_candidates:  recompute from scratch over the full pool.
  - narrow_candidates:  apply ONE new reveal to the previous candidate list.
Folding narrow_candidates over a game's history, starting from the words of
the disclosed length, yields exactly filter_candidates(pool, state).

These list-based functions are the reference checks. The coverage solver
narrows an array-backed CandidateSet instead and, under DEBUG logging,
verifies it against filter_candidates on every turn.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .matching import is_consistent, matches_reveal


def filter_candidates(words: Iterable[str], state) -> List[str]:
    """
    Keep only words of the target's length that agree with every reveal.

    Args:
      words : iterable of candidate words (order preserved)
      state : GameState (uses length, correct, wrong; never the target itself)

    Returns:
      List[str] of consistent candidates.
    """
    N = state.length
    correct = state.correct
    excluded = state.wrong
    return [w for w in words if is_consistent(w, N, correct, excluded)]


def narrow_candidates(candidates: Iterable[str], letter: str,
                      positions: Sequence[int]) -> List[str]:
    """
    Apply a single reveal to an already-filtered candidate list.

    `positions` empty means the letter was a miss.
    """
    return [w for w in candidates if matches_reveal(w, letter, positions)]
