"""
Pattern matching for Hangman: is a candidate word still possible?

A Hangman reveal is exhaustive for the letters it names: guessing 'a' on
"banana" shows every 'a' (positions 1, 3, 5). So a candidate survives iff

  - it has the target's length,
  - it contains none of the letters guessed incorrectly,
  - for each correctly guessed letter, the candidate holds that letter at
    exactly the revealed positions and at no other position.

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping, Sequence, Tuple

Positions = Tuple[int, ...]


def positions_of(word: str, letter: str) -> Positions:
    """Indices of every occurrence of `letter` in `word` (ascending)."""
    return tuple(i for i, ch in enumerate(word) if ch == letter)


def matches_reveal(word: str, letter: str, positions: Sequence[int]) -> bool:
    """
    True if `letter` occurs in `word` at exactly `positions` and nowhere else.

    An empty `positions` means "the letter was a miss": the word must not
    contain it at all.
    """
    if not positions:
        return letter not in word
    expected = set(positions)
    for i, ch in enumerate(word):
        if (ch == letter) != (i in expected):
            return False
    return True


def is_consistent(
        candidate: str,
        N: int,
        correct: Mapping[str, Sequence[int]],
        excluded: AbstractSet[str],
) -> bool:
    """
    Decide whether `candidate` agrees with everything revealed so far.

    Args:
      candidate : dictionary word under test
      N         : target word length (disclosed at game start)
      correct   : letter -> positions revealed for each correct guess
      excluded  : letters guessed incorrectly

    Returns:
      True if the candidate could still be the target.
    """
    if len(candidate) != N:
        return False

    # Misses: cheapest check, usually rejects most words early in a game
    for ch in candidate:
        if ch in excluded:
            return False

    for letter, positions in correct.items():
        if not matches_reveal(candidate, letter, positions):
            return False

    return True
