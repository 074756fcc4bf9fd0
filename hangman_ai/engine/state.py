"""
Per-game state for one simulated Hangman game.

Conventions:
  - The target's LENGTH is public from the first turn (standard Hangman:
    the guesser sees one blank per letter). Solvers may read `state.length`;
    they must not read `state.target`.
  - A letter is either correct (revealed at >= 1 position) or wrong, never
    both, and is never guessed twice.
  - There is no guess limit, so the only terminal status is WON. With 26
    letters and no repeats a game always ends within 26 guesses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set, Tuple

from .errors import InvalidGuessError
from .matching import Positions, positions_of
from .validation import ALPHABET, validate_guess, validate_word

MASK_CHAR = "_"


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass
class GameState:
    target: str
    correct: Dict[str, Positions] = field(default_factory=dict)
    wrong: Set[str] = field(default_factory=set)
    wrong_guesses: int = 0
    history: List[Tuple[str, Positions]] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.target)

    @property
    def guessed(self) -> Set[str]:
        return set(self.correct) | self.wrong

    @property
    def unguessed(self) -> List[str]:
        """Letters still available, in alphabetical order."""
        done = self.guessed
        return [ch for ch in ALPHABET if ch not in done]

    @property
    def revealed(self) -> int:
        """Number of positions uncovered so far."""
        return sum(len(p) for p in self.correct.values())

    @property
    def pattern(self) -> str:
        """Board as the guesser sees it, e.g. '_a_a_a' for banana after 'a'."""
        return "".join(ch if ch in self.correct else MASK_CHAR for ch in self.target)

    @property
    def status(self) -> GameStatus:
        if self.revealed == self.length:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    def apply(self, letter: str) -> Positions:
        """
        Play `letter` against the target.

        Returns:
          the positions where it occurs (empty tuple for a miss).

        Raises:
          InvalidGuessError if the letter is not a fresh lowercase letter or
          the game is already won.
        """
        if self.status is GameStatus.WON:
            raise InvalidGuessError(letter, "game is already won")
        if not validate_guess(letter, self):
            reason = "already guessed" if letter in self.guessed else "not a lowercase letter"
            raise InvalidGuessError(letter, reason)

        positions = positions_of(self.target, letter)
        if positions:
            self.correct[letter] = positions
        else:
            self.wrong.add(letter)
            self.wrong_guesses += 1
        self.history.append((letter, positions))
        return positions


def new_game(target: str) -> GameState:
    """Start a fresh game; the target must be a valid word."""
    return GameState(target=validate_word(target))
