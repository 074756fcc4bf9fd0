from .errors import HangmanError, EmptyDictionaryError, InvalidWordError, InvalidGuessError
from .validation import ALPHABET, is_valid_word, validate_word, validate_guess
from .matching import is_consistent, positions_of, matches_reveal
from .state import GameState, GameStatus, new_game
from .constraints import filter_candidates, narrow_candidates
from .candidates import CandidateSet, LengthBucket

__all__ = [
    "ALPHABET",
    "HangmanError", "EmptyDictionaryError", "InvalidWordError", "InvalidGuessError",
    "is_valid_word", "validate_word", "validate_guess",
    "is_consistent", "positions_of", "matches_reveal",
    "GameState", "GameStatus", "new_game",
    "filter_candidates", "narrow_candidates",
    "CandidateSet", "LengthBucket",
]
