"""
Lightweight word and guess validation.

This module answers two questions:
  - "Is this a playable word?"  (non-empty, lowercase a–z only)
  - "Is this guess acceptable right now?"  (one lowercase letter, not yet guessed)

Validation is a loader/harness concern: the matching and filtering code
assumes its inputs already passed these checks and does not re-check them.
"""

from __future__ import annotations

from .errors import InvalidWordError

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_ALPHABET_SET = frozenset(ALPHABET)


def is_valid_word(word) -> bool:
    """
    Return True if `word` is a non-empty string of lowercase ASCII letters.

    Notes:
      - str.isalpha() accepts non-ASCII letters ('é'), so membership in the
        a–z set is checked explicitly.
    """
    if not isinstance(word, str) or not word:
        return False
    return all(ch in _ALPHABET_SET for ch in word)


def validate_word(word, line: int | None = None) -> str:
    """Return `word` unchanged, or raise InvalidWordError."""
    if not is_valid_word(word):
        raise InvalidWordError(word, line=line)
    return word


def validate_guess(letter, state) -> bool:
    """
    Return True if `letter` is a single lowercase letter that has not been
    guessed yet in `state` (anything exposing a `guessed` set).
    """
    if not isinstance(letter, str) or len(letter) != 1:
        return False
    if letter not in _ALPHABET_SET:
        return False
    return letter not in state.guessed
