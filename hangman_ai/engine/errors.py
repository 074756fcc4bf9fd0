"""
Exception types shared by the engine, datasets and harness layers.

All of them derive from ValueError so callers that only care about "bad
input" can catch a single builtin type.
"""

from __future__ import annotations


class HangmanError(ValueError):
    """Base class for every precondition failure raised by hangmanAI."""


class EmptyDictionaryError(HangmanError):
    def __init__(self, message: str = "dictionary contains 0 words"):
        super().__init__(message)


class InvalidWordError(HangmanError):
    """A word is empty or contains characters outside a-z."""

    def __init__(self, word: str, line: int | None = None):
        self.word = word
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"invalid word{where}: {word!r} (expected lowercase a-z only)")


class InvalidGuessError(HangmanError):
    """A solver proposed something other than a fresh lowercase letter."""

    def __init__(self, letter, reason: str):
        self.letter = letter
        self.reason = reason
        super().__init__(f"invalid guess {letter!r}: {reason}")
