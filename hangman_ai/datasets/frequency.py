"""
Static letter-frequency ordering for the frequency solver.

The order is computed ONCE per run (independent of any game state) by
counting every letter occurrence across all words, then passed explicitly
to each game. Ties are broken alphabetically and letters that never occur
are appended alphabetically, so the result is always a full permutation
of a–z.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from hangman_ai.engine import ALPHABET

# Computed from /usr/share/dict/words; close to the commonly quoted
# "eianorstlcudpmhgybfvkwzxqj".
REFERENCE_ORDER = "eiaorntslcupmdhygbfvkwzxqj"


def letter_counts(words: Iterable[str]) -> Counter:
    counts: Counter = Counter()
    for w in words:
        counts.update(w)
    return counts


def letter_frequency_order(words: Iterable[str]) -> str:
    counts = letter_counts(words)
    return "".join(sorted(ALPHABET, key=lambda ch: (-counts[ch], ch)))


def validate_order(order: str) -> str:
    """Return `order` if it is a permutation of a–z, else raise ValueError."""
    if not isinstance(order, str) or len(order) != len(ALPHABET) or set(order) != set(ALPHABET):
        raise ValueError(f"frequency order must be a permutation of {ALPHABET!r}; got {order!r}")
    return order
