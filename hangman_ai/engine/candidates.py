"""
Array-backed candidate sets for the coverage solver.

A LengthBucket holds every dictionary word of one length as two numpy
matrices built once per run:
  - codes     (n_words, N) uint8: letter index 0..25 at each position
  - presence  (n_words, 26) bool: does the word contain letter k at all

A CandidateSet is a view over a bucket (an index array). Narrowing by a
reveal and counting per-letter coverage are then vectorised, which keeps
the whole-dictionary benchmark fast enough for large word lists.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .validation import ALPHABET

_BASE = ord("a")


class LengthBucket:
    def __init__(self, words: Sequence[str], N: int):
        self.N = int(N)
        self.words = tuple(words)
        n = len(self.words)

        raw = "".join(self.words).encode("ascii")
        self.codes = (np.frombuffer(raw, dtype=np.uint8).reshape(n, self.N) - _BASE).astype(np.uint8)

        self.presence = np.zeros((n, len(ALPHABET)), dtype=bool)
        if n:
            rows = np.repeat(np.arange(n), self.N)
            self.presence[rows, self.codes.ravel()] = True

    def __len__(self) -> int:
        return len(self.words)


class CandidateSet:
    """Words of one length still consistent with the reveals applied so far."""

    def __init__(self, bucket: LengthBucket, index: np.ndarray | None = None):
        self.bucket = bucket
        self.index = np.arange(len(bucket)) if index is None else index

    def __len__(self) -> int:
        return int(self.index.size)

    @property
    def words(self) -> List[str]:
        ws = self.bucket.words
        return [ws[i] for i in self.index]

    def narrow(self, letter: str, positions: Sequence[int]) -> "CandidateSet":
        """
        Return the subset holding `letter` at exactly `positions`
        (no occurrence at all when `positions` is empty).
        """
        code = ord(letter) - _BASE
        expected = np.zeros(self.bucket.N, dtype=bool)
        expected[list(positions)] = True

        sub = self.bucket.codes[self.index]
        keep = ((sub == code) == expected).all(axis=1)
        return CandidateSet(self.bucket, self.index[keep])

    def coverage(self) -> np.ndarray:
        """Per-letter count of candidates containing that letter (length 26)."""
        return self.bucket.presence[self.index].sum(axis=0)
