"""
The word dictionary shared read-only by every simulated game.

Loading rules (one word per line):
  - surrounding whitespace is stripped; blank lines are skipped
  - each word must be lowercase a–z (see engine.validation)
      strict=True   -> the first bad word raises InvalidWordError (with line no.)
      strict=False  -> bad words are dropped and counted in `rejected`
  - duplicates are removed, keeping the first occurrence; the number dropped
    is kept in `duplicates` so reports can mention it

Words are grouped by length on demand (`bucket(n)`) for the array-backed
candidate sets; buckets are cached because every game of a run reuses them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from hangman_ai.engine import (
    EmptyDictionaryError,
    LengthBucket,
    is_valid_word,
    validate_word,
)
from .io import read_lines

logger = logging.getLogger(__name__)


class Dictionary:
    def __init__(self, words: Iterable[str], *, rejected: int = 0, duplicates: int = 0,
                 source: str | None = None):
        self._words: Tuple[str, ...] = tuple(words)
        self._index = frozenset(self._words)
        self.rejected = rejected
        self.duplicates = duplicates
        self.source = source
        self._buckets: Dict[int, LengthBucket] = {}

    # ---- construction ----

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, strict: bool = True,
                   source: str | None = None) -> "Dictionary":
        words: List[str] = []
        seen = set()
        rejected = 0
        duplicates = 0

        for lineno, raw in enumerate(lines, start=1):
            w = raw.strip()
            if not w:
                continue
            if strict:
                validate_word(w, line=lineno)
            elif not is_valid_word(w):
                rejected += 1
                continue
            if w in seen:
                duplicates += 1
                continue
            seen.add(w)
            words.append(w)

        if rejected:
            logger.warning("dropped %d invalid word(s) from %s", rejected, source or "input")
        if duplicates:
            logger.info("dropped %d duplicate word(s) from %s", duplicates, source or "input")

        return cls(words, rejected=rejected, duplicates=duplicates, source=source)

    @classmethod
    def load(cls, path: Path | str, *, strict: bool = True) -> "Dictionary":
        """Read a word list from `path` ("-" = stdin)."""
        d = cls.from_lines(read_lines(path), strict=strict, source=str(path))
        logger.info("loaded %d word(s) from %s", len(d), path)
        return d

    # ---- sequence protocol ----

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, i):
        return self._words[i]

    def __contains__(self, word) -> bool:
        return word in self._index

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words, source={self.source!r})"

    # ---- queries ----

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def lengths(self) -> Dict[int, int]:
        """Histogram: word length -> number of words (sorted by length)."""
        out: Dict[int, int] = {}
        for w in self._words:
            out[len(w)] = out.get(len(w), 0) + 1
        return dict(sorted(out.items()))

    def words_of_length(self, N: int) -> List[str]:
        return [w for w in self._words if len(w) == N]

    def bucket(self, N: int) -> LengthBucket:
        """
        Array form of the words of length N. Words that would not load
        (the constructor does not validate) are left out: they can never be
        a consistent candidate, and their own games fail in the harness.
        """
        b = self._buckets.get(N)
        if b is None:
            b = LengthBucket([w for w in self.words_of_length(N) if is_valid_word(w)], N)
            self._buckets[N] = b
        return b

    def require_nonempty(self) -> "Dictionary":
        if not self._words:
            raise EmptyDictionaryError(
                f"dictionary contains 0 words (source={self.source or 'input'})")
        return self
