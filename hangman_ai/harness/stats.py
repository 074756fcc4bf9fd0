"""
Reduce per-game results into a per-solver Summary.

- summarize:   average / worst-case words / histogram over a batch.
- rank_words:  words sorted hardest first (the "guessability" ranking).

Failed games (result["error"] set) are listed separately and do not take
part in the average.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from hangman_ai.engine import EmptyDictionaryError


@dataclass
class Summary:
    solver_id: str
    num_words: int
    total_wrong: int
    average: float
    max_wrong: int
    worst_words: List[str]
    histogram: Dict[int, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)


def summarize(results: Iterable[Dict], solver_id: str | None = None) -> Summary:
    """
    Aggregate a batch of results from one solver.

    The average is total_wrong / num_words over successful games: exactly the
    arithmetic mean of their wrong-guess counts.

    Raises:
        EmptyDictionaryError if no game finished successfully.
    """
    ok: List[Dict] = []
    errors: List[str] = []
    for r in results:
        if r.get("error"):
            errors.append(r["word"])
        else:
            ok.append(r)
        if solver_id is None:
            solver_id = r.get("solver_id")

    if not ok:
        raise EmptyDictionaryError("no completed games to summarize")

    total = sum(r["wrong_guesses"] for r in ok)
    worst = max(r["wrong_guesses"] for r in ok)

    histogram: Dict[int, int] = {}
    for r in ok:
        k = r["wrong_guesses"]
        histogram[k] = histogram.get(k, 0) + 1

    return Summary(
        solver_id=solver_id or "?",
        num_words=len(ok),
        total_wrong=total,
        average=total / len(ok),
        max_wrong=worst,
        worst_words=[r["word"] for r in ok if r["wrong_guesses"] == worst],
        histogram=dict(sorted(histogram.items())),
        errors=errors,
    )


def rank_words(results: Iterable[Dict]) -> List[Dict]:
    """Successful results sorted by wrong guesses, hardest first (stable)."""
    ok = [r for r in results if not r.get("error")]
    return sorted(ok, key=lambda r: r["wrong_guesses"], reverse=True)


def pretty_summary(s: Summary, max_words: int = 10) -> str:
    """
    One-liner for the console.

    Example:
        optimal | words=235886 | avg wrong=1.2345 | max=9 (3 words: ...) | errors=0
    """
    shown = ", ".join(s.worst_words[:max_words])
    if len(s.worst_words) > max_words:
        shown += ", ..."
    return (
        f"{s.solver_id} | words={s.num_words} | avg wrong={s.average:.4f} "
        f"| max={s.max_wrong} ({len(s.worst_words)} words: {shown}) | errors={len(s.errors)}"
    )
