from pathlib import Path
import csv
import json

import pytest
from hangman_ai.datasets import Dictionary
from hangman_ai.engine import EmptyDictionaryError
from hangman_ai.harness import (pretty_summary, rank_words, run_batch, summarize, write_csv,
                                write_manifest, write_report)
from hangman_ai.solvers import create_solver


def _r(word, wrong, error=None):
    return {"solver_id": "t", "word": word, "length": len(word), "success": error is None,
            "wrong_guesses": None if error else wrong, "guesses": 0, "history": "",
            "time_ms": 0.0, "error": error}


def test_summarize_exact_mean_and_worst():
    results = [_r("a", 1), _r("b", 4), _r("c", 0), _r("d", 4), _r("e", 2)]
    s = summarize(results)
    assert s.average == (1 + 4 + 0 + 4 + 2) / 5
    assert s.total_wrong == 11 and s.num_words == 5
    assert s.max_wrong == 4 and s.worst_words == ["b", "d"]
    assert s.histogram == {0: 1, 1: 1, 2: 1, 4: 2}
    assert "avg wrong=2.2000" in pretty_summary(s)


def test_summarize_skips_errors():
    s = summarize([_r("a", 3), _r("Bad", 0, error="invalid word")], "x")
    assert s.solver_id == "x" and s.num_words == 1 and s.errors == ["Bad"]


def test_summarize_nothing_to_average():
    with pytest.raises(EmptyDictionaryError):
        summarize([])


def test_summary_matches_per_word_results():
    d = Dictionary.from_lines(["banana", "letter", "quiz", "jazz", "cat", "a"])
    results = run_batch(create_solver("random"), d, seed=3)
    s = summarize(results)
    vals = [r["wrong_guesses"] for r in results]
    assert s.average == sum(vals) / len(vals)
    assert s.max_wrong == max(vals)


def test_rank_words_is_stable_hardest_first():
    ranked = rank_words([_r("a", 1), _r("b", 3), _r("c", 1), _r("d", 3)])
    assert [r["word"] for r in ranked] == ["b", "d", "a", "c"]


def test_writers(tmp_path: Path):
    results = [_r("cat", 2), _r("a", 0), _r("Bad", 0, error="invalid word")]
    rep = write_report(results, str(tmp_path / "out" / "t.txt"))
    assert Path(rep).read_text(encoding="utf-8") == "2 cat\n0 a\n"

    with open(write_csv(results, str(tmp_path / "t.csv")), newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["word"] for row in rows] == ["cat", "a", "Bad"]
    assert rows[2]["wrong_guesses"] == "" and rows[2]["error"] == "invalid word"

    m = write_manifest({"run_id": "x", "summary": summarize(results)}, str(tmp_path / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["summary"]["worst_words"] == ["cat"]
