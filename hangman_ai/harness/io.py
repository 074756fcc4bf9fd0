"""
I/O utilities for experiment runs.

Responsibilities:
- write_report:  "<wrong> <word>" lines, hardest word first (one file per solver).
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, dictionary report and summary.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from .stats import rank_words

CSV_FIELDS = ["solver", "word", "length", "success", "wrong_guesses", "guesses",
              "time_ms", "history", "error"]


def write_report(results: List[Dict], path: str) -> str:
    """
    Write the words ranked by guessability, one "<wrong_guesses> <word>" per line.
    Failed games are left out (they are listed in the manifest summary).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        for r in rank_words(results):
            f.write(f"{r['wrong_guesses']} {r['word']}\n")
    return str(p)


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, word, length, success, wrong_guesses, guesses, time_ms, history, error

    `history` is the guessed letters in order, e.g. "eaitn".

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "word": r["word"],
                "length": r["length"],
                "success": r["success"],
                "wrong_guesses": "" if r["wrong_guesses"] is None else r["wrong_guesses"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "history": r["history"],
                "error": r.get("error") or "",
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and results summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, words path, seed, sample, workers, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: harness.stats.Summary (dataclasses are converted)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    payload = {k: (asdict(v) if is_dataclass(v) else v) for k, v in manifest.items()}
    with p.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
