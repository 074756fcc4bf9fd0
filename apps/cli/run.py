# apps/cli/run.py
"""
CLI entry point for running one hangmanAI solver over a dictionary.

This script:
  1) Validates the word list (prints counts + SHA + length range).
  2) Loads the dictionary and instantiates the requested solver.
  3) Runs one game per word with a live progress indicator and writes:
       - TXT:  words ranked by wrong guesses ("<wrong> <word>", hardest first)
       - CSV:  per-word results + guess order
       - JSON: manifest with config, word-list report, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict

from tqdm import tqdm

from hangman_ai.datasets import Dictionary, REFERENCE_ORDER, validate_wordlist, pretty_summary
from hangman_ai.harness import run_parallel, summarize
from hangman_ai.harness import pretty_summary as pretty_stats
from hangman_ai.harness.io import (write_csv, write_manifest, write_report, timestamp_id,
                                   git_commit_or_unknown)
from hangman_ai.solvers import build_context, get_solver_ids

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def add_common_args(ap: argparse.ArgumentParser) -> None:
    """Flags shared by run.py and run_multi.py."""
    ap.add_argument("--words", default="data/words.txt",
                    help="path to the dictionary, one lowercase word per line ('-' = stdin)")
    ap.add_argument("--lenient", action="store_true",
                    help="drop invalid words instead of refusing the whole list")
    ap.add_argument("--frequency-order", default="dictionary",
                    help="static order for the frequency solver: 'dictionary' (count the "
                         f"loaded words), 'reference' ({REFERENCE_ORDER}), or 26 letters")
    ap.add_argument("--sample", type=int, help="run only the first K words")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, default=1,
                    help="worker processes (1 = run in this process)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def resolve_order(choice: str) -> str | None:
    """None means 'compute from the loaded dictionary'."""
    if choice == "dictionary":
        return None
    if choice == "reference":
        return REFERENCE_ORDER
    return choice


def load_dictionary(args) -> tuple[Dictionary, Dict | None]:
    """Validate (files only) and load the dictionary named by --words."""
    rep = None
    if args.words != "-":
        rep = validate_wordlist(args.words)
        print(pretty_summary(rep))
    return Dictionary.load(args.words, strict=not args.lenient), rep


def progress_hook(mode: str, total: int, desc: str):
    """
    Return (on_result, close) for the chosen progress mode.
    """
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    if mode == "bar":
        bar = tqdm(total=total, ncols=80, desc=desc, unit="word")
        return (lambda r: bar.update(1)), bar.close

    if mode == "off":
        return None, (lambda: None)

    start = time.time()
    state = {"done": 0, "last": 0.0}

    def on_result(r: Dict) -> None:
        state["done"] += 1
        idx = state["done"]
        now = time.time()
        if (now - state["last"] >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{desc}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            state["last"] = now

    def close() -> None:
        sys.stderr.write("\n")
        sys.stderr.flush()

    return on_result, close


def run_solver(solver_id: str, dictionary: Dictionary, context, args, *, outdir: Path,
               wordlist_report: Dict | None) -> Dict[str, str]:
    """Run one solver end to end and write its report/CSV/manifest."""
    total = len(dictionary) if args.sample is None else min(args.sample, len(dictionary))
    on_result, close = progress_hook(args.progress, total, solver_id)
    try:
        results = run_parallel(solver_id, dictionary, context=context, seed=args.seed,
                               sample=args.sample, workers=args.workers, on_result=on_result)
    finally:
        close()

    summary = summarize(results, solver_id)
    print(pretty_stats(summary))

    run_id = timestamp_id()
    outdir.mkdir(parents=True, exist_ok=True)
    paths = {
        "report": write_report(results, str(outdir / f"{solver_id}.txt")),
        "csv": write_csv(results, str(outdir / f"{solver_id}_{run_id}.csv")),
    }
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {**vars(args), "solver": solver_id},
        "frequency_order": context.frequency_order,
        "wordlist": wordlist_report,
        "dictionary": {"words": len(dictionary), "duplicates": dictionary.duplicates,
                       "rejected": dictionary.rejected},
        "summary": summary,
    }
    paths["manifest"] = write_manifest(manifest, str(outdir / f"{solver_id}_{run_id}_manifest.json"))
    return paths


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary, run the solver with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="hangmanAI — run one solver over a dictionary")
    ap.add_argument("--solver", default="optimal", help=f"solver id (one of: {solver_choices})")
    add_common_args(ap)
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    if args.solver not in get_solver_ids():
        ap.error(f"unknown solver id {args.solver!r} (one of: {solver_choices})")

    try:
        dictionary, rep = load_dictionary(args)
        dictionary.require_nonempty()
        context = build_context(dictionary, resolve_order(args.frequency_order))
        paths = run_solver(args.solver, dictionary, context, args,
                           outdir=Path(args.outdir), wordlist_report=rep)
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for p in paths.values():
        print(f"Wrote: {p}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
