"""
Experiment harness core primitives.

- run_case:     play one Hangman game (one hidden word) with a given solver.
- run_batch:    play every dictionary word in sequence (optionally a sample prefix).
- run_parallel: same games spread over worker processes, merged in order.

Games are independent: each gets a fresh GameState and a per-word seed
derived from the base seed (seed + index), so a seeded run gives the same
results whether it runs serially or in parallel, in any chunking.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, List, Sequence, Tuple

from hangman_ai.datasets import Dictionary
from hangman_ai.engine import ALPHABET, GameStatus, HangmanError, new_game
from hangman_ai.solvers import SolverContext, build_context, create_solver

logger = logging.getLogger(__name__)

# One guess per letter at most; a game can never take longer.
MAX_GUESSES = len(ALPHABET)

ResultHook = Callable[[Dict], None]


def run_case(solver, word: str, *, context: SolverContext, seed: int | None = None) -> Dict:
    """
    Play one game from IN_PROGRESS until the word is fully revealed.

    Args:
        solver:  an object implementing BaseSolver
        word:    the hidden word for this case
        context: shared read-only run data (dictionary, frequency order)
        seed:    RNG seed to make the solver's random choices reproducible

    Returns:
        dict with keys:
            solver_id, word, length, success (bool), wrong_guesses (int),
            guesses (int), history (str, letters in guess order),
            time_ms (float), error (None)

    Raises:
        HangmanError if the word is invalid or the solver proposes a bad letter.
    """
    state = new_game(word)
    solver.reset(context=context, N=state.length, seed=seed)

    t0 = time.perf_counter()
    for _ in range(MAX_GUESSES):
        letter = solver.next_letter(state, context)
        positions = state.apply(letter)
        solver.observe(letter, positions)
        if state.status is GameStatus.WON:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "solver_id": solver.id,
        "word": word,
        "length": state.length,
        "success": state.status is GameStatus.WON,
        "wrong_guesses": state.wrong_guesses,
        "guesses": len(state.history),
        "history": "".join(letter for letter, _ in state.history),
        "time_ms": dt,
        "error": None,
    }


def _failed_case(solver, word, exc: HangmanError) -> Dict:
    return {
        "solver_id": solver.id,
        "word": word,
        "length": len(word) if isinstance(word, str) else 0,
        "success": False,
        "wrong_guesses": None,
        "guesses": 0,
        "history": "",
        "time_ms": 0.0,
        "error": str(exc),
    }


def _case_seed(seed: int | None, idx: int) -> int | None:
    return None if seed is None else seed + idx


def _run_indexed(solver, cases: Sequence[Tuple[int, str]], context: SolverContext,
                 seed: int | None, on_result: ResultHook | None = None) -> List[Dict]:
    out: List[Dict] = []
    for idx, word in cases:
        try:
            r = run_case(solver, word, context=context, seed=_case_seed(seed, idx))
        except HangmanError as exc:
            # One bad word must not abort the rest of the batch
            logger.warning("%s: game for %r failed: %s", solver.id, word, exc)
            r = _failed_case(solver, word, exc)
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out


def _select_cases(dictionary: Dictionary, sample: int | None) -> List[Tuple[int, str]]:
    dictionary.require_nonempty()
    pool = list(enumerate(dictionary, start=1))
    if sample is not None:
        pool = pool[:sample]
    return pool


def run_batch(
        solver,
        dictionary: Dictionary,
        *,
        context: SolverContext | None = None,
        seed: int | None = None,
        sample: int | None = None,
        on_result: ResultHook | None = None,
) -> List[Dict]:
    """
    Run one game per dictionary word back-to-back. If 'sample' is provided,
    only the first K words are used to speed up quick experiments.

    Raises EmptyDictionaryError before any game is played if the dictionary
    is empty. Per-word failures are recorded in that word's result.
    """
    cases = _select_cases(dictionary, sample)
    if context is None:
        context = build_context(dictionary)

    t0 = time.time()
    out = _run_indexed(solver, cases, context, seed, on_result)
    logger.info("%s: %d game(s) in %.2fs", solver.id, len(out), time.time() - t0)
    return out


# Set once per worker process by _init_worker; chunks only carry their words.
_WORKER_CONTEXT: SolverContext | None = None


def _init_worker(context: SolverContext) -> None:
    global _WORKER_CONTEXT
    _WORKER_CONTEXT = context


def _run_chunk(solver_id: str, cases: List[Tuple[int, str]], seed: int | None) -> List[Dict]:
    """Worker entry point: own solver, own game states."""
    return _run_indexed(create_solver(solver_id), cases, _WORKER_CONTEXT, seed)


def run_parallel(
        solver_id: str,
        dictionary: Dictionary,
        *,
        context: SolverContext | None = None,
        seed: int | None = None,
        sample: int | None = None,
        workers: int | None = None,
        chunk_size: int | None = None,
        on_result: ResultHook | None = None,
) -> List[Dict]:
    """
    Run the same games as run_batch across worker processes.

    The word list is cut into contiguous chunks; each worker plays its chunk
    with a freshly created solver. Results come back in dictionary order
    and are identical to run_batch for a fixed seed.
    """
    cases = _select_cases(dictionary, sample)
    if context is None:
        context = build_context(dictionary)

    if workers is None:
        workers = min(os.cpu_count() or 4, 8)
    if workers <= 1:
        return run_batch(create_solver(solver_id), dictionary, context=context,
                         seed=seed, sample=sample, on_result=on_result)

    if chunk_size is None:
        # A few chunks per worker keeps the pool busy when word lengths vary
        chunk_size = max(1, len(cases) // (workers * 4))
    chunks = [cases[i:i + chunk_size] for i in range(0, len(cases), chunk_size)]

    logger.info("%s: %d game(s) in %d chunk(s) on %d worker(s)",
                solver_id, len(cases), len(chunks), workers)

    t0 = time.time()
    parts: Dict[int, List[Dict]] = {}
    # The context (dictionary + numpy buckets) is pickled once per worker
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                             initargs=(context,)) as executor:
        futs = {executor.submit(_run_chunk, solver_id, ch, seed): i
                for i, ch in enumerate(chunks)}
        for fut in as_completed(futs):
            i = futs[fut]
            parts[i] = fut.result()
            if on_result is not None:
                for r in parts[i]:
                    on_result(r)

    out = [r for i in range(len(chunks)) for r in parts[i]]
    logger.info("%s: %d game(s) in %.2fs", solver_id, len(out), time.time() - t0)
    return out
