import pytest
from hangman_ai.datasets import Dictionary, REFERENCE_ORDER
from hangman_ai.engine import EmptyDictionaryError
from hangman_ai.harness import MAX_GUESSES, run_batch, run_case, run_parallel, summarize
from hangman_ai.solvers import BaseSolver, DEFAULT_SOLVERS, build_context, create_solver

WORDS = ["cat", "cot", "act", "dog", "banana", "letter", "a", "queue",
         "abcdefghijklmnopqrstuvwxyz"]


@pytest.fixture
def dictionary():
    return Dictionary.from_lines(WORDS)


@pytest.mark.parametrize("solver_id", DEFAULT_SOLVERS)
def test_run_case_always_wins_within_26(dictionary, solver_id):
    ctx = build_context(dictionary)
    solver = create_solver(solver_id)
    for w in dictionary:
        r = run_case(solver, w, context=ctx, seed=42)
        assert r["success"] is True and r["error"] is None
        assert r["guesses"] <= MAX_GUESSES
        assert r["guesses"] == len(r["history"]) == len(set(r["history"]))
        assert r["wrong_guesses"] == r["guesses"] - len(set(w))


@pytest.mark.parametrize("solver_id", DEFAULT_SOLVERS)
def test_pangram_takes_every_letter(dictionary, solver_id):
    r = run_case(create_solver(solver_id), "abcdefghijklmnopqrstuvwxyz",
                 context=build_context(dictionary), seed=1)
    assert r["guesses"] == 26 and r["wrong_guesses"] == 0


def test_run_batch_covers_every_word(dictionary):
    results = run_batch(create_solver("optimal"), dictionary, seed=7)
    assert [r["word"] for r in results] == list(dictionary)
    sampled = run_batch(create_solver("optimal"), dictionary, sample=3, seed=7)
    assert _strip_time(sampled) == _strip_time(results[:3])


def test_run_batch_empty_dictionary():
    with pytest.raises(EmptyDictionaryError):
        run_batch(create_solver("random"), Dictionary([]))
    with pytest.raises(EmptyDictionaryError):
        run_parallel("random", Dictionary([]), workers=2)


class RepeatSolver(BaseSolver):
    id = "repeat_e"

    def next_letter(self, state, context):
        return "e"


def test_failed_games_do_not_abort_batch():
    d = Dictionary.from_lines(["bee", "e", "see"])
    results = run_batch(RepeatSolver(), d)
    assert [r["success"] for r in results] == [False, True, False]
    assert "already guessed" in results[0]["error"]
    s = summarize(results)
    assert s.errors == ["bee", "see"] and s.num_words == 1


@pytest.mark.parametrize("solver_id", DEFAULT_SOLVERS)
def test_invalid_word_reported_per_word(solver_id):
    # Bypasses the loader on purpose: the harness must still isolate the bad words
    d = Dictionary(["cat", "Dog", "dög", "ant"])
    results = run_batch(create_solver(solver_id), d, seed=3)
    assert [r["error"] is None for r in results] == [True, False, False, True]
    assert "invalid word" in results[1]["error"]
    assert "invalid word" in results[2]["error"]
    assert summarize(results).num_words == 2


def test_bucket_skips_words_the_loader_would_reject():
    d = Dictionary(["cat", "Dog", "dög", "ant"])
    assert d.bucket(3).words == ("cat", "ant")


def _strip_time(results):
    return [{k: v for k, v in r.items() if k != "time_ms"} for r in results]


@pytest.mark.parametrize("solver_id", DEFAULT_SOLVERS)
def test_parallel_matches_serial(dictionary, solver_id):
    ctx = build_context(dictionary, REFERENCE_ORDER)
    serial = run_batch(create_solver(solver_id), dictionary, context=ctx, seed=11)
    parallel = run_parallel(solver_id, dictionary, context=ctx, seed=11, workers=2,
                            chunk_size=2)
    assert _strip_time(parallel) == _strip_time(serial)


def test_on_result_hook_sees_every_game(dictionary):
    seen = []
    run_batch(create_solver("frequency"), dictionary, on_result=seen.append)
    assert len(seen) == len(dictionary)


def test_worker_chunks_use_context_from_initializer(dictionary, monkeypatch):
    from hangman_ai.harness import core

    ctx = build_context(dictionary)
    monkeypatch.setattr(core, "_WORKER_CONTEXT", None)
    core._init_worker(ctx)
    cases = list(enumerate(dictionary, start=1))[2:5]
    chunk = core._run_chunk("optimal", cases, 9)
    serial = run_batch(create_solver("optimal"), dictionary, context=ctx, seed=9)
    assert _strip_time(chunk) == _strip_time(serial[2:5])
