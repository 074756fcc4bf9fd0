import random

import pytest
from hangman_ai.engine import (
    CandidateSet, GameStatus, InvalidGuessError, InvalidWordError, LengthBucket,
    filter_candidates, is_consistent, is_valid_word, narrow_candidates, new_game,
    positions_of, validate_guess,
)


# --- pattern matching ---
@pytest.mark.parametrize("candidate,correct,excluded,expected", [
    ("banana", {"a": (1, 3, 5)}, set(), True),
    ("banana", {"a": (1, 3)}, set(), False),       # extra 'a' at 5 not revealed
    ("cabana", {"a": (1, 3, 5)}, set(), True),
    ("banane", {"a": (1, 3, 5)}, set(), False),
    ("banana", {"a": (1, 3, 5)}, {"n"}, False),
    ("banana", {}, {"e", "z"}, True),
    ("bananas", {"a": (1, 3, 5)}, set(), False),   # wrong length
])
def test_is_consistent(candidate, correct, excluded, expected):
    assert is_consistent(candidate, 6, correct, excluded) is expected


def test_positions_of():
    assert positions_of("banana", "a") == (1, 3, 5)
    assert positions_of("banana", "z") == ()


@pytest.mark.parametrize("word,ok", [
    ("cat", True), ("a", True), ("", False), ("Cat", False), ("café", False),
    ("don't", False), ("two words", False), (None, False),
])
def test_is_valid_word(word, ok):
    assert is_valid_word(word) is ok


# --- game state ---
def test_game_state_reveals_all_positions():
    st = new_game("banana")
    assert st.length == 6 and st.pattern == "______"
    assert st.apply("a") == (1, 3, 5)
    assert st.pattern == "_a_a_a"
    assert st.apply("z") == ()
    assert st.wrong_guesses == 1 and st.wrong == {"z"}
    st.apply("b")
    assert st.status is GameStatus.IN_PROGRESS
    st.apply("n")
    assert st.status is GameStatus.WON
    assert [letter for letter, _ in st.history] == ["a", "z", "b", "n"]


def test_game_state_rejects_bad_guesses():
    st = new_game("cat")
    st.apply("c")
    assert validate_guess("c", st) is False
    assert validate_guess("a", st) is True
    with pytest.raises(InvalidGuessError):
        st.apply("c")
    with pytest.raises(InvalidGuessError):
        st.apply("A")
    with pytest.raises(InvalidGuessError):
        st.apply("at")
    st.apply("a")
    st.apply("t")
    with pytest.raises(InvalidGuessError):
        st.apply("e")


def test_new_game_rejects_invalid_word():
    with pytest.raises(InvalidWordError):
        new_game("Hello")


def test_correct_and_wrong_sets_stay_disjoint():
    st = new_game("letter")
    for ch in "etaoinshrdl":
        st.apply(ch)
        assert not (set(st.correct) & st.wrong)
    assert st.status is GameStatus.WON


# --- candidate filtering ---
WORDS = ["cat", "cot", "cut", "act", "dog", "tact", "a", "coat"]


def test_filter_candidates_uses_length_and_reveals():
    st = new_game("cat")
    assert filter_candidates(WORDS, st) == ["cat", "cot", "cut", "act", "dog"]
    st.apply("c")
    assert filter_candidates(WORDS, st) == ["cat", "cot", "cut"]
    st.apply("o")
    assert filter_candidates(WORDS, st) == ["cat", "cut"]


def test_narrow_candidates_miss_and_hit():
    assert narrow_candidates(["cat", "cot", "act"], "o", ()) == ["cat", "act"]
    assert narrow_candidates(["cat", "cot", "act"], "c", (0,)) == ["cat", "cot"]


def test_candidate_set_coverage_and_narrow():
    cs = CandidateSet(LengthBucket(["cat", "cot", "cut", "act", "dog"], 3))
    cov = cs.coverage()
    assert len(cov) == 26
    assert int(cov[ord("c") - ord("a")]) == 4
    assert int(cov[ord("o") - ord("a")]) == 2
    cs = cs.narrow("c", (0,))
    assert cs.words == ["cat", "cot", "cut"]
    cs = cs.narrow("o", ())
    assert cs.words == ["cat", "cut"] and len(cs) == 2


def test_candidate_set_empty_bucket():
    cs = CandidateSet(LengthBucket([], 4))
    assert len(cs) == 0
    assert int(cs.coverage().sum()) == 0
    assert cs.narrow("a", ()).words == []


SAMPLE = ["cat", "cot", "cut", "act", "dog", "bat", "tab", "tot", "toe", "ant",
          "banana", "bandana", "cabana", "letter", "settle", "little", "tattle",
          "better", "a", "b", "i", "queue", "quiet", "quite", "tequila"]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_incremental_filter_equals_from_scratch(seed):
    rng = random.Random(seed)
    for target in SAMPLE:
        st = new_game(target)
        cs = CandidateSet(LengthBucket([w for w in SAMPLE if len(w) == len(target)], len(target)))
        listed = [w for w in SAMPLE if len(w) == len(target)]
        letters = list("abcdefghijklmnopqrstuvwxyz")
        rng.shuffle(letters)
        for ch in letters:
            if st.status is GameStatus.WON:
                break
            positions = st.apply(ch)
            cs = cs.narrow(ch, positions)
            listed = narrow_candidates(listed, ch, positions)
            expected = filter_candidates(SAMPLE, st)
            assert cs.words == expected
            assert listed == expected
            assert target in expected
