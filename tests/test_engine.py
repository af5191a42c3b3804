import pytest
from packages.engine import (
    score, matches, filter_candidates, apply_feedback, reset_candidates, list_candidates,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","bgyyy"),
    ("level","level","ggggg"),
    ("lemon","level","ggbbb"),
    ("cools","scoop","yygby"),
    ("scoop","scoop","ggggg"),
    ("crane","crane","ggggg"),
    ("raise","crane","yybbg"),
    ("stare","crane","bbgyg"),
    ("lolly","allot","yygbb"),
    ("lolls","hello","byggb"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","bgggyy"),
    ("little","letter","gbggby"),
    ("planet","palate","gyybyy"),
    ("kitten","tinket","ygyygy"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")

# --- every answer survives its own feedback ---
WORDS = ["crane","allot","lolly","hello","sassy","soses","teeth","genie","epees","level","belle"]

@pytest.mark.parametrize("answer", WORDS)
def test_answer_matches_its_own_feedback(answer):
    for guess in WORDS:
        assert matches(answer, guess, score(guess, answer)), (guess, answer)

def test_filter_candidates_n5_history():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    history = [("raise","yybbg")]
    cand = filter_candidates(words, history)
    assert cand == ["crane","trace"]

def test_filter_candidates_n6_basic():
    words = ["letter","settle","little","tattle","better"]
    history = [("settle","bgggyy")]
    cand = filter_candidates(words, history)
    assert "letter" in cand and "better" not in cand

def test_filter_candidates_intersects_observations():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    history = [("raise","yybbg"), ("trace","bggyg")]
    assert filter_candidates(words, history) == ["crane"]

def test_filter_candidates_accepts_generator_history():
    words = ["crane","trace"]
    history = ((g, p) for g, p in [("raise","yybbg"), ("trace","bggyg")])
    assert filter_candidates(words, history) == ["crane"]

def test_filter_skips_other_lengths():
    words = ["crane","cranes","cran",""]
    assert filter_candidates(words, [("crane","ggggg")]) == ["crane"]

def test_apply_feedback_is_idempotent():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    once = apply_feedback(words, "raise", "yybbg")
    twice = apply_feedback(once, "raise", "yybbg")
    assert once == twice

def test_apply_feedback_preserves_order():
    words = ["trace","scoop","crane","racer"]
    assert apply_feedback(words, "raise", "yybbg") == ["trace","crane"]

def test_reset_candidates_copies():
    dictionary = ("crane","trace")
    cand = reset_candidates(dictionary)
    cand.remove("crane")
    assert reset_candidates(dictionary) == ["crane","trace"]

def test_list_candidates_is_a_copy():
    cand = ["crane","trace"]
    shown = list_candidates(cand)
    shown.clear()
    assert cand == ["crane","trace"]
