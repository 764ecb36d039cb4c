import itertools

import pytest

from hint_engine.consts import ABSENT, MATCH, PRESENT
from hint_engine.feedback import (
    consistent_with,
    int_to_pattern,
    pattern_to_int,
    pattern_to_string,
    score_pattern,
)

WORDS = ["crane", "stare", "allot", "total", "press", "spree", "abbey", "cabin",
         "geese", "eerie", "llama", "spell", "speed", "apple"]


def test_crane_against_stare():
    assert score_pattern("crane", "stare") == [ABSENT, PRESENT, MATCH, ABSENT, MATCH]


@pytest.mark.parametrize(
    "guess, answer, expected",
    [
        ("allot", "total", [1, 1, 0, 1, 1]),
        ("abbey", "cabin", [1, 0, 2, 0, 0]),
        ("press", "spree", [1, 1, 1, 1, 0]),
        ("speed", "abide", [0, 0, 1, 0, 1]),
        ("geese", "eerie", [0, 2, 1, 0, 2]),
    ],
)
def test_duplicate_letter_patterns(guess, answer, expected):
    assert score_pattern(guess, answer) == expected


@pytest.mark.parametrize("word", WORDS)
def test_word_against_itself_is_all_match(word):
    assert score_pattern(word, word) == [MATCH] * 5


def test_marks_never_exceed_answer_counts():
    for guess, answer in itertools.product(WORDS, repeat=2):
        patt = score_pattern(guess, answer)
        for letter in set(guess):
            marked = sum(1 for g, p in zip(guess, patt) if g == letter and p != ABSENT)
            assert marked <= answer.count(letter), (guess, answer)


def test_pattern_is_not_symmetric():
    assert score_pattern("allot", "total") != score_pattern("total", "allot")


@pytest.mark.parametrize("guess, answer", [("cran", "stare"), ("CRANE", "stare"), ("cr4ne", "stare")])
def test_score_pattern_rejects_malformed_words(guess, answer):
    with pytest.raises(ValueError):
        score_pattern(guess, answer)


def test_pattern_codes():
    assert pattern_to_int([2, 2, 2, 2, 2]) == 242
    assert pattern_to_int([0, 0, 0, 0, 0]) == 0
    assert int_to_pattern(pattern_to_int([0, 1, 2, 0, 2])) == [0, 1, 2, 0, 2]
    with pytest.raises(ValueError):
        pattern_to_int([0, 1, 3, 0, 0])
    with pytest.raises(ValueError):
        int_to_pattern(243)


def test_pattern_to_string():
    assert pattern_to_string([0, 1, 2, 0, 2]) == "bygbg"


def test_consistent_with():
    assert consistent_with("total", "allot", [1, 1, 0, 1, 1])
    assert not consistent_with("allot", "allot", [1, 1, 0, 1, 1])
