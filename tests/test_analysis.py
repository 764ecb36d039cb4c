import numpy as np
import pytest

from hint_engine.analysis import analyze_candidates, position_matrix, presence_vector


def test_empty_candidates():
    a = analyze_candidates([])
    assert a.count == 0
    assert a.overall_frequency == {}
    assert a.per_position_frequency == {}
    assert a.exploration_letters == []


def test_overall_and_positional_frequencies():
    a = analyze_candidates(["batch", "catch", "latch"])
    assert a.count == 3
    assert a.overall_frequency["a"] == 1.0
    assert a.overall_frequency["c"] == 1.0
    assert a.overall_frequency["b"] == pytest.approx(1 / 3)
    assert set(a.overall_frequency) == set("abclth")
    assert a.per_position_frequency[0] == pytest.approx({"b": 1 / 3, "c": 1 / 3, "l": 1 / 3})
    assert a.per_position_frequency[3] == {"c": 1.0}


def test_repeated_letter_counts_once_per_word():
    a = analyze_candidates(["geese", "crane"])
    assert a.overall_frequency["e"] == 1.0
    assert a.per_position_frequency[4] == {"e": 1.0}
    assert a.per_position_frequency[1] == {"e": 0.5, "r": 0.5}


def test_exploration_letters_closest_to_half_first():
    a = analyze_candidates(["batch", "catch", "latch"])
    # b and l sit at 1/3; the rest are in every word. Ties are alphabetical.
    assert a.exploration_letters == ["b", "l", "a", "c", "h", "t"]


def test_exploration_letters_capped():
    words = ["abcde", "fghij", "klmno", "pqrst"]
    a = analyze_candidates(words)
    assert len(a.overall_frequency) == 20
    assert len(a.exploration_letters) == 10
    assert len(analyze_candidates(words, exploration_limit=3).exploration_letters) == 3


def test_position_matrix_rows_sum_to_one():
    m = position_matrix(["crane", "stare", "slate"])
    assert m.shape == (5, 26)
    assert np.allclose(m.sum(axis=1), 1.0)
    assert m[0, ord("s") - 97] == pytest.approx(2 / 3)


def test_matrices_for_no_candidates_are_zero():
    assert not position_matrix([]).any()
    assert not presence_vector([]).any()


def test_letters_outside_a_to_z_are_counted_by_character():
    a = analyze_candidates(["piñas", "crane"])
    assert a.count == 2
    assert a.overall_frequency["ñ"] == 0.5
    assert a.overall_frequency["a"] == 1.0
    assert a.per_position_frequency[2] == {"a": 0.5, "ñ": 0.5}
    assert "ñ" in a.exploration_letters


def test_punctuation_is_not_folded_into_z():
    a = analyze_candidates(["`bcde"])
    assert "z" not in a.overall_frequency
    assert a.overall_frequency["`"] == 1.0
    assert a.per_position_frequency[0] == {"`": 1.0}


def test_default_alphabet_matrices_skip_other_characters():
    m = position_matrix(["`bcde", "piñas"])
    assert m.shape == (5, 26)
    assert m[0, 25] == 0.0
    assert m[2].sum() == 0.0
    assert presence_vector(["`bcde"])[25] == 0.0
