from __future__ import annotations

import numpy as np

from weighted_levenshtein import IndelCost, Match, TableCost, best_match, pairwise, rank

CHOICES = ["apple", "apply", "ample", "maple", "angle"]


def test_best_match_prefers_closest_then_first() -> None:
    match = best_match("appel", CHOICES)
    assert match == Match(choice="apple", index=0, distance=2)


def test_best_match_respects_max_cost() -> None:
    assert best_match("zzzzz", CHOICES, max_cost=2) is None
    assert best_match("appl", CHOICES, max_cost=1).choice == "apple"
    assert best_match("anything", []) is None


def test_rank_is_stable_and_limited() -> None:
    ranked = rank("apple", CHOICES)
    assert [m.choice for m in ranked] == ["apple", "apply", "ample", "maple", "angle"]
    assert [m.distance for m in ranked] == [0, 1, 1, 2, 2]
    assert len(rank("apple", CHOICES, limit=2)) == 2
    assert rank("apple", CHOICES, limit=-1) == []


def test_rank_accepts_token_queries() -> None:
    ranked = rank(iter(["the", "cat"]), [["the", "dog"], ["a", "cat"], ["the", "cat"]], IndelCost())
    assert ranked[0].index == 2
    assert ranked[0].distance == 0


def test_pairwise_is_square_with_zero_diagonal() -> None:
    matrix = pairwise(["abc", "abd", "xyz"])
    assert matrix.shape == (3, 3)
    assert matrix.dtype == np.int64
    assert np.array_equal(np.diag(matrix), np.zeros(3, dtype=np.int64))
    assert matrix[0, 1] == 1
    assert matrix[0, 2] == 3
    assert np.array_equal(matrix, matrix.T)


def test_pairwise_keeps_asymmetric_weights_and_floats() -> None:
    model = TableCost({"a": 0.5}, remove={"a": 2.0})
    matrix = pairwise(["", "a"], model)
    assert matrix.dtype == np.float64
    assert matrix[0, 1] == 0.5
    assert matrix[1, 0] == 2.0


def test_pairwise_of_nothing() -> None:
    assert pairwise([]).shape == (0, 0)
