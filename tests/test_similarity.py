from __future__ import annotations

import pytest

from domain_scoring.similarity import get_categories, semantic_similarity


def test_get_categories():
    assert get_categories("cash") == {"finance"}
    assert get_categories("Doctor") == {"health"}
    assert get_categories("xyzzy") == set()


def test_same_category_is_fully_similar():
    assert semantic_similarity(["cash"], ["bank"]) == 1.0


def test_unrelated_words():
    assert semantic_similarity(["doctor"], ["car"]) == 0.0


def test_partial_overlap():
    assert semantic_similarity(["cash", "doctor"], ["bank"]) == pytest.approx(0.5)


def test_empty_side_is_zero():
    assert semantic_similarity([], ["bank"]) == 0.0
    assert semantic_similarity(["xyzzy"], ["bank"]) == 0.0
