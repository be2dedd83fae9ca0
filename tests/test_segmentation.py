from __future__ import annotations

import pytest

from domain_scoring.scoring.segmentation import (
    count_words,
    dictionary_coverage,
    is_fully_covered,
    segment,
    split_into_words,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("cloudbank", ["cloud", "bank"]),
        ("cashflow", ["cash", "flow"]),
        ("CloudBank", ["cloud", "bank"]),
    ],
)
def test_split_compounds(name, expected):
    assert split_into_words(name) == expected


def test_split_portmanteau_via_truncated_word():
    assert split_into_words("chainalysis") == ["chain", "analysis"]


def test_split_overlapping_portmanteau():
    assert split_into_words("example") == ["exam", "ample"]


def test_split_unknown_letters_come_back_as_characters():
    assert split_into_words("xqz") == ["x", "q", "z"]


def test_split_empty():
    assert split_into_words("") == []


def test_count_words():
    assert count_words("cloudbank") == 2
    assert count_words("rocket") == 1
    assert count_words("xqz") == 1
    assert count_words("ab") == 1


def test_dictionary_coverage():
    assert dictionary_coverage("cloudbank") == 1.0
    assert dictionary_coverage("chainalysis") < 1.0
    assert dictionary_coverage("x") == 0.0
    assert dictionary_coverage("xqz") == 0.0
    assert dictionary_coverage("ai") == 1.0


def test_full_portmanteau_counts_as_covered():
    assert dictionary_coverage("example") == 1.0


def test_is_fully_covered_allows_bounded_overlap():
    assert is_fully_covered("chainalysis", ["chain", "analysis"])
    assert is_fully_covered("cloudbank", ["cloud", "bank"])
    assert not is_fully_covered("cloudbank", ["cloud"])
    assert not is_fully_covered("cloudbank", [])


def test_segment_bundles_results():
    result = segment("cloud-bank")
    assert result.words == ["cloud", "bank"]
    assert result.word_count == 2
    assert result.coverage == 1.0


@pytest.mark.parametrize("name", ["together", "football", "password"])
def test_whole_word_beats_equal_coverage_split(name):
    assert split_into_words(name) == [name]
    assert count_words(name) == 1


def test_longer_word_wins_coverage_tie_inside_compound():
    assert split_into_words("mydomain") == ["my", "domain"]
