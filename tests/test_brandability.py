from __future__ import annotations

import pytest

from domain_scoring.scoring.brandability import (
    WEIGHTS,
    brand_grade,
    rhythm_score,
    score_brandability,
    visual_appeal_score,
)
from domain_scoring.trademark import create_checker_from_settings
from domain_scoring.util import round_half_up

DIMENSIONS = [
    "Pronounceability",
    "Length",
    "Word Structure",
    "Trademark Safety",
    "Memorability",
    "Visual Appeal",
]


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_dimensions_in_fixed_order():
    result = score_brandability("rocket.com")
    assert [d.name for d in result.dimensions] == DIMENSIONS
    assert sum(d.weight for d in result.dimensions) == pytest.approx(1.0)


def test_short_real_word_is_top_grade():
    result = score_brandability("rocket.com")
    assert result.overall >= 85
    assert result.grade == "A+"
    assert result.trademark_risk == "none"
    assert result.get_dimension("Word Structure").score == 95


def test_empty_name():
    result = score_brandability(".com")
    assert result.overall == 0
    assert result.grade == "F"
    assert result.dimensions == []


def test_gibberish_scores_low():
    result = score_brandability("xkcdqz.com")
    assert result.overall < 60
    assert result.overall < score_brandability("rocket.com").overall
    assert result.get_dimension("Word Structure").score <= 20


def test_hyphen_weakens_word_structure():
    joined = score_brandability("rocketfuel.com")
    hyphenated = score_brandability("rocket-fuel.com")
    assert (
        hyphenated.get_dimension("Word Structure").score
        < joined.get_dimension("Word Structure").score
    )
    assert hyphenated.get_dimension("Visual Appeal").score < joined.get_dimension("Visual Appeal").score
    assert hyphenated.overall < joined.overall


def test_trademark_conflict_drops_safety():
    result = score_brandability("google.com")
    assert result.trademark_risk == "high"
    assert result.get_dimension("Trademark Safety").score == 5


def test_offensive_language_dampens_overall():
    result = score_brandability("hellfire.com")
    assert result.overall <= 35
    assert "Contains inappropriate language." in result.summary


def test_pronounceability_detail_includes_grade():
    result = score_brandability("rocket.com")
    assert result.get_dimension("Pronounceability").detail.startswith("Excellent, ")


def test_overall_always_in_range():
    for domain in ["a.com", "ai.com", "x-y-z.net", "thebestplaceforyou.com", "9999.com"]:
        result = score_brandability(domain)
        assert 0 <= result.overall <= 100
        for dimension in result.dimensions:
            assert 0 <= dimension.score <= 100


def test_to_dict_round_trips_dimensions():
    data = score_brandability("rocket.com").to_dict()
    assert data["domain_name"] == "rocket.com"
    assert [d["name"] for d in data["dimensions"]] == DIMENSIONS


def test_brand_grade_boundaries():
    assert brand_grade(90) == "A+"
    assert brand_grade(80) == "A"
    assert brand_grade(65) == "B"
    assert brand_grade(50) == "C"
    assert brand_grade(35) == "D"
    assert brand_grade(34) == "F"


def test_visual_appeal_score():
    assert visual_appeal_score("rocket") == 100
    assert visual_appeal_score("my-brand") == 60


def test_rhythm_score():
    assert rhythm_score("rocket") == 100
    assert rhythm_score("banana") == 40
    assert rhythm_score("a") == 40


def test_custom_checker_drives_trademark_safety():
    checker = create_checker_from_settings(["zentrova"])
    result = score_brandability("zentrova.com", checker=checker)
    assert result.trademark_risk == "high"
    assert result.get_dimension("Trademark Safety").score == 5
    assert score_brandability("zentrova.com").get_dimension("Trademark Safety").score > 5


def test_two_offensive_words_apply_severe_multiplier():
    result = score_brandability("poostain.com")
    weighted = sum(d.score * d.weight for d in result.dimensions)
    assert result.overall == round_half_up(weighted * 0.15)
    assert result.overall <= 15
    assert "Contains highly offensive language." in result.summary
