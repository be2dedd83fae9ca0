from __future__ import annotations

import pytest

from domain_scoring.trademark import (
    TrademarkRiskChecker,
    check_trademark_risk,
    create_checker_from_settings,
    is_typo_variant,
    levenshtein_distance,
    normalize_leet,
)


def test_exact_match_is_high_risk():
    result = check_trademark_risk("google.com")
    assert result.risk_level == "high"
    assert result.brands("exact") == ["google"]
    assert "google" in result.summary


def test_leetspeak_is_normalized():
    result = check_trademark_risk("g00gle.com")
    assert result.risk_level == "high"
    assert result.brands() == ["google"]


def test_contained_brand_is_medium_risk():
    result = check_trademark_risk("googlepay.com")
    assert result.risk_level == "medium"
    assert result.brands("contains") == ["google"]
    assert result.summary == "Contains trademarked term: google"


def test_two_contained_brands_are_high_risk():
    result = check_trademark_risk("googlestripe.com")
    assert result.risk_level == "high"
    assert sorted(result.brands()) == ["google", "stripe"]


def test_hyphens_do_not_hide_brands():
    assert check_trademark_risk("google-pay.com").risk_level == "medium"


def test_typo_variant_is_low_risk():
    result = check_trademark_risk("gogle.com")
    assert result.risk_level == "low"
    assert result.brands("variant") == ["google"]


def test_real_word_containing_brand_is_allowed():
    result = check_trademark_risk("pineapplejuice.com")
    assert result.is_clear
    assert result.matches == []


def test_short_brands_only_match_exactly():
    assert check_trademark_risk("amd.com").risk_level == "high"
    assert check_trademark_risk("framed.com").risk_level == "none"


def test_clean_name():
    result = check_trademark_risk("rocket.com")
    assert result.risk_level == "none"
    assert result.to_dict()["matches"] == []


def test_check_batch():
    checker = TrademarkRiskChecker()
    results = checker.check_batch(["google.com", "rocket.com"])
    assert [r.risk_level for r in results] == ["high", "none"]


def test_custom_brand_list():
    checker = TrademarkRiskChecker(brands=["Acme Corp"])
    assert checker.brand_count == 1
    assert checker.check("acmecorp.io").risk_level == "high"
    assert checker.check("google.com").risk_level == "none"


def test_create_checker_from_settings_adds_brands():
    checker = create_checker_from_settings(["zentrix"])
    assert checker.check("zentrix.com").risk_level == "high"
    assert checker.check("google.com").risk_level == "high"
    assert create_checker_from_settings([]) is create_checker_from_settings(())


def test_normalize_leet():
    assert normalize_leet("g00gl3") == "google"
    assert normalize_leet("rocket") == "rocket"


@pytest.mark.parametrize(
    ("a", "b", "distance"),
    [("kitten", "sitting", 3), ("", "abc", 3), ("same", "same", 0), ("gogle", "google", 1)],
)
def test_levenshtein_distance(a, b, distance):
    assert levenshtein_distance(a, b) == distance


def test_typo_variant_limits_brand_length():
    assert is_typo_variant("gogle", "google")
    assert not is_typo_variant("hb", "hbo")
    assert not is_typo_variant("googl", "googlegooglegoogle")
