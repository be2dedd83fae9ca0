from __future__ import annotations

import pytest

from domain_scoring.trademark import TrademarkRiskChecker
from domain_scoring.valuation import (
    VALUE_TIERS,
    format_band,
    get_semantic_synergy_bonus,
    get_trending_multiplier,
    quick_valuation,
    value_tier,
)


@pytest.mark.parametrize(
    "domain",
    ["cloudbank.com", "smartpay.com", "crypto.ai", "power.com", "xkqzwp.info", "google.com", "a.io"],
)
def test_band_spread_never_exceeds_three(domain):
    result = quick_valuation(domain)
    assert result.value_min > 0
    assert result.value_max <= result.value_min * 3
    assert 0 <= result.score <= 100
    assert result.band == format_band(result.value_min, result.value_max)


def test_format_band():
    assert format_band(2_500, 7_500) == "$2,500 – $7,500"


def test_value_tiers():
    assert value_tier(100).value_min == 75_000
    assert value_tier(92).value_min == 75_000
    assert value_tier(91).value_min == 25_000
    assert value_tier(0) == VALUE_TIERS[-1]
    floors = [t.floor for t in VALUE_TIERS]
    assert floors == sorted(floors, reverse=True)


def test_trending_two_word_com():
    result = quick_valuation("cloudbank.com")
    assert result.value_min >= 10_000


def test_premium_two_word_com():
    assert quick_valuation("smartpay.com").value_min >= 15_000


def test_dictionary_com_floor():
    assert quick_valuation("power.com").value_min >= 50_000


def test_niche_boost_on_alt_tld():
    result = quick_valuation("crypto.ai")
    assert (result.value_min, result.value_max) == (1_020, 3_060)


def test_penalty_keyword_gets_lowest_band():
    result = quick_valuation("replicawatches.com")
    assert result.band == "$5 – $15"


def test_high_trademark_risk_caps_value():
    result = quick_valuation("google.com")
    assert result.band == "$5 – $15"
    assert result.score <= 13


def test_pronounceability_adds_points():
    without = quick_valuation("zentrova.com")
    with_bonus = quick_valuation("zentrova.com", pronounce_score=100)
    assert with_bonus.score >= without.score


def test_trending_multiplier():
    multiplier, trends = get_trending_multiplier(["cloud", "bank"])
    assert multiplier == pytest.approx(2.34)
    assert trends == ["cloud", "bank"]
    assert get_trending_multiplier(["xyzzy"]) == (1.0, [])


def test_semantic_synergy_bonus():
    assert get_semantic_synergy_bonus(["cloud", "vault"])[0] == 1.4
    assert get_semantic_synergy_bonus(["vault", "cloud"])[0] == 1.4
    multiplier, reason = get_semantic_synergy_bonus(["pay", "bank"])
    assert multiplier == 1.25
    assert "strong niche alignment" in reason
    assert get_semantic_synergy_bonus(["cloud"]) == (1.0, "")
    assert get_semantic_synergy_bonus(["xyzzy", "blorp"]) == (1.0, "")


def test_to_dict():
    data = quick_valuation("cloudbank.com").to_dict()
    assert set(data) == {"band", "score", "value_min", "value_max"}


def test_medium_trademark_risk_scales_score():
    medium = quick_valuation("googlepay.com")
    clear = quick_valuation("googlepay.com", checker=TrademarkRiskChecker(brands=()))
    assert medium.score < clear.score
    assert medium.score == pytest.approx(clear.score * 0.6, abs=2)


@pytest.mark.parametrize(
    "domain",
    ["", ".com", "123.com", "a.zz", "ai.com", "thisisaverylongdomainnamethatgoesonandon.com", "www.cloud-bank-pay.io"],
)
def test_score_stays_in_range(domain):
    result = quick_valuation(domain, pronounce_score=100)
    assert 0 <= result.score <= 100
    assert result.value_max <= result.value_min * 3


def test_crypto_ai_band():
    result = quick_valuation("www.Crypto.AI")
    assert result.band == "$1,020 – $3,060"
    assert 55 <= result.score <= 75
